"""Course matching endpoints"""
from fastapi import APIRouter, Body, Depends, Query
from typing import Any, Dict, List, Optional
import logging

from neuromatch.dependencies import get_matching_service
from neuromatch.models.request import (
    QUERY_FILTER_LABELS,
    build_filters,
    build_preference,
    parse_match_query,
)
from neuromatch.models.response import MatchResultResponse
from neuromatch.services.course_matching import CourseMatchingService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[MatchResultResponse])
def get_matches(
    neurotype: Optional[str] = Query(None, description="One of the supported neurotypes"),
    preferences: Optional[str] = Query(None, description="JSON list of learning preferences"),
    topics: Optional[str] = Query(None, description="JSON list of topics"),
    accessibility: Optional[str] = Query(None, description="JSON list of accessibility needs"),
    min_score: int = Query(0, description="Minimum match score"),
    price: List[str] = Query([], description="free and/or paid"),
    skill_level: List[str] = Query([], description="Skill levels to keep"),
    platform: List[str] = Query([], description="Platforms to keep"),
    service: CourseMatchingService = Depends(get_matching_service),
):
    """
    Rank courses for a learner described in the query string.

    - **neurotype**: e.g. `ADHD`
    - **preferences**: e.g. `["Short lessons (under 15 min)"]`
    - **topics**: e.g. `["python"]`
    - **accessibility**: optional, e.g. `["Captions required"]`
    """
    preference = parse_match_query(neurotype, preferences, topics, accessibility)
    filters = build_filters({
        "minScore": min_score,
        "priceTypes": price,
        "skillLevels": skill_level,
        "platforms": platform,
    }, field_labels=QUERY_FILTER_LABELS)
    results = service.recommend(preference, filters)
    return [MatchResultResponse.from_result(r) for r in results]


@router.post("", response_model=List[MatchResultResponse])
def post_matches(
    payload: Dict[str, Any] = Body(
        ...,
        examples=[{
            "neurotype": "ADHD",
            "learningPreferences": ["Short lessons (under 15 min)", "Gamified experience"],
            "topics": ["python"],
            "accessibilityNeeds": ["Captions required"],
            "filters": {"minScore": 70, "priceTypes": ["free"]},
        }],
    ),
    service: CourseMatchingService = Depends(get_matching_service),
):
    """
    Rank courses for a learner described in a JSON body.
    An optional `filters` object narrows the ranked list.
    """
    preference = build_preference(payload)
    filters = build_filters(payload.get("filters"))
    results = service.recommend(preference, filters)
    return [MatchResultResponse.from_result(r) for r in results]
