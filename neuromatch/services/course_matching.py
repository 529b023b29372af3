"""Course matching service"""
from typing import List, Optional
import logging

from neuromatch.core.catalog import CourseCatalog
from neuromatch.models.domain import MatchResult
from neuromatch.models.request import MatchFilters, UserPreference
from neuromatch.services.profiles import get_profile
from neuromatch.services.scoring import accessibility_highlights, match

logger = logging.getLogger(__name__)


class CourseMatchingService:
    """Ranks catalog courses against a learner's preference"""

    def __init__(self, catalog: CourseCatalog):
        self.catalog = catalog

    def get_matched_courses(self, preference: UserPreference) -> List[MatchResult]:
        """
        Score every topic-relevant course and rank by score.

        Args:
            preference: Validated user preference

        Returns:
            Match results sorted by score, highest first. Courses with equal
            scores keep their catalog order.
        """
        profile = get_profile(preference.neurotype)
        candidates = self.catalog.search(preference.topics)

        results: List[MatchResult] = []
        for course in candidates:
            scored = match(course, preference, profile)
            logger.debug(f"Scored {course.id}: {scored.score}")
            results.append(
                MatchResult(
                    course=course,
                    score=scored.score,
                    reasons=scored.reasons,
                    accessibility_highlights=accessibility_highlights(course),
                )
            )

        # sorted() is stable, so ties keep search order
        results = sorted(results, key=lambda r: r.score, reverse=True)
        logger.info(
            f"Matched {len(results)} courses for neurotype={preference.neurotype} "
            f"topics={len(preference.topics)}"
        )
        return results

    def recommend(
        self, preference: UserPreference, filters: Optional[MatchFilters] = None
    ) -> List[MatchResult]:
        results = self.get_matched_courses(preference)
        if filters is None or not filters.is_active:
            return results
        filtered = filter_matches(results, filters)
        logger.info(f"Filters kept {len(filtered)} of {len(results)} matches")
        return filtered


def filter_matches(results: List[MatchResult], filters: MatchFilters) -> List[MatchResult]:
    """Apply post-ranking filters, keeping result order."""
    kept: List[MatchResult] = []
    for result in results:
        course = result.course
        if filters.min_score > 0 and result.score < filters.min_score:
            continue
        if "free" in filters.price_types and not course.is_free:
            continue
        if "paid" in filters.price_types and course.is_free:
            continue
        if filters.skill_levels and course.skill_level not in filters.skill_levels:
            continue
        if filters.platforms and course.platform not in filters.platforms:
            continue
        kept.append(result)
    return kept
