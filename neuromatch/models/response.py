"""Response schemas"""
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional

from neuromatch.models.domain import Course, MatchResult, NeurotypeProfile
from neuromatch.services.scoring import match_tier


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CourseResponse(_CamelModel):
    """Course information response"""
    id: str
    title: str
    platform: str
    url: str
    description: str
    instructor: Optional[str] = None
    duration: int
    module_length: int
    content_type: str
    skill_level: str
    has_caption: bool
    has_transcript: bool
    has_dyslexia_font: bool
    has_structured_layout: bool
    has_progress_tracking: bool
    is_gamified: bool
    is_self_paced: bool
    price: str
    category: str
    tags: List[str] = []
    rating: Optional[int] = None
    enrollment_count: Optional[int] = None

    @classmethod
    def from_course(cls, course: Course) -> "CourseResponse":
        return cls(
            id=course.id,
            title=course.title,
            platform=course.platform,
            url=course.url,
            description=course.description,
            instructor=course.instructor,
            duration=course.duration,
            module_length=course.module_length,
            content_type=course.content_type,
            skill_level=course.skill_level,
            has_caption=course.has_caption,
            has_transcript=course.has_transcript,
            has_dyslexia_font=course.has_dyslexia_font,
            has_structured_layout=course.has_structured_layout,
            has_progress_tracking=course.has_progress_tracking,
            is_gamified=course.is_gamified,
            is_self_paced=course.is_self_paced,
            price=course.price,
            category=course.category,
            tags=list(course.tags),
            rating=course.rating,
            enrollment_count=course.enrollment_count,
        )


class MatchResultResponse(_CamelModel):
    """One ranked course with its explanation"""
    course: CourseResponse
    match_score: int = Field(..., ge=0, le=100)
    match_tier: str
    match_reasons: List[str] = Field(default_factory=list, max_length=3)
    accessibility_highlights: List[str] = Field(default_factory=list)

    @classmethod
    def from_result(cls, result: MatchResult) -> "MatchResultResponse":
        return cls(
            course=CourseResponse.from_course(result.course),
            match_score=result.score,
            match_tier=match_tier(result.score),
            match_reasons=list(result.reasons),
            accessibility_highlights=list(result.accessibility_highlights),
        )


class ModuleLengthResponse(BaseModel):
    min: int
    max: int


class NeurotypeProfileResponse(_CamelModel):
    """Scoring profile for one neurotype"""
    neurotype: str
    preferred_module_length: ModuleLengthResponse
    preferred_content_types: List[str]
    bonus_features: List[str]
    description: str

    @classmethod
    def from_profile(cls, profile: NeurotypeProfile) -> "NeurotypeProfileResponse":
        band = profile.preferred_module_length
        return cls(
            neurotype=profile.neurotype,
            preferred_module_length=ModuleLengthResponse(min=band.min, max=band.max),
            preferred_content_types=list(profile.preferred_content_types),
            bonus_features=[to_camel(f) for f in profile.bonus_features],
            description=profile.description,
        )


class HealthCheckResponse(_CamelModel):
    """Health check response"""
    status: str
    service: str
    version: str
    catalog_size: int = 0
