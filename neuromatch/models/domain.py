"""Domain models"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple, get_args

Neurotype = Literal[
    "ADHD",
    "Dyslexia",
    "Autism",
    "Auditory Processing Disorder",
    "Multiple",
    "Other",
]

LearningPreference = Literal[
    "Short lessons (under 15 min)",
    "Medium lessons (15-30 min)",
    "Long lessons (30+ min)",
    "Visual focus (diagrams, videos)",
    "Text-based content",
    "Interactive exercises",
    "Predictable structure",
    "Self-paced learning",
    "Gamified experience",
    "Clear objectives",
    "Minimal distractions",
    "Community support",
    "Downloadable materials",
    "Mobile-friendly",
]

AccessibilityNeed = Literal[
    "Captions required",
    "Transcripts required",
    "Dyslexia-friendly fonts",
    "High contrast visuals",
    "Screen reader compatible",
    "Keyboard navigation",
]

ContentType = Literal["video", "text", "interactive", "mixed"]
SkillLevel = Literal["beginner", "intermediate", "advanced"]

NEUROTYPES: Tuple[str, ...] = get_args(Neurotype)
LEARNING_PREFERENCES: Tuple[str, ...] = get_args(LearningPreference)
ACCESSIBILITY_NEEDS: Tuple[str, ...] = get_args(AccessibilityNeed)
CONTENT_TYPES: Tuple[str, ...] = get_args(ContentType)
SKILL_LEVELS: Tuple[str, ...] = get_args(SkillLevel)

# Boolean accessibility/format flags, in display order
COURSE_FLAGS: Tuple[str, ...] = (
    "has_caption",
    "has_transcript",
    "has_dyslexia_font",
    "has_structured_layout",
    "has_progress_tracking",
    "is_gamified",
    "is_self_paced",
)


@dataclass(frozen=True, slots=True)
class Course:
    """Course catalog entry"""
    id: str
    title: str
    platform: str
    url: str
    description: str
    duration: int  # total minutes
    module_length: int  # average minutes per module
    content_type: str
    skill_level: str
    price: str
    category: str
    instructor: Optional[str] = None
    has_caption: bool = False
    has_transcript: bool = False
    has_dyslexia_font: bool = False
    has_structured_layout: bool = False
    has_progress_tracking: bool = False
    is_gamified: bool = False
    is_self_paced: bool = False
    tags: Tuple[str, ...] = ()
    rating: Optional[int] = None
    enrollment_count: Optional[int] = None

    def search_text(self) -> str:
        """Lowercased haystack used by topic search."""
        return f"{self.title} {self.description} {self.category} {' '.join(self.tags)}".lower()

    @property
    def is_free(self) -> bool:
        return "free" in self.price.lower()


@dataclass(frozen=True, slots=True)
class ModuleLengthBand:
    """Inclusive module length range in minutes"""
    min: int
    max: int

    def __contains__(self, minutes: int) -> bool:
        return self.min <= minutes <= self.max


@dataclass(frozen=True, slots=True)
class NeurotypeProfile:
    """Scoring preferences for one neurotype"""
    neurotype: str
    preferred_module_length: ModuleLengthBand
    preferred_content_types: Tuple[str, ...]
    bonus_features: Tuple[str, ...]
    description: str


@dataclass(frozen=True, slots=True)
class MatchScore:
    score: int
    reasons: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A scored course for one user preference"""
    course: Course
    score: int
    reasons: List[str]
    accessibility_highlights: List[str]
