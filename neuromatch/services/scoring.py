"""
Rule-based fit scoring between a course and a learner's profile.

Scores start at a neutral base, collect points for module length,
content type, profile bonus features, stated learning preferences,
accessibility needs and quality signals, and are clamped to 0..100.
Only the first three reasons are kept, in the order they were emitted.
"""
from __future__ import annotations

from typing import Callable, Dict, List, Tuple

from neuromatch.models.domain import Course, MatchScore, NeurotypeProfile
from neuromatch.models.request import UserPreference

BASE_SCORE = 50
IN_BAND_POINTS = 20
SHORT_MODULE_POINTS = 10
CONTENT_TYPE_POINTS = 15
BONUS_FEATURE_POINTS = 5
BONUS_FEATURE_CAP = 25
PREFERENCE_POINTS = 5
QUALITY_POINTS = 5
MIN_QUALITY_RATING = 4
POPULAR_ENROLLMENT = 10_000
MAX_REASONS = 3

CONTENT_TYPE_REASONS: Dict[str, str] = {
    "interactive": "Interactive content keeps you engaged",
    "video": "Visual learning through video content",
    "text": "Text-based for focused reading",
}
MIXED_CONTENT_REASON = "Mixed content types for variety"

BONUS_FEATURE_REASONS: Dict[str, str] = {
    "is_gamified": "Gamified experience makes learning fun",
    "has_progress_tracking": "Track your progress clearly",
    "is_self_paced": "Learn at your own pace",
    "has_caption": "Full captions available",
    "has_transcript": "Complete transcripts provided",
    "has_dyslexia_font": "Dyslexia-friendly typography",
    "has_structured_layout": "Well-organized, predictable structure",
}

SHORT_LESSONS = "Short lessons (under 15 min)"
SHORT_LESSON_REASON = "Short lesson format reduces overwhelm"
POPULAR_REASON = "Popular course with strong community"

# Preferences without an entry here carry no course signal
PREFERENCE_RULES: Dict[str, Callable[[Course], bool]] = {
    SHORT_LESSONS: lambda c: c.module_length <= 15,
    "Medium lessons (15-30 min)": lambda c: 15 < c.module_length <= 30,
    "Long lessons (30+ min)": lambda c: c.module_length > 30,
    "Visual focus (diagrams, videos)": lambda c: c.content_type in ("video", "interactive"),
    "Text-based content": lambda c: c.content_type == "text",
    "Interactive exercises": lambda c: c.content_type == "interactive",
    "Gamified experience": lambda c: c.is_gamified,
    "Self-paced learning": lambda c: c.is_self_paced,
    "Clear objectives": lambda c: c.has_structured_layout,
    "Predictable structure": lambda c: c.has_structured_layout,
}

# High contrast has no flag of its own; structured layout stands in for it
ACCESSIBILITY_NEED_RULES: Dict[str, Tuple[str, int]] = {
    "Captions required": ("has_caption", 5),
    "Transcripts required": ("has_transcript", 5),
    "Dyslexia-friendly fonts": ("has_dyslexia_font", 5),
    "High contrast visuals": ("has_structured_layout", 3),
}

ACCESSIBILITY_HIGHLIGHTS: Tuple[Tuple[str, str], ...] = (
    ("has_caption", "Captions"),
    ("has_transcript", "Transcripts"),
    ("has_dyslexia_font", "Dyslexia-friendly fonts"),
    ("has_structured_layout", "Structured layout"),
    ("has_progress_tracking", "Progress tracking"),
    ("is_gamified", "Gamified"),
    ("is_self_paced", "Self-paced"),
)

MATCH_TIERS: Tuple[Tuple[int, str], ...] = (
    (90, "excellent"),
    (75, "great"),
    (60, "good"),
)


def match(course: Course, preference: UserPreference, profile: NeurotypeProfile) -> MatchScore:
    """
    Score how well a course fits a learner.

    Args:
        course: Catalog entry to score
        preference: Validated user preference
        profile: Profile resolved from ``preference.neurotype``

    Returns:
        MatchScore with an integer score in 0..100 and at most three reasons
    """
    score = BASE_SCORE
    reasons: List[str] = []

    # Module length
    module_reason = False
    band = profile.preferred_module_length
    if course.module_length in band:
        score += IN_BAND_POINTS
        reasons.append(f"{course.module_length}-minute modules match your preferred pace")
        module_reason = True
    elif course.module_length < band.min:
        score += SHORT_MODULE_POINTS
        reasons.append(f"Short {course.module_length}-minute modules for quick learning")
        module_reason = True

    # Content type
    if course.content_type in profile.preferred_content_types:
        score += CONTENT_TYPE_POINTS
        reasons.append(CONTENT_TYPE_REASONS.get(course.content_type, MIXED_CONTENT_REASON))

    # Bonus features: every true flag gives a reason, points are capped
    bonus_points = 0
    for feature in profile.bonus_features:
        if getattr(course, feature):
            bonus_points += BONUS_FEATURE_POINTS
            reasons.append(BONUS_FEATURE_REASONS[feature])
    score += min(bonus_points, BONUS_FEATURE_CAP)

    # Learning preferences
    for pref in preference.learning_preferences:
        rule = PREFERENCE_RULES.get(pref)
        if rule is None or not rule(course):
            continue
        score += PREFERENCE_POINTS
        if pref == SHORT_LESSONS and not module_reason:
            reasons.append(SHORT_LESSON_REASON)

    # Accessibility needs
    for need in preference.accessibility_needs or []:
        rule = ACCESSIBILITY_NEED_RULES.get(need)
        if rule is not None and getattr(course, rule[0]):
            score += rule[1]

    # Quality signals
    if course.rating is not None and course.rating >= MIN_QUALITY_RATING:
        score += QUALITY_POINTS
    if course.enrollment_count is not None and course.enrollment_count > POPULAR_ENROLLMENT:
        score += QUALITY_POINTS
        reasons.append(POPULAR_REASON)

    return MatchScore(score=max(0, min(100, round(score))), reasons=reasons[:MAX_REASONS])


def accessibility_highlights(course: Course) -> List[str]:
    """Labels for every true accessibility/format flag, in display order."""
    return [label for flag, label in ACCESSIBILITY_HIGHLIGHTS if getattr(course, flag)]


def match_tier(score: int) -> str:
    for threshold, tier in MATCH_TIERS:
        if score >= threshold:
            return tier
    return "fair"
