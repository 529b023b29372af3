"""Neurotype profile table used by the scoring engine"""
from types import MappingProxyType
from typing import List, Mapping

from neuromatch.models.domain import ModuleLengthBand, NeurotypeProfile


NEUROTYPE_PROFILES: Mapping[str, NeurotypeProfile] = MappingProxyType({
    "ADHD": NeurotypeProfile(
        neurotype="ADHD",
        preferred_module_length=ModuleLengthBand(5, 20),
        preferred_content_types=("video", "interactive", "mixed"),
        bonus_features=("is_gamified", "has_progress_tracking", "is_self_paced"),
        description="Shorter, engaging modules with gamification and progress tracking",
    ),
    "Dyslexia": NeurotypeProfile(
        neurotype="Dyslexia",
        preferred_module_length=ModuleLengthBand(10, 30),
        preferred_content_types=("video", "interactive"),
        bonus_features=("has_caption", "has_transcript", "has_dyslexia_font", "has_structured_layout"),
        description="Strong visual and audio support with readable fonts",
    ),
    "Autism": NeurotypeProfile(
        neurotype="Autism",
        preferred_module_length=ModuleLengthBand(15, 35),
        preferred_content_types=("text", "video", "mixed"),
        bonus_features=("has_structured_layout", "is_self_paced"),
        description="Predictable structure with clear objectives and minimal distractions",
    ),
    "Auditory Processing Disorder": NeurotypeProfile(
        neurotype="Auditory Processing Disorder",
        preferred_module_length=ModuleLengthBand(10, 25),
        preferred_content_types=("text", "interactive"),
        bonus_features=("has_caption", "has_transcript", "has_structured_layout"),
        description="Text-first content with comprehensive written materials",
    ),
    "Multiple": NeurotypeProfile(
        neurotype="Multiple",
        preferred_module_length=ModuleLengthBand(10, 25),
        preferred_content_types=("video", "text", "interactive", "mixed"),
        bonus_features=(
            "has_caption",
            "has_transcript",
            "has_dyslexia_font",
            "has_structured_layout",
            "is_gamified",
            "has_progress_tracking",
            "is_self_paced",
        ),
        description="Comprehensive accessibility features across multiple needs",
    ),
    "Other": NeurotypeProfile(
        neurotype="Other",
        preferred_module_length=ModuleLengthBand(10, 30),
        preferred_content_types=("video", "text", "interactive", "mixed"),
        bonus_features=("is_self_paced", "has_caption", "has_transcript"),
        description="Flexible learning with strong accessibility foundation",
    ),
})


def get_profile(neurotype: str) -> NeurotypeProfile:
    """
    Resolve the profile for a validated neurotype.

    Raises KeyError for anything outside the six known neurotypes; callers
    are expected to validate input before reaching this point.
    """
    return NEUROTYPE_PROFILES[neurotype]


def list_profiles() -> List[NeurotypeProfile]:
    return list(NEUROTYPE_PROFILES.values())
