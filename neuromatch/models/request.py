"""Request schemas"""
from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from neuromatch.core.exceptions import MalformedValueError, MissingParameterError
from neuromatch.models.domain import AccessibilityNeed, LearningPreference, Neurotype, SkillLevel

REQUIRED_PREFERENCE_FIELDS = ("neurotype", "learningPreferences", "topics")


class UserPreference(BaseModel):
    """Learner profile supplied with every match request"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    neurotype: Neurotype = Field(..., description="Self-identified neurotype")
    learning_preferences: List[LearningPreference] = Field(
        ..., min_length=1, description="Preferred lesson formats"
    )
    topics: List[str] = Field(..., min_length=1, description="Topics of interest (free text)")
    accessibility_needs: Optional[List[AccessibilityNeed]] = Field(
        None, description="Required accessibility accommodations"
    )

    @field_validator("learning_preferences")
    @classmethod
    def _dedupe_preferences(cls, value: List[str]) -> List[str]:
        return list(dict.fromkeys(value))

    @field_validator("topics")
    @classmethod
    def _require_topic(cls, value: List[str]) -> List[str]:
        # topics are matched verbatim; only an all-blank list is rejected
        if not any(t.strip() for t in value):
            raise ValueError("at least one non-blank topic is required")
        return value


class MatchFilters(BaseModel):
    """Post-ranking filters applied to match results"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    min_score: int = Field(0, ge=0, le=100, description="Drop results scoring below this")
    price_types: List[Literal["free", "paid"]] = Field(default_factory=list)
    skill_levels: List[SkillLevel] = Field(default_factory=list)
    platforms: List[str] = Field(default_factory=list)

    @property
    def is_active(self) -> bool:
        return bool(self.min_score or self.price_types or self.skill_levels or self.platforms)


def _is_blank(value: Any) -> bool:
    return value is None or value == "" or (isinstance(value, (list, tuple)) and not value)


def _lookup(data: Mapping[str, Any], name: str) -> Any:
    """Read a field by its camelCase name, falling back to snake_case."""
    if name in data:
        return data[name]
    snake = "".join(f"_{ch.lower()}" if ch.isupper() else ch for ch in name)
    return data.get(snake)


def _raise_malformed(exc: ValidationError, labels: Mapping[str, str]) -> None:
    error = exc.errors()[0]
    loc = error.get("loc") or ("request",)
    field = str(loc[0])
    if "_" in field:
        field = to_camel(field)
    value = error.get("input")
    raise MalformedValueError(
        labels.get(field, field),
        error.get("msg", "invalid value"),
        value=None if isinstance(value, Mapping) else value,
    ) from exc


def build_preference(
    data: Mapping[str, Any],
    field_labels: Optional[Mapping[str, str]] = None,
) -> UserPreference:
    """
    Validate raw preference data into a UserPreference.

    Args:
        data: Mapping with camelCase or snake_case keys
        field_labels: Optional renaming of fields in error reports, used when
            the caller received the data under different names

    Raises:
        MissingParameterError: a required field is absent or empty
        MalformedValueError: a field is present but invalid
    """
    labels = dict(field_labels or {})
    missing = [
        labels.get(name, name)
        for name in REQUIRED_PREFERENCE_FIELDS
        if _is_blank(_lookup(data, name))
    ]
    if missing:
        raise MissingParameterError(missing)

    payload = {name: _lookup(data, name) for name in REQUIRED_PREFERENCE_FIELDS}
    needs = _lookup(data, "accessibilityNeeds")
    if needs is not None:
        payload["accessibilityNeeds"] = needs

    try:
        return UserPreference.model_validate(payload)
    except ValidationError as exc:
        _raise_malformed(exc, labels)


def build_filters(
    data: Optional[Mapping[str, Any]],
    field_labels: Optional[Mapping[str, str]] = None,
) -> MatchFilters:
    if not data:
        return MatchFilters()
    if not isinstance(data, Mapping):
        raise MalformedValueError("filters", "expected an object", value=data)
    try:
        return MatchFilters.model_validate(dict(data))
    except ValidationError as exc:
        _raise_malformed(exc, field_labels or {})


# Names used by the query-string encoding of a preference
QUERY_FIELD_LABELS = {
    "neurotype": "neurotype",
    "learningPreferences": "preferences",
    "topics": "topics",
    "accessibilityNeeds": "accessibility",
}

# Names used for filters on the query-string endpoint
QUERY_FILTER_LABELS = {
    "minScore": "min_score",
    "priceTypes": "price",
    "skillLevels": "skill_level",
    "platforms": "platform",
}


def _decode_json_list(name: str, raw: str) -> List[Any]:
    try:
        value = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedValueError(name, f"expected a JSON list ({exc.msg})", value=raw) from exc
    if not isinstance(value, list):
        raise MalformedValueError(name, "expected a JSON list", value=raw)
    return value


def parse_match_query(
    neurotype: Optional[str],
    preferences: Optional[str],
    topics: Optional[str],
    accessibility: Optional[str] = None,
) -> UserPreference:
    """
    Build a UserPreference from the query-string encoding.

    ``preferences``, ``topics`` and ``accessibility`` are JSON-encoded lists,
    e.g. ``?neurotype=ADHD&preferences=["Gamified experience"]&topics=["python"]``.
    """
    raw = {"neurotype": neurotype, "preferences": preferences, "topics": topics}
    missing = [name for name, value in raw.items() if _is_blank(value)]
    if missing:
        raise MissingParameterError(missing)

    data: Dict[str, Any] = {
        "neurotype": neurotype,
        "learningPreferences": _decode_json_list("preferences", preferences),
        "topics": _decode_json_list("topics", topics),
    }
    if accessibility:
        data["accessibilityNeeds"] = _decode_json_list("accessibility", accessibility)
    return build_preference(data, field_labels=QUERY_FIELD_LABELS)
