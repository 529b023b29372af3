"""Unit tests for preference validation and query parsing."""

from __future__ import annotations

import json

import pytest

from neuromatch.core.exceptions import MalformedValueError, MissingParameterError
from neuromatch.models.request import (
    QUERY_FILTER_LABELS,
    MatchFilters,
    build_filters,
    build_preference,
    parse_match_query,
)


def _payload(**overrides):
    data = {
        "neurotype": "Dyslexia",
        "learningPreferences": ["Visual focus (diagrams, videos)"],
        "topics": ["design"],
    }
    data.update(overrides)
    return data


def test_build_preference_accepts_camel_case() -> None:
    preference = build_preference(_payload(accessibilityNeeds=["Captions required"]))

    assert preference.neurotype == "Dyslexia"
    assert preference.learning_preferences == ["Visual focus (diagrams, videos)"]
    assert preference.accessibility_needs == ["Captions required"]


def test_build_preference_accepts_snake_case() -> None:
    preference = build_preference({
        "neurotype": "Autism",
        "learning_preferences": ["Predictable structure"],
        "topics": ["math"],
        "accessibility_needs": ["Keyboard navigation"],
    })

    assert preference.learning_preferences == ["Predictable structure"]
    assert preference.accessibility_needs == ["Keyboard navigation"]


def test_build_preference_reports_every_missing_field() -> None:
    with pytest.raises(MissingParameterError) as excinfo:
        build_preference({"neurotype": "ADHD", "learningPreferences": [], "topics": None})

    assert excinfo.value.missing == ["learningPreferences", "topics"]
    assert excinfo.value.message == "Missing required parameters: learningPreferences, topics"


@pytest.mark.parametrize(
    ("overrides", "field"),
    [
        ({"neurotype": "Dyscalculia"}, "neurotype"),
        ({"learningPreferences": ["Lots of homework"]}, "learningPreferences"),
        ({"accessibilityNeeds": ["Sign language"]}, "accessibilityNeeds"),
        ({"topics": "python"}, "topics"),
        ({"topics": ["   "]}, "topics"),
    ],
)
def test_build_preference_rejects_malformed_values(overrides, field) -> None:
    with pytest.raises(MalformedValueError) as excinfo:
        build_preference(_payload(**overrides))

    assert excinfo.value.field == field
    assert excinfo.value.details["field"] == field


def test_learning_preferences_are_deduplicated_and_topics_kept_verbatim() -> None:
    preference = build_preference(_payload(
        learningPreferences=["Gamified experience", "Gamified experience", "Clear objectives"],
        topics=["  python ", ""],
    ))

    assert preference.learning_preferences == ["Gamified experience", "Clear objectives"]
    assert preference.topics == ["  python ", ""]


def test_parse_match_query_decodes_json_lists() -> None:
    preference = parse_match_query(
        "ADHD",
        json.dumps(["Short lessons (under 15 min)"]),
        json.dumps(["Python", "SQL"]),
        json.dumps(["Captions required"]),
    )

    assert preference.topics == ["Python", "SQL"]
    assert preference.accessibility_needs == ["Captions required"]


def test_parse_match_query_without_accessibility() -> None:
    preference = parse_match_query("Other", '["Mobile-friendly"]', '["art"]')

    assert preference.accessibility_needs is None


def test_parse_match_query_missing_parameters() -> None:
    with pytest.raises(MissingParameterError) as excinfo:
        parse_match_query(None, None, '["python"]')

    assert excinfo.value.missing == ["neurotype", "preferences"]


@pytest.mark.parametrize(
    ("args", "field"),
    [
        (("ADHD", "not json", '["python"]'), "preferences"),
        (("ADHD", '["Gamified experience"]', '{"topic": "python"}'), "topics"),
        (("ADHD", '["Gamified experience"]', '["python"]', "[1"), "accessibility"),
        (("ADHD", '["Snacks"]', '["python"]'), "preferences"),
        (("Neurotypical", '["Gamified experience"]', '["python"]'), "neurotype"),
    ],
)
def test_parse_match_query_malformed_values_use_query_names(args, field) -> None:
    with pytest.raises(MalformedValueError) as excinfo:
        parse_match_query(*args)

    assert excinfo.value.field == field


def test_parse_match_query_empty_list_is_missing() -> None:
    with pytest.raises(MissingParameterError) as excinfo:
        parse_match_query("ADHD", "[]", '["python"]')

    assert excinfo.value.missing == ["preferences"]


def test_build_filters() -> None:
    assert build_filters(None) == MatchFilters()
    assert build_filters({"minScore": 70, "priceTypes": ["free"]}).min_score == 70

    with pytest.raises(MalformedValueError) as excinfo:
        build_filters({"priceTypes": ["cheap"]})
    assert excinfo.value.field == "priceTypes"

    with pytest.raises(MalformedValueError):
        build_filters({"minScore": 150})

    with pytest.raises(MalformedValueError):
        build_filters(["free"])


def test_build_filters_reports_query_parameter_names() -> None:
    with pytest.raises(MalformedValueError) as excinfo:
        build_filters({"priceTypes": ["cheap"]}, field_labels=QUERY_FILTER_LABELS)
    assert excinfo.value.field == "price"

    with pytest.raises(MalformedValueError) as excinfo:
        build_filters({"minScore": 150}, field_labels=QUERY_FILTER_LABELS)
    assert excinfo.value.field == "min_score"
