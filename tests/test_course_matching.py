"""Unit tests for CourseMatchingService and result filters."""

from __future__ import annotations

import pytest

from neuromatch.core.catalog import CourseCatalog
from neuromatch.models.request import MatchFilters, UserPreference
from neuromatch.services.course_matching import CourseMatchingService, filter_matches


def test_matches_are_topic_filtered_and_sorted(catalog, make_preference) -> None:
    service = CourseMatchingService(catalog)

    results = service.get_matched_courses(make_preference(topics=["python"]))

    assert [r.course.id for r in results] == ["py-games", "py-long", "data-python"]
    assert results[0].score == 100
    assert results[0].accessibility_highlights == ["Gamified", "Self-paced"]
    scores = [r.score for r in results]
    assert scores == sorted(scores, reverse=True)


def test_equal_scores_keep_search_order(catalog, make_preference) -> None:
    service = CourseMatchingService(catalog)

    results = service.get_matched_courses(make_preference(topics=["python"]))

    # py-long and data-python are both 60-minute video courses
    tied = [r for r in results if r.score == results[1].score]
    assert [r.course.id for r in tied] == ["py-long", "data-python"]


def test_empty_topics_scores_whole_catalog(make_course) -> None:
    courses = [make_course(id=f"c{i}", module_length=5 + i) for i in range(50)]
    service = CourseMatchingService(CourseCatalog(courses))
    preference = UserPreference.model_construct(
        neurotype="Other",
        learning_preferences=["Community support"],
        topics=[],
        accessibility_needs=None,
    )

    results = service.get_matched_courses(preference)

    assert len(results) == 50
    assert {r.course.id for r in results} == {c.id for c in courses}
    assert all(0 <= r.score <= 100 for r in results)


def test_unknown_neurotype_is_a_contract_violation(catalog) -> None:
    preference = UserPreference.model_construct(
        neurotype="Unknown",
        learning_preferences=["Community support"],
        topics=["python"],
        accessibility_needs=None,
    )

    with pytest.raises(KeyError):
        CourseMatchingService(catalog).get_matched_courses(preference)


def test_recommend_without_filters_returns_all_matches(catalog, make_preference) -> None:
    service = CourseMatchingService(catalog)
    preference = make_preference(topics=["python"])

    assert service.recommend(preference) == service.get_matched_courses(preference)


@pytest.fixture
def ranked(catalog, make_preference):
    preference = make_preference(topics=["python", "art"])
    return CourseMatchingService(catalog).get_matched_courses(preference)


def test_filter_by_min_score(ranked) -> None:
    kept = filter_matches(ranked, MatchFilters(min_score=80))

    assert [r.course.id for r in kept] == [r.course.id for r in ranked if r.score >= 80]
    assert kept


def test_filter_free_and_paid(ranked) -> None:
    free = filter_matches(ranked, MatchFilters(price_types=["free"]))
    paid = filter_matches(ranked, MatchFilters(price_types=["paid"]))
    both = filter_matches(ranked, MatchFilters(price_types=["free", "paid"]))

    assert {r.course.id for r in free} == {"py-games", "art-history"}
    assert {r.course.id for r in paid} == {"py-long", "data-python"}
    assert both == []


def test_filter_by_skill_level_and_platform(ranked) -> None:
    kept = filter_matches(ranked, MatchFilters(skill_levels=["advanced", "intermediate"], platforms=["Udemy"]))

    assert [r.course.id for r in kept] == ["py-long", "data-python"]


def test_inactive_filters() -> None:
    assert not MatchFilters().is_active
    assert MatchFilters(platforms=["Udemy"]).is_active
