"""Shared fixtures for neuromatch tests."""

from __future__ import annotations

from typing import Any, Callable, List

import pytest
from fastapi.testclient import TestClient

from neuromatch.core.catalog import CourseCatalog
from neuromatch.dependencies import get_course_catalog, get_matching_service, reset_services
from neuromatch.main import app
from neuromatch.models.domain import Course
from neuromatch.models.request import UserPreference
from neuromatch.services.course_matching import CourseMatchingService


def build_course(**overrides: Any) -> Course:
    fields = {
        "id": "course-1",
        "title": "Sample Course",
        "platform": "TestPlatform",
        "url": "https://example.com/course-1",
        "description": "A course used in tests",
        "duration": 300,
        "module_length": 45,
        "content_type": "text",
        "skill_level": "beginner",
        "price": "$10",
        "category": "Testing",
    }
    fields.update(overrides)
    return Course(**fields)


def build_preference(**overrides: Any) -> UserPreference:
    fields = {
        "neurotype": "ADHD",
        # no scoring rule is attached to this preference
        "learning_preferences": ["Community support"],
        "topics": ["python"],
    }
    fields.update(overrides)
    return UserPreference(**fields)


@pytest.fixture
def make_course() -> Callable[..., Course]:
    return build_course


@pytest.fixture
def make_preference() -> Callable[..., UserPreference]:
    return build_preference


@pytest.fixture
def sample_courses() -> List[Course]:
    return [
        build_course(
            id="py-games",
            title="Python Games",
            description="Build small games in Python",
            module_length=12,
            content_type="interactive",
            is_gamified=True,
            is_self_paced=True,
            rating=5,
            enrollment_count=15000,
            price="Free",
            platform="Codecademy",
        ),
        build_course(
            id="py-long",
            title="Python Deep Dive",
            description="Long lectures on Python internals",
            module_length=60,
            content_type="video",
            price="$99",
            skill_level="advanced",
            platform="Udemy",
        ),
        build_course(
            id="art-history",
            title="Art History",
            description="Renaissance to modern art",
            category="Humanities",
            tags=("art", "history"),
            module_length=20,
            content_type="video",
            price="Free",
            platform="Khan Academy",
        ),
        build_course(
            id="data-python",
            title="Data Wrangling",
            description="Cleaning datasets",
            category="Data Science",
            tags=("pandas", "python"),
            module_length=60,
            content_type="video",
            price="$49",
            skill_level="intermediate",
            platform="Udemy",
        ),
    ]


@pytest.fixture
def catalog(sample_courses: List[Course]) -> CourseCatalog:
    return CourseCatalog(sample_courses)


@pytest.fixture
def client(catalog: CourseCatalog):
    app.dependency_overrides[get_course_catalog] = lambda: catalog
    app.dependency_overrides[get_matching_service] = lambda: CourseMatchingService(catalog)
    yield TestClient(app)
    app.dependency_overrides.clear()
    reset_services()
