from __future__ import annotations

import json
import logging
from importlib import resources
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..core.exceptions import CatalogLoadError
from ..models.domain import CONTENT_TYPES, COURSE_FLAGS, SKILL_LEVELS, Course

LOGGER = logging.getLogger("neuromatch.course_loader")

BUNDLED_CATALOG = "courses.json"


def default_catalog_path() -> Path:
    return Path(str(resources.files("neuromatch.data").joinpath(BUNDLED_CATALOG)))


def load_courses(path: Optional[Path | str] = None) -> List[Course]:
    catalog_file = Path(path) if path else default_catalog_path()
    if not catalog_file.exists():
        raise FileNotFoundError(f"Course catalog does not exist: {catalog_file}")

    try:
        with catalog_file.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except json.JSONDecodeError as exc:
        raise CatalogLoadError(f"Invalid JSON in catalog: {exc}", source=str(catalog_file)) from exc

    if not isinstance(payload, list):
        raise CatalogLoadError("Catalog must be a JSON array of courses", source=str(catalog_file))

    courses: List[Course] = []
    seen: set[str] = set()
    for index, record in enumerate(payload):
        course = _parse_course(record, index, str(catalog_file))
        if course.id in seen:
            raise CatalogLoadError(
                f"Duplicate course id: {course.id}", source=str(catalog_file), record=index
            )
        seen.add(course.id)
        courses.append(course)

    LOGGER.info("Loaded %s courses from %s", len(courses), catalog_file)
    return courses


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _parse_course(record: Any, index: int, source: str) -> Course:
    if not isinstance(record, dict):
        raise CatalogLoadError("Course record must be an object", source=source, record=index)

    def fail(message: str) -> CatalogLoadError:
        return CatalogLoadError(message, source=source, record=index)

    def required_str(key: str) -> str:
        value = record.get(key)
        if not isinstance(value, str) or not value.strip():
            raise fail(f"Missing or empty '{key}'")
        return value

    def positive_int(key: str) -> int:
        value = record.get(key)
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise fail(f"'{key}' must be a positive integer, got {value!r}")
        return value

    def optional_int(key: str) -> Optional[int]:
        value = record.get(key)
        if value is None:
            return None
        if isinstance(value, bool) or not isinstance(value, int):
            raise fail(f"'{key}' must be an integer, got {value!r}")
        return value

    def optional_str(key: str) -> Optional[str]:
        value = record.get(key)
        if value is not None and not isinstance(value, str):
            raise fail(f"'{key}' must be a string, got {value!r}")
        return value

    content_type = required_str("contentType")
    if content_type not in CONTENT_TYPES:
        raise fail(f"Unknown contentType {content_type!r}")
    skill_level = required_str("skillLevel")
    if skill_level not in SKILL_LEVELS:
        raise fail(f"Unknown skillLevel {skill_level!r}")

    rating = optional_int("rating")
    if rating is not None and not 1 <= rating <= 5:
        raise fail(f"'rating' must be between 1 and 5, got {rating}")

    tags = record.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise fail("'tags' must be a list of strings")

    flags: Dict[str, bool] = {}
    for flag in COURSE_FLAGS:
        value = record.get(_camel(flag), False)
        if not isinstance(value, bool):
            raise fail(f"'{_camel(flag)}' must be a boolean")
        flags[flag] = value

    return Course(
        id=required_str("id"),
        title=required_str("title"),
        platform=required_str("platform"),
        url=required_str("url"),
        description=required_str("description"),
        instructor=optional_str("instructor"),
        duration=positive_int("duration"),
        module_length=positive_int("moduleLength"),
        content_type=content_type,
        skill_level=skill_level,
        price=required_str("price"),
        category=required_str("category"),
        tags=tuple(tags),
        rating=rating,
        enrollment_count=optional_int("enrollmentCount"),
        **flags,
    )
