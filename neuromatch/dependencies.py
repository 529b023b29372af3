"""Dependency injection for FastAPI"""
import logging

from neuromatch.core.catalog import CourseCatalog
from neuromatch.core.config import settings
from neuromatch.io.course_loader import load_courses
from neuromatch.services.course_matching import CourseMatchingService

logger = logging.getLogger(__name__)

# Service instances cache
_course_catalog = None
_matching_service = None


def get_course_catalog() -> CourseCatalog:
    """
    Get or create the shared CourseCatalog.
    Loaded once from CATALOG_PATH (or the bundled catalog) and never mutated.
    """
    global _course_catalog
    if _course_catalog is None:
        _course_catalog = CourseCatalog(load_courses(settings.CATALOG_PATH))
        logger.info(f"Course catalog ready with {len(_course_catalog)} courses")
    return _course_catalog


def get_matching_service() -> CourseMatchingService:
    """
    Get or create CourseMatchingService instance.
    This is a dependency for FastAPI endpoints.
    """
    global _matching_service
    if _matching_service is None:
        _matching_service = CourseMatchingService(get_course_catalog())
    return _matching_service


def reset_services():
    """Reset service instances (useful for testing)"""
    global _course_catalog, _matching_service
    _course_catalog = None
    _matching_service = None
