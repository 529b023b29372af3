"""Course catalog endpoints"""
from fastapi import APIRouter, Depends
from typing import List

from neuromatch.core.catalog import CourseCatalog
from neuromatch.core.exceptions import NotFoundError
from neuromatch.dependencies import get_course_catalog
from neuromatch.models.response import CourseResponse

router = APIRouter()


@router.get("", response_model=List[CourseResponse])
def list_courses(catalog: CourseCatalog = Depends(get_course_catalog)):
    """
    Get every course in the catalog, in catalog order.
    """
    return [CourseResponse.from_course(c) for c in catalog.get_all()]


@router.get("/platforms", response_model=List[str])
def list_platforms(catalog: CourseCatalog = Depends(get_course_catalog)):
    """
    Distinct course platforms, sorted, for building filter options.
    """
    return catalog.platforms()


@router.get("/{course_id}", response_model=CourseResponse)
def get_course(course_id: str, catalog: CourseCatalog = Depends(get_course_catalog)):
    """
    Get a single course.

    - **course_id**: Catalog identifier
    """
    course = catalog.get_by_id(course_id)
    if course is None:
        raise NotFoundError(f"Course {course_id} not found", {"course_id": course_id})
    return CourseResponse.from_course(course)
