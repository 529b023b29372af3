"""Health check endpoints"""
from fastapi import APIRouter, Depends

from neuromatch.core.catalog import CourseCatalog
from neuromatch.core.config import settings
from neuromatch.dependencies import get_course_catalog
from neuromatch.models.response import HealthCheckResponse

router = APIRouter()


@router.get("/health", response_model=HealthCheckResponse)
def health_check(catalog: CourseCatalog = Depends(get_course_catalog)):
    """
    Health check endpoint - reports whether the catalog has courses to match
    """
    size = len(catalog)
    return HealthCheckResponse(
        status="healthy" if size else "degraded",
        service=settings.APP_NAME,
        version=settings.APP_VERSION,
        catalog_size=size,
    )
