"""API v1 router aggregator"""
from fastapi import APIRouter

from neuromatch.api.v1.endpoints import courses, health, matches, profiles

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(health.router, tags=["health"])
api_router.include_router(courses.router, prefix="/courses", tags=["courses"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(matches.router, prefix="/matches", tags=["matches"])
