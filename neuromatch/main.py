"""FastAPI application entry point"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import logging

from neuromatch.core.config import settings
from neuromatch.core.exceptions import (
    MalformedValueError,
    MissingParameterError,
    NeuromatchError,
    NotFoundError,
    PreferenceValidationError,
)
from neuromatch.api.v1.api import api_router
from neuromatch.dependencies import get_course_catalog
from neuromatch.utils.logging_utils import setup_logging

setup_logging(settings.LOG_CONFIG_PATH, level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


def create_application() -> FastAPI:
    """Create and configure FastAPI application"""

    app = FastAPI(
        title=settings.APP_NAME,
        description="Matches online courses to a learner's neurotype and learning preferences",
        version=settings.APP_VERSION,
        debug=settings.DEBUG,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Include API v1 router
    app.include_router(api_router, prefix="/api/v1")

    @app.exception_handler(PreferenceValidationError)
    async def validation_error_handler(request: Request, exc: PreferenceValidationError):
        """Handle rejected user preferences."""
        logger.info(f"Rejected preference: {exc.message}")
        return JSONResponse(status_code=400, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        """Report framework-level request errors as missing or malformed parameters."""
        error = exc.errors()[0]
        field = str((error.get("loc") or ("request",))[-1])
        if error.get("type") == "missing":
            rejected = MissingParameterError([field])
        else:
            rejected = MalformedValueError(field, error.get("msg", "invalid value"))
        logger.info(f"Rejected request: {rejected.message}")
        return JSONResponse(status_code=400, content=rejected.to_dict())

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(request: Request, exc: NotFoundError):
        """Handle lookup misses."""
        return JSONResponse(status_code=404, content=exc.to_dict())

    @app.exception_handler(NeuromatchError)
    async def general_error_handler(request: Request, exc: NeuromatchError):
        """Handle all other application errors."""
        logger.error(f"{exc.__class__.__name__}: {exc.message}", exc_info=True)
        return JSONResponse(status_code=500, content=exc.to_dict())

    # Root endpoint
    @app.get("/")
    def root():
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/docs",
            "api": "/api/v1",
        }

    # Startup event
    @app.on_event("startup")
    async def startup_event():
        logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
        logger.info(f"Debug mode: {settings.DEBUG}")
        get_course_catalog()

    # Shutdown event
    @app.on_event("shutdown")
    async def shutdown_event():
        logger.info(f"Shutting down {settings.APP_NAME}")

    return app


# Create app instance
app = create_application()
