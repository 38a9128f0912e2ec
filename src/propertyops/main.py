"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from propertyops import __version__
from propertyops.config import settings
from propertyops.core.database import async_engine
from propertyops.core.errors import register_exception_handlers
from propertyops.core.logging import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
    configure_logging,
)


logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler.

    Handles startup and shutdown events.
    """
    logger.info(
        "application_startup",
        app_name=settings.app_name,
        environment=settings.environment,
    )

    yield

    logger.info("application_shutdown")

    await async_engine.dispose()
    logger.info("database_engine_disposed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    from propertyops.api import get_api_router

    configure_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="Tenants, units, maintenance requests and payments",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
        # Disable docs in production
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        openapi_url="/openapi.json" if not settings.is_production else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )

    # Add request logging middleware
    app.add_middleware(RequestLoggingMiddleware)

    # Add request ID middleware (outermost, runs first)
    app.add_middleware(RequestIdMiddleware)

    register_exception_handlers(app)

    app.include_router(get_api_router())

    return app
