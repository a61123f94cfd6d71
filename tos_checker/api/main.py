"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers and configures uvicorn server.

Dependencies: fastapi, tos_checker.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager
import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tos_checker import __version__
from tos_checker.api.deps.dependencies import build_service_container
from tos_checker.boundary.db.create_tables import create_all_tables
from tos_checker.configs import Settings, get_settings
from tos_checker.observability.logger import configure_logging
from tos_checker.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware

from .routers import cache_router, caution_router, health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Builds collaborator handles at startup and releases them at shutdown.
    Missing credentials fail startup instead of the first request.
    """
    settings: Settings = app.state.settings
    configure_logging(settings.log_level)

    services = build_service_container(settings)
    try:
        if settings.database.create_tables_on_startup:
            await create_all_tables(services.engine)
    except Exception:
        await services.aclose()
        raise
    app.state.services = services
    logger.info("Application startup complete", extra={"environment": settings.environment})

    yield

    await services.aclose()
    logger.info("Application shutdown complete")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings override (defaults to environment settings)

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="TOS Checker API",
        description="Flags risky clauses in website terms and conditions",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Correlation-ID"],
        expose_headers=["X-Correlation-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Register all routers with /api/v1 prefix for versioning
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(cache_router, prefix="/api/v1")
    app.include_router(caution_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "tos_checker.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
