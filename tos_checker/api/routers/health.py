"""
Health check API endpoints.

Routes: GET /health, GET /health/cache, GET /health/db

Dependencies: tos_checker.api.deps, sqlalchemy
System role: Health check HTTP API
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from tos_checker.api.deps import ServiceContainer, get_services
from tos_checker.boundary.db.connection import DATABASE_UNAVAILABLE_ERRORS, get_async_db
from tos_checker.core.exceptions import CacheUnavailableError

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/cache", response_model=HealthResponse)
async def health_check_cache(
    services: ServiceContainer = Depends(get_services),
) -> HealthResponse:
    """Cache health check."""
    try:
        await services.cache.ping()
    except CacheUnavailableError as e:
        logger.warning("Cache health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Cache unreachable",
        )
    return HealthResponse(status="healthy", message="Cache connection OK")


@router.get("/db", response_model=HealthResponse)
async def health_check_db(db: AsyncSession = Depends(get_async_db)) -> HealthResponse:
    """Database health check."""
    try:
        await db.execute(text("SELECT 1"))
    except DATABASE_UNAVAILABLE_ERRORS as e:
        logger.warning("Database health check failed", extra={"error": str(e)})
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Database unreachable",
        )
    return HealthResponse(status="healthy", message="Database connection OK")
