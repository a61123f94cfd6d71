"""FastAPI dependencies."""

from tos_checker.api.deps.dependencies import (
    ServiceContainer,
    build_analysis_pipeline,
    build_service_container,
    get_analysis_service,
    get_cache_service,
    get_services,
)

__all__ = [
    "ServiceContainer",
    "build_analysis_pipeline",
    "build_service_container",
    "get_analysis_service",
    "get_cache_service",
    "get_services",
]
