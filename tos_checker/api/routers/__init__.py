"""API routers."""

from .cache import router as cache_router
from .caution import router as caution_router
from .health import router as health_router

__all__ = [
    "cache_router",
    "caution_router",
    "health_router",
]
