"""
Router error handling utilities.

Decorator translating domain exceptions into HTTP errors so every
endpoint maps them the same way: invalid input is a 400, an unreachable
cache or result store is a retryable 503.

Dependencies: fastapi, tos_checker.core.exceptions
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status

from tos_checker.core.exceptions import InfrastructureError, ValidationError

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

RETRY_AFTER_SECONDS = "5"


def handle_service_errors(func: F) -> F:
    """
    Decorator to map service-layer errors to HTTPExceptions.

    HTTPExceptions raised by the endpoint pass through untouched.
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except ValidationError as e:
            logger.warning("Invalid request", extra={"error": e.message})
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except InfrastructureError as e:
            logger.error(
                "Backing store unavailable",
                extra={"error_type": type(e).__name__, "error": str(e)},
            )
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail=e.message,
                headers={"Retry-After": RETRY_AFTER_SECONDS},
            )

    return wrapper  # type: ignore[return-value]
