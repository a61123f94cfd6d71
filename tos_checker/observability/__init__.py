"""
Observability module.

Provides logging configuration, correlation ID tracking and HTTP
request logging for the API.
"""

from tos_checker.observability.correlation import (
    clear_correlation_id,
    get_correlation_id,
    set_correlation_id,
)
from tos_checker.observability.logger import configure_logging

__all__ = [
    "clear_correlation_id",
    "configure_logging",
    "get_correlation_id",
    "set_correlation_id",
]
