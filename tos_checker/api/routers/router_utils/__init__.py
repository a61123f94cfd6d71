"""Router helpers."""

from tos_checker.api.routers.router_utils.error_handling import handle_service_errors

__all__ = ["handle_service_errors"]
