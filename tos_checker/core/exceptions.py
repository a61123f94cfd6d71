"""
Exception hierarchy for the TOS Checker service.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Infrastructure errors (cache, result store) are retryable by the caller
and surface as HTTP 503. Language model and vector index errors are
absorbed by the analysis pipeline and never reach the API.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TosCheckerException(Exception):
    """Base exception for all TOS Checker errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(TosCheckerException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidIdentityError(ValidationError):
    """Raised when a document identity is empty or malformed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, field="document_identity", details=details)


class ConfigurationError(TosCheckerException):
    """Raised at startup when required configuration is missing or inconsistent."""

    pass


class InfrastructureError(TosCheckerException):
    """Base for failures of shared stores that the caller may retry."""

    retryable = True


class CacheUnavailableError(InfrastructureError):
    """Raised when the KV cache cannot be reached or rejects a command."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize cache error.

        Args:
            message: Error message
            operation: Cache operation that failed (get, set, ping)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ResultStoreUnavailableError(InfrastructureError):
    """Raised when the analysis result database cannot serve a request."""

    def __init__(
        self,
        message: str,
        document_id: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if document_id:
            details["document_id"] = document_id
        super().__init__(message, details)


class LanguageModelError(TosCheckerException):
    """Raised by the language model client when a completion cannot be produced."""

    def __init__(
        self,
        message: str,
        model_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize language model error.

        Args:
            message: Error message
            model_name: Model that was called
            details: Additional context
        """
        details = details or {}
        if model_name:
            details["model_name"] = model_name
        super().__init__(message, details)


class VectorStoreError(TosCheckerException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (ensure_collection, upsert, scroll)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class VectorDimensionMismatchError(VectorStoreError):
    """Raised when an existing collection was created for a different embedding size."""

    def __init__(self, collection: str, expected: int, actual: int | None) -> None:
        super().__init__(
            f"Vector size mismatch for collection {collection}. Expected: {expected}, Got: {actual}",
            operation="ensure_collection",
            details={"collection": collection, "expected": expected, "actual": actual},
        )
