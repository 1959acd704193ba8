"""
Exception hierarchy for the Future Franchise Owners site.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FranchiseSiteException(Exception):
    """Base exception for all site application errors."""

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


class ValidationError(FranchiseSiteException):
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


class NotFoundError(FranchiseSiteException):
    """Raised when a collection record cannot be found."""

    def __init__(
        self,
        collection: str,
        record_id: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            collection: Collection name (franchises, agents, ...)
            record_id: ID or slug of the missing record
            details: Additional context
        """
        details = details or {}
        details["collection"] = collection
        details["record_id"] = record_id
        self.collection = collection
        super().__init__(f"{collection} not found: {record_id}", details)


class ConflictError(FranchiseSiteException):
    """Raised when a write violates a uniqueness rule (slug, email, name)."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class AuthenticationError(FranchiseSiteException):
    """Raised when credentials or tokens are missing or invalid."""

    pass


class PermissionDeniedError(FranchiseSiteException):
    """Raised when an authenticated user may not perform an operation."""

    pass


class CaptchaError(FranchiseSiteException):
    """Raised when Turnstile verification fails."""

    pass


class StorageError(FranchiseSiteException):
    """Raised when media storage operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            operation: Operation that failed (upload, delete, presign)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class EmailDeliveryError(FranchiseSiteException):
    """Raised when the email provider rejects or fails a send."""

    def __init__(
        self,
        message: str,
        recipient: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        details = details or {}
        if recipient:
            details["recipient"] = recipient
        super().__init__(message, details)


class WebhookDeliveryError(FranchiseSiteException):
    """Raised when an agent webhook call fails (non-critical)."""

    pass


class ImportFileError(FranchiseSiteException):
    """Raised when an uploaded CSV cannot be read at all."""

    pass
