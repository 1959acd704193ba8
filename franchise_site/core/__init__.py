"""
Core business logic module.

Contains the exception hierarchy and pure domain helpers (slugs, audit
diffs, catalog filtering, CSV validation, lead routing, structured data).
Nothing here performs I/O.
"""

from franchise_site.core.exceptions import (
    AuthenticationError,
    CaptchaError,
    ConflictError,
    EmailDeliveryError,
    FranchiseSiteException,
    ImportFileError,
    NotFoundError,
    PermissionDeniedError,
    StorageError,
    ValidationError,
    WebhookDeliveryError,
)

__all__ = [
    "FranchiseSiteException",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
    "PermissionDeniedError",
    "CaptchaError",
    "StorageError",
    "EmailDeliveryError",
    "WebhookDeliveryError",
    "ImportFileError",
]
