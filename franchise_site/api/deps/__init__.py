"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_audit_service,
    get_current_user,
    get_optional_user,
    get_service_cache,
    get_settings_dependency,
    is_draft_mode,
)

__all__ = [
    "get_audit_service",
    "get_current_user",
    "get_optional_user",
    "get_service_cache",
    "get_settings_dependency",
    "is_draft_mode",
]
