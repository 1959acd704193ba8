"""
Router utility functions.

Contains helpers extracted from router endpoints to keep them clean.
"""

from franchise_site.api.routers.router_utils.error_handling import (
    handle_admin_errors,
    handle_import_errors,
    handle_lead_errors,
)
from franchise_site.api.routers.router_utils.pagination import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    offset_for,
)

__all__ = [
    "DEFAULT_PER_PAGE",
    "MAX_PER_PAGE",
    "build_page",
    "handle_admin_errors",
    "handle_import_errors",
    "handle_lead_errors",
    "offset_for",
]
