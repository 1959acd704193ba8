"""
Franchises router package.

Exports the router for franchise catalog and management endpoints.
"""

from .franchises_router import router

__all__ = ["router"]
