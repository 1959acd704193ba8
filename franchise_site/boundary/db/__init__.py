"""
Database boundary layer: ORM models, CRUD operations, and connection management.

Exports:
  - Base, UUIDMixin, TimestampMixin, AuditFieldsMixin: Model building blocks
  - get_async_engine(), get_async_session_factory(), get_async_db(): Connection management
  - create_all_tables(): Schema creation
  - *_crud: CRUD operation singletons

Dependencies: sqlalchemy, franchise_site.configs
System role: Database adapter providing persistent storage for the CMS
collections, the site settings global and the audit log.
"""

from franchise_site.boundary.db.base import AuditFieldsMixin, Base, TimestampMixin, UUIDMixin
from franchise_site.boundary.db.connection import (
    get_async_db,
    get_async_engine,
    get_async_session_factory,
)
from franchise_site.boundary.db.create_tables import create_all_tables, drop_all_tables
from franchise_site.boundary.db.CRUD import (
    agent_crud,
    audit_log_crud,
    contact_submission_crud,
    franchise_crud,
    industry_crud,
    media_crud,
    page_crud,
    site_settings_crud,
    tag_crud,
    user_crud,
)

__all__ = [
    # Base classes
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "AuditFieldsMixin",
    # Connection
    "get_async_db",
    "get_async_engine",
    "get_async_session_factory",
    "create_all_tables",
    "drop_all_tables",
    # CRUD singletons
    "user_crud",
    "media_crud",
    "agent_crud",
    "industry_crud",
    "tag_crud",
    "franchise_crud",
    "page_crud",
    "contact_submission_crud",
    "audit_log_crud",
    "site_settings_crud",
]
