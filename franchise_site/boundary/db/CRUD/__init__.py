"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from franchise_site.boundary.db.CRUD import franchise_crud, page_crud

    # Use singleton instances
    franchise = await franchise_crud.get_by_id(db, franchise_id)

    # Or instantiate classes directly for custom behavior
    from franchise_site.boundary.db.CRUD import FranchiseCRUD
    custom_crud = FranchiseCRUD()
"""

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.CRUD.user_crud import UserCRUD, user_crud
from franchise_site.boundary.db.CRUD.media_crud import MediaCRUD, media_crud
from franchise_site.boundary.db.CRUD.agent_crud import AgentCRUD, agent_crud
from franchise_site.boundary.db.CRUD.taxonomy_crud import (
    IndustryCRUD,
    TagCRUD,
    industry_crud,
    tag_crud,
)
from franchise_site.boundary.db.CRUD.franchise_crud import FranchiseCRUD, franchise_crud
from franchise_site.boundary.db.CRUD.page_crud import PageCRUD, page_crud
from franchise_site.boundary.db.CRUD.contact_submission_crud import (
    ContactSubmissionCRUD,
    contact_submission_crud,
)
from franchise_site.boundary.db.CRUD.audit_log_crud import AuditLogCRUD, audit_log_crud
from franchise_site.boundary.db.CRUD.site_settings_crud import (
    SiteSettingsCRUD,
    site_settings_crud,
)

__all__ = [
    "BaseCRUD",
    "UserCRUD",
    "user_crud",
    "MediaCRUD",
    "media_crud",
    "AgentCRUD",
    "agent_crud",
    "IndustryCRUD",
    "industry_crud",
    "TagCRUD",
    "tag_crud",
    "FranchiseCRUD",
    "franchise_crud",
    "PageCRUD",
    "page_crud",
    "ContactSubmissionCRUD",
    "contact_submission_crud",
    "AuditLogCRUD",
    "audit_log_crud",
    "SiteSettingsCRUD",
    "site_settings_crud",
]
