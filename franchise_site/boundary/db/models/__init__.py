"""
Database models package.

Exports:
  - UserModel: Admin users
  - MediaModel: Uploaded and external media
  - AgentModel, AgentSpecialty: Lead-receiving agents
  - IndustryModel, TagModel, IndustryIcon, TagType: Franchise taxonomy
  - FranchiseModel, FranchiseStatus, franchise_tags: Franchise catalog
  - PageModel: CMS pages
  - ContactSubmissionModel, SubmissionStatus: Contact form submissions
  - AuditLogModel, AuditOperation: Change history
  - SiteSettingsModel: Site-wide settings global

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Database model definitions for domain entities
"""

from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.boundary.db.models.media_model import MediaModel
from franchise_site.boundary.db.models.agent_model import AgentModel, AgentSpecialty
from franchise_site.boundary.db.models.taxonomy_model import (
    IndustryIcon,
    IndustryModel,
    TagModel,
    TagType,
)
from franchise_site.boundary.db.models.franchise_model import (
    FranchiseModel,
    FranchiseStatus,
    franchise_tags,
)
from franchise_site.boundary.db.models.page_model import PageModel
from franchise_site.boundary.db.models.contact_submission_model import (
    ContactSubmissionModel,
    SubmissionStatus,
)
from franchise_site.boundary.db.models.audit_log_model import AuditLogModel, AuditOperation
from franchise_site.boundary.db.models.site_settings_model import SiteSettingsModel

__all__ = [
    "UserModel",
    "MediaModel",
    "AgentModel",
    "AgentSpecialty",
    "IndustryModel",
    "IndustryIcon",
    "TagModel",
    "TagType",
    "FranchiseModel",
    "FranchiseStatus",
    "franchise_tags",
    "PageModel",
    "ContactSubmissionModel",
    "SubmissionStatus",
    "AuditLogModel",
    "AuditOperation",
    "SiteSettingsModel",
]
