"""Service orchestrators."""

from .agent_service import AgentService
from .audit_service import AuditService, RequestMeta
from .auth_service import AuthService
from .franchise_service import FranchiseService
from .import_service import ImportService
from .lead_service import ContactSubmissionService, LeadService
from .media_service import MediaService
from .page_service import PageService
from .seo_service import SeoService
from .site_service import PublicSiteService
from .site_settings_service import SiteSettingsService
from .taxonomy_service import TaxonomyService
from .user_service import UserService

__all__ = [
    "AgentService",
    "AuditService",
    "AuthService",
    "ContactSubmissionService",
    "FranchiseService",
    "ImportService",
    "LeadService",
    "MediaService",
    "PageService",
    "PublicSiteService",
    "RequestMeta",
    "SeoService",
    "SiteSettingsService",
    "TaxonomyService",
    "UserService",
]
