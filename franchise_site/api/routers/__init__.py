"""API routers."""

from .agents import router as agents_router
from .audit_logs import router as audit_logs_router
from .auth import router as auth_router
from .contact_submissions import router as contact_submissions_router
from .franchises import router as franchises_router  # Imports from franchises/ package
from .health import router as health_router
from .imports import router as import_router
from .leads import router as leads_router
from .media import router as media_router
from .pages import router as pages_router
from .preview import router as preview_router
from .seo import router as seo_router
from .site import router as site_router
from .site_settings import router as site_settings_router
from .taxonomy import industries_router, tags_router
from .users import router as users_router

__all__ = [
    "agents_router",
    "audit_logs_router",
    "auth_router",
    "contact_submissions_router",
    "franchises_router",
    "health_router",
    "import_router",
    "industries_router",
    "leads_router",
    "media_router",
    "pages_router",
    "preview_router",
    "seo_router",
    "site_router",
    "site_settings_router",
    "tags_router",
    "users_router",
]
