"""
Site settings API endpoints.

Routes: GET /site-settings (public), PUT /site-settings (authenticated)

Dependencies: franchise_site.application.services, franchise_site.models
System role: Site-wide settings HTTP API
"""

from fastapi import APIRouter, Depends

from franchise_site.api.deps.dependencies import get_current_user, get_site_settings_service
from franchise_site.api.routers.router_utils import handle_admin_errors
from franchise_site.application.services.site_settings_service import SiteSettingsService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.site_settings import SiteSettingsData, UpdateSiteSettingsRequest

router = APIRouter(prefix="/site-settings", tags=["site-settings"])


@router.get("", response_model=SiteSettingsData)
@handle_admin_errors
async def get_site_settings(
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
) -> SiteSettingsData:
    return await settings_service.get_settings()


@router.put("", response_model=SiteSettingsData)
@handle_admin_errors
async def update_site_settings(
    request: UpdateSiteSettingsRequest,
    user: UserModel = Depends(get_current_user),
    settings_service: SiteSettingsService = Depends(get_site_settings_service),
) -> SiteSettingsData:
    """Replace the provided sections (navbar, footer, ticker, general, seo)."""
    return await settings_service.update_settings(request)
