"""
Public site page endpoints (server-rendered HTML).

Routes:
- GET / - Homepage
- GET /franchises - Franchise catalog with filters from the query string
- GET /franchises/{id} - Published franchise detail
- GET /admin/login - Admin login form
- GET /import - CSV import page (authenticated)
- GET /{slug} - CMS page

Registered last so API and SEO routes take precedence over /{slug}.

Dependencies: franchise_site.application.services.site_service
System role: Public website HTTP surface
"""

import logging
from typing import Awaitable
from urllib.parse import quote
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from franchise_site.api.deps.dependencies import (
    get_filter_state,
    get_optional_user,
    get_public_site_service,
    get_settings_dependency,
    is_draft_mode,
)
from franchise_site.api.routers.preview import is_local_path
from franchise_site.application.services.page_service import HOMEPAGE_SLUG
from franchise_site.application.services.site_service import PublicSiteService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.configs import Settings
from franchise_site.core.exceptions import NotFoundError
from franchise_site.models.catalog import FilterState

logger = logging.getLogger(__name__)

router = APIRouter(tags=["site"], default_response_class=HTMLResponse)


async def render_or_not_found(site_service: PublicSiteService, rendering: Awaitable[str]) -> HTMLResponse:
    """Render a page, or the not-found page with status 404."""
    try:
        return HTMLResponse(await rendering)
    except NotFoundError as e:
        logger.info("Page not found", extra={"error": str(e)})
        return HTMLResponse(
            await site_service.render_not_found(), status_code=status.HTTP_404_NOT_FOUND
        )


@router.get("/")
async def homepage(
    draft: bool = Depends(is_draft_mode),
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> HTMLResponse:
    return await render_or_not_found(site_service, site_service.render_page(HOMEPAGE_SLUG, draft))


@router.get("/franchises")
async def franchise_catalog(
    state: FilterState = Depends(get_filter_state),
    page: int = Query(1, ge=1),
    per_page: int = Query(12, ge=1, le=100),
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> HTMLResponse:
    return HTMLResponse(await site_service.render_catalog(state, page, per_page))


@router.get("/franchises/{franchise_id}")
async def franchise_detail(
    franchise_id: str,
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> HTMLResponse:
    try:
        parsed = UUID(franchise_id)
    except ValueError:
        return HTMLResponse(
            await site_service.render_not_found(), status_code=status.HTTP_404_NOT_FOUND
        )
    return await render_or_not_found(site_service, site_service.render_franchise(parsed))


@router.get("/admin/login")
async def admin_login(
    redirect: str = "/import",
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> HTMLResponse:
    target = redirect if is_local_path(redirect) else "/import"
    return HTMLResponse(await site_service.render_admin_login(target))


@router.get("/import")
async def import_page(
    user: UserModel | None = Depends(get_optional_user),
    settings: Settings = Depends(get_settings_dependency),
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> Response:
    """CSV import page; expired or invalid sessions go back to the login form."""
    if user is None:
        return RedirectResponse(
            f"{settings.auth.login_path}?redirect={quote('/import', safe='')}",
            status_code=status.HTTP_307_TEMPORARY_REDIRECT,
        )
    return HTMLResponse(await site_service.render_import())


@router.get("/{slug}")
async def cms_page(
    slug: str,
    draft: bool = Depends(is_draft_mode),
    site_service: PublicSiteService = Depends(get_public_site_service),
) -> HTMLResponse:
    return await render_or_not_found(site_service, site_service.render_page(slug, draft))
