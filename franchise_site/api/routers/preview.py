"""
Preview (draft mode) endpoints.

Routes:
- GET /api/preview?url=&secret= - Enable draft mode and redirect to a local path
- GET /api/preview/exit - Disable draft mode

Draft mode renders unpublished blocks and franchises on public pages.

Dependencies: franchise_site.application.services.auth_service
System role: Content preview HTTP API
"""

import hmac
import logging

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse, RedirectResponse, Response

from franchise_site.api.deps.dependencies import get_settings_dependency
from franchise_site.application.services.auth_service import issue_draft_token
from franchise_site.configs import Settings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/preview", tags=["preview"])

DRAFT_TTL_MINUTES = 60


def is_local_path(url: str) -> bool:
    """Only same-site paths are valid redirect targets."""
    return url.startswith("/") and not url.startswith("//") and "\\" not in url


@router.get("")
async def enable_preview(
    url: str | None = None,
    secret: str | None = None,
    settings: Settings = Depends(get_settings_dependency),
) -> Response:
    """
    Enable draft mode.

    Args:
        url: Local path to open in draft mode
        secret: Shared preview secret

    Returns:
        Response: 307 redirect with the draft-mode cookie, or a plain-text error
    """
    expected = settings.auth.effective_preview_secret
    if secret is None or not hmac.compare_digest(secret.encode(), expected.encode()):
        logger.warning("Preview rejected: invalid secret")
        return PlainTextResponse("Invalid token", status_code=status.HTTP_401_UNAUTHORIZED)
    if not url:
        return PlainTextResponse("URL parameter is required", status_code=status.HTTP_400_BAD_REQUEST)
    if not is_local_path(url):
        return PlainTextResponse("URL must be a local path", status_code=status.HTTP_400_BAD_REQUEST)

    response = RedirectResponse(url, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.set_cookie(
        key=settings.auth.draft_cookie_name,
        value=issue_draft_token(settings.auth, DRAFT_TTL_MINUTES),
        max_age=DRAFT_TTL_MINUTES * 60,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
    )
    logger.info("Draft mode enabled", extra={"preview_path": url})
    return response


@router.get("/exit")
async def exit_preview(
    url: str = "/",
    settings: Settings = Depends(get_settings_dependency),
) -> Response:
    target = url if is_local_path(url) else "/"
    response = RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
    response.delete_cookie(key=settings.auth.draft_cookie_name, path="/")
    return response
