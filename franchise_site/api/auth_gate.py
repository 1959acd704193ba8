"""
Authentication gate middleware.

Cheap presence check in front of the import page and import API. Routes still
verify the token itself through the get_current_user dependency.

Dependencies: fastapi, starlette
System role: Edge guard for admin-only site areas
"""

import logging
from urllib.parse import quote

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

IMPORT_PAGE_PREFIX = "/import"
IMPORT_API_PREFIX = "/api/franchises/import"


def is_under(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def has_bearer_token(request: Request) -> bool:
    scheme, _, credentials = request.headers.get("authorization", "").partition(" ")
    return scheme.lower() == "bearer" and bool(credentials.strip())


class AuthGateMiddleware(BaseHTTPMiddleware):
    """Redirect or reject unauthenticated requests to admin-only paths."""

    def __init__(self, app, cookie_name: str, login_path: str = "/admin/login"):
        super().__init__(app)
        self.cookie_name = cookie_name
        self.login_path = login_path

    async def dispatch(self, request: Request, call_next):
        """
        Apply the gate.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: 307 to the login page, 401 JSON, or the downstream response
        """
        path = request.url.path
        has_cookie = bool(request.cookies.get(self.cookie_name))

        if is_under(path, IMPORT_PAGE_PREFIX) and not has_cookie:
            target = f"{self.login_path}?redirect={quote(path, safe='')}"
            logger.info("Redirecting unauthenticated request", extra={"path": path})
            return RedirectResponse(target, status_code=status.HTTP_307_TEMPORARY_REDIRECT)

        if is_under(path, IMPORT_API_PREFIX) and not (has_cookie or has_bearer_token(request)):
            logger.info("Rejecting unauthenticated API request", extra={"path": path})
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"error": "Authentication required"},
            )

        response: Response = await call_next(request)
        return response
