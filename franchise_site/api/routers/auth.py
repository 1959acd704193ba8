"""
Authentication API endpoints.

Routes: POST /auth/login, POST /auth/logout, GET /auth/me

Login issues an HS256 token, returned in the body and set as an http-only
cookie so the /import page and the import API accept it.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Admin session HTTP API
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Response, status

from franchise_site.api.deps.dependencies import (
    get_auth_service,
    get_current_user,
    get_settings_dependency,
)
from franchise_site.application.services.auth_service import AuthService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.configs import Settings
from franchise_site.core.exceptions import AuthenticationError
from franchise_site.models.common import MessageResponse
from franchise_site.models.user import LoginRequest, LoginResponse, UserResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    response: Response,
    auth_service: AuthService = Depends(get_auth_service),
    settings: Settings = Depends(get_settings_dependency),
) -> LoginResponse:
    """
    Log in with email and password.

    Args:
        request: LoginRequest with email and password
        response: Outgoing response (receives the auth cookie)
        auth_service: Injected AuthService
        settings: Cookie configuration

    Returns:
        LoginResponse: Token, expiry and the user

    Raises:
        HTTPException(401): Wrong credentials or disabled account
    """
    try:
        user, token, expires_at = await auth_service.login(request.email.lower(), request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=e.message) from e

    max_age = int((expires_at - datetime.now(timezone.utc)).total_seconds())
    response.set_cookie(
        key=settings.auth.cookie_name,
        value=token,
        max_age=max_age,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        path="/",
    )
    return LoginResponse(
        access_token=token,
        expires_at=expires_at,
        user=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    response: Response,
    settings: Settings = Depends(get_settings_dependency),
) -> MessageResponse:
    response.delete_cookie(key=settings.auth.cookie_name, path="/")
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserResponse)
async def me(user: UserModel = Depends(get_current_user)) -> UserResponse:
    return UserResponse.model_validate(user)
