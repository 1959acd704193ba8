"""
User API endpoints.

Routes: GET /users, POST /users, GET /users/{id}, PATCH /users/{id},
DELETE /users/{id}

Internal admins manage every account; other users only see and edit their own.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Admin user management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from franchise_site.api.deps.dependencies import get_current_user, get_user_service
from franchise_site.api.routers.router_utils import handle_admin_errors
from franchise_site.application.services.user_service import UserService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.common import MessageResponse
from franchise_site.models.user import CreateUserRequest, UpdateUserRequest, UserResponse

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=list[UserResponse])
@handle_admin_errors
async def list_users(
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> list[UserResponse]:
    return [UserResponse.model_validate(u) for u in await user_service.list_users(user)]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_user(
    request: CreateUserRequest,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """
    Create an admin account.

    Raises:
        HTTPException(403): Caller is not an internal admin
        HTTPException(409): Email already registered
    """
    created = await user_service.create_user(
        user,
        email=request.email,
        password=request.password,
        name=request.name,
        is_active=request.is_active,
    )
    return UserResponse.model_validate(created)


@router.get("/{user_id}", response_model=UserResponse)
@handle_admin_errors
async def get_user(
    user_id: UUID,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    return UserResponse.model_validate(await user_service.get_user(user, user_id))


@router.patch("/{user_id}", response_model=UserResponse)
@handle_admin_errors
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    updated = await user_service.update_user(
        user, user_id, **request.model_dump(exclude_unset=True)
    )
    return UserResponse.model_validate(updated)


@router.delete("/{user_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_user(
    user_id: UUID,
    user: UserModel = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.delete_user(user, user_id)
    return MessageResponse(message="User deleted")
