"""
User and authentication schemas.

Dependencies: pydantic
System role: Auth API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from franchise_site.models.common import EMAIL_PATTERN


class LoginRequest(BaseModel):
    email: str = Field(..., max_length=320, pattern=EMAIL_PATTERN)
    password: str = Field(..., min_length=1)


class CreateUserRequest(BaseModel):
    email: str = Field(..., max_length=320, pattern=EMAIL_PATTERN)
    name: str | None = Field(None, max_length=255)
    password: str = Field(..., min_length=8, max_length=72)
    is_active: bool = True


class UpdateUserRequest(BaseModel):
    """Only provided fields change; a password is re-hashed."""

    email: str | None = Field(None, max_length=320, pattern=EMAIL_PATTERN)
    name: str | None = Field(None, max_length=255)
    password: str | None = Field(None, min_length=8, max_length=72)
    is_active: bool | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    email: str
    name: str | None
    is_active: bool
    created_at: datetime


class LoginResponse(BaseModel):
    """Token response; the token is also set as an http-only cookie."""

    access_token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: UserResponse
