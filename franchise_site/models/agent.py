"""
Agent schemas.

Dependencies: pydantic
System role: Agent API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl

from franchise_site.boundary.db.models.agent_model import AgentSpecialty
from franchise_site.models.common import EMAIL_PATTERN


class CreateAgentRequest(BaseModel):
    """Request schema for creating an agent."""

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=320, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=64)
    title: str | None = Field(None, max_length=255)
    bio: str | None = Field(None, description="Rich text (HTML)")
    photo_id: uuid.UUID | None = None
    specialties: list[AgentSpecialty] = Field(default_factory=list)
    is_active: bool = True
    ghl_webhook: HttpUrl | None = None


class UpdateAgentRequest(BaseModel):
    """Request schema for updating an agent (only provided fields change)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    email: str | None = Field(None, max_length=320, pattern=EMAIL_PATTERN)
    phone: str | None = Field(None, max_length=64)
    title: str | None = Field(None, max_length=255)
    bio: str | None = None
    photo_id: uuid.UUID | None = None
    specialties: list[AgentSpecialty] | None = None
    is_active: bool | None = None
    ghl_webhook: HttpUrl | None = None


class AgentResponse(BaseModel):
    """Public agent profile (webhook URL omitted)."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    phone: str | None
    title: str | None
    bio: str | None
    photo_id: uuid.UUID | None
    specialties: list[str]
    is_active: bool
    created_at: datetime
    updated_at: datetime


class AgentAdminResponse(AgentResponse):
    """Agent profile including routing configuration."""

    ghl_webhook: str | None
    created_by_id: uuid.UUID | None
    updated_by_id: uuid.UUID | None
