"""
Media schemas.

Dependencies: pydantic
System role: Media API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class CreateExternalMediaRequest(BaseModel):
    """Register an external asset by URL."""

    alt: str = Field(..., min_length=1, max_length=512)
    url: HttpUrl
    filename: str | None = Field(None, max_length=512)


class UpdateMediaRequest(BaseModel):
    alt: str = Field(..., min_length=1, max_length=512)


class MediaResponse(BaseModel):
    """Media record with a URL usable on the public site."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    alt: str
    filename: str
    mime_type: str | None
    filesize: int | None
    url: str | None = Field(None, description="Resolved public URL")
    created_at: datetime
    updated_at: datetime
