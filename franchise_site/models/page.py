"""
Page schemas.

Dependencies: pydantic
System role: Page API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from franchise_site.models.blocks import Block

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"


class CreatePageRequest(BaseModel):
    """Request schema for creating a page; ``slug`` is derived from the title when blank."""

    title: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    layout: list[Block] = Field(default_factory=list)


class UpdatePageRequest(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255, pattern=SLUG_PATTERN)
    description: str | None = None
    layout: list[Block] | None = None


class PageResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    title: str
    slug: str
    description: str | None
    layout: list[dict]
    created_at: datetime
    updated_at: datetime
