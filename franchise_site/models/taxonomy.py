"""
Industry and tag schemas.

Dependencies: pydantic
System role: Taxonomy API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from franchise_site.boundary.db.models.taxonomy_model import IndustryIcon, TagType

HEX_COLOR = r"^#(?:[0-9a-fA-F]{3}){1,2}$"


class CreateIndustryRequest(BaseModel):
    """Request schema for creating an industry."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255, description="Generated from name when blank")
    description: str | None = None
    icon: IndustryIcon = IndustryIcon.BRIEFCASE
    color: str | None = Field(None, pattern=HEX_COLOR)
    text_color: str = Field("#ffffff", pattern=HEX_COLOR)


class UpdateIndustryRequest(BaseModel):
    """Request schema for updating an industry (only provided fields change)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    description: str | None = None
    icon: IndustryIcon | None = None
    color: str | None = Field(None, pattern=HEX_COLOR)
    text_color: str | None = Field(None, pattern=HEX_COLOR)


class IndustryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    description: str | None
    icon: IndustryIcon
    color: str | None
    text_color: str
    created_at: datetime
    updated_at: datetime


class CreateTagRequest(BaseModel):
    """Request schema for creating a tag."""

    name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    type: TagType = TagType.FEATURE
    description: str | None = None
    color: str | None = Field(None, pattern=HEX_COLOR)
    text_color: str = Field("#ffffff", pattern=HEX_COLOR)


class UpdateTagRequest(BaseModel):
    """Request schema for updating a tag (only provided fields change)."""

    name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    type: TagType | None = None
    description: str | None = None
    color: str | None = Field(None, pattern=HEX_COLOR)
    text_color: str | None = Field(None, pattern=HEX_COLOR)


class TagResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    type: TagType
    description: str | None
    color: str | None
    text_color: str
    created_at: datetime
    updated_at: datetime
