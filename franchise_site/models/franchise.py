"""
Franchise schemas.

Request bodies for the admin API, response shapes with their related
industry, tags and agent, and the CSV import result.

Dependencies: pydantic
System role: Franchise API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from franchise_site.boundary.db.models.franchise_model import FranchiseStatus


class CreateFranchiseRequest(BaseModel):
    """
    Request schema for creating a franchise.

    Attributes:
        business_name: Franchise brand name
        industry_id: Owning industry
        tag_ids: Tags to attach
        investment_min: Minimum investment in dollars
        investment_max: Maximum investment in dollars (must not be below min)
    """

    business_name: str = Field(..., min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    status: FranchiseStatus = FranchiseStatus.DRAFT
    is_featured: bool = False
    is_sponsored: bool = False
    is_top_pick: bool = False
    description: str | None = Field(None, description="Rich text (HTML)")
    industry_id: uuid.UUID
    tag_ids: list[uuid.UUID] = Field(default_factory=list)
    investment_min: float | None = Field(None, ge=0)
    investment_max: float | None = Field(None, ge=0)
    logo_id: uuid.UUID | None = None
    assigned_agent_id: uuid.UUID | None = None
    use_main_contact: bool = False

    @model_validator(mode="after")
    def check_investment_range(self) -> "CreateFranchiseRequest":
        if (
            self.investment_min is not None
            and self.investment_max is not None
            and self.investment_min > self.investment_max
        ):
            raise ValueError("investment_min cannot exceed investment_max")
        return self


class UpdateFranchiseRequest(BaseModel):
    """Request schema for updating a franchise (only provided fields change)."""

    business_name: str | None = Field(None, min_length=1, max_length=255)
    slug: str | None = Field(None, max_length=255)
    status: FranchiseStatus | None = None
    is_featured: bool | None = None
    is_sponsored: bool | None = None
    is_top_pick: bool | None = None
    description: str | None = None
    industry_id: uuid.UUID | None = None
    tag_ids: list[uuid.UUID] | None = None
    investment_min: float | None = Field(None, ge=0)
    investment_max: float | None = Field(None, ge=0)
    logo_id: uuid.UUID | None = None
    assigned_agent_id: uuid.UUID | None = None
    use_main_contact: bool | None = None


class IndustrySummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    icon: str
    color: str | None
    text_color: str


class TagSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    slug: str
    type: str
    color: str | None
    text_color: str


class AgentSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    title: str | None
    email: str
    phone: str | None


class FranchiseResponse(BaseModel):
    """Franchise with its related records."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    business_name: str
    slug: str | None
    status: FranchiseStatus
    is_featured: bool
    is_sponsored: bool
    is_top_pick: bool
    description: str | None
    industry_id: uuid.UUID
    industry: IndustrySummary | None = None
    tags: list[TagSummary] = Field(default_factory=list)
    investment_min: float | None
    investment_max: float | None
    logo_id: uuid.UUID | None
    assigned_agent_id: uuid.UUID | None
    assigned_agent: AgentSummary | None = None
    use_main_contact: bool
    created_at: datetime
    updated_at: datetime


class ImportRowError(BaseModel):
    row: int
    business_name: str | None = None
    error: str


class ImportResult(BaseModel):
    """Outcome of a CSV import (``success`` is False when any row failed)."""

    success: bool
    created: int = 0
    errors: list[ImportRowError] = Field(default_factory=list)
