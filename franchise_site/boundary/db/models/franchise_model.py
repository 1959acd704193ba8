"""
Franchise ORM model.

The franchise catalog: each franchise belongs to one industry, carries
any number of tags and may be assigned to an agent.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Franchise catalog persistence
"""

import enum
from uuid import UUID

from sqlalchemy import Boolean, Column, Enum, Float, ForeignKey, String, Table, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from franchise_site.boundary.db.base import (
    AuditFieldsMixin,
    Base,
    TimestampMixin,
    UUIDMixin,
    enum_values,
)


class FranchiseStatus(str, enum.Enum):
    """
    Publication state.

    DRAFT: Visible to admins only
    PUBLISHED: Listed on the public site
    ARCHIVED: Retired, hidden from the public site
    """

    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


franchise_tags = Table(
    "franchise_tags",
    Base.metadata,
    Column("franchise_id", ForeignKey("franchises.id", ondelete="CASCADE"), primary_key=True),
    Column("tag_id", ForeignKey("tags.id", ondelete="CASCADE"), primary_key=True),
)


class FranchiseModel(Base, UUIDMixin, TimestampMixin, AuditFieldsMixin):
    """
    Franchise ORM model.

    Attributes:
        business_name: Franchise brand name
        slug: Optional legacy slug
        status: FranchiseStatus (default draft)
        is_featured: Highlighted on grids
        is_sponsored: Paid placement
        is_top_pick: Editor's pick
        description: Rich text description (HTML)
        industry_id: Owning industry (required)
        investment_min: Minimum investment in dollars
        investment_max: Maximum investment in dollars
        logo_id: Optional logo in media
        assigned_agent_id: Agent receiving leads for this franchise
        use_main_contact: Route leads to the main contact even when an agent is assigned

    Relationships:
        industry: Many-to-one with IndustryModel (RESTRICT on industry deletion)
        tags: Many-to-many with TagModel through franchise_tags
        logo: Many-to-one with MediaModel
        assigned_agent: Many-to-one with AgentModel (SET NULL on agent deletion)
    """

    __tablename__ = "franchises"

    business_name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    status: Mapped[FranchiseStatus] = mapped_column(
        Enum(FranchiseStatus, native_enum=False, values_callable=enum_values, length=16),
        nullable=False,
        default=FranchiseStatus.DRAFT,
        index=True,
    )
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_sponsored: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_top_pick: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    industry_id: Mapped[UUID] = mapped_column(
        ForeignKey("industries.id", ondelete="RESTRICT"),
        nullable=False,
    )
    investment_min: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    investment_max: Mapped[float | None] = mapped_column(Float, nullable=True, default=None)
    logo_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("media.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )
    assigned_agent_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("agents.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )
    use_main_contact: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    industry = relationship("IndustryModel", lazy="selectin")
    tags = relationship("TagModel", secondary=franchise_tags, lazy="selectin")
    logo = relationship("MediaModel", lazy="selectin")
    assigned_agent = relationship("AgentModel", foreign_keys=[assigned_agent_id], lazy="selectin")
