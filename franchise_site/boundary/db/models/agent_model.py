"""
Agent ORM model.

Franchise consultants that leads are routed to.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Agent persistence for lead routing
"""

import enum
from uuid import UUID

from sqlalchemy import JSON, Boolean, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from franchise_site.boundary.db.base import AuditFieldsMixin, Base, TimestampMixin, UUIDMixin


class AgentSpecialty(str, enum.Enum):
    """Franchise categories an agent specialises in."""

    FITNESS = "Fitness"
    FOOD_AND_BEVERAGE = "Food and Beverage"
    HEALTH_AND_WELLNESS = "Health and Wellness"
    HOME_SERVICES = "Home Services"
    SENIOR_CARE = "Senior Care"
    SPORTS = "Sports"


class AgentModel(Base, UUIDMixin, TimestampMixin, AuditFieldsMixin):
    """
    Agent ORM model.

    Attributes:
        name: Full name
        email: Address that receives routed leads
        phone: Contact phone
        title: Job title shown on franchise pages
        bio: Rich text biography (HTML)
        photo_id: Optional portrait in media
        specialties: List of AgentSpecialty values
        is_active: Inactive agents never receive leads
        ghl_webhook: Optional GoHighLevel webhook URL for lead delivery

    Relationships:
        photo: Many-to-one with MediaModel (SET NULL on media deletion)
    """

    __tablename__ = "agents"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    phone: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    title: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    bio: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    photo_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("media.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )
    specialties: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    ghl_webhook: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)

    # Relationships
    photo = relationship("MediaModel", lazy="selectin")
