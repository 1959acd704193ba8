"""
Site settings ORM model.

Singleton global holding navbar, footer, ticker, general and SEO settings.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Site-wide configuration persistence
"""

from uuid import UUID

from sqlalchemy import JSON, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import Base, TimestampMixin, UUIDMixin


class SiteSettingsModel(Base, UUIDMixin, TimestampMixin):
    """
    Site settings singleton row.

    Each section is a JSON document validated by the matching pydantic
    schema in franchise_site.models.site_settings.
    """

    __tablename__ = "site_settings"

    navbar: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    footer: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    ticker: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    general: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    seo: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    updated_by_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
    )
