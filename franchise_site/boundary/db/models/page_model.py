"""
Page ORM model.

CMS pages composed from an ordered list of content blocks.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Page layout persistence
"""

from sqlalchemy import JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import AuditFieldsMixin, Base, TimestampMixin, UUIDMixin


class PageModel(Base, UUIDMixin, TimestampMixin, AuditFieldsMixin):
    """
    CMS page.

    Attributes:
        title: Page title
        slug: Unique path segment ("homepage" renders at /)
        description: Meta description for SEO
        layout: Ordered list of block dicts, each with a ``blockType``
    """

    __tablename__ = "pages"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    slug: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True, default=None)
    layout: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
