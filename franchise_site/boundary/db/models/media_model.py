"""
Media ORM model.

Uploaded files (logos, photos, page images) stored in the S3 media bucket,
or external assets referenced by URL.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Media asset metadata persistence
"""

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import Base, TimestampMixin, UUIDMixin


class MediaModel(Base, UUIDMixin, TimestampMixin):
    """
    Media asset.

    Exactly one of storage_key (uploaded to the bucket) or url (external
    asset) is normally set.

    Attributes:
        alt: Alternative text (required)
        filename: Sanitised filename ``<base>-<epoch-ms>.<ext>``
        mime_type: Content type of the upload
        filesize: Size in bytes
        storage_key: Object key in the media bucket
        url: External URL for pasted assets
    """

    __tablename__ = "media"

    alt: Mapped[str] = mapped_column(String(512), nullable=False)
    filename: Mapped[str] = mapped_column(String(512), nullable=False)
    mime_type: Mapped[str | None] = mapped_column(String(255), nullable=True, default=None)
    filesize: Mapped[int | None] = mapped_column(Integer, nullable=True, default=None)
    storage_key: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
    url: Mapped[str | None] = mapped_column(String(2048), nullable=True, default=None)
