"""
Media service.

Uploads files to the media bucket, registers external assets by URL and
resolves the URL each media record is served from.

Dependencies: franchise_site.boundary.aws, franchise_site.boundary.db.CRUD
System role: Media library orchestration
"""

import asyncio
import logging
import mimetypes
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.boundary.aws.s3_client import S3MediaClient
from franchise_site.boundary.db.CRUD.media_crud import media_crud
from franchise_site.boundary.db.models.media_model import MediaModel
from franchise_site.configs.storage import StorageSettings
from franchise_site.core.exceptions import NotFoundError, StorageError, ValidationError
from franchise_site.core.text_utils import filename_from_url, sanitize_filename

logger = logging.getLogger(__name__)

COLLECTION = "media"


def resolve_media_url(media: MediaModel | None, storage: S3MediaClient | None) -> str | None:
    """
    URL a media record is served from.

    External assets use their own URL; uploads go through the bucket's
    public URL (or a presigned URL when the bucket is private).
    """
    if media is None:
        return None
    if media.url:
        return media.url
    if media.storage_key and storage is not None:
        return storage.public_url(media.storage_key)
    return None


class MediaService:
    """Media library operations."""

    def __init__(
        self,
        db: AsyncSession,
        storage: S3MediaClient | None,
        settings: StorageSettings,
        audit: AuditService | None = None,
    ) -> None:
        """
        Initialize media service.

        Args:
            db: Async SQLAlchemy session
            storage: Media bucket client (None when no bucket is configured)
            settings: Storage settings (key prefix, upload size limit)
            audit: Audit recorder for media changes
        """
        self.db = db
        self.storage = storage
        self.settings = settings
        self.audit = audit or AuditService(db)

    def url_for(self, media: MediaModel | None) -> str | None:
        return resolve_media_url(media, self.storage)

    async def upload(
        self,
        data: bytes,
        filename: str,
        alt: str,
        content_type: str | None = None,
    ) -> MediaModel:
        """
        Upload a file to the media bucket and record it.

        Args:
            data: File contents
            filename: Client filename (sanitised before use)
            alt: Alternative text
            content_type: MIME type reported by the client

        Returns:
            MediaModel: Created media record

        Raises:
            ValidationError: Empty file, missing alt text or file too large
            StorageError: No bucket configured or upload failure
        """
        if not alt or not alt.strip():
            raise ValidationError("Alt text is required", field="alt")
        if not data:
            raise ValidationError("Uploaded file is empty", field="file")
        if len(data) > self.settings.max_upload_bytes:
            raise ValidationError(
                "Uploaded file is too large",
                field="file",
                details={"max_bytes": self.settings.max_upload_bytes},
            )
        if self.storage is None:
            raise StorageError("Media storage is not configured", operation="upload")

        safe_name = sanitize_filename(filename or "file")
        mime_type = content_type or mimetypes.guess_type(safe_name)[0] or "application/octet-stream"
        storage_key = f"{self.settings.key_prefix.strip('/')}/{safe_name}"

        await asyncio.to_thread(self.storage.upload_bytes, storage_key, data, mime_type)

        media = await media_crud.create(
            self.db,
            alt=alt.strip(),
            filename=safe_name,
            mime_type=mime_type,
            filesize=len(data),
            storage_key=storage_key,
        )
        logger.info(
            "Media uploaded",
            extra={"media_id": str(media.id), "storage_key": storage_key, "filesize": len(data)},
        )
        await self.audit.record_create(COLLECTION, media.id)
        return media

    async def create_external(self, alt: str, url: str, filename: str | None = None) -> MediaModel:
        """Register an external asset; the filename is derived from the URL when omitted."""
        safe_name = sanitize_filename(filename) if filename else filename_from_url(url)
        media = await media_crud.create(
            self.db,
            alt=alt.strip(),
            filename=safe_name,
            mime_type=mimetypes.guess_type(safe_name)[0],
            url=url,
        )
        logger.info("External media registered", extra={"media_id": str(media.id), "url": url})
        await self.audit.record_create(COLLECTION, media.id)
        return media

    async def get(self, media_id: UUID) -> MediaModel:
        media = await media_crud.get_by_id(self.db, media_id)
        if media is None:
            raise NotFoundError(COLLECTION, media_id)
        return media

    async def list_media(self, limit: int = 50, offset: int = 0) -> tuple[list[MediaModel], int]:
        items = await media_crud.get_all(self.db, limit=limit, offset=offset)
        total = await media_crud.count(self.db)
        return list(items), total

    async def update_alt(self, media_id: UUID, alt: str) -> MediaModel:
        media = await self.get(media_id)
        before = snapshot(media)
        media = await media_crud.update(self.db, media, alt=alt.strip())
        await self.audit.record_update(COLLECTION, media.id, before, snapshot(media))
        return media

    async def delete(self, media_id: UUID) -> None:
        """
        Delete a media record and its stored object.

        Raises:
            NotFoundError: Unknown media id
            StorageError: Object deletion failed (the record is kept)
        """
        media = await self.get(media_id)
        before = snapshot(media)
        if media.storage_key and self.storage is not None:
            await asyncio.to_thread(self.storage.delete_object, media.storage_key)
        await media_crud.delete_by_id(self.db, media_id)
        logger.info("Media deleted", extra={"media_id": str(media_id)})
        await self.audit.record_delete(COLLECTION, before)
