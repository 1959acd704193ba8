"""
Page service.

CMS pages composed from content blocks. Layouts arrive validated as block
models and are stored as camelCase JSON.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.models.blocks
System role: Page management orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.boundary.db.CRUD.page_crud import page_crud
from franchise_site.boundary.db.models.page_model import PageModel
from franchise_site.core.exceptions import ConflictError, NotFoundError, ValidationError
from franchise_site.core.text_utils import to_slug
from franchise_site.models.blocks import dump_layout

logger = logging.getLogger(__name__)

COLLECTION = "pages"
HOMEPAGE_SLUG = "homepage"


class PageService:
    """Page CRUD and lookup."""

    def __init__(self, db: AsyncSession, audit: AuditService | None = None) -> None:
        self.db = db
        self.audit = audit or AuditService(db)

    async def _unique_slug(self, slug: str, current_id: UUID | None = None) -> str:
        existing = await page_crud.get_by_slug(self.db, slug)
        if existing is not None and existing.id != current_id:
            raise ConflictError("Page with this slug already exists", field="slug")
        return slug

    async def create_page(
        self,
        title: str,
        slug: str | None = None,
        description: str | None = None,
        layout: list[Any] | None = None,
    ) -> PageModel:
        """
        Create a page.

        Args:
            title: Page title
            slug: Path segment (derived from the title when blank)
            description: Meta description
            layout: Validated block models

        Returns:
            PageModel: Created page

        Raises:
            ConflictError: Slug already used
        """
        resolved = to_slug(slug or "") or to_slug(title)
        if not resolved:
            raise ValidationError("Slug could not be generated from title", field="slug")
        await self._unique_slug(resolved)

        user_id = self.audit.meta.user_id
        page = await page_crud.create(
            self.db,
            title=title.strip(),
            slug=resolved,
            description=description,
            layout=dump_layout(layout or []),
            created_by_id=user_id,
            updated_by_id=user_id,
        )
        logger.info("Page created", extra={"page_id": str(page.id), "page_slug": page.slug})
        await self.audit.record_create(COLLECTION, page.id)
        return page

    async def get_page(self, page_id: UUID) -> PageModel:
        page = await page_crud.get_by_id(self.db, page_id)
        if page is None:
            raise NotFoundError(COLLECTION, page_id)
        return page

    async def get_by_slug(self, slug: str) -> PageModel:
        page = await page_crud.get_by_slug(self.db, slug)
        if page is None:
            raise NotFoundError(COLLECTION, slug)
        return page

    async def list_pages(self) -> list[PageModel]:
        return list(await page_crud.list_by_title(self.db))

    async def update_page(self, page_id: UUID, **fields: Any) -> PageModel:
        """Update a page; ``layout`` replaces the whole block list."""
        page = await self.get_page(page_id)
        before = snapshot(page)

        updates: dict[str, Any] = {}
        if fields.get("title"):
            updates["title"] = fields["title"].strip()
        if "description" in fields:
            updates["description"] = fields["description"]
        if fields.get("slug"):
            updates["slug"] = await self._unique_slug(to_slug(fields["slug"]), current_id=page.id)
        if fields.get("layout") is not None:
            updates["layout"] = dump_layout(fields["layout"])

        page = await page_crud.update(
            self.db, page, updated_by_id=self.audit.meta.user_id, **updates
        )
        await self.audit.record_update(COLLECTION, page.id, before, snapshot(page))
        return page

    async def delete_page(self, page_id: UUID) -> None:
        page = await self.get_page(page_id)
        before = snapshot(page)
        await page_crud.delete_by_id(self.db, page_id)
        logger.info("Page deleted", extra={"page_id": str(page_id)})
        await self.audit.record_delete(COLLECTION, before)
