"""
Taxonomy service.

Industries and tags share the same rules: names are unique, slugs are
generated from the name when left blank and must stay unique. Industries
still referenced by franchises cannot be deleted.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.core.text_utils
System role: Franchise categorisation orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.boundary.db.CRUD.franchise_crud import franchise_crud
from franchise_site.boundary.db.CRUD.taxonomy_crud import industry_crud, tag_crud
from franchise_site.boundary.db.models.taxonomy_model import IndustryModel, TagModel
from franchise_site.core.exceptions import ConflictError, NotFoundError, ValidationError
from franchise_site.core.text_utils import to_slug

logger = logging.getLogger(__name__)

# Fields an update may explicitly clear
NULLABLE_FIELDS = frozenset({"description", "color"})


class TaxonomyService:
    """Industry and tag management."""

    def __init__(self, db: AsyncSession, audit: AuditService | None = None) -> None:
        """
        Initialize taxonomy service.

        Args:
            db: Async SQLAlchemy session
            audit: Audit recorder (carries the acting user)
        """
        self.db = db
        self.audit = audit or AuditService(db)

    @property
    def _user_id(self) -> UUID | None:
        return self.audit.meta.user_id

    @staticmethod
    def _resolve_slug(name: str, slug: str | None) -> str:
        resolved = to_slug(slug or "") or to_slug(name)
        if not resolved:
            raise ValidationError("Slug could not be generated from name", field="slug")
        return resolved

    async def _check_unique(
        self,
        crud: Any,
        collection: str,
        name: str,
        slug: str,
        current_id: UUID | None = None,
    ) -> None:
        existing = await crud.find_by_name_or_slug(self.db, name, slug)
        if existing is not None and existing.id != current_id:
            field = "name" if existing.name.lower() == name.lower() else "slug"
            raise ConflictError(
                f"{collection} with this {field} already exists",
                field=field,
                details={"existing_id": str(existing.id)},
            )

    async def _create(self, crud: Any, collection: str, **fields: Any) -> Any:
        fields["name"] = fields["name"].strip()
        fields["slug"] = self._resolve_slug(fields["name"], fields.get("slug"))
        await self._check_unique(crud, collection, fields["name"], fields["slug"])

        record = await crud.create(
            self.db,
            created_by_id=self._user_id,
            updated_by_id=self._user_id,
            **fields,
        )
        logger.info(
            f"{collection} created",
            extra={"record_id": str(record.id), "record_slug": record.slug},
        )
        await self.audit.record_create(collection, record.id)
        return record

    async def _update(self, crud: Any, collection: str, record_id: UUID, **fields: Any) -> Any:
        record = await crud.get_by_id(self.db, record_id)
        if record is None:
            raise NotFoundError(collection, record_id)

        fields = {k: v for k, v in fields.items() if v is not None or k in NULLABLE_FIELDS}
        before = snapshot(record)
        name = (fields.get("name") or record.name).strip()
        if "name" in fields or "slug" in fields:
            slug = fields.get("slug")
            # Blank slug on update regenerates it from the (possibly new) name
            fields["slug"] = self._resolve_slug(name, slug) if "slug" in fields else record.slug
            fields["name"] = name
            await self._check_unique(crud, collection, name, fields["slug"], current_id=record.id)

        record = await crud.update(self.db, record, updated_by_id=self._user_id, **fields)
        await self.audit.record_update(collection, record.id, before, snapshot(record))
        return record

    async def _delete(self, crud: Any, collection: str, record_id: UUID) -> None:
        record = await crud.get_by_id(self.db, record_id)
        if record is None:
            raise NotFoundError(collection, record_id)
        before = snapshot(record)
        await crud.delete_by_id(self.db, record_id)
        logger.info(f"{collection} deleted", extra={"record_id": str(record_id)})
        await self.audit.record_delete(collection, before)

    # Industries

    async def create_industry(self, **fields: Any) -> IndustryModel:
        """
        Create an industry.

        Args:
            **fields: name, slug, description, icon, color, text_color

        Returns:
            IndustryModel: Created industry

        Raises:
            ConflictError: Name or slug already used
            ValidationError: No usable slug
        """
        return await self._create(industry_crud, "industries", **fields)

    async def get_industry(self, industry_id: UUID) -> IndustryModel:
        industry = await industry_crud.get_by_id(self.db, industry_id)
        if industry is None:
            raise NotFoundError("industries", industry_id)
        return industry

    async def list_industries(self) -> list[IndustryModel]:
        return list(await industry_crud.list_by_name(self.db))

    async def update_industry(self, industry_id: UUID, **fields: Any) -> IndustryModel:
        return await self._update(industry_crud, "industries", industry_id, **fields)

    async def delete_industry(self, industry_id: UUID) -> None:
        """
        Delete an industry.

        Raises:
            NotFoundError: Unknown industry
            ConflictError: Franchises still belong to the industry
        """
        in_use = await franchise_crud.count_for_industry(self.db, industry_id)
        if in_use:
            raise ConflictError(
                "Industry is assigned to franchises",
                details={"franchise_count": in_use},
            )
        await self._delete(industry_crud, "industries", industry_id)

    async def find_or_create_industry(self, name: str) -> IndustryModel:
        """Resolve an industry by name or slug, creating it when missing."""
        name = name.strip()
        industry = await industry_crud.find_by_name_or_slug(self.db, name, to_slug(name))
        if industry is not None:
            return industry
        return await self.create_industry(name=name)

    # Tags

    async def create_tag(self, **fields: Any) -> TagModel:
        return await self._create(tag_crud, "tags", **fields)

    async def get_tag(self, tag_id: UUID) -> TagModel:
        tag = await tag_crud.get_by_id(self.db, tag_id)
        if tag is None:
            raise NotFoundError("tags", tag_id)
        return tag

    async def list_tags(self) -> list[TagModel]:
        return list(await tag_crud.list_by_name(self.db))

    async def update_tag(self, tag_id: UUID, **fields: Any) -> TagModel:
        return await self._update(tag_crud, "tags", tag_id, **fields)

    async def delete_tag(self, tag_id: UUID) -> None:
        await self._delete(tag_crud, "tags", tag_id)

    async def find_or_create_tag(self, name: str) -> TagModel:
        """Resolve a tag by name or slug, creating it when missing."""
        name = name.strip()
        tag = await tag_crud.find_by_name_or_slug(self.db, name, to_slug(name))
        if tag is not None:
            return tag
        return await self.create_tag(name=name)
