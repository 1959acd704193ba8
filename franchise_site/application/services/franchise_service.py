"""
Franchise service.

Admin CRUD for the franchise catalog plus the public read side: card view
models, the filtered/paginated catalog and the franchise grid block query.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.core.franchise_filters
System role: Franchise catalog orchestration
"""

import logging
from typing import Any, Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.application.services.media_service import resolve_media_url
from franchise_site.boundary.aws.s3_client import S3MediaClient
from franchise_site.boundary.db.CRUD.agent_crud import agent_crud
from franchise_site.boundary.db.CRUD.franchise_crud import franchise_crud
from franchise_site.boundary.db.CRUD.media_crud import media_crud
from franchise_site.boundary.db.CRUD.taxonomy_crud import industry_crud, tag_crud
from franchise_site.boundary.db.models.franchise_model import FranchiseModel, FranchiseStatus
from franchise_site.core.exceptions import NotFoundError, ValidationError
from franchise_site.core.franchise_filters import apply_filters, available_categories, paginate
from franchise_site.core.text_utils import format_investment_range, html_to_text, to_slug
from franchise_site.models.blocks import FranchiseGridBlock
from franchise_site.models.catalog import CardTag, CatalogPage, FilterState, FranchiseCard

logger = logging.getLogger(__name__)

COLLECTION = "franchises"

NULLABLE_FIELDS = frozenset(
    {
        "slug",
        "description",
        "investment_min",
        "investment_max",
        "logo_id",
        "assigned_agent_id",
    }
)


def franchise_snapshot(franchise: FranchiseModel) -> dict[str, Any]:
    """Audit snapshot including the attached tag ids."""
    return snapshot(franchise, tag_ids=sorted(str(tag.id) for tag in franchise.tags))


def to_card(franchise: FranchiseModel, storage: S3MediaClient | None = None) -> FranchiseCard:
    """
    Flatten a franchise into the card view model.

    Args:
        franchise: Franchise with relationships loaded
        storage: Media bucket client used to resolve the logo URL

    Returns:
        FranchiseCard: Card with plain-text description and cash display string
    """
    industry = franchise.industry
    agent = franchise.assigned_agent
    return FranchiseCard(
        id=franchise.id,
        name=franchise.business_name,
        category=industry.name if industry else "Uncategorized",
        category_icon=industry.icon.value if industry else None,
        description=html_to_text(franchise.description) or "View details for this franchise",
        cash_required=format_investment_range(franchise.investment_min, franchise.investment_max),
        min_investment=franchise.investment_min,
        max_investment=franchise.investment_max,
        tags=[
            CardTag(name=tag.name, color=tag.color, text_color=tag.text_color)
            for tag in franchise.tags
        ],
        logo_url=resolve_media_url(franchise.logo, storage),
        is_featured=franchise.is_featured,
        is_sponsored=franchise.is_sponsored,
        is_top_pick=franchise.is_top_pick,
        agent_name=agent.name if agent else None,
        agent_title=agent.title if agent else None,
    )


class FranchiseService:
    """Franchise catalog operations."""

    def __init__(
        self,
        db: AsyncSession,
        storage: S3MediaClient | None = None,
        audit: AuditService | None = None,
    ) -> None:
        """
        Initialize franchise service.

        Args:
            db: Async SQLAlchemy session
            storage: Media bucket client for logo URLs
            audit: Audit recorder (carries the acting user)
        """
        self.db = db
        self.storage = storage
        self.audit = audit or AuditService(db)

    async def _resolve_relations(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Validate referenced records and swap ``tag_ids`` for tag objects."""
        if fields.get("industry_id") is not None:
            if not await industry_crud.exists(self.db, fields["industry_id"]):
                raise ValidationError("Industry does not exist", field="industry_id")
        if fields.get("assigned_agent_id") is not None:
            if not await agent_crud.exists(self.db, fields["assigned_agent_id"]):
                raise ValidationError("Agent does not exist", field="assigned_agent_id")
        if fields.get("logo_id") is not None:
            if not await media_crud.exists(self.db, fields["logo_id"]):
                raise ValidationError("Logo media does not exist", field="logo_id")

        if "tag_ids" in fields:
            tag_ids = list(dict.fromkeys(fields.pop("tag_ids") or []))
            tags = await tag_crud.get_by_ids(self.db, tag_ids)
            if len(tags) != len(tag_ids):
                raise ValidationError("One or more tags do not exist", field="tag_ids")
            by_id = {tag.id: tag for tag in tags}
            fields["tags"] = [by_id[tag_id] for tag_id in tag_ids]
        return fields

    async def create_franchise(self, **fields: Any) -> FranchiseModel:
        """
        Create a franchise.

        Args:
            **fields: Column values plus optional ``tag_ids``

        Returns:
            FranchiseModel: Created franchise with relationships loaded

        Raises:
            ValidationError: Missing or unknown related records
        """
        try:
            fields = await self._resolve_relations(dict(fields))
            if fields.get("slug"):
                fields["slug"] = to_slug(fields["slug"]) or None
            user_id = self.audit.meta.user_id
            franchise = await franchise_crud.create(
                self.db,
                created_by_id=user_id,
                updated_by_id=user_id,
                **fields,
            )
            logger.info(
                "Franchise created",
                extra={"franchise_id": str(franchise.id), "business_name": franchise.business_name},
            )
        except ValidationError:
            raise
        except Exception as e:
            logger.error(
                "Failed to create franchise",
                extra={"error": str(e), "business_name": fields.get("business_name")},
            )
            raise

        await self.audit.record_create(COLLECTION, franchise.id)
        return franchise

    async def get_franchise(self, franchise_id: UUID) -> FranchiseModel:
        franchise = await franchise_crud.get_by_id(self.db, franchise_id)
        if franchise is None:
            raise NotFoundError(COLLECTION, franchise_id)
        return franchise

    async def get_published(self, franchise_id: UUID) -> FranchiseModel:
        """Fetch a franchise visible on the public site."""
        franchise = await franchise_crud.get_published(self.db, franchise_id)
        if franchise is None:
            raise NotFoundError(COLLECTION, franchise_id)
        return franchise

    async def list_franchises(
        self,
        status: FranchiseStatus | None = None,
        industry_id: UUID | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[FranchiseModel], int]:
        """Admin listing, most recently updated first."""
        items = await franchise_crud.list_franchises(
            self.db, status=status, industry_id=industry_id, limit=limit, offset=offset
        )
        total = await franchise_crud.count_franchises(self.db, status=status, industry_id=industry_id)
        return list(items), total

    async def update_franchise(self, franchise_id: UUID, **fields: Any) -> FranchiseModel:
        """
        Update a franchise; only the provided fields change.

        Raises:
            NotFoundError: Unknown franchise
            ValidationError: Unknown related records or an inverted investment range
        """
        franchise = await self.get_franchise(franchise_id)
        before = franchise_snapshot(franchise)

        fields = {k: v for k, v in fields.items() if v is not None or k in NULLABLE_FIELDS}
        fields = await self._resolve_relations(fields)

        minimum = fields.get("investment_min", franchise.investment_min)
        maximum = fields.get("investment_max", franchise.investment_max)
        if minimum is not None and maximum is not None and minimum > maximum:
            raise ValidationError(
                "investment_min cannot exceed investment_max", field="investment_min"
            )

        franchise = await franchise_crud.update(
            self.db, franchise, updated_by_id=self.audit.meta.user_id, **fields
        )
        logger.info("Franchise updated", extra={"franchise_id": str(franchise_id)})
        await self.audit.record_update(COLLECTION, franchise.id, before, franchise_snapshot(franchise))
        return franchise

    async def delete_franchise(self, franchise_id: UUID) -> None:
        franchise = await self.get_franchise(franchise_id)
        before = franchise_snapshot(franchise)
        await franchise_crud.delete_by_id(self.db, franchise_id)
        logger.info("Franchise deleted", extra={"franchise_id": str(franchise_id)})
        await self.audit.record_delete(COLLECTION, before)

    async def published_cards(self) -> list[FranchiseCard]:
        """All published franchises as cards, newest updated first."""
        franchises = await franchise_crud.list_franchises(self.db, status=FranchiseStatus.PUBLISHED)
        return [to_card(f, self.storage) for f in franchises]

    async def catalog(self, state: FilterState, page: int = 1, per_page: int = 12) -> CatalogPage:
        """
        Filtered, sorted and paginated public catalog.

        Args:
            state: Filter and sort selection
            page: 1-based page number
            per_page: Page size

        Returns:
            CatalogPage: Page of cards with category options and totals
        """
        cards = await self.published_cards()
        filtered = apply_filters(cards, state)
        page_data = paginate(filtered, page, per_page)
        return CatalogPage(
            total_unfiltered=len(cards),
            categories=available_categories(cards),
            **page_data,
        )

    async def grid_cards(self, block: FranchiseGridBlock, draft: bool = False) -> list[FranchiseCard]:
        """
        Cards for a franchise grid block.

        Manual mode keeps the editor's order; automatic mode queries by the
        block's toggles and category, newest updated first. Unpublished
        franchises only appear in draft mode.

        Args:
            block: Grid block configuration
            draft: Include unpublished franchises (preview)

        Returns:
            list[FranchiseCard]: At most ``block.limit`` cards
        """
        if block.display_mode == "manual":
            found = await franchise_crud.get_by_ids(self.db, block.selected_franchises)
            by_id = {f.id: f for f in found}
            ordered: Iterable[FranchiseModel] = (
                by_id[fid] for fid in dict.fromkeys(block.selected_franchises) if fid in by_id
            )
            franchises = [
                f for f in ordered if draft or f.status == FranchiseStatus.PUBLISHED
            ][: block.limit]
            return [to_card(f, self.storage) for f in franchises]

        industry_id = None
        category = (block.category or "all").strip()
        if category.lower() != "all":
            industry = await industry_crud.find_by_name_or_slug(self.db, category, to_slug(category))
            if industry is None:
                return []
            industry_id = industry.id

        franchises = await franchise_crud.list_franchises(
            self.db,
            status=None if draft else FranchiseStatus.PUBLISHED,
            industry_id=industry_id,
            only_featured=block.only_featured,
            only_sponsored=block.only_sponsored,
            only_top_pick=block.only_top_pick,
            limit=block.limit,
        )
        return [to_card(f, self.storage) for f in franchises]
