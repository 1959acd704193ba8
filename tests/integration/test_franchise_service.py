"""
Integration tests for FranchiseService.

Covers admin CRUD with relation validation, the audit trail it leaves,
and the public read side (cards, catalog and grid block queries).

System role: Verification of franchise catalog orchestration
"""

import uuid

import pytest

from franchise_site.application.services.audit_service import AuditService, RequestMeta
from franchise_site.application.services.franchise_service import FranchiseService, to_card
from franchise_site.boundary.db.CRUD import audit_log_crud, franchise_crud
from franchise_site.boundary.db.models.audit_log_model import AuditOperation
from franchise_site.boundary.db.models.franchise_model import FranchiseStatus
from franchise_site.core.exceptions import NotFoundError, ValidationError
from franchise_site.models.blocks import FranchiseGridBlock
from franchise_site.models.catalog import FilterState, SortOption


@pytest.fixture
def franchise_service(test_async_db, audit) -> FranchiseService:
    return FranchiseService(test_async_db, audit=audit)


class TestFranchiseCrud:
    @pytest.mark.asyncio
    async def test_create_with_tags_and_agent(
        self, franchise_service, test_async_db, industry, tag, agent
    ) -> None:
        franchise = await franchise_service.create_franchise(
            business_name="Sweat Box",
            industry_id=industry.id,
            tag_ids=[tag.id, tag.id],
            assigned_agent_id=agent.id,
            investment_min=10000,
            investment_max=20000,
        )

        assert franchise.status == FranchiseStatus.DRAFT
        assert [t.name for t in franchise.tags] == ["Best Score 90"]
        assert franchise.assigned_agent.email == "alice@example.com"

        logs = await audit_log_crud.list_logs(test_async_db, collection="franchises")
        assert len(logs) == 1
        assert logs[0].operation == AuditOperation.CREATE
        assert logs[0].record_id == str(franchise.id)
        assert logs[0].ip_address == "127.0.0.1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("field", "message"),
        [
            ("industry_id", "Industry does not exist"),
            ("assigned_agent_id", "Agent does not exist"),
            ("logo_id", "Logo media does not exist"),
        ],
    )
    async def test_create_rejects_unknown_relations(
        self, franchise_service, industry, field, message
    ) -> None:
        fields = {"business_name": "Ghost", "industry_id": industry.id, field: uuid.uuid4()}

        with pytest.raises(ValidationError, match=message):
            await franchise_service.create_franchise(**fields)

    @pytest.mark.asyncio
    async def test_create_rejects_unknown_tag(self, franchise_service, industry) -> None:
        with pytest.raises(ValidationError, match="tags"):
            await franchise_service.create_franchise(
                business_name="Ghost", industry_id=industry.id, tag_ids=[uuid.uuid4()]
            )

    @pytest.mark.asyncio
    async def test_update_records_changed_fields(
        self, franchise_service, test_async_db, draft_franchise
    ) -> None:
        updated = await franchise_service.update_franchise(
            draft_franchise.id, status=FranchiseStatus.PUBLISHED, business_name=None
        )

        assert updated.status == FranchiseStatus.PUBLISHED
        assert updated.business_name == "Yoga Nook"

        logs = await audit_log_crud.list_logs(
            test_async_db, collection="franchises", operation=AuditOperation.UPDATE
        )
        assert len(logs) == 1
        assert logs[0].changes == {"status": {"before": "draft", "after": "published"}}
        assert logs[0].changed_fields == [{"field": "status"}]

    @pytest.mark.asyncio
    async def test_update_without_changes_writes_no_audit(
        self, franchise_service, test_async_db, draft_franchise
    ) -> None:
        await franchise_service.update_franchise(draft_franchise.id, business_name="Yoga Nook")

        assert await audit_log_crud.count_logs(test_async_db, operation=AuditOperation.UPDATE) == 0

    @pytest.mark.asyncio
    async def test_update_rejects_inverted_range(self, franchise_service, draft_franchise) -> None:
        with pytest.raises(ValidationError, match="cannot exceed"):
            await franchise_service.update_franchise(draft_franchise.id, investment_min=99999)

    @pytest.mark.asyncio
    async def test_update_replaces_tags(self, franchise_service, published_franchise) -> None:
        updated = await franchise_service.update_franchise(published_franchise.id, tag_ids=[])

        assert updated.tags == []

    @pytest.mark.asyncio
    async def test_delete_writes_summary(
        self, franchise_service, test_async_db, draft_franchise
    ) -> None:
        await franchise_service.delete_franchise(draft_franchise.id)

        with pytest.raises(NotFoundError):
            await franchise_service.get_franchise(draft_franchise.id)
        logs = await audit_log_crud.list_logs(
            test_async_db, operation=AuditOperation.DELETE
        )
        assert logs[0].changes["summary"] == "Record deleted"
        assert logs[0].changes["business_name"] == "Yoga Nook"

    @pytest.mark.asyncio
    async def test_get_published_hides_drafts(self, franchise_service, draft_franchise) -> None:
        with pytest.raises(NotFoundError):
            await franchise_service.get_published(draft_franchise.id)

    @pytest.mark.asyncio
    async def test_list_filters_by_status(
        self, franchise_service, published_franchise, draft_franchise
    ) -> None:
        items, total = await franchise_service.list_franchises(status=FranchiseStatus.DRAFT)

        assert total == 1
        assert items[0].id == draft_franchise.id

    @pytest.mark.asyncio
    async def test_acting_user_is_recorded(self, test_async_db, admin_user, industry) -> None:
        service = FranchiseService(test_async_db, audit=AuditService(test_async_db, RequestMeta(user_id=admin_user.id)))

        franchise = await service.create_franchise(business_name="Owned", industry_id=industry.id)

        assert franchise.created_by_id == admin_user.id
        assert franchise.updated_by_id == admin_user.id


class TestPublicCatalog:
    @pytest.mark.asyncio
    async def test_to_card_flattens_relations(self, published_franchise) -> None:
        card = to_card(published_franchise)

        assert card.name == "Iron Gym"
        assert card.category == "Fitness"
        assert card.category_icon == "Briefcase"
        assert card.description == "Strength training studios"
        assert card.cash_required == "$50,000 - $90,000"
        assert card.agent_name == "Alice Agent"
        assert card.tag_names == ["Best Score 90"]
        assert card.href == f"/franchises/{published_franchise.id}"

    @pytest.mark.asyncio
    async def test_catalog_only_lists_published(
        self, franchise_service, published_franchise, draft_franchise
    ) -> None:
        page = await franchise_service.catalog(FilterState(sort_by=SortOption.BEST))

        assert page.total == 1
        assert page.total_unfiltered == 1
        assert page.items[0].name == "Iron Gym"
        assert page.categories == ["all", "Fitness"]

    @pytest.mark.asyncio
    async def test_catalog_filters(self, franchise_service, published_franchise) -> None:
        page = await franchise_service.catalog(FilterState(search="pizza"))

        assert page.total == 0
        assert page.total_unfiltered == 1
        assert page.items == []

    @pytest.mark.asyncio
    async def test_grid_manual_keeps_order_and_hides_drafts(
        self, franchise_service, published_franchise, draft_franchise
    ) -> None:
        block = FranchiseGridBlock(
            display_mode="manual",
            selected_franchises=[draft_franchise.id, published_franchise.id],
        )

        public = await franchise_service.grid_cards(block)
        preview = await franchise_service.grid_cards(block, draft=True)

        assert [c.name for c in public] == ["Iron Gym"]
        assert [c.name for c in preview] == ["Yoga Nook", "Iron Gym"]

    @pytest.mark.asyncio
    async def test_grid_automatic_by_category_and_flags(
        self, franchise_service, test_async_db, published_franchise, industry
    ) -> None:
        await franchise_crud.create(
            test_async_db,
            business_name="Plain Gym",
            industry_id=industry.id,
            status=FranchiseStatus.PUBLISHED,
        )

        featured = await franchise_service.grid_cards(
            FranchiseGridBlock(category="fitness", only_featured=True)
        )
        unknown = await franchise_service.grid_cards(FranchiseGridBlock(category="Pets"))
        limited = await franchise_service.grid_cards(FranchiseGridBlock(limit=1))

        assert [c.name for c in featured] == ["Iron Gym"]
        assert unknown == []
        assert len(limited) == 1
