"""
Integration tests for pages, site settings and the audit log reader.

System role: Verification of CMS content orchestration
"""

import pytest

from franchise_site.application.services.page_service import PageService
from franchise_site.application.services.site_settings_service import SiteSettingsService
from franchise_site.boundary.db.CRUD import audit_log_crud, site_settings_crud
from franchise_site.boundary.db.models.audit_log_model import AuditOperation
from franchise_site.core.exceptions import ConflictError, NotFoundError
from franchise_site.models.blocks import HeroBlock, RibbonBlock
from franchise_site.models.site_settings import TickerSettings, UpdateSiteSettingsRequest


@pytest.fixture
def page_service(test_async_db, audit) -> PageService:
    return PageService(test_async_db, audit=audit)


@pytest.fixture
def site_settings_service(test_async_db, audit) -> SiteSettingsService:
    return SiteSettingsService(test_async_db, audit=audit)


class TestPageService:
    @pytest.mark.asyncio
    async def test_create_stores_camel_case_layout(self, page_service) -> None:
        page = await page_service.create_page(
            title="About Us",
            layout=[HeroBlock(heading="Own your future", show_overlay=False)],
        )

        assert page.slug == "about-us"
        assert page.layout[0]["blockType"] == "hero"
        assert page.layout[0]["showOverlay"] is False
        assert page.layout[0]["heading"] == "Own your future"

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_conflict(self, page_service) -> None:
        await page_service.create_page(title="Contact")

        with pytest.raises(ConflictError):
            await page_service.create_page(title="Contact Us", slug="contact")

    @pytest.mark.asyncio
    async def test_get_by_slug(self, page_service) -> None:
        created = await page_service.create_page(title="Home", slug="homepage")

        assert (await page_service.get_by_slug("homepage")).id == created.id
        with pytest.raises(NotFoundError):
            await page_service.get_by_slug("missing")

    @pytest.mark.asyncio
    async def test_update_replaces_layout_and_keeps_other_fields(self, page_service) -> None:
        page = await page_service.create_page(
            title="Offers", description="Deals", layout=[HeroBlock(heading="Old")]
        )

        updated = await page_service.update_page(page.id, layout=[RibbonBlock(text="New deal")])

        assert updated.title == "Offers"
        assert updated.description == "Deals"
        assert [b["blockType"] for b in updated.layout] == ["ribbon"]

    @pytest.mark.asyncio
    async def test_update_slug_conflict(self, page_service) -> None:
        await page_service.create_page(title="Taken")
        page = await page_service.create_page(title="Other")

        with pytest.raises(ConflictError):
            await page_service.update_page(page.id, slug="Taken")

    @pytest.mark.asyncio
    async def test_delete(self, page_service, test_async_db) -> None:
        page = await page_service.create_page(title="Temp")

        await page_service.delete_page(page.id)

        assert await page_service.list_pages() == []
        logs = await audit_log_crud.list_logs(test_async_db, operation=AuditOperation.DELETE)
        assert logs[0].changes == {"summary": "Record deleted", "id": str(page.id), "title": "Temp"}


class TestSiteSettingsService:
    @pytest.mark.asyncio
    async def test_first_read_creates_defaults(self, site_settings_service, test_async_db) -> None:
        settings = await site_settings_service.get_settings()

        assert settings.navbar.logo_text == "Future Franchise Owners"
        assert settings.ticker.enabled is False
        assert await site_settings_crud.get_singleton(test_async_db) is not None

        # Second read reuses the same row
        await site_settings_service.get_settings()
        assert await site_settings_crud.count(test_async_db) == 1

    @pytest.mark.asyncio
    async def test_update_replaces_only_given_sections(self, site_settings_service, test_async_db) -> None:
        before = await site_settings_service.get_settings()

        after = await site_settings_service.update_settings(
            UpdateSiteSettingsRequest(ticker=TickerSettings(enabled=True, text="Sale!"))
        )

        assert after.ticker.enabled is True
        assert after.ticker.text == "Sale!"
        assert after.navbar == before.navbar
        logs = await audit_log_crud.list_logs(test_async_db, collection="site_settings")
        assert set(logs[0].changes) == {"ticker.enabled", "ticker.text"}

    @pytest.mark.asyncio
    async def test_empty_update_is_noop(self, site_settings_service, test_async_db) -> None:
        await site_settings_service.update_settings(UpdateSiteSettingsRequest())

        assert await audit_log_crud.count_logs(test_async_db) == 0


class TestAuditLogReader:
    @pytest.mark.asyncio
    async def test_list_filter_and_delete(self, page_service, audit) -> None:
        page = await page_service.create_page(title="Audited")
        await page_service.update_page(page.id, title="Audited Again")

        logs, total = await audit.list_logs(collection="pages")
        updates, update_total = await audit.list_logs(operation=AuditOperation.UPDATE)

        assert total == 2
        assert update_total == 1
        assert updates[0].changes["title"] == {"before": "Audited", "after": "Audited Again"}

        await audit.delete_log(updates[0].id)
        with pytest.raises(NotFoundError):
            await audit.get_log(updates[0].id)
        with pytest.raises(NotFoundError):
            await audit.delete_log(updates[0].id)

    @pytest.mark.asyncio
    async def test_audit_log_collection_is_never_audited(self, audit, test_async_db) -> None:
        await audit.record_create("audit_logs", "x")

        assert await audit_log_crud.count_logs(test_async_db) == 0
