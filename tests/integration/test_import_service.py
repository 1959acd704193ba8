"""
Integration tests for the franchise CSV import.

Each row runs in its own savepoint; these tests check that failing rows are
reported with spreadsheet row numbers while the other rows are kept.

System role: Verification of bulk franchise import
"""

import pytest

from franchise_site.application.services.import_service import ImportService
from franchise_site.boundary.db.CRUD import audit_log_crud, franchise_crud, industry_crud, tag_crud
from franchise_site.boundary.db.models.franchise_model import FranchiseStatus
from franchise_site.core.exceptions import ImportFileError

HEADER = "businessName,description,category,minInvestment,maxInvestment,tags,agentEmail,isFeatured,status"


def csv_bytes(*rows: str) -> bytes:
    return "\n".join([HEADER, *rows]).encode("utf-8")


@pytest.fixture
def import_service(test_async_db, audit) -> ImportService:
    return ImportService(test_async_db, audit=audit)


class TestImportCsv:
    @pytest.mark.asyncio
    async def test_creates_franchises_with_taxonomy(self, import_service, test_async_db, agent) -> None:
        content = csv_bytes(
            "Iron Gym,Strength studios,Fitness,50000,90000,Low Cost;Best Score 80,ALICE@example.com,yes,published",
            "Taco Town,Tacos,Food & Beverage,$100,000,200000,,,",
        )

        result = await import_service.import_csv(content)

        # "$100,000" splits into two CSV cells, so the second row is invalid
        assert result.created == 1
        assert result.success is False
        assert result.errors[0].row == 3
        assert result.errors[0].business_name == "Taco Town"

        franchises = await franchise_crud.list_franchises(test_async_db)
        assert len(franchises) == 1
        iron_gym = franchises[0]
        assert iron_gym.status == FranchiseStatus.PUBLISHED
        assert iron_gym.is_featured is True
        assert iron_gym.assigned_agent_id == agent.id
        assert iron_gym.industry.slug == "fitness"
        assert sorted(t.name for t in iron_gym.tags) == ["Best Score 80", "Low Cost"]

    @pytest.mark.asyncio
    async def test_reuses_existing_industry_and_tags(self, import_service, test_async_db, industry, tag) -> None:
        content = csv_bytes(
            "A,Desc,fitness,1,2,Best Score 90,,,",
            "B,Desc,FITNESS,1,2,best-score-90,,,",
        )

        result = await import_service.import_csv(content)

        assert result.created == 2
        assert result.success is True
        assert len(await industry_crud.get_all(test_async_db)) == 1
        assert len(await tag_crud.get_all(test_async_db)) == 1

    @pytest.mark.asyncio
    async def test_case_and_slug_variant_tags_link_once(self, import_service, test_async_db) -> None:
        content = csv_bytes("Iron Gym,Desc,Fitness,1,2,Low Cost;low cost;low-cost,,,")

        result = await import_service.import_csv(content)

        assert result.success is True
        assert result.created == 1
        franchises = await franchise_crud.list_franchises(test_async_db)
        assert [t.name for t in franchises[0].tags] == ["Low Cost"]
        assert len(await tag_crud.get_all(test_async_db)) == 1

    @pytest.mark.asyncio
    async def test_unknown_agent_rolls_back_only_that_row(self, import_service, test_async_db) -> None:
        content = csv_bytes(
            "Good One,Desc,Pets,1,2,New Tag,,,",
            "Bad One,Desc,Automotive,1,2,Other Tag,nobody@example.com,,",
            "Good Two,Desc,Pets,1,2,,,,draft",
        )

        result = await import_service.import_csv(content)

        assert result.created == 2
        assert [e.model_dump() for e in result.errors] == [
            {"row": 3, "business_name": "Bad One", "error": "Agent with email 'nobody@example.com' not found"}
        ]
        names = sorted(f.business_name for f in await franchise_crud.list_franchises(test_async_db))
        assert names == ["Good One", "Good Two"]
        # Nothing from the failed row survives
        assert await industry_crud.get_by_slug(test_async_db, "automotive") is None

    @pytest.mark.asyncio
    async def test_validation_errors_are_per_row(self, import_service) -> None:
        content = csv_bytes(
            ",Desc,Pets,1,2,,,,",
            "Flip,Desc,Pets,5,1,,,,",
            "Odd,Desc,Pets,1,2,,,maybe,",
            "Live,Desc,Pets,1,2,,,,live",
        )

        result = await import_service.import_csv(content)

        assert result.created == 0
        assert [e.row for e in result.errors] == [2, 3, 4, 5]
        assert result.errors[0].error == "Missing required fields: businessName"
        assert "cannot be greater" in result.errors[1].error
        assert "isFeatured" in result.errors[2].error
        assert "Invalid status" in result.errors[3].error

    @pytest.mark.asyncio
    async def test_unreadable_file_raises(self, import_service) -> None:
        with pytest.raises(ImportFileError, match="Missing required columns"):
            await import_service.import_csv(b"name,price\nA,1\n")

    @pytest.mark.asyncio
    async def test_audit_entries_for_created_records(self, import_service, test_async_db) -> None:
        await import_service.import_csv(csv_bytes("A,Desc,Pets,1,2,Cute,,,"))

        collections = sorted(log.collection for log in await audit_log_crud.list_logs(test_async_db))
        assert collections == ["franchises", "industries", "tags"]
