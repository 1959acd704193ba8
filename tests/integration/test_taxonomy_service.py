"""
Integration tests for industries and tags against an in-memory database.

System role: Verification of taxonomy uniqueness, slugs and delete guards
"""

import pytest

from franchise_site.application.services.taxonomy_service import TaxonomyService
from franchise_site.boundary.db.models.taxonomy_model import IndustryIcon
from franchise_site.core.exceptions import ConflictError, NotFoundError, ValidationError


@pytest.fixture
def taxonomy_service(test_async_db, audit) -> TaxonomyService:
    return TaxonomyService(test_async_db, audit=audit)


class TestIndustries:
    @pytest.mark.asyncio
    async def test_create_generates_slug(self, taxonomy_service) -> None:
        industry = await taxonomy_service.create_industry(name="  Food & Beverage ")

        assert industry.name == "Food & Beverage"
        assert industry.slug == "food-beverage"
        assert industry.icon == IndustryIcon.BRIEFCASE
        assert industry.text_color == "#ffffff"

    @pytest.mark.asyncio
    async def test_duplicate_name_is_conflict(self, taxonomy_service) -> None:
        await taxonomy_service.create_industry(name="Fitness")

        with pytest.raises(ConflictError) as exc_info:
            await taxonomy_service.create_industry(name="fitness", slug="gyms")

        assert exc_info.value.details["field"] == "name"

    @pytest.mark.asyncio
    async def test_duplicate_slug_is_conflict(self, taxonomy_service) -> None:
        await taxonomy_service.create_industry(name="Fitness", slug="fit")

        with pytest.raises(ConflictError, match="slug"):
            await taxonomy_service.create_industry(name="Fit", slug="Fit")

    @pytest.mark.asyncio
    async def test_name_without_slug_characters(self, taxonomy_service) -> None:
        with pytest.raises(ValidationError):
            await taxonomy_service.create_industry(name="!!!")

    @pytest.mark.asyncio
    async def test_list_is_alphabetical(self, taxonomy_service) -> None:
        for name in ("Senior Care", "Automotive", "Fitness"):
            await taxonomy_service.create_industry(name=name)

        industries = await taxonomy_service.list_industries()

        assert [i.name for i in industries] == ["Automotive", "Fitness", "Senior Care"]

    @pytest.mark.asyncio
    async def test_update_blank_slug_regenerates_from_name(self, taxonomy_service) -> None:
        industry = await taxonomy_service.create_industry(name="Fitness")

        updated = await taxonomy_service.update_industry(industry.id, name="Health Clubs", slug="")

        assert updated.slug == "health-clubs"

    @pytest.mark.asyncio
    async def test_update_can_clear_color(self, taxonomy_service) -> None:
        industry = await taxonomy_service.create_industry(name="Fitness", color="#ff0000")

        updated = await taxonomy_service.update_industry(industry.id, color=None, icon=None)

        assert updated.color is None
        assert updated.icon == IndustryIcon.BRIEFCASE

    @pytest.mark.asyncio
    async def test_delete_in_use_industry_is_conflict(
        self, taxonomy_service, industry, published_franchise
    ) -> None:
        with pytest.raises(ConflictError, match="assigned to franchises"):
            await taxonomy_service.delete_industry(industry.id)

    @pytest.mark.asyncio
    async def test_delete_unused_industry(self, taxonomy_service) -> None:
        industry = await taxonomy_service.create_industry(name="Pets")

        await taxonomy_service.delete_industry(industry.id)

        with pytest.raises(NotFoundError):
            await taxonomy_service.get_industry(industry.id)

    @pytest.mark.asyncio
    async def test_find_or_create_matches_slug(self, taxonomy_service) -> None:
        existing = await taxonomy_service.create_industry(name="Home Services")

        found = await taxonomy_service.find_or_create_industry("home services")
        created = await taxonomy_service.find_or_create_industry("Senior Care")

        assert found.id == existing.id
        assert created.slug == "senior-care"


class TestTags:
    @pytest.mark.asyncio
    async def test_crud_roundtrip(self, taxonomy_service) -> None:
        tag = await taxonomy_service.create_tag(name="Low Cost")
        updated = await taxonomy_service.update_tag(tag.id, name="Low Investment")

        # Slug only changes when explicitly provided
        assert updated.slug == "low-cost"
        assert [t.name for t in await taxonomy_service.list_tags()] == ["Low Investment"]

        await taxonomy_service.delete_tag(tag.id)
        assert await taxonomy_service.list_tags() == []

    @pytest.mark.asyncio
    async def test_delete_missing_tag(self, taxonomy_service, record_id) -> None:
        with pytest.raises(NotFoundError):
            await taxonomy_service.delete_tag(record_id)
