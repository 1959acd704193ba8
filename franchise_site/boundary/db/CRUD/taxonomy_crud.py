"""
Industry and tag CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Franchise taxonomy persistence operations
"""

from typing import Sequence

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.taxonomy_model import IndustryModel, TagModel


class IndustryCRUD(BaseCRUD[IndustryModel]):
    """CRUD operations for IndustryModel."""

    def __init__(self) -> None:
        """Initialize IndustryCRUD with IndustryModel."""
        super().__init__(IndustryModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> IndustryModel | None:
        """Retrieve an industry by slug."""
        stmt = select(IndustryModel).where(IndustryModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_name_or_slug(
        self,
        session: AsyncSession,
        name: str,
        slug: str,
    ) -> IndustryModel | None:
        """
        Resolve an industry from free text (CSV category column).

        Args:
            session: Async database session
            name: Industry name, matched case-insensitively
            slug: Slug derived from the same text

        Returns:
            IndustryModel if either matches, None otherwise
        """
        stmt = (
            select(IndustryModel)
            .where(or_(func.lower(IndustryModel.name) == name.lower(), IndustryModel.slug == slug))
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_name(self, session: AsyncSession) -> Sequence[IndustryModel]:
        """List all industries alphabetically."""
        result = await session.execute(select(IndustryModel).order_by(IndustryModel.name))
        return result.scalars().all()


class TagCRUD(BaseCRUD[TagModel]):
    """CRUD operations for TagModel."""

    def __init__(self) -> None:
        """Initialize TagCRUD with TagModel."""
        super().__init__(TagModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> TagModel | None:
        """Retrieve a tag by slug."""
        stmt = select(TagModel).where(TagModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def find_by_name_or_slug(
        self,
        session: AsyncSession,
        name: str,
        slug: str,
    ) -> TagModel | None:
        """Resolve a tag by case-insensitive name or slug."""
        stmt = (
            select(TagModel)
            .where(or_(func.lower(TagModel.name) == name.lower(), TagModel.slug == slug))
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_name(self, session: AsyncSession) -> Sequence[TagModel]:
        """List all tags alphabetically."""
        result = await session.execute(select(TagModel).order_by(TagModel.name))
        return result.scalars().all()


industry_crud = IndustryCRUD()
tag_crud = TagCRUD()
