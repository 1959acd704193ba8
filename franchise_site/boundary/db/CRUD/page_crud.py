"""
Page CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Page persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.page_model import PageModel


class PageCRUD(BaseCRUD[PageModel]):
    """CRUD operations for PageModel with slug lookup."""

    def __init__(self) -> None:
        """Initialize PageCRUD with PageModel."""
        super().__init__(PageModel)

    async def get_by_slug(self, session: AsyncSession, slug: str) -> PageModel | None:
        """
        Retrieve a page by slug.

        Args:
            session: Async database session
            slug: Page slug

        Returns:
            PageModel if found, None otherwise
        """
        stmt = select(PageModel).where(PageModel.slug == slug)
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_by_title(self, session: AsyncSession) -> Sequence[PageModel]:
        """List all pages alphabetically by title."""
        result = await session.execute(select(PageModel).order_by(PageModel.title))
        return result.scalars().all()


page_crud = PageCRUD()
