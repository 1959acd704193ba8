"""
Franchise CRUD operations.

Provides Create, Read, Update, Delete operations for FranchiseModel
with catalog-specific queries.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Franchise catalog persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.franchise_model import FranchiseModel, FranchiseStatus


class FranchiseCRUD(BaseCRUD[FranchiseModel]):
    """
    CRUD operations for FranchiseModel.

    Relationships (industry, tags, logo, agent) load eagerly via the
    model's selectin loaders, so results are safe to read after the
    session's async context.
    """

    def __init__(self) -> None:
        """Initialize FranchiseCRUD with FranchiseModel."""
        super().__init__(FranchiseModel)

    def _filtered(
        self,
        status: FranchiseStatus | None = None,
        industry_id: UUID | None = None,
        only_featured: bool = False,
        only_sponsored: bool = False,
        only_top_pick: bool = False,
    ) -> Select:
        stmt = select(FranchiseModel)
        if status is not None:
            stmt = stmt.where(FranchiseModel.status == status)
        if industry_id is not None:
            stmt = stmt.where(FranchiseModel.industry_id == industry_id)
        if only_featured:
            stmt = stmt.where(FranchiseModel.is_featured.is_(True))
        if only_sponsored:
            stmt = stmt.where(FranchiseModel.is_sponsored.is_(True))
        if only_top_pick:
            stmt = stmt.where(FranchiseModel.is_top_pick.is_(True))
        return stmt

    async def list_franchises(
        self,
        session: AsyncSession,
        status: FranchiseStatus | None = None,
        industry_id: UUID | None = None,
        only_featured: bool = False,
        only_sponsored: bool = False,
        only_top_pick: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[FranchiseModel]:
        """
        List franchises, most recently updated first.

        Args:
            session: Async database session
            status: Restrict to a publication status
            industry_id: Restrict to an industry
            only_featured: Only featured franchises
            only_sponsored: Only sponsored franchises
            only_top_pick: Only top picks
            limit: Maximum number of franchises to return
            offset: Number of franchises to skip

        Returns:
            Sequence of FranchiseModels
        """
        stmt = (
            self._filtered(status, industry_id, only_featured, only_sponsored, only_top_pick)
            .order_by(FranchiseModel.updated_at.desc(), FranchiseModel.id)
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_franchises(
        self,
        session: AsyncSession,
        status: FranchiseStatus | None = None,
        industry_id: UUID | None = None,
    ) -> int:
        """Count franchises with optional status/industry restriction."""
        criteria = []
        if status is not None:
            criteria.append(FranchiseModel.status == status)
        if industry_id is not None:
            criteria.append(FranchiseModel.industry_id == industry_id)
        return await self.count(session, *criteria)

    async def get_published(self, session: AsyncSession, id: UUID) -> FranchiseModel | None:
        """Retrieve a franchise only when it is published."""
        stmt = select(FranchiseModel).where(
            FranchiseModel.id == id,
            FranchiseModel.status == FranchiseStatus.PUBLISHED,
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def count_for_industry(self, session: AsyncSession, industry_id: UUID) -> int:
        """Count franchises referencing an industry (deletion guard)."""
        return await self.count(session, FranchiseModel.industry_id == industry_id)


franchise_crud = FranchiseCRUD()
