"""
Contact submission CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Lead persistence operations
"""

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.contact_submission_model import (
    ContactSubmissionModel,
    SubmissionStatus,
)


class ContactSubmissionCRUD(BaseCRUD[ContactSubmissionModel]):
    """CRUD operations for ContactSubmissionModel."""

    def __init__(self) -> None:
        """Initialize ContactSubmissionCRUD with ContactSubmissionModel."""
        super().__init__(ContactSubmissionModel)

    async def list_submissions(
        self,
        session: AsyncSession,
        status: SubmissionStatus | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[ContactSubmissionModel]:
        """
        List submissions newest first.

        Args:
            session: Async database session
            status: Restrict to a triage status
            limit: Maximum number of submissions to return
            offset: Number of submissions to skip

        Returns:
            Sequence of ContactSubmissionModels
        """
        stmt = select(ContactSubmissionModel).order_by(ContactSubmissionModel.created_at.desc())
        if status is not None:
            stmt = stmt.where(ContactSubmissionModel.status == status)
        stmt = stmt.offset(offset)
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_submissions(
        self,
        session: AsyncSession,
        status: SubmissionStatus | None = None,
    ) -> int:
        """Count submissions, optionally by status."""
        if status is None:
            return await self.count(session)
        return await self.count(session, ContactSubmissionModel.status == status)


contact_submission_crud = ContactSubmissionCRUD()
