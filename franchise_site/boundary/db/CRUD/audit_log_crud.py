"""
Audit log CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Change history persistence operations
"""

from typing import Any, Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.audit_log_model import AuditLogModel, AuditOperation


class AuditLogCRUD(BaseCRUD[AuditLogModel]):
    """CRUD operations for AuditLogModel with filtered listing."""

    def __init__(self) -> None:
        """Initialize AuditLogCRUD with AuditLogModel."""
        super().__init__(AuditLogModel)

    @staticmethod
    def _criteria(
        collection: str | None,
        operation: AuditOperation | None,
        record_id: str | None,
        user_id: UUID | None,
    ) -> list[Any]:
        criteria: list[Any] = []
        if collection:
            criteria.append(AuditLogModel.collection == collection)
        if operation is not None:
            criteria.append(AuditLogModel.operation == operation)
        if record_id:
            criteria.append(AuditLogModel.record_id == record_id)
        if user_id is not None:
            criteria.append(AuditLogModel.user_id == user_id)
        return criteria

    async def list_logs(
        self,
        session: AsyncSession,
        collection: str | None = None,
        operation: AuditOperation | None = None,
        record_id: str | None = None,
        user_id: UUID | None = None,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[AuditLogModel]:
        """
        List audit entries newest first.

        Args:
            session: Async database session
            collection: Restrict to a collection name
            operation: Restrict to an operation
            record_id: Restrict to one record
            user_id: Restrict to one acting user
            limit: Maximum number of entries to return
            offset: Number of entries to skip

        Returns:
            Sequence of AuditLogModels
        """
        stmt = (
            select(AuditLogModel)
            .where(*self._criteria(collection, operation, record_id, user_id))
            .order_by(AuditLogModel.created_at.desc())
            .offset(offset)
        )
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()

    async def count_logs(
        self,
        session: AsyncSession,
        collection: str | None = None,
        operation: AuditOperation | None = None,
        record_id: str | None = None,
        user_id: UUID | None = None,
    ) -> int:
        """Count audit entries matching the same filters as list_logs."""
        return await self.count(session, *self._criteria(collection, operation, record_id, user_id))


audit_log_crud = AuditLogCRUD()
