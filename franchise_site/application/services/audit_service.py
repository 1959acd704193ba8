"""
Audit service.

Records create/update/delete operations on CMS collections and serves the
audit log to admins. Writes run inside a savepoint so a failed audit entry
never rolls back the change it describes.

Dependencies: franchise_site.boundary.db.CRUD, franchise_site.core.audit_diff
System role: Change history recording and querying
"""

import enum
import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from sqlalchemy import inspect
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.audit_log_crud import audit_log_crud
from franchise_site.boundary.db.models.audit_log_model import AuditLogModel, AuditOperation
from franchise_site.core.audit_diff import (
    build_compact_changes,
    build_delete_summary,
    get_changed_fields,
)
from franchise_site.core.exceptions import NotFoundError

logger = logging.getLogger(__name__)

EXCLUDED_COLLECTIONS = frozenset({"audit_logs"})

# Never copied into audit entries
SECRET_FIELDS = frozenset({"password_hash"})


@dataclass
class RequestMeta:
    """Who made a change and from where."""

    user_id: UUID | None = None
    ip_address: str | None = None
    user_agent: str | None = None


def _json_value(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, enum.Enum):
        return value.value
    return value


def snapshot(instance: Any, **extra: Any) -> dict[str, Any]:
    """
    JSON-friendly dict of a model's column values.

    Args:
        instance: ORM instance
        **extra: Additional values to include (e.g. ``tag_ids`` for relationships)

    Returns:
        dict: Column name to value, secrets removed
    """
    mapper = inspect(instance).mapper
    data = {
        attr.key: _json_value(getattr(instance, attr.key))
        for attr in mapper.column_attrs
        if attr.key not in SECRET_FIELDS
    }
    for key, value in extra.items():
        data[key] = [_json_value(v) for v in value] if isinstance(value, list) else _json_value(value)
    return data


class AuditService:
    """Audit log writer and reader."""

    def __init__(self, db: AsyncSession, meta: RequestMeta | None = None) -> None:
        """
        Initialize audit service.

        Args:
            db: Async SQLAlchemy session
            meta: Acting user and request metadata attached to every entry
        """
        self.db = db
        self.meta = meta or RequestMeta()

    async def _write(
        self,
        collection: str,
        record_id: Any,
        operation: AuditOperation,
        changes: dict[str, Any],
        changed_fields: list[dict[str, str]],
    ) -> None:
        if collection in EXCLUDED_COLLECTIONS:
            return
        try:
            async with self.db.begin_nested():
                await audit_log_crud.create(
                    self.db,
                    collection=collection,
                    record_id=str(record_id),
                    operation=operation,
                    user_id=self.meta.user_id,
                    changes=changes,
                    changed_fields=changed_fields,
                    ip_address=self.meta.ip_address,
                    user_agent=self.meta.user_agent,
                )
        except Exception as e:
            logger.error(
                "Failed to write audit log",
                extra={
                    "error": str(e),
                    "collection": collection,
                    "record_id": str(record_id),
                    "operation": operation.value,
                },
            )

    async def record_create(self, collection: str, record_id: Any) -> None:
        """Log a created record."""
        await self._write(
            collection,
            record_id,
            AuditOperation.CREATE,
            {"summary": "Record created"},
            [],
        )

    async def record_update(
        self,
        collection: str,
        record_id: Any,
        before: dict[str, Any],
        after: dict[str, Any],
    ) -> None:
        """Log an update; nothing is written when no tracked field changed."""
        changes = get_changed_fields(before, after)
        if not changes:
            return
        await self._write(
            collection,
            record_id,
            AuditOperation.UPDATE,
            build_compact_changes(changes),
            [{"field": change.field} for change in changes],
        )

    async def record_delete(self, collection: str, before: dict[str, Any]) -> None:
        """Log a deletion with the record's identifying fields."""
        await self._write(
            collection,
            before.get("id"),
            AuditOperation.DELETE,
            build_delete_summary(before),
            [],
        )

    async def list_logs(
        self,
        collection: str | None = None,
        operation: AuditOperation | None = None,
        record_id: str | None = None,
        user_id: UUID | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[AuditLogModel], int]:
        """
        List audit entries newest first.

        Returns:
            tuple: (entries, total matching)
        """
        filters = {
            "collection": collection,
            "operation": operation,
            "record_id": record_id,
            "user_id": user_id,
        }
        logs = await audit_log_crud.list_logs(self.db, limit=limit, offset=offset, **filters)
        total = await audit_log_crud.count_logs(self.db, **filters)
        return list(logs), total

    async def get_log(self, log_id: UUID) -> AuditLogModel:
        log = await audit_log_crud.get_by_id(self.db, log_id)
        if log is None:
            raise NotFoundError("audit_logs", log_id)
        return log

    async def delete_log(self, log_id: UUID) -> None:
        deleted = await audit_log_crud.delete_by_id(self.db, log_id)
        if not deleted:
            raise NotFoundError("audit_logs", log_id)
        logger.info("Audit log deleted", extra={"log_id": str(log_id)})
