"""
Audit log ORM model.

One row per create/update/delete on an audited collection.

Dependencies: sqlalchemy, franchise_site.boundary.db.base
System role: Change history persistence
"""

import enum
from uuid import UUID

from sqlalchemy import JSON, Enum, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from franchise_site.boundary.db.base import Base, TimestampMixin, UUIDMixin, enum_values


class AuditOperation(str, enum.Enum):
    """Operation recorded in an audit entry."""

    CREATE = "create"
    UPDATE = "update"
    DELETE = "delete"


class AuditLogModel(Base, UUIDMixin, TimestampMixin):
    """
    Audit log entry.

    Attributes:
        collection: Collection name ("franchises", "agents", ...)
        record_id: ID of the affected record
        operation: AuditOperation
        user_id: Acting user (None for anonymous/system changes)
        changes: Compact before/after map, or a summary for create/delete
        changed_fields: ``[{"field": "dotted.path"}]`` for updates
        ip_address: Requester IP
        user_agent: Requester user agent
    """

    __tablename__ = "audit_logs"

    collection: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    record_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    operation: Mapped[AuditOperation] = mapped_column(
        Enum(AuditOperation, native_enum=False, values_callable=enum_values, length=16),
        nullable=False,
    )
    user_id: Mapped[UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        default=None,
        index=True,
    )
    changes: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    changed_fields: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    ip_address: Mapped[str | None] = mapped_column(String(64), nullable=True, default=None)
    user_agent: Mapped[str | None] = mapped_column(String(1024), nullable=True, default=None)
