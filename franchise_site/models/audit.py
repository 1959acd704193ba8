"""
Audit log schemas.

Dependencies: pydantic
System role: Audit log API contracts
"""

import uuid
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from franchise_site.boundary.db.models.audit_log_model import AuditOperation


class AuditLogResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    collection: str
    record_id: str
    operation: AuditOperation
    user_id: uuid.UUID | None
    changes: dict[str, Any] = Field(default_factory=dict)
    changed_fields: list[dict[str, str]] = Field(default_factory=list)
    ip_address: str | None
    user_agent: str | None
    created_at: datetime
