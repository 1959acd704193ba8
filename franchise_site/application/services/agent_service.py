"""
Agent service.

Franchise consultants that receive routed leads.

Dependencies: franchise_site.boundary.db.CRUD
System role: Agent management orchestration
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.application.services.audit_service import AuditService, snapshot
from franchise_site.boundary.db.CRUD.agent_crud import agent_crud
from franchise_site.boundary.db.CRUD.media_crud import media_crud
from franchise_site.boundary.db.models.agent_model import AgentModel
from franchise_site.core.exceptions import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

COLLECTION = "agents"

NULLABLE_FIELDS = frozenset({"phone", "title", "bio", "photo_id", "ghl_webhook"})


def _normalise(fields: dict[str, Any]) -> dict[str, Any]:
    if fields.get("email"):
        fields["email"] = fields["email"].strip().lower()
    if fields.get("ghl_webhook") is not None:
        fields["ghl_webhook"] = str(fields["ghl_webhook"])
    if fields.get("specialties") is not None:
        fields["specialties"] = [getattr(s, "value", s) for s in fields["specialties"]]
    return fields


class AgentService:
    """Agent CRUD operations."""

    def __init__(self, db: AsyncSession, audit: AuditService | None = None) -> None:
        self.db = db
        self.audit = audit or AuditService(db)

    async def _check_photo(self, photo_id: UUID | None) -> None:
        if photo_id is not None and not await media_crud.exists(self.db, photo_id):
            raise ValidationError("Photo media does not exist", field="photo_id")

    async def create_agent(self, **fields: Any) -> AgentModel:
        """
        Create an agent.

        Args:
            **fields: Agent column values

        Returns:
            AgentModel: Created agent
        """
        fields = _normalise(dict(fields))
        await self._check_photo(fields.get("photo_id"))
        user_id = self.audit.meta.user_id
        agent = await agent_crud.create(
            self.db, created_by_id=user_id, updated_by_id=user_id, **fields
        )
        logger.info("Agent created", extra={"agent_id": str(agent.id), "agent_email": agent.email})
        await self.audit.record_create(COLLECTION, agent.id)
        return agent

    async def get_agent(self, agent_id: UUID, active_only: bool = False) -> AgentModel:
        agent = await agent_crud.get_by_id(self.db, agent_id)
        if agent is None or (active_only and not agent.is_active):
            raise NotFoundError(COLLECTION, agent_id)
        return agent

    async def list_agents(
        self,
        active_only: bool = False,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[AgentModel], int]:
        agents = await agent_crud.list_agents(
            self.db, active_only=active_only, limit=limit, offset=offset
        )
        criteria = [AgentModel.is_active.is_(True)] if active_only else []
        total = await agent_crud.count(self.db, *criteria)
        return list(agents), total

    async def update_agent(self, agent_id: UUID, **fields: Any) -> AgentModel:
        agent = await self.get_agent(agent_id)
        before = snapshot(agent)
        fields = {k: v for k, v in fields.items() if v is not None or k in NULLABLE_FIELDS}
        fields = _normalise(fields)
        await self._check_photo(fields.get("photo_id"))
        agent = await agent_crud.update(
            self.db, agent, updated_by_id=self.audit.meta.user_id, **fields
        )
        await self.audit.record_update(COLLECTION, agent.id, before, snapshot(agent))
        return agent

    async def delete_agent(self, agent_id: UUID) -> None:
        """Delete an agent; franchises assigned to them fall back to the main contact."""
        agent = await self.get_agent(agent_id)
        before = snapshot(agent)
        await agent_crud.delete_by_id(self.db, agent_id)
        logger.info("Agent deleted", extra={"agent_id": str(agent_id)})
        await self.audit.record_delete(COLLECTION, before)
