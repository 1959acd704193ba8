"""
Agent CRUD operations.

Dependencies: sqlalchemy, franchise_site.boundary.db.models
System role: Agent persistence operations
"""

from typing import Sequence

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.db.CRUD.base_crud import BaseCRUD
from franchise_site.boundary.db.models.agent_model import AgentModel


class AgentCRUD(BaseCRUD[AgentModel]):
    """CRUD operations for AgentModel with email lookup and active filtering."""

    def __init__(self) -> None:
        """Initialize AgentCRUD with AgentModel."""
        super().__init__(AgentModel)

    async def get_by_email(self, session: AsyncSession, email: str) -> AgentModel | None:
        """
        Retrieve the first agent with the given email (case-insensitive).

        Args:
            session: Async database session
            email: Agent email

        Returns:
            AgentModel if found, None otherwise
        """
        stmt = (
            select(AgentModel)
            .where(func.lower(AgentModel.email) == email.strip().lower())
            .order_by(AgentModel.created_at)
            .limit(1)
        )
        result = await session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_agents(
        self,
        session: AsyncSession,
        active_only: bool = False,
        limit: int | None = None,
        offset: int = 0,
    ) -> Sequence[AgentModel]:
        """
        List agents alphabetically.

        Args:
            session: Async database session
            active_only: Exclude inactive agents
            limit: Maximum number of agents to return
            offset: Number of agents to skip

        Returns:
            Sequence of AgentModels
        """
        stmt = select(AgentModel).order_by(AgentModel.name).offset(offset)
        if active_only:
            stmt = stmt.where(AgentModel.is_active.is_(True))
        if limit is not None:
            stmt = stmt.limit(limit)
        result = await session.execute(stmt)
        return result.scalars().all()


agent_crud = AgentCRUD()
