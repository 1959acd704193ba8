"""
Agent API endpoints.

Routes: GET /agents, GET /agents/admin, POST /agents, GET /agents/{id},
PATCH /agents/{id}, DELETE /agents/{id}

Public reads return active agents without their webhook URLs.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Agent management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from franchise_site.api.deps.dependencies import get_agent_service, get_current_user
from franchise_site.api.routers.router_utils import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    handle_admin_errors,
    offset_for,
)
from franchise_site.application.services.agent_service import AgentService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.agent import (
    AgentAdminResponse,
    AgentResponse,
    CreateAgentRequest,
    UpdateAgentRequest,
)
from franchise_site.models.common import MessageResponse, PaginatedResponse

router = APIRouter(prefix="/agents", tags=["agents"])


@router.get("", response_model=PaginatedResponse[AgentResponse])
@handle_admin_errors
async def list_active_agents(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    agent_service: AgentService = Depends(get_agent_service),
) -> PaginatedResponse[AgentResponse]:
    agents, total = await agent_service.list_agents(
        active_only=True, limit=per_page, offset=offset_for(page, per_page)
    )
    items = [AgentResponse.model_validate(agent) for agent in agents]
    return build_page(items, total, page, per_page)


@router.get("/admin", response_model=PaginatedResponse[AgentAdminResponse])
@handle_admin_errors
async def list_agents(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    user: UserModel = Depends(get_current_user),
    agent_service: AgentService = Depends(get_agent_service),
) -> PaginatedResponse[AgentAdminResponse]:
    """List all agents including inactive ones and their webhook URLs."""
    agents, total = await agent_service.list_agents(
        limit=per_page, offset=offset_for(page, per_page)
    )
    items = [AgentAdminResponse.model_validate(agent) for agent in agents]
    return build_page(items, total, page, per_page)


@router.post("", response_model=AgentAdminResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_agent(
    request: CreateAgentRequest,
    user: UserModel = Depends(get_current_user),
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentAdminResponse:
    agent = await agent_service.create_agent(**request.model_dump())
    return AgentAdminResponse.model_validate(agent)


@router.get("/{agent_id}", response_model=AgentResponse)
@handle_admin_errors
async def get_agent(
    agent_id: UUID,
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentResponse:
    agent = await agent_service.get_agent(agent_id, active_only=True)
    return AgentResponse.model_validate(agent)


@router.patch("/{agent_id}", response_model=AgentAdminResponse)
@handle_admin_errors
async def update_agent(
    agent_id: UUID,
    request: UpdateAgentRequest,
    user: UserModel = Depends(get_current_user),
    agent_service: AgentService = Depends(get_agent_service),
) -> AgentAdminResponse:
    agent = await agent_service.update_agent(agent_id, **request.model_dump(exclude_unset=True))
    return AgentAdminResponse.model_validate(agent)


@router.delete("/{agent_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_agent(
    agent_id: UUID,
    user: UserModel = Depends(get_current_user),
    agent_service: AgentService = Depends(get_agent_service),
) -> MessageResponse:
    await agent_service.delete_agent(agent_id)
    return MessageResponse(message="Agent deleted")
