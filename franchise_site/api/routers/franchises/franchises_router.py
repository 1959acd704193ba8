"""
Franchise API endpoints.

Routes:
- GET /franchises - Public catalog (published only, filters, pagination)
- GET /franchises/admin - Admin listing across all statuses
- POST /franchises - Create franchise
- GET /franchises/{id} - Single franchise (published unless authenticated)
- PATCH /franchises/{id} - Update franchise
- DELETE /franchises/{id} - Delete franchise

Dependencies: franchise_site.application.services, franchise_site.models
System role: Franchise catalog and management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from franchise_site.api.deps.dependencies import (
    get_current_user,
    get_filter_state,
    get_franchise_service,
    get_optional_user,
)
from franchise_site.api.routers.router_utils import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    handle_admin_errors,
    offset_for,
)
from franchise_site.application.services.franchise_service import FranchiseService
from franchise_site.boundary.db.models.franchise_model import FranchiseStatus
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.catalog import CatalogPage, FilterState
from franchise_site.models.common import MessageResponse, PaginatedResponse
from franchise_site.models.franchise import (
    CreateFranchiseRequest,
    FranchiseResponse,
    UpdateFranchiseRequest,
)

from .franchise_responses import map_franchise_to_response, map_franchises_to_response

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/franchises", tags=["franchises"])


@router.get("", response_model=CatalogPage)
@handle_admin_errors
async def browse_franchises(
    state: FilterState = Depends(get_filter_state),
    page: int = Query(1, ge=1),
    per_page: int = Query(12, ge=1, le=MAX_PER_PAGE),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> CatalogPage:
    """
    Browse published franchises.

    Args:
        state: Search, category, max cash, flag filters and sort order
        page: 1-based page number
        per_page: Cards per page
        franchise_service: Injected FranchiseService

    Returns:
        CatalogPage: Cards for this page plus categories and unfiltered total
    """
    return await franchise_service.catalog(state, page, per_page)


@router.get("/admin", response_model=PaginatedResponse[FranchiseResponse])
@handle_admin_errors
async def list_franchises(
    status_filter: FranchiseStatus | None = Query(None, alias="status"),
    industry_id: UUID | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    user: UserModel = Depends(get_current_user),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> PaginatedResponse[FranchiseResponse]:
    """List franchises of every status, most recently updated first."""
    items, total = await franchise_service.list_franchises(
        status=status_filter,
        industry_id=industry_id,
        limit=per_page,
        offset=offset_for(page, per_page),
    )
    return build_page(map_franchises_to_response(items), total, page, per_page)


@router.post("", response_model=FranchiseResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_franchise(
    request: CreateFranchiseRequest,
    user: UserModel = Depends(get_current_user),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> FranchiseResponse:
    """
    Create a franchise.

    Args:
        request: CreateFranchiseRequest with name, industry, tags and investment range
        user: Authenticated admin
        franchise_service: Injected FranchiseService

    Returns:
        FranchiseResponse: Created franchise

    Raises:
        HTTPException(400): Unknown industry, agent, logo or tags
    """
    logger.info(
        "Creating franchise",
        extra={"business_name": request.business_name, "user_id": str(user.id)},
    )
    franchise = await franchise_service.create_franchise(**request.model_dump())
    return map_franchise_to_response(franchise)


@router.get("/{franchise_id}", response_model=FranchiseResponse)
@handle_admin_errors
async def get_franchise(
    franchise_id: UUID,
    user: UserModel | None = Depends(get_optional_user),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> FranchiseResponse:
    """Get one franchise; anonymous callers only see published ones."""
    if user is None:
        franchise = await franchise_service.get_published(franchise_id)
    else:
        franchise = await franchise_service.get_franchise(franchise_id)
    return map_franchise_to_response(franchise)


@router.patch("/{franchise_id}", response_model=FranchiseResponse)
@handle_admin_errors
async def update_franchise(
    franchise_id: UUID,
    request: UpdateFranchiseRequest,
    user: UserModel = Depends(get_current_user),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> FranchiseResponse:
    """Update the provided franchise fields."""
    franchise = await franchise_service.update_franchise(
        franchise_id, **request.model_dump(exclude_unset=True)
    )
    return map_franchise_to_response(franchise)


@router.delete("/{franchise_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_franchise(
    franchise_id: UUID,
    user: UserModel = Depends(get_current_user),
    franchise_service: FranchiseService = Depends(get_franchise_service),
) -> MessageResponse:
    await franchise_service.delete_franchise(franchise_id)
    return MessageResponse(message="Franchise deleted")
