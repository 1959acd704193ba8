"""
Page API endpoints.

Routes: GET /pages, POST /pages, GET /pages/slug/{slug}, GET /pages/{id},
PATCH /pages/{id}, DELETE /pages/{id}

Layouts are validated block lists; unknown block types are rejected with 422.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Page builder HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from franchise_site.api.deps.dependencies import get_current_user, get_page_service
from franchise_site.api.routers.router_utils import handle_admin_errors
from franchise_site.application.services.page_service import PageService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.common import MessageResponse
from franchise_site.models.page import CreatePageRequest, PageResponse, UpdatePageRequest

router = APIRouter(prefix="/pages", tags=["pages"])


@router.get("", response_model=list[PageResponse])
@handle_admin_errors
async def list_pages(
    page_service: PageService = Depends(get_page_service),
) -> list[PageResponse]:
    return [PageResponse.model_validate(p) for p in await page_service.list_pages()]


@router.post("", response_model=PageResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_page(
    request: CreatePageRequest,
    user: UserModel = Depends(get_current_user),
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    """
    Create a page.

    Args:
        request: Title, optional slug, description and block layout
        user: Authenticated admin
        page_service: Injected PageService

    Returns:
        PageResponse: Created page

    Raises:
        HTTPException(409): Slug already used
    """
    page = await page_service.create_page(
        title=request.title,
        slug=request.slug,
        description=request.description,
        layout=request.layout,
    )
    return PageResponse.model_validate(page)


@router.get("/slug/{slug}", response_model=PageResponse)
@handle_admin_errors
async def get_page_by_slug(
    slug: str,
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    return PageResponse.model_validate(await page_service.get_by_slug(slug))


@router.get("/{page_id}", response_model=PageResponse)
@handle_admin_errors
async def get_page(
    page_id: UUID,
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    return PageResponse.model_validate(await page_service.get_page(page_id))


@router.patch("/{page_id}", response_model=PageResponse)
@handle_admin_errors
async def update_page(
    page_id: UUID,
    request: UpdatePageRequest,
    user: UserModel = Depends(get_current_user),
    page_service: PageService = Depends(get_page_service),
) -> PageResponse:
    """Update a page; a provided layout replaces the whole block list."""
    fields = {key: getattr(request, key) for key in request.model_fields_set}
    page = await page_service.update_page(page_id, **fields)
    return PageResponse.model_validate(page)


@router.delete("/{page_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_page(
    page_id: UUID,
    user: UserModel = Depends(get_current_user),
    page_service: PageService = Depends(get_page_service),
) -> MessageResponse:
    await page_service.delete_page(page_id)
    return MessageResponse(message="Page deleted")
