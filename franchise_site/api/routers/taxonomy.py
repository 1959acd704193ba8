"""
Industry and tag API endpoints.

Routes:
- GET|POST /industries, GET|PATCH|DELETE /industries/{id}
- GET|POST /tags, GET|PATCH|DELETE /tags/{id}

Reads are public; writes require an authenticated admin.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Taxonomy management HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from franchise_site.api.deps.dependencies import get_current_user, get_taxonomy_service
from franchise_site.api.routers.router_utils import handle_admin_errors
from franchise_site.application.services.taxonomy_service import TaxonomyService
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.common import MessageResponse
from franchise_site.models.taxonomy import (
    CreateIndustryRequest,
    CreateTagRequest,
    IndustryResponse,
    TagResponse,
    UpdateIndustryRequest,
    UpdateTagRequest,
)

industries_router = APIRouter(prefix="/industries", tags=["industries"])
tags_router = APIRouter(prefix="/tags", tags=["tags"])


@industries_router.get("", response_model=list[IndustryResponse])
@handle_admin_errors
async def list_industries(
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> list[IndustryResponse]:
    industries = await taxonomy_service.list_industries()
    return [IndustryResponse.model_validate(i) for i in industries]


@industries_router.post("", response_model=IndustryResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_industry(
    request: CreateIndustryRequest,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> IndustryResponse:
    """
    Create an industry.

    Raises:
        HTTPException(409): Name or slug already used
    """
    industry = await taxonomy_service.create_industry(**request.model_dump())
    return IndustryResponse.model_validate(industry)


@industries_router.get("/{industry_id}", response_model=IndustryResponse)
@handle_admin_errors
async def get_industry(
    industry_id: UUID,
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> IndustryResponse:
    return IndustryResponse.model_validate(await taxonomy_service.get_industry(industry_id))


@industries_router.patch("/{industry_id}", response_model=IndustryResponse)
@handle_admin_errors
async def update_industry(
    industry_id: UUID,
    request: UpdateIndustryRequest,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> IndustryResponse:
    industry = await taxonomy_service.update_industry(
        industry_id, **request.model_dump(exclude_unset=True)
    )
    return IndustryResponse.model_validate(industry)


@industries_router.delete("/{industry_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_industry(
    industry_id: UUID,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> MessageResponse:
    """
    Delete an industry.

    Raises:
        HTTPException(409): Franchises still belong to the industry
    """
    await taxonomy_service.delete_industry(industry_id)
    return MessageResponse(message="Industry deleted")


@tags_router.get("", response_model=list[TagResponse])
@handle_admin_errors
async def list_tags(
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> list[TagResponse]:
    return [TagResponse.model_validate(t) for t in await taxonomy_service.list_tags()]


@tags_router.post("", response_model=TagResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_tag(
    request: CreateTagRequest,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> TagResponse:
    tag = await taxonomy_service.create_tag(**request.model_dump())
    return TagResponse.model_validate(tag)


@tags_router.get("/{tag_id}", response_model=TagResponse)
@handle_admin_errors
async def get_tag(
    tag_id: UUID,
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> TagResponse:
    return TagResponse.model_validate(await taxonomy_service.get_tag(tag_id))


@tags_router.patch("/{tag_id}", response_model=TagResponse)
@handle_admin_errors
async def update_tag(
    tag_id: UUID,
    request: UpdateTagRequest,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> TagResponse:
    tag = await taxonomy_service.update_tag(tag_id, **request.model_dump(exclude_unset=True))
    return TagResponse.model_validate(tag)


@tags_router.delete("/{tag_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_tag(
    tag_id: UUID,
    user: UserModel = Depends(get_current_user),
    taxonomy_service: TaxonomyService = Depends(get_taxonomy_service),
) -> MessageResponse:
    await taxonomy_service.delete_tag(tag_id)
    return MessageResponse(message="Tag deleted")
