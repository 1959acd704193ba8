"""
Media library API endpoints.

Routes:
- GET /media - List media
- POST /media - Upload a file (multipart: file, alt)
- POST /media/external - Register an externally hosted asset
- GET /media/{id} - Single media item
- PATCH /media/{id} - Update alt text
- DELETE /media/{id} - Delete record and stored object

Dependencies: franchise_site.application.services, franchise_site.models
System role: Media management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile, status

from franchise_site.api.deps.dependencies import get_current_user, get_media_service
from franchise_site.api.routers.router_utils import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    handle_admin_errors,
    offset_for,
)
from franchise_site.application.services.media_service import MediaService
from franchise_site.boundary.db.models.media_model import MediaModel
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.common import MessageResponse, PaginatedResponse
from franchise_site.models.media import (
    CreateExternalMediaRequest,
    MediaResponse,
    UpdateMediaRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/media", tags=["media"])


def map_media_to_response(media: MediaModel, media_service: MediaService) -> MediaResponse:
    response = MediaResponse.model_validate(media)
    return response.model_copy(update={"url": media_service.url_for(media)})


@router.get("", response_model=PaginatedResponse[MediaResponse])
@handle_admin_errors
async def list_media(
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> PaginatedResponse[MediaResponse]:
    items, total = await media_service.list_media(
        limit=per_page, offset=offset_for(page, per_page)
    )
    return build_page(
        [map_media_to_response(m, media_service) for m in items], total, page, per_page
    )


@router.post("", response_model=MediaResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def upload_media(
    file: UploadFile = File(...),
    alt: str = Form(...),
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> MediaResponse:
    """
    Upload a file to the media bucket.

    Args:
        file: Uploaded file
        alt: Alternative text (required)
        user: Authenticated admin
        media_service: Injected MediaService

    Returns:
        MediaResponse: Created media with its public URL

    Raises:
        HTTPException(400): Empty file, missing alt text or file too large
        HTTPException(502): Storage upload failed
    """
    data = await file.read()
    logger.info(
        "Uploading media",
        extra={"upload_filename": file.filename, "filesize": len(data), "user_id": str(user.id)},
    )
    media = await media_service.upload(
        data=data,
        filename=file.filename or "file",
        alt=alt,
        content_type=file.content_type,
    )
    return map_media_to_response(media, media_service)


@router.post("/external", response_model=MediaResponse, status_code=status.HTTP_201_CREATED)
@handle_admin_errors
async def create_external_media(
    request: CreateExternalMediaRequest,
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> MediaResponse:
    media = await media_service.create_external(
        alt=request.alt, url=str(request.url), filename=request.filename
    )
    return map_media_to_response(media, media_service)


@router.get("/{media_id}", response_model=MediaResponse)
@handle_admin_errors
async def get_media(
    media_id: UUID,
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> MediaResponse:
    return map_media_to_response(await media_service.get(media_id), media_service)


@router.patch("/{media_id}", response_model=MediaResponse)
@handle_admin_errors
async def update_media(
    media_id: UUID,
    request: UpdateMediaRequest,
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> MediaResponse:
    media = await media_service.update_alt(media_id, request.alt)
    return map_media_to_response(media, media_service)


@router.delete("/{media_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_media(
    media_id: UUID,
    user: UserModel = Depends(get_current_user),
    media_service: MediaService = Depends(get_media_service),
) -> MessageResponse:
    await media_service.delete(media_id)
    return MessageResponse(message="Media deleted")
