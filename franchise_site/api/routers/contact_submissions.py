"""
Contact submission API endpoints.

Routes: GET /contact-submissions, GET /contact-submissions/{id},
PATCH /contact-submissions/{id}, DELETE /contact-submissions/{id}

Dependencies: franchise_site.application.services, franchise_site.models
System role: Contact inbox HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from franchise_site.api.deps.dependencies import (
    get_contact_submission_service,
    get_current_user,
)
from franchise_site.api.routers.router_utils import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    handle_admin_errors,
    offset_for,
)
from franchise_site.application.services.lead_service import ContactSubmissionService
from franchise_site.boundary.db.models.contact_submission_model import SubmissionStatus
from franchise_site.boundary.db.models.user_model import UserModel
from franchise_site.models.common import MessageResponse, PaginatedResponse
from franchise_site.models.lead import ContactSubmissionResponse, UpdateSubmissionStatusRequest

router = APIRouter(
    prefix="/contact-submissions",
    tags=["contact-submissions"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=PaginatedResponse[ContactSubmissionResponse])
@handle_admin_errors
async def list_submissions(
    status_filter: SubmissionStatus | None = Query(None, alias="status"),
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    submission_service: ContactSubmissionService = Depends(get_contact_submission_service),
) -> PaginatedResponse[ContactSubmissionResponse]:
    """List submissions newest first, optionally by status."""
    items, total = await submission_service.list_submissions(
        status=status_filter, limit=per_page, offset=offset_for(page, per_page)
    )
    return build_page(
        [ContactSubmissionResponse.model_validate(s) for s in items], total, page, per_page
    )


@router.get("/{submission_id}", response_model=ContactSubmissionResponse)
@handle_admin_errors
async def get_submission(
    submission_id: UUID,
    submission_service: ContactSubmissionService = Depends(get_contact_submission_service),
) -> ContactSubmissionResponse:
    submission = await submission_service.get_submission(submission_id)
    return ContactSubmissionResponse.model_validate(submission)


@router.patch("/{submission_id}", response_model=ContactSubmissionResponse)
@handle_admin_errors
async def update_submission_status(
    submission_id: UUID,
    request: UpdateSubmissionStatusRequest,
    submission_service: ContactSubmissionService = Depends(get_contact_submission_service),
) -> ContactSubmissionResponse:
    submission = await submission_service.update_status(submission_id, request.status)
    return ContactSubmissionResponse.model_validate(submission)


@router.delete("/{submission_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_submission(
    submission_id: UUID,
    submission_service: ContactSubmissionService = Depends(get_contact_submission_service),
) -> MessageResponse:
    await submission_service.delete_submission(submission_id)
    return MessageResponse(message="Submission deleted")
