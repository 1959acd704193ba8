"""
Audit log API endpoints.

Routes: GET /audit-logs, GET /audit-logs/{id}, DELETE /audit-logs/{id}

Dependencies: franchise_site.application.services, franchise_site.models
System role: Change history HTTP API
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query

from franchise_site.api.deps.dependencies import get_audit_service, get_current_user
from franchise_site.api.routers.router_utils import (
    DEFAULT_PER_PAGE,
    MAX_PER_PAGE,
    build_page,
    handle_admin_errors,
    offset_for,
)
from franchise_site.application.services.audit_service import AuditService
from franchise_site.boundary.db.models.audit_log_model import AuditOperation
from franchise_site.models.audit import AuditLogResponse
from franchise_site.models.common import MessageResponse, PaginatedResponse

router = APIRouter(
    prefix="/audit-logs",
    tags=["audit-logs"],
    dependencies=[Depends(get_current_user)],
)


@router.get("", response_model=PaginatedResponse[AuditLogResponse])
@handle_admin_errors
async def list_audit_logs(
    collection: str | None = None,
    operation: AuditOperation | None = None,
    record_id: str | None = None,
    user_id: UUID | None = None,
    page: int = Query(1, ge=1),
    per_page: int = Query(DEFAULT_PER_PAGE, ge=1, le=MAX_PER_PAGE),
    audit_service: AuditService = Depends(get_audit_service),
) -> PaginatedResponse[AuditLogResponse]:
    """
    List audit entries newest first.

    Args:
        collection: Only entries for this collection
        operation: create, update or delete
        record_id: Only entries for this record
        user_id: Only changes made by this user
        page: 1-based page number
        per_page: Page size
        audit_service: Injected AuditService

    Returns:
        PaginatedResponse[AuditLogResponse]: One page of entries
    """
    logs, total = await audit_service.list_logs(
        collection=collection,
        operation=operation,
        record_id=record_id,
        user_id=user_id,
        limit=per_page,
        offset=offset_for(page, per_page),
    )
    return build_page([AuditLogResponse.model_validate(log) for log in logs], total, page, per_page)


@router.get("/{log_id}", response_model=AuditLogResponse)
@handle_admin_errors
async def get_audit_log(
    log_id: UUID,
    audit_service: AuditService = Depends(get_audit_service),
) -> AuditLogResponse:
    return AuditLogResponse.model_validate(await audit_service.get_log(log_id))


@router.delete("/{log_id}", response_model=MessageResponse)
@handle_admin_errors
async def delete_audit_log(
    log_id: UUID,
    audit_service: AuditService = Depends(get_audit_service),
) -> MessageResponse:
    await audit_service.delete_log(log_id)
    return MessageResponse(message="Audit log deleted")
