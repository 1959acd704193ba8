"""
Lead intake endpoints used by the public site forms.

Routes:
- POST /api/contact - Contact form (free-form fields)
- POST /api/request-info - Information request for one or more franchises
- POST /api/request-single-info - Information request for a single franchise

Errors are answered as `{"error": message}`: 400 for missing fields or a
failed CAPTCHA, 500 "Failed to process request" for anything unexpected.

Dependencies: franchise_site.application.services, franchise_site.models
System role: Public lead capture HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from franchise_site.api.deps.dependencies import client_ip, get_lead_service
from franchise_site.api.routers.router_utils import handle_lead_errors
from franchise_site.application.services.lead_service import LeadService
from franchise_site.core.exceptions import ValidationError
from franchise_site.models.common import MessageResponse
from franchise_site.models.lead import RequestInfoRequest, SingleRequestInfoRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["leads"])

MISSING_FIELDS = "Missing required fields"


async def read_json_object(request: Request) -> dict[str, Any]:
    """
    Parse the request body as a JSON object.

    Raises:
        ValidationError: Body is not valid JSON or not an object
    """
    try:
        body = await request.json()
    except ValueError as e:
        raise ValidationError("Invalid JSON body") from e
    if not isinstance(body, dict):
        raise ValidationError(MISSING_FIELDS)
    return body


def parse_body(model: type[BaseModel], body: dict[str, Any]) -> Any:
    try:
        return model.model_validate(body)
    except PydanticValidationError as e:
        logger.info("Rejected lead payload", extra={"error_count": e.error_count()})
        raise ValidationError(MISSING_FIELDS) from e


@router.post("/contact", response_model=MessageResponse)
@handle_lead_errors
async def submit_contact(
    request: Request,
    lead_service: LeadService = Depends(get_lead_service),
) -> MessageResponse:
    """
    Handle a contact form submission.

    Args:
        request: Incoming request (JSON body with any form fields)
        lead_service: Injected LeadService

    Returns:
        MessageResponse: Success message
    """
    body = await read_json_object(request)
    await lead_service.submit_contact(body, ip_address=client_ip(request))
    return MessageResponse(message="Message sent successfully")


@router.post("/request-info", response_model=MessageResponse)
@handle_lead_errors
async def request_info(
    request: Request,
    lead_service: LeadService = Depends(get_lead_service),
) -> MessageResponse:
    """Handle a request for information about several franchises."""
    payload = parse_body(RequestInfoRequest, await read_json_object(request))
    await lead_service.request_info(payload, ip_address=client_ip(request))
    return MessageResponse(message="Request submitted successfully")


@router.post("/request-single-info", response_model=MessageResponse)
@handle_lead_errors
async def request_single_info(
    request: Request,
    lead_service: LeadService = Depends(get_lead_service),
) -> MessageResponse:
    payload = parse_body(SingleRequestInfoRequest, await read_json_object(request))
    await lead_service.request_info(payload.as_multi(), ip_address=client_ip(request))
    return MessageResponse(message="Request submitted successfully")
