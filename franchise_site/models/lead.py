"""
Lead and contact submission schemas.

The contact endpoint accepts free-form bodies and is normalised in
franchise_site.core.leads; the request-info endpoints are typed here.

Dependencies: pydantic
System role: Lead API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from franchise_site.boundary.db.models.contact_submission_model import SubmissionStatus


class RequestedFranchise(BaseModel):
    """A franchise as listed in a request-info form."""

    id: str | None = None
    name: str = Field(..., min_length=1)
    category: str | None = None
    cash_required: str | None = Field(None, alias="cashRequired")

    model_config = ConfigDict(populate_by_name=True)


class RequestInfoRequest(BaseModel):
    """Request information about one or more franchises."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    message: str | None = None
    franchises: list[RequestedFranchise] = Field(..., min_length=1)
    turnstile_token: str | None = Field(None, alias="turnstileToken")

    model_config = ConfigDict(populate_by_name=True)


class SingleRequestInfoRequest(BaseModel):
    """Request information about a single franchise."""

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=3)
    phone: str = Field(..., min_length=1)
    message: str | None = None
    franchise: RequestedFranchise
    turnstile_token: str | None = Field(None, alias="turnstileToken")

    model_config = ConfigDict(populate_by_name=True)

    def as_multi(self) -> RequestInfoRequest:
        return RequestInfoRequest(
            name=self.name,
            email=self.email,
            phone=self.phone,
            message=self.message,
            franchises=[self.franchise],
            turnstile_token=self.turnstile_token,
        )


class ExtraField(BaseModel):
    label: str
    value: str


class ContactSubmissionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    email: str
    phone: str | None
    company: str | None
    subject: str | None
    message: str | None
    ip_address: str | None
    status: SubmissionStatus
    extra_fields: list[ExtraField] = Field(default_factory=list)
    created_at: datetime


class UpdateSubmissionStatusRequest(BaseModel):
    status: SubmissionStatus
