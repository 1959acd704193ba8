"""
Lead service.

Handles contact form submissions and franchise information requests:
CAPTCHA verification, persistence, the main-contact notification, the
visitor confirmation and routing to assigned agents by email and webhook.

Delivery failures are logged and never fail the visitor's request.

Dependencies: franchise_site.boundary.mailer, franchise_site.boundary.captcha,
              franchise_site.boundary.webhooks, franchise_site.core.leads
System role: Lead intake and routing orchestration
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from franchise_site.boundary.captcha import TurnstileVerifier
from franchise_site.boundary.db.CRUD.contact_submission_crud import contact_submission_crud
from franchise_site.boundary.db.CRUD.franchise_crud import franchise_crud
from franchise_site.boundary.db.models.contact_submission_model import (
    ContactSubmissionModel,
    SubmissionStatus,
)
from franchise_site.boundary.mailer import EmailMessage, ResendEmailClient
from franchise_site.boundary.webhooks import GHLWebhookClient
from franchise_site.core.exceptions import (
    CaptchaError,
    EmailDeliveryError,
    NotFoundError,
    ValidationError,
    WebhookDeliveryError,
)
from franchise_site.core.leads import (
    AgentAssignment,
    AgentContact,
    ContactLead,
    FranchiseRouting,
    assign_agents,
    captcha_token,
    normalize_contact,
)
from franchise_site.models.lead import RequestedFranchise, RequestInfoRequest
from franchise_site.rendering.emails import EmailRenderer

logger = logging.getLogger(__name__)

COMPANY_EXTRA_LABELS = ("Company", "Company Name")


@dataclass
class LeadOutcome:
    """What happened to a request-info submission."""

    franchise_count: int
    agents_notified: int
    webhooks_delivered: int


def _webhook_payload(
    request: RequestInfoRequest,
    franchises: list[RequestedFranchise],
    agent: AgentContact,
    submitted_at: datetime,
) -> dict[str, Any]:
    first_name, _, last_name = request.name.strip().partition(" ")
    return {
        "name": request.name,
        "firstName": first_name,
        "lastName": last_name,
        "email": request.email,
        "phone": request.phone,
        "message": request.message or "",
        "source": "Future Franchise Owners Website",
        "agent": {"id": agent.id, "name": agent.name, "email": agent.email},
        "franchises": [
            {
                "id": f.id,
                "name": f.name,
                "category": f.category,
                "cashRequired": f.cash_required,
            }
            for f in franchises
        ],
        "submittedAt": submitted_at.isoformat(),
    }


class LeadService:
    """Contact and request-info intake."""

    def __init__(
        self,
        db: AsyncSession,
        mailer: ResendEmailClient,
        verifier: TurnstileVerifier,
        webhooks: GHLWebhookClient,
        renderer: EmailRenderer,
        main_contact_email: str,
        webhooks_enabled: bool = True,
    ) -> None:
        """
        Initialize lead service.

        Args:
            db: Async SQLAlchemy session
            mailer: Transactional email client
            verifier: Turnstile verifier (passes everything when disabled)
            webhooks: Agent webhook client
            renderer: Email composer
            main_contact_email: Inbox receiving every lead
            webhooks_enabled: Deliver to agent webhooks
        """
        self.db = db
        self.mailer = mailer
        self.verifier = verifier
        self.webhooks = webhooks
        self.renderer = renderer
        self.main_contact_email = main_contact_email
        self.webhooks_enabled = webhooks_enabled

    async def _verify_captcha(self, token: str | None, remote_ip: str | None) -> None:
        if not await self.verifier.verify(token, remote_ip):
            logger.warning("CAPTCHA verification failed", extra={"remote_ip": remote_ip})
            raise CaptchaError("CAPTCHA verification failed")

    async def _send_quietly(self, message: EmailMessage, kind: str) -> bool:
        try:
            await self.mailer.send(message)
            return True
        except EmailDeliveryError as e:
            logger.error(
                "Failed to send email",
                extra={"email_kind": kind, "recipient": message.to, "error": str(e)},
            )
            return False

    async def submit_contact(
        self,
        body: dict[str, Any],
        ip_address: str | None = None,
    ) -> ContactSubmissionModel:
        """
        Process a contact form submission.

        Args:
            body: Free-form JSON body from the form
            ip_address: Requester IP

        Returns:
            ContactSubmissionModel: Stored submission

        Raises:
            ValidationError: Email or phone missing
            CaptchaError: Turnstile rejected the token
        """
        lead = normalize_contact(body)
        if lead is None:
            raise ValidationError("Missing required fields")
        await self._verify_captcha(captcha_token(body), ip_address)

        submission = await contact_submission_crud.create(
            self.db,
            name=lead.name,
            email=lead.email,
            phone=lead.phone,
            company=self._company(lead),
            subject=lead.subject,
            message=lead.message or None,
            ip_address=ip_address,
            extra_fields=lead.extra_fields,
        )
        logger.info(
            "Contact submission stored",
            extra={"submission_id": str(submission.id), "extra_field_count": len(lead.extra_fields)},
        )

        submitted_at = submission.created_at or datetime.now(timezone.utc)
        await self._send_quietly(
            self.renderer.contact_admin(lead, self.main_contact_email, submitted_at),
            "contact_admin",
        )
        await self._send_quietly(
            self.renderer.contact_confirmation(lead, submitted_at),
            "contact_confirmation",
        )
        return submission

    @staticmethod
    def _company(lead: ContactLead) -> str | None:
        for item in lead.extra_fields:
            if item["label"] in COMPANY_EXTRA_LABELS and item["value"]:
                return item["value"]
        return None

    async def _load_routing(self, franchises: list[RequestedFranchise]) -> dict[str, FranchiseRouting]:
        ids = []
        for item in franchises:
            try:
                ids.append(uuid.UUID(str(item.id)))
            except ValueError:
                continue
        records = await franchise_crud.get_by_ids(self.db, ids)

        routing: dict[str, FranchiseRouting] = {}
        for franchise in records:
            agent = franchise.assigned_agent
            routing[str(franchise.id)] = FranchiseRouting(
                franchise_id=str(franchise.id),
                use_main_contact=franchise.use_main_contact,
                agent=AgentContact(
                    id=str(agent.id),
                    name=agent.name,
                    email=agent.email,
                    is_active=agent.is_active,
                    webhook_url=agent.ghl_webhook,
                )
                if agent is not None
                else None,
            )
        return routing

    async def _notify_agent(
        self,
        assignment: AgentAssignment,
        request: RequestInfoRequest,
        submitted_at: datetime,
    ) -> bool:
        agent = assignment.agent
        await self._send_quietly(
            self.renderer.agent_lead(agent, request, assignment.franchises, submitted_at),
            "agent_lead",
        )
        if not (self.webhooks_enabled and agent.webhook_url):
            return False
        try:
            await self.webhooks.post_lead(
                agent.webhook_url,
                _webhook_payload(request, assignment.franchises, agent, submitted_at),
            )
            return True
        except WebhookDeliveryError as e:
            logger.error(
                "Agent webhook delivery failed",
                extra={"agent_id": agent.id, "error": str(e)},
            )
            return False

    async def request_info(
        self,
        request: RequestInfoRequest,
        ip_address: str | None = None,
    ) -> LeadOutcome:
        """
        Process a franchise information request.

        The main contact always receives the full request. Franchises with an
        active assigned agent (and not flagged to use the main contact) are
        also sent to that agent by email and, when configured, webhook.

        Args:
            request: Validated request with one or more franchises
            ip_address: Requester IP

        Returns:
            LeadOutcome: Counts of franchises, notified agents and delivered webhooks

        Raises:
            CaptchaError: Turnstile rejected the token
        """
        await self._verify_captcha(request.turnstile_token, ip_address)
        submitted_at = datetime.now(timezone.utc)
        franchises = list(request.franchises)

        await self._send_quietly(
            self.renderer.request_info_admin(
                request, franchises, self.main_contact_email, submitted_at
            ),
            "request_info_admin",
        )
        await self._send_quietly(
            self.renderer.request_info_confirmation(request, franchises, submitted_at),
            "request_info_confirmation",
        )

        assignments = assign_agents(franchises, await self._load_routing(franchises))
        webhooks_delivered = 0
        for assignment in assignments:
            if await self._notify_agent(assignment, request, submitted_at):
                webhooks_delivered += 1

        logger.info(
            "Franchise info request processed",
            extra={
                "franchise_count": len(franchises),
                "agents_notified": len(assignments),
                "webhooks_delivered": webhooks_delivered,
            },
        )
        return LeadOutcome(
            franchise_count=len(franchises),
            agents_notified=len(assignments),
            webhooks_delivered=webhooks_delivered,
        )


class ContactSubmissionService:
    """Admin access to stored contact submissions."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def list_submissions(
        self,
        status: SubmissionStatus | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> tuple[list[ContactSubmissionModel], int]:
        items = await contact_submission_crud.list_submissions(
            self.db, status=status, limit=limit, offset=offset
        )
        total = await contact_submission_crud.count_submissions(self.db, status=status)
        return list(items), total

    async def get_submission(self, submission_id: uuid.UUID) -> ContactSubmissionModel:
        submission = await contact_submission_crud.get_by_id(self.db, submission_id)
        if submission is None:
            raise NotFoundError("contact_submissions", submission_id)
        return submission

    async def update_status(
        self,
        submission_id: uuid.UUID,
        status: SubmissionStatus,
    ) -> ContactSubmissionModel:
        submission = await self.get_submission(submission_id)
        return await contact_submission_crud.update(self.db, submission, status=status)

    async def delete_submission(self, submission_id: uuid.UUID) -> None:
        if not await contact_submission_crud.delete_by_id(self.db, submission_id):
            raise NotFoundError("contact_submissions", submission_id)
        logger.info("Contact submission deleted", extra={"submission_id": str(submission_id)})
