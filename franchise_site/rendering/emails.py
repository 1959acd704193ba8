"""
Email rendering.

Builds the HTML and plain-text bodies of every lead email from templates
under rendering/templates/emails.

Dependencies: jinja2, franchise_site.boundary.mailer
System role: Lead and confirmation email composition
"""

from datetime import datetime, timezone
from typing import Any, Sequence

from franchise_site.boundary.mailer import EmailMessage
from franchise_site.configs.site import SiteSettings
from franchise_site.core.leads import AgentContact, ContactLead
from franchise_site.rendering.environment import get_environment


class EmailRenderer:
    """Composes lead notification and confirmation emails."""

    def __init__(self, site: SiteSettings) -> None:
        """
        Initialize renderer.

        Args:
            site: Site identity used in headers, footers and signatures
        """
        self.site = site
        self.env = get_environment()

    def _render(self, name: str, **context: Any) -> tuple[str, str]:
        submitted_at = context.pop("submitted_at", None) or datetime.now(timezone.utc)
        context.update(
            site_name=self.site.name,
            site_url=self.site.root_url,
            support_email=self.site.support_email,
            support_phone=self.site.support_phone,
            submitted_at=submitted_at,
            year=submitted_at.year,
        )
        html = self.env.get_template(f"emails/{name}.html").render(**context)
        text = self.env.get_template(f"emails/{name}.txt").render(**context)
        return html, text

    def contact_admin(
        self,
        lead: ContactLead,
        to: str,
        submitted_at: datetime | None = None,
    ) -> EmailMessage:
        """Notification to the main contact about a contact form submission."""
        html, text = self._render("contact_admin", lead=lead, submitted_at=submitted_at)
        return EmailMessage(
            to=to,
            subject=f"New Contact: {lead.subject}",
            html=html,
            text=text,
            reply_to=lead.email,
        )

    def contact_confirmation(
        self,
        lead: ContactLead,
        submitted_at: datetime | None = None,
    ) -> EmailMessage:
        html, text = self._render("contact_user", lead=lead, submitted_at=submitted_at)
        return EmailMessage(to=lead.email, subject="We Received Your Message", html=html, text=text)

    def request_info_admin(
        self,
        request: Any,
        franchises: Sequence[Any],
        to: str,
        submitted_at: datetime | None = None,
    ) -> EmailMessage:
        """
        Notification to the main contact listing every requested franchise.

        Args:
            request: Request-info payload (name, email, phone, message)
            franchises: Requested franchises (name, category, cash_required)
            to: Main contact address
            submitted_at: Submission time (now when omitted)
        """
        html, text = self._render(
            "request_info_admin",
            request=request,
            franchises=franchises,
            submitted_at=submitted_at,
        )
        return EmailMessage(
            to=to,
            subject=f"Franchise Information Request from {request.name}",
            html=html,
            text=text,
            reply_to=request.email,
        )

    def request_info_confirmation(
        self,
        request: Any,
        franchises: Sequence[Any],
        submitted_at: datetime | None = None,
    ) -> EmailMessage:
        html, text = self._render(
            "request_info_user",
            request=request,
            franchises=franchises,
            submitted_at=submitted_at,
        )
        return EmailMessage(
            to=request.email,
            subject="Your Franchise Information Request",
            html=html,
            text=text,
        )

    def agent_lead(
        self,
        agent: AgentContact,
        request: Any,
        franchises: Sequence[Any],
        submitted_at: datetime | None = None,
    ) -> EmailMessage:
        """Lead routed to an agent for the franchises they represent."""
        html, text = self._render(
            "agent_lead",
            agent=agent,
            request=request,
            franchises=franchises,
            submitted_at=submitted_at,
        )
        return EmailMessage(
            to=agent.email,
            subject=f"New Lead: {request.name}",
            html=html,
            text=text,
            reply_to=request.email,
        )
