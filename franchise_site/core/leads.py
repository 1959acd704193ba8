"""
Lead normalisation and routing rules.

Normalises free-form contact form payloads and decides which agents
receive a franchise information request in addition to the main contact.

Dependencies: franchise_site.core.text_utils
System role: Lead routing business logic (no I/O)
"""

from dataclasses import dataclass, field
from typing import Any

from franchise_site.core.text_utils import humanize_field_name

DEFAULT_CONTACT_NAME = "Unknown"
DEFAULT_CONTACT_SUBJECT = "Contact Form Submission"

CAPTCHA_TOKEN_KEYS = frozenset({"turnstileToken", "cf-turnstile-response", "captchaToken"})
CONTACT_CORE_KEYS = frozenset({"name", "fullName", "email", "phone", "subject", "message"})


@dataclass
class ContactLead:
    """A normalised contact form submission."""

    name: str
    email: str
    phone: str
    subject: str
    message: str
    extra_fields: list[dict[str, str]] = field(default_factory=list)

    @property
    def has_custom_subject(self) -> bool:
        return self.subject != DEFAULT_CONTACT_SUBJECT


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value).strip()


def captcha_token(body: dict[str, Any]) -> str | None:
    """Return the Turnstile token from a form payload, if any."""
    for key in CAPTCHA_TOKEN_KEYS:
        token = body.get(key)
        if token:
            return str(token)
    return None


def normalize_contact(body: dict[str, Any]) -> ContactLead | None:
    """
    Normalise a free-form contact payload.

    The name comes from ``name`` or ``fullName`` (default "Unknown"). Every
    key outside the core set and the captcha token becomes a labelled extra
    field ("companyName" -> "Company Name").

    Args:
        body: Decoded JSON body from the form

    Returns:
        ContactLead, or None when email or phone is missing
    """
    email = _as_text(body.get("email"))
    phone = _as_text(body.get("phone"))
    if not email or not phone:
        return None

    extras = [
        {"label": humanize_field_name(key), "value": _as_text(value)}
        for key, value in body.items()
        if key not in CONTACT_CORE_KEYS and key not in CAPTCHA_TOKEN_KEYS
    ]

    return ContactLead(
        name=_as_text(body.get("name")) or _as_text(body.get("fullName")) or DEFAULT_CONTACT_NAME,
        email=email,
        phone=phone,
        subject=_as_text(body.get("subject")) or DEFAULT_CONTACT_SUBJECT,
        message=_as_text(body.get("message")),
        extra_fields=extras,
    )


@dataclass
class AgentContact:
    """Agent routing details for a franchise."""

    id: str
    name: str
    email: str
    is_active: bool = True
    webhook_url: str | None = None


@dataclass
class FranchiseRouting:
    """Routing facts for one franchise loaded from the catalog."""

    franchise_id: str
    use_main_contact: bool = False
    agent: AgentContact | None = None


@dataclass
class AgentAssignment:
    """Franchises of a request that an agent should receive."""

    agent: AgentContact
    franchises: list[Any] = field(default_factory=list)


def assign_agents(
    requested: list[Any],
    routing: dict[str, FranchiseRouting],
) -> list[AgentAssignment]:
    """
    Group requested franchises by the agent that should receive them.

    A franchise routes to its agent when it was referenced by id, has an
    assigned agent that is active, and is not flagged to use the main
    contact. Everything else is covered by the main contact email alone.

    Args:
        requested: Requested franchise items (objects with an ``id`` attribute)
        routing: Routing facts keyed by franchise id

    Returns:
        list[AgentAssignment]: One entry per agent in first-seen order
    """
    assignments: dict[str, AgentAssignment] = {}
    for item in requested:
        franchise_id = getattr(item, "id", None)
        if not franchise_id:
            continue
        facts = routing.get(str(franchise_id))
        if facts is None or facts.use_main_contact or facts.agent is None:
            continue
        if not facts.agent.is_active or not facts.agent.email:
            continue
        assignment = assignments.setdefault(
            facts.agent.id, AgentAssignment(agent=facts.agent)
        )
        assignment.franchises.append(item)
    return list(assignments.values())
