"""
Tests for lead email composition.

System role: Verification of email subjects, recipients and bodies
"""

from datetime import datetime, timezone

import pytest

from franchise_site.configs.site import SiteSettings
from franchise_site.core.leads import AgentContact, normalize_contact
from franchise_site.models.lead import RequestInfoRequest
from franchise_site.rendering.emails import EmailRenderer

SUBMITTED_AT = datetime(2025, 3, 4, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def renderer() -> EmailRenderer:
    return EmailRenderer(SiteSettings(name="Future Franchise Owners", support_email="help@example.com"))


@pytest.fixture
def request_info() -> RequestInfoRequest:
    return RequestInfoRequest.model_validate(
        {
            "name": "Jane <Doe>",
            "email": "jane@example.com",
            "phone": "555-0100",
            "message": "Line one\nLine two",
            "franchises": [
                {"name": "Iron Gym", "category": "Fitness", "cashRequired": "$50,000"},
                {"name": "Taco Town"},
            ],
        }
    )


def test_contact_admin_escapes_html_but_not_text(renderer) -> None:
    lead = normalize_contact(
        {"name": "<b>Jane</b>", "email": "jane@example.com", "phone": "1", "subject": "Pricing", "budgetRange": "50k"}
    )

    message = renderer.contact_admin(lead, "leads@example.com", SUBMITTED_AT)

    assert message.to == "leads@example.com"
    assert message.subject == "New Contact: Pricing"
    assert message.reply_to == "jane@example.com"
    assert "&lt;b&gt;Jane&lt;/b&gt;" in message.html
    assert "<b>Jane</b>" not in message.html
    assert "Budget Range" in message.html
    assert "Submitted on March 04, 2025 at 03:30 PM UTC" in message.html


def test_contact_confirmation_mentions_support_email(renderer) -> None:
    lead = normalize_contact({"email": "jane@example.com", "phone": "1"})

    message = renderer.contact_confirmation(lead, SUBMITTED_AT)

    assert message.to == "jane@example.com"
    assert "Hi Unknown" in message.text
    assert "help@example.com" in message.text


def test_request_info_admin_lists_every_franchise(renderer, request_info) -> None:
    message = renderer.request_info_admin(
        request_info, request_info.franchises, "leads@example.com", SUBMITTED_AT
    )

    assert message.subject == "Franchise Information Request from Jane <Doe>"
    assert "1. Iron Gym" in message.text
    assert "Investment: $50,000" in message.text
    assert "2. Taco Town" in message.text
    assert "Contact for details" in message.text
    assert "Jane &lt;Doe&gt;" in message.html


def test_request_info_confirmation(renderer, request_info) -> None:
    message = renderer.request_info_confirmation(request_info, request_info.franchises, SUBMITTED_AT)

    assert message.to == "jane@example.com"
    assert message.reply_to is None
    assert "The Future Franchise Owners Team" in message.text


def test_agent_lead(renderer, request_info) -> None:
    agent = AgentContact(id="a1", name="Alice Agent", email="alice@example.com")

    message = renderer.agent_lead(agent, request_info, request_info.franchises[:1], SUBMITTED_AT)

    assert message.to == "alice@example.com"
    assert message.subject == "New Lead: Jane <Doe>"
    assert message.text.startswith("Hi Alice Agent,")
    assert "Iron Gym (Fitness) - $50,000" in message.text
    assert "Taco Town" not in message.text
    assert "Line one\nLine two" in message.text
