"""
Tests for lead normalisation and agent routing.

System role: Verification of lead routing business rules
"""

from types import SimpleNamespace

from franchise_site.core.leads import (
    DEFAULT_CONTACT_SUBJECT,
    AgentContact,
    FranchiseRouting,
    assign_agents,
    captcha_token,
    normalize_contact,
)


class TestNormalizeContact:
    def test_requires_email_and_phone(self) -> None:
        assert normalize_contact({"email": "a@b.com"}) is None
        assert normalize_contact({"phone": "555-0100"}) is None
        assert normalize_contact({"email": "  ", "phone": "555-0100"}) is None

    def test_defaults(self) -> None:
        lead = normalize_contact({"email": "a@b.com", "phone": "555-0100"})

        assert lead.name == "Unknown"
        assert lead.subject == DEFAULT_CONTACT_SUBJECT
        assert lead.has_custom_subject is False
        assert lead.message == ""
        assert lead.extra_fields == []

    def test_full_name_fallback_and_extras(self) -> None:
        lead = normalize_contact(
            {
                "fullName": "Jane Doe",
                "email": "jane@example.com",
                "phone": "555-0100",
                "subject": "Partnership",
                "companyName": "Doe LLC",
                "newsletter": True,
                "turnstileToken": "tok",
            }
        )

        assert lead.name == "Jane Doe"
        assert lead.has_custom_subject is True
        assert lead.extra_fields == [
            {"label": "Company Name", "value": "Doe LLC"},
            {"label": "Newsletter", "value": "true"},
        ]


def test_captcha_token_reads_any_known_key() -> None:
    assert captcha_token({"cf-turnstile-response": "abc"}) == "abc"
    assert captcha_token({"captchaToken": "xyz"}) == "xyz"
    assert captcha_token({"turnstileToken": ""}) is None
    assert captcha_token({}) is None


class TestAssignAgents:
    def setup_method(self) -> None:
        self.alice = AgentContact(id="a1", name="Alice", email="alice@example.com")
        self.bob = AgentContact(id="b1", name="Bob", email="bob@example.com", is_active=False)
        self.routing = {
            "f1": FranchiseRouting("f1", agent=self.alice),
            "f2": FranchiseRouting("f2", agent=self.alice),
            "f3": FranchiseRouting("f3", agent=self.bob),
            "f4": FranchiseRouting("f4", use_main_contact=True, agent=self.alice),
            "f5": FranchiseRouting("f5"),
        }

    def test_groups_franchises_by_active_agent(self) -> None:
        requested = [SimpleNamespace(id=f"f{i}") for i in range(1, 6)]

        assignments = assign_agents(requested, self.routing)

        assert len(assignments) == 1
        assert assignments[0].agent is self.alice
        assert [item.id for item in assignments[0].franchises] == ["f1", "f2"]

    def test_items_without_id_or_routing_are_skipped(self) -> None:
        requested = [SimpleNamespace(id=None), SimpleNamespace(id="unknown"), SimpleNamespace(name="x")]

        assert assign_agents(requested, self.routing) == []
