"""
Tests for LeadService.

Email, CAPTCHA and webhook clients are mocked; submissions and routing
facts come from the in-memory database.

System role: Verification of lead intake and agent routing
"""

import pytest

from franchise_site.application.services.lead_service import ContactSubmissionService, LeadService
from franchise_site.boundary.db.CRUD import contact_submission_crud
from franchise_site.boundary.db.models.contact_submission_model import SubmissionStatus
from franchise_site.configs.site import SiteSettings
from franchise_site.core.exceptions import (
    CaptchaError,
    EmailDeliveryError,
    NotFoundError,
    ValidationError,
    WebhookDeliveryError,
)
from franchise_site.models.lead import RequestInfoRequest, SingleRequestInfoRequest
from franchise_site.rendering.emails import EmailRenderer

MAIN_CONTACT = "leads@futurefranchiseowners.com"


@pytest.fixture
def lead_service(test_async_db, mock_mailer, mock_verifier, mock_webhooks) -> LeadService:
    return LeadService(
        test_async_db,
        mailer=mock_mailer,
        verifier=mock_verifier,
        webhooks=mock_webhooks,
        renderer=EmailRenderer(SiteSettings()),
        main_contact_email=MAIN_CONTACT,
    )


def sent_messages(mailer) -> list:
    return [call.args[0] for call in mailer.send.await_args_list]


def info_request(*franchises: dict, **overrides) -> RequestInfoRequest:
    body = {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "555-0100",
        "message": "Tell me more",
        "franchises": list(franchises),
        "turnstileToken": "tok",
        **overrides,
    }
    return RequestInfoRequest.model_validate(body)


class TestSubmitContact:
    @pytest.mark.asyncio
    async def test_stores_submission_and_sends_emails(
        self, lead_service, mock_mailer, mock_verifier
    ) -> None:
        body = {
            "fullName": "Jane Doe",
            "email": "jane@example.com",
            "phone": "555-0100",
            "message": "Hello",
            "companyName": "Acme",
            "turnstileToken": "tok",
        }

        submission = await lead_service.submit_contact(body, ip_address="1.2.3.4")

        assert submission.name == "Jane Doe"
        assert submission.company == "Acme"
        assert submission.ip_address == "1.2.3.4"
        assert submission.status == SubmissionStatus.NEW
        assert submission.extra_fields == [{"label": "Company Name", "value": "Acme"}]
        mock_verifier.verify.assert_awaited_once_with("tok", "1.2.3.4")

        admin, confirmation = sent_messages(mock_mailer)
        assert admin.to == MAIN_CONTACT
        assert admin.subject == "New Contact: Contact Form Submission"
        assert admin.reply_to == "jane@example.com"
        assert "Company Name" in admin.html
        assert confirmation.to == "jane@example.com"
        assert confirmation.subject == "We Received Your Message"

    @pytest.mark.asyncio
    async def test_missing_phone_is_rejected_before_captcha(
        self, lead_service, mock_verifier, test_async_db
    ) -> None:
        with pytest.raises(ValidationError, match="Missing required fields"):
            await lead_service.submit_contact({"email": "jane@example.com"})

        mock_verifier.verify.assert_not_awaited()
        assert await contact_submission_crud.count_submissions(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_failed_captcha(self, lead_service, mock_verifier, mock_mailer, test_async_db) -> None:
        mock_verifier.verify.return_value = False

        with pytest.raises(CaptchaError):
            await lead_service.submit_contact({"email": "jane@example.com", "phone": "1"})

        mock_mailer.send.assert_not_awaited()
        assert await contact_submission_crud.count_submissions(test_async_db) == 0

    @pytest.mark.asyncio
    async def test_email_failure_does_not_fail_submission(self, lead_service, mock_mailer) -> None:
        mock_mailer.send.side_effect = EmailDeliveryError("Resend is not configured")

        submission = await lead_service.submit_contact({"email": "jane@example.com", "phone": "1"})

        assert submission.name == "Unknown"
        assert mock_mailer.send.await_count == 2


class TestRequestInfo:
    @pytest.mark.asyncio
    async def test_routes_to_assigned_agent(
        self, lead_service, mock_mailer, mock_webhooks, published_franchise
    ) -> None:
        request = info_request(
            {"id": str(published_franchise.id), "name": "Iron Gym", "category": "Fitness", "cashRequired": "$50,000"},
            {"name": "Unlisted Brand"},
        )

        outcome = await lead_service.request_info(request, ip_address="1.2.3.4")

        assert outcome.franchise_count == 2
        assert outcome.agents_notified == 1
        assert outcome.webhooks_delivered == 1

        admin, confirmation, agent_email = sent_messages(mock_mailer)
        assert admin.to == MAIN_CONTACT
        assert admin.subject == "Franchise Information Request from Jane Doe"
        assert "Unlisted Brand" in admin.text
        assert confirmation.subject == "Your Franchise Information Request"
        assert agent_email.to == "alice@example.com"
        assert agent_email.subject == "New Lead: Jane Doe"
        assert "Iron Gym" in agent_email.text
        assert "Unlisted Brand" not in agent_email.text

        url, payload = mock_webhooks.post_lead.await_args.args
        assert url == "https://hooks.example.com/alice"
        assert payload["firstName"] == "Jane"
        assert payload["lastName"] == "Doe"
        assert payload["source"] == "Future Franchise Owners Website"
        assert payload["agent"]["email"] == "alice@example.com"
        assert payload["franchises"] == [
            {
                "id": str(published_franchise.id),
                "name": "Iron Gym",
                "category": "Fitness",
                "cashRequired": "$50,000",
            }
        ]

    @pytest.mark.asyncio
    async def test_use_main_contact_skips_agent(
        self, lead_service, mock_mailer, mock_webhooks, published_franchise, test_async_db
    ) -> None:
        published_franchise.use_main_contact = True
        await test_async_db.flush()

        outcome = await lead_service.request_info(
            info_request({"id": str(published_franchise.id), "name": "Iron Gym"})
        )

        assert outcome.agents_notified == 0
        assert [m.to for m in sent_messages(mock_mailer)] == [MAIN_CONTACT, "jane@example.com"]
        mock_webhooks.post_lead.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_agent_gets_nothing(
        self, lead_service, mock_webhooks, published_franchise, agent, test_async_db
    ) -> None:
        agent.is_active = False
        await test_async_db.flush()

        outcome = await lead_service.request_info(
            info_request({"id": str(published_franchise.id), "name": "Iron Gym"})
        )

        assert outcome.agents_notified == 0
        mock_webhooks.post_lead.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_webhook_failure_is_logged_not_raised(
        self, lead_service, mock_mailer, mock_webhooks, published_franchise
    ) -> None:
        mock_webhooks.post_lead.side_effect = WebhookDeliveryError("Webhook returned an error status")

        outcome = await lead_service.request_info(
            info_request({"id": str(published_franchise.id), "name": "Iron Gym"})
        )

        assert outcome.agents_notified == 1
        assert outcome.webhooks_delivered == 0
        assert mock_mailer.send.await_count == 3

    @pytest.mark.asyncio
    async def test_webhooks_can_be_disabled(
        self, test_async_db, mock_mailer, mock_verifier, mock_webhooks, published_franchise
    ) -> None:
        service = LeadService(
            test_async_db,
            mailer=mock_mailer,
            verifier=mock_verifier,
            webhooks=mock_webhooks,
            renderer=EmailRenderer(SiteSettings()),
            main_contact_email=MAIN_CONTACT,
            webhooks_enabled=False,
        )

        outcome = await service.request_info(
            info_request({"id": str(published_franchise.id), "name": "Iron Gym"})
        )

        assert outcome.agents_notified == 1
        mock_webhooks.post_lead.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_uuid_ids_go_to_main_contact_only(self, lead_service, mock_mailer) -> None:
        outcome = await lead_service.request_info(info_request({"id": "42", "name": "Legacy Listing"}))

        assert outcome.agents_notified == 0
        assert mock_mailer.send.await_count == 2

    @pytest.mark.asyncio
    async def test_failed_captcha(self, lead_service, mock_verifier, mock_mailer) -> None:
        mock_verifier.verify.return_value = False

        with pytest.raises(CaptchaError):
            await lead_service.request_info(info_request({"name": "Iron Gym"}))

        mock_mailer.send.assert_not_awaited()

    def test_single_request_converts_to_multi(self) -> None:
        single = SingleRequestInfoRequest.model_validate(
            {
                "name": "Jane",
                "email": "jane@example.com",
                "phone": "1",
                "franchise": {"name": "Iron Gym", "cashRequired": "$10,000"},
                "turnstileToken": "tok",
            }
        )

        multi = single.as_multi()

        assert multi.turnstile_token == "tok"
        assert [f.cash_required for f in multi.franchises] == ["$10,000"]


class TestContactSubmissionService:
    @pytest.mark.asyncio
    async def test_status_workflow(self, lead_service, test_async_db) -> None:
        service = ContactSubmissionService(test_async_db)
        submission = await lead_service.submit_contact({"email": "jane@example.com", "phone": "1"})

        await service.update_status(submission.id, SubmissionStatus.READ)
        new_items, new_total = await service.list_submissions(status=SubmissionStatus.NEW)
        read_items, read_total = await service.list_submissions(status=SubmissionStatus.READ)

        assert new_total == 0
        assert read_total == 1
        assert read_items[0].id == submission.id

        await service.delete_submission(submission.id)
        with pytest.raises(NotFoundError):
            await service.get_submission(submission.id)
