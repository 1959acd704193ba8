import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from franchise_site.api.deps.dependencies import get_lead_service
from franchise_site.api.main import create_app
from franchise_site.core.exceptions import CaptchaError, ValidationError


@pytest.fixture
def client():
    app = create_app()
    return TestClient(app)


@pytest.fixture
def mock_lead_service(client):
    service = AsyncMock()
    client.app.dependency_overrides[get_lead_service] = lambda: service
    return service


CONTACT = {"name": "Jane", "email": "jane@example.com", "phone": "555-0100", "turnstileToken": "tok"}

REQUEST_INFO = {
    "name": "Jane Doe",
    "email": "jane@example.com",
    "phone": "555-0100",
    "franchises": [{"id": "f1", "name": "Iron Gym", "cashRequired": "$50,000"}],
    "turnstileToken": "tok",
}


def test_contact_success(client, mock_lead_service):
    response = client.post(
        "/api/contact",
        json=CONTACT,
        headers={"X-Forwarded-For": "9.9.9.9, 10.0.0.1"},
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Message sent successfully"}
    mock_lead_service.submit_contact.assert_awaited_once_with(CONTACT, ip_address="9.9.9.9")


def test_contact_invalid_json(client, mock_lead_service):
    response = client.post(
        "/api/contact", content=b"{not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid JSON body"}
    mock_lead_service.submit_contact.assert_not_awaited()


def test_contact_body_must_be_object(client, mock_lead_service):
    response = client.post("/api/contact", json=["email"])

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}


@pytest.mark.parametrize(
    ("error", "message"),
    [
        (ValidationError("Missing required fields"), "Missing required fields"),
        (CaptchaError("CAPTCHA verification failed"), "CAPTCHA verification failed"),
    ],
)
def test_contact_rejected(client, mock_lead_service, error, message):
    mock_lead_service.submit_contact.side_effect = error

    response = client.post("/api/contact", json=CONTACT)

    assert response.status_code == 400
    assert response.json() == {"error": message}


def test_contact_unexpected_failure_is_generic(client, mock_lead_service):
    mock_lead_service.submit_contact.side_effect = RuntimeError("db down")

    response = client.post("/api/contact", json=CONTACT)

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to process request"}


def test_request_info_success(client, mock_lead_service):
    response = client.post("/api/request-info", json=REQUEST_INFO)

    assert response.status_code == 200
    assert response.json()["message"] == "Request submitted successfully"
    payload = mock_lead_service.request_info.await_args.args[0]
    assert payload.turnstile_token == "tok"
    assert payload.franchises[0].cash_required == "$50,000"


@pytest.mark.parametrize("missing", ["name", "email", "phone", "franchises"])
def test_request_info_missing_fields(client, mock_lead_service, missing):
    body = {k: v for k, v in REQUEST_INFO.items() if k != missing}

    response = client.post("/api/request-info", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields"}
    mock_lead_service.request_info.assert_not_awaited()


def test_request_info_empty_franchise_list(client, mock_lead_service):
    response = client.post("/api/request-info", json={**REQUEST_INFO, "franchises": []})

    assert response.status_code == 400


def test_request_single_info(client, mock_lead_service):
    body = {k: v for k, v in REQUEST_INFO.items() if k != "franchises"}
    body["franchise"] = {"name": "Iron Gym"}

    response = client.post("/api/request-single-info", json=body)

    assert response.status_code == 200
    payload = mock_lead_service.request_info.await_args.args[0]
    assert [f.name for f in payload.franchises] == ["Iron Gym"]


def test_request_single_info_captcha_failure(client, mock_lead_service):
    mock_lead_service.request_info.side_effect = CaptchaError("CAPTCHA verification failed")
    body = {k: v for k, v in REQUEST_INFO.items() if k != "franchises"}
    body["franchise"] = {"name": "Iron Gym"}

    response = client.post("/api/request-single-info", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "CAPTCHA verification failed"}
