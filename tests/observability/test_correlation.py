"""Tests for correlation ID tracking and request logging middleware."""

import logging

from fastapi import FastAPI
from fastapi.testclient import TestClient
import pytest

from franchise_site.observability import (
    CorrelationMiddleware,
    RequestLoggingMiddleware,
    get_correlation_id,
    set_correlation_id,
)
from franchise_site.observability.correlation import clear_correlation_id
from franchise_site.observability.logger import CorrelationIdFilter


@pytest.fixture
def client() -> TestClient:
    app = FastAPI()
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    @app.get("/echo")
    async def echo() -> dict:
        return {"correlation_id": get_correlation_id()}

    return TestClient(app)


class TestCorrelationContext:
    """Tests for the ContextVar helpers."""

    def test_generates_id_when_missing(self) -> None:
        """A fresh UUID is generated when none is supplied."""
        value = set_correlation_id()
        assert len(value) == 36
        assert get_correlation_id() == value
        clear_correlation_id()

    def test_clear(self) -> None:
        set_correlation_id("abc")
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_filter_tags_records(self) -> None:
        """Log records carry the current ID, or '-' outside a request."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "-"

        set_correlation_id("req-1")
        CorrelationIdFilter().filter(record)
        assert record.correlation_id == "req-1"
        clear_correlation_id()


class TestCorrelationMiddleware:
    """Tests for header propagation."""

    def test_incoming_header_is_reused(self, client) -> None:
        response = client.get("/echo", headers={"X-Correlation-ID": "req-42"})

        assert response.json() == {"correlation_id": "req-42"}
        assert response.headers["X-Correlation-ID"] == "req-42"

    def test_header_generated_when_absent(self, client) -> None:
        response = client.get("/echo")

        generated = response.headers["X-Correlation-ID"]
        assert generated
        assert response.json() == {"correlation_id": generated}

    def test_request_is_logged(self, client, caplog) -> None:
        with caplog.at_level(logging.INFO, logger="franchise_site.observability.middleware"):
            client.get("/echo")

        assert any(r.getMessage() == "GET /echo - 200" for r in caplog.records)
