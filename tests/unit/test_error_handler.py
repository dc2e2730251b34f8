"""Unit tests for the error hierarchy and FastAPI exception handlers."""

from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pydantic import BaseModel

from dwiju_gateway.middleware.error_handler import (
    CORS_HEADERS,
    ConfigurationError,
    GatewayError,
    InvalidRequestTypeError,
    UpstreamError,
    ValidationError,
    error_envelope,
    register_error_handlers,
)


# ---------------------------------------------------------------------------
# Test app fixture
# ---------------------------------------------------------------------------


class _Body(BaseModel):
    count: int


def _make_app() -> FastAPI:
    """Build a minimal FastAPI app with error handlers registered."""
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise-gateway")
    async def _raise_gateway():
        raise GatewayError()

    @app.get("/raise-config")
    async def _raise_config():
        raise ConfigurationError("GEMINI_API_KEY is not configured")

    @app.get("/raise-invalid-type")
    async def _raise_invalid_type():
        raise InvalidRequestTypeError()

    @app.get("/raise-details")
    async def _raise_details():
        raise ValidationError("Bad field", fields=["query"])

    @app.get("/raise-unhandled")
    async def _raise_unhandled():
        raise RuntimeError("unexpected failure")

    @app.post("/body")
    async def _body(body: _Body):
        return {"success": True}

    return app


@pytest.fixture
def client() -> TestClient:
    return TestClient(_make_app(), raise_server_exceptions=False)


# ---------------------------------------------------------------------------
# Hierarchy
# ---------------------------------------------------------------------------


class TestErrorHierarchy:
    def test_defaults(self):
        assert GatewayError().status_code == 500
        assert GatewayError().message == "Unknown error"
        assert ConfigurationError().status_code == 500
        assert UpstreamError().status_code == 500
        assert InvalidRequestTypeError().status_code == 500
        assert ValidationError().status_code == 422

    def test_all_subclass_gateway_error(self):
        for cls in (ConfigurationError, UpstreamError, InvalidRequestTypeError, ValidationError):
            assert issubclass(cls, GatewayError)

    def test_custom_message_overrides_default(self):
        err = ConfigurationError("OPENAI_API_KEY is not configured")
        assert err.message == "OPENAI_API_KEY is not configured"
        assert str(err) == "OPENAI_API_KEY is not configured"

    def test_upstream_status_stays_out_of_details(self):
        err = UpstreamError("quota exceeded", upstream_status=429)
        assert err.upstream_status == 429
        assert err.details == {}


# ---------------------------------------------------------------------------
# error_envelope
# ---------------------------------------------------------------------------


class TestErrorEnvelope:
    def test_gateway_error(self):
        resp = error_envelope(InvalidRequestTypeError())
        assert resp.status_code == 500
        assert resp.body == b'{"success":false,"error":"Invalid request type"}'

    def test_plain_exception_uses_its_message(self):
        resp = error_envelope(ValueError("bad provider json"))
        assert resp.status_code == 500
        assert b"bad provider json" in resp.body

    def test_exception_without_message_uses_fallback(self):
        resp = error_envelope(RuntimeError())
        assert b'"error":"Unknown error"' in resp.body

    def test_carries_cors_headers(self):
        resp = error_envelope(RuntimeError("x"))
        for name, value in CORS_HEADERS.items():
            assert resp.headers[name] == value


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


class TestExceptionHandlers:
    def test_gateway_error(self, client: TestClient):
        resp = client.get("/raise-gateway")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "Unknown error"}

    def test_configuration_error(self, client: TestClient):
        resp = client.get("/raise-config")
        assert resp.status_code == 500
        assert resp.json()["error"] == "GEMINI_API_KEY is not configured"

    def test_invalid_type(self, client: TestClient):
        resp = client.get("/raise-invalid-type")
        assert resp.status_code == 500
        assert resp.json()["error"] == "Invalid request type"

    def test_details_are_rendered(self, client: TestClient):
        resp = client.get("/raise-details")
        assert resp.status_code == 422
        assert resp.json()["details"] == {"fields": ["query"]}

    def test_request_validation(self, client: TestClient):
        resp = client.post("/body", json={"count": "many"})
        body = resp.json()
        assert resp.status_code == 422
        assert body["success"] is False
        assert body["error"] == "Validation error"
        assert body["details"]["fields"][0]["field"] == "body -> count"

    def test_unhandled_exception(self, client: TestClient):
        resp = client.get("/raise-unhandled")
        assert resp.status_code == 500
        assert resp.json() == {"success": False, "error": "unexpected failure"}
