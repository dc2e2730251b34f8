"""Unit tests for the health and readiness endpoints."""

from __future__ import annotations

from tests.conftest import ProviderStub, make_settings, make_test_client


def test_health_lists_configured_providers():
    client = make_test_client(make_settings(youtube_api_key=None), ProviderStub())

    body = client.get("/health").json()

    assert body["success"] is True
    assert body["status"] == "healthy"
    assert body["providers"]["gemini"] is True
    assert body["providers"]["youtube"] is False
    assert "test-gemini-key" not in str(body)


def test_readiness_ok_with_language_model():
    client = make_test_client(make_settings(), ProviderStub())

    resp = client.get("/readiness")

    assert resp.status_code == 200
    assert resp.json()["ready"] is True


def test_readiness_fails_without_language_model():
    client = make_test_client(make_settings(gemini_api_key=None), ProviderStub())

    resp = client.get("/readiness")

    assert resp.status_code == 503
    assert resp.json()["success"] is False
