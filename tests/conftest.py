"""Shared test fixtures and hypothesis strategies for the gateway test suite."""

from __future__ import annotations

import asyncio
import os
from typing import Any, Callable

import httpx
import pytest
from fastapi.testclient import TestClient
from hypothesis import strategies as st

from dwiju_gateway.config.settings import GatewaySettings
from dwiju_gateway.main import create_app
from dwiju_gateway.models.requests import Capability

MUSIC_URL = "https://music.example.test/api/generate"


# ---------------------------------------------------------------------------
# Keep the developer's real credentials out of the tests
# ---------------------------------------------------------------------------

@pytest.fixture(autouse=True)
def _clear_gateway_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("DWIJU_"):
            monkeypatch.delenv(key, raising=False)


# ---------------------------------------------------------------------------
# Provider stub
# ---------------------------------------------------------------------------

def gemini_reply(text: str) -> dict:
    """Minimal generateContent success body."""
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


class ProviderStub:
    """httpx MockTransport handler routing by URL path fragment.

    Every request is recorded; unmatched requests get a 404 with a provider
    style error body.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self._routes: list[tuple[str, Callable[[httpx.Request], httpx.Response]]] = []

    def add(
        self,
        fragment: str,
        status_code: int = 200,
        *,
        json: Any = None,
        content: bytes | None = None,
    ) -> None:
        def respond(_request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=json)

        self._routes.insert(0, (fragment, respond))

    def add_handler(self, fragment: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self._routes.insert(0, (fragment, handler))

    def gemini(self, text: str) -> None:
        self.add(":generateContent", json=gemini_reply(text))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for fragment, respond in self._routes:
            if fragment in str(request.url):
                return respond(request)
        return httpx.Response(404, json={"error": {"message": f"no stub for {request.url.path}"}})


def make_settings(**overrides: Any) -> GatewaySettings:
    values: dict[str, Any] = {
        "gemini_api_key": "test-gemini-key",
        "openai_api_key": "test-openai-key",
        "google_search_api_key": "test-search-key",
        "google_search_engine_id": "test-engine",
        "youtube_api_key": "test-youtube-key",
        "music_api_key": "test-music-key",
        "music_api_url": MUSIC_URL,
        "log_json": False,
    }
    values.update(overrides)
    return GatewaySettings(**values)


def make_test_client(settings: GatewaySettings, stub: ProviderStub) -> TestClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(stub))
    return TestClient(create_app(settings, http_client=http_client))


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def settings() -> GatewaySettings:
    return make_settings()


@pytest.fixture
def stub() -> ProviderStub:
    return ProviderStub()


@pytest.fixture
def client(settings: GatewaySettings, stub: ProviderStub) -> TestClient:
    return make_test_client(settings, stub)


# ---------------------------------------------------------------------------
# Panel doubles
# ---------------------------------------------------------------------------

class RecordingNotifier:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def of(self, kind: str) -> list[str]:
        return [message for k, message in self.messages if k == kind]


class FakeGateway:
    """Stands in for GatewayClient; answers are queued per call.

    An answer is either a dict (success envelope), an exception instance
    (raised) or an ``asyncio.Event`` paired with a dict, which holds the
    answer back until the event is set.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[Capability, dict]] = []
        self._answers: list[Any] = []

    def queue(self, answer: Any, gate: asyncio.Event | None = None) -> None:
        self._answers.append((answer, gate))

    async def call(self, capability: Capability, payload: dict) -> dict:
        self.calls.append((capability, payload))
        answer, gate = self._answers.pop(0)
        if gate is not None:
            await gate.wait()
        if isinstance(answer, Exception):
            raise answer
        return answer


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


# ---------------------------------------------------------------------------
# Hypothesis strategies (reusable across property tests)
# ---------------------------------------------------------------------------

blank_text = st.text(alphabet=" \t\n\r", max_size=10)

# Prose that cannot contain a JSON object of its own
prose = st.text(
    alphabet=st.characters(exclude_characters="{}", exclude_categories=("Cs",)),
    max_size=60,
)

json_scalars = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-10_000, max_value=10_000),
    st.text(max_size=20),
)
json_objects = st.dictionaries(
    keys=st.text(min_size=1, max_size=10),
    values=st.one_of(json_scalars, st.lists(json_scalars, max_size=4)),
    min_size=1,
    max_size=5,
)

capabilities = st.sampled_from(list(Capability))
