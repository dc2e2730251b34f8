"""Unit tests for the provider clients."""

from __future__ import annotations

import base64
import json

import httpx
import pytest

from dwiju_gateway.config.generation_profiles import DEFAULT_PROFILES
from dwiju_gateway.middleware.error_handler import ConfigurationError, UpstreamError
from dwiju_gateway.providers.base import provider_error_message
from dwiju_gateway.providers.gemini import GeminiClient, first_text, image_part, text_part
from dwiju_gateway.providers.music import MusicClient
from dwiju_gateway.providers.search import SearchClient
from dwiju_gateway.providers.speech import SpeechClient
from tests.conftest import ProviderStub, gemini_reply


def _http(stub: ProviderStub) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(stub))


def _gemini(stub: ProviderStub, api_key: str | None = "g-key") -> GeminiClient:
    return GeminiClient(
        api_key=api_key,
        model="gemini-2.0-flash-exp",
        base_url="https://generativelanguage.googleapis.com/v1beta/",
        http_client=_http(stub),
    )


class TestProviderErrorMessage:
    def test_nested_message(self):
        assert provider_error_message({"error": {"message": "API key not valid"}}) == "API key not valid"

    def test_flat_message(self):
        assert provider_error_message({"error": "quota exceeded"}) == "quota exceeded"

    def test_absent(self):
        assert provider_error_message({"error": {}}) is None
        assert provider_error_message(None) is None
        assert provider_error_message(["error"]) is None


class TestFirstText:
    def test_reads_first_candidate(self):
        assert first_text(gemini_reply("hi")) == "hi"

    def test_missing_candidates(self):
        assert first_text({}) is None
        assert first_text({"candidates": []}) is None
        assert first_text({"candidates": [{"content": {"parts": [{}]}}]}) is None

    def test_empty_text_counts_as_missing(self):
        assert first_text(gemini_reply("")) is None


class TestGeminiClient:
    @pytest.mark.asyncio
    async def test_builds_generate_content_request(self):
        stub = ProviderStub()
        stub.gemini("4")

        text = await _gemini(stub).generate(
            [{"role": "user", "parts": [text_part("2+2?"), image_part("aGk=")]}],
            profile=DEFAULT_PROFILES["vision"],
            system_instruction="Be brief.",
        )

        assert text == "4"
        [request] = stub.requests
        assert request.url.path == "/v1beta/models/gemini-2.0-flash-exp:generateContent"
        assert request.url.params["key"] == "g-key"
        body = json.loads(request.content)
        assert body["systemInstruction"] == {"parts": [{"text": "Be brief."}]}
        assert body["generationConfig"] == {
            "temperature": 0.4,
            "topK": 32,
            "topP": 0.95,
            "maxOutputTokens": 4096,
        }
        assert body["contents"][0]["parts"][1] == {
            "inlineData": {"mimeType": "image/jpeg", "data": "aGk="}
        }

    @pytest.mark.asyncio
    async def test_omits_empty_system_instruction(self):
        stub = ProviderStub()
        stub.gemini("ok")

        await _gemini(stub).generate([], profile=DEFAULT_PROFILES["translate"])

        assert "systemInstruction" not in json.loads(stub.requests[0].content)

    @pytest.mark.asyncio
    async def test_missing_key_makes_no_request(self):
        stub = ProviderStub()

        with pytest.raises(ConfigurationError, match="GEMINI_API_KEY is not configured"):
            await _gemini(stub, api_key=None).generate([], profile=DEFAULT_PROFILES["brain"])

        assert stub.requests == []

    @pytest.mark.asyncio
    async def test_upstream_error_carries_provider_message(self):
        stub = ProviderStub()
        stub.add(":generateContent", 400, json={"error": {"message": "API key not valid"}})

        with pytest.raises(UpstreamError) as excinfo:
            await _gemini(stub).generate([], profile=DEFAULT_PROFILES["brain"], failure_message="Brain processing failed")

        assert excinfo.value.message == "API key not valid"
        assert excinfo.value.upstream_status == 400

    @pytest.mark.asyncio
    async def test_upstream_error_without_message_uses_fallback(self):
        stub = ProviderStub()
        stub.add(":generateContent", 503, content=b"<html>unavailable</html>")

        with pytest.raises(UpstreamError, match="Brain processing failed"):
            await _gemini(stub).generate([], profile=DEFAULT_PROFILES["brain"], failure_message="Brain processing failed")


class TestSpeechClient:
    @pytest.mark.asyncio
    async def test_returns_base64_audio(self):
        stub = ProviderStub()
        stub.add("/audio/speech", content=b"ID3-fake-mp3")
        client = SpeechClient(
            api_key="o-key",
            base_url="https://api.openai.com/v1",
            model="tts-1",
            default_voice="alloy",
            http_client=_http(stub),
        )

        audio = await client.synthesize("Hello")

        assert base64.b64decode(audio) == b"ID3-fake-mp3"
        [request] = stub.requests
        assert request.headers["authorization"] == "Bearer o-key"
        assert json.loads(request.content) == {
            "model": "tts-1",
            "input": "Hello",
            "voice": "alloy",
            "response_format": "mp3",
        }

    @pytest.mark.asyncio
    async def test_missing_key(self):
        stub = ProviderStub()
        client = SpeechClient(
            api_key=None,
            base_url="https://api.openai.com/v1",
            model="tts-1",
            default_voice="alloy",
            http_client=_http(stub),
        )

        with pytest.raises(ConfigurationError, match="OPENAI_API_KEY"):
            await client.synthesize("Hello", "nova")
        assert stub.requests == []


class TestSearchClient:
    @pytest.mark.asyncio
    async def test_sends_query_parameters(self):
        stub = ProviderStub()
        stub.add("customsearch", json={"items": []})
        client = SearchClient(
            api_key="s-key",
            engine_id="cx-1",
            base_url="https://www.googleapis.com/customsearch/v1",
            result_count=10,
            http_client=_http(stub),
        )

        assert await client.search("solar system") == {"items": []}

        params = stub.requests[0].url.params
        assert params["q"] == "solar system"
        assert params["cx"] == "cx-1"
        assert params["num"] == "10"

    @pytest.mark.asyncio
    async def test_needs_key_and_engine(self):
        stub = ProviderStub()
        client = SearchClient(
            api_key="s-key",
            engine_id=None,
            base_url="https://www.googleapis.com/customsearch/v1",
            result_count=10,
            http_client=_http(stub),
        )

        with pytest.raises(ConfigurationError, match="Google Search API credentials not configured"):
            await client.search("x")
        assert stub.requests == []


class TestMusicClient:
    @pytest.mark.asyncio
    async def test_posts_parameters_with_bearer(self):
        stub = ProviderStub()
        stub.add("music.example.test", json={"audio_url": "https://cdn/x.mp3"})
        client = MusicClient(
            api_key="m-key", api_url="https://music.example.test/gen", http_client=_http(stub)
        )

        body = await client.generate({"prompt": "rain song"})

        assert body == {"audio_url": "https://cdn/x.mp3"}
        assert stub.requests[0].headers["authorization"] == "Bearer m-key"

    @pytest.mark.asyncio
    async def test_missing_url(self):
        client = MusicClient(api_key="m-key", api_url=None, http_client=_http(ProviderStub()))

        with pytest.raises(ConfigurationError, match="MUSIC_API_URL"):
            await client.generate({})
