"""Client for the hosted text-to-speech API (OpenAI ``audio/speech``)."""

from __future__ import annotations

import base64

import httpx

from dwiju_gateway.providers.base import ProviderClient


class SpeechClient(ProviderClient):
    """Synthesizes mp3 audio and hands it back base64-encoded."""

    provider = "openai"

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str,
        model: str,
        default_voice: str,
        http_client: httpx.AsyncClient,
        timeout_seconds: float = 60.0,
    ) -> None:
        super().__init__(http_client=http_client, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._model = model
        self._default_voice = default_voice

    async def synthesize(self, text: str, voice: str | None = None) -> str:
        """Return base64 mp3 audio for *text* spoken with *voice*."""
        api_key = self.require(self._api_key, "OPENAI_API_KEY")
        response = await self.send(
            "POST",
            f"{self._base_url}/audio/speech",
            failure_message="TTS generation failed",
            headers={"Authorization": f"Bearer {api_key}"},
            json={
                "model": self._model,
                "input": text,
                "voice": voice or self._default_voice,
                "response_format": "mp3",
            },
        )
        return base64.b64encode(response.content).decode("ascii")
