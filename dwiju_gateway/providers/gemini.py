"""Client for the hosted language model (Gemini ``generateContent``).

Used for text reasoning, multi-turn chat, image understanding and
translation. The API key travels as the ``key`` query parameter.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.providers.base import ProviderClient

logger = logging.getLogger(__name__)


def text_part(text: str) -> dict:
    return {"text": text}


def image_part(image_base64: str, mime_type: str = "image/jpeg") -> dict:
    """Inline image part; the browser sends JPEG captures as bare base64."""
    return {"inlineData": {"mimeType": mime_type, "data": image_base64}}


def first_text(data: Any) -> str | None:
    """Return ``candidates[0].content.parts[0].text`` if present."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        return None
    return text or None


class GeminiClient(ProviderClient):
    """Thin wrapper around ``models/{model}:generateContent``."""

    provider = "gemini"

    def __init__(
        self,
        *,
        api_key: str | None,
        model: str,
        base_url: str,
        http_client: httpx.AsyncClient,
        timeout_seconds: float = 60.0,
    ) -> None:
        super().__init__(http_client=http_client, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")

    def ensure_configured(self) -> None:
        self.require(self._api_key, "GEMINI_API_KEY")

    async def generate(
        self,
        contents: list[dict],
        *,
        profile: GenerationProfile,
        system_instruction: str | None = None,
        failure_message: str = "Failed to get response",
    ) -> str | None:
        """Run one generation and return the first candidate's text.

        Returns ``None`` when the provider answered successfully but produced
        no text; callers substitute their own fallback.
        """
        api_key = self.require(self._api_key, "GEMINI_API_KEY")

        body: dict = {
            "contents": contents,
            "generationConfig": profile.to_generation_config(),
        }
        if system_instruction:
            body["systemInstruction"] = {"parts": [text_part(system_instruction)]}

        response = await self.send(
            "POST",
            f"{self._base_url}/models/{self._model}:generateContent",
            failure_message=failure_message,
            params={"key": api_key},
            json=body,
        )
        return first_text(response.json())
