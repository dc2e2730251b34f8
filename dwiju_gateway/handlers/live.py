"""Live chat handler: multi-turn conversation with an optional image."""

from __future__ import annotations

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.models.requests import Capability, LiveRequest
from dwiju_gateway.models.responses import LiveResponse
from dwiju_gateway.providers.gemini import GeminiClient, image_part, text_part
from dwiju_gateway.templates.live import LIVE_PERSONA


def build_contents(request: LiveRequest) -> list[dict]:
    """Map chat history onto provider turns.

    Every message but the last becomes a prior turn (``assistant`` is the
    provider's ``model`` role). The last message's text and the optional
    image form the final user turn.
    """
    history = request.messages[:-1]
    contents = [
        {
            "role": "model" if message.role == "assistant" else "user",
            "parts": [text_part(message.content)],
        }
        for message in history
    ]

    parts: list[dict] = []
    last = request.messages[-1].content if request.messages else ""
    if last:
        parts.append(text_part(last))
    if request.image_base64:
        parts.append(image_part(request.image_base64))

    contents.append({"role": "user", "parts": parts})
    return contents


class LiveHandler(CapabilityHandler):
    capability = Capability.LIVE

    def __init__(self, *, gemini: GeminiClient, profile: GenerationProfile) -> None:
        self._gemini = gemini
        self._profile = profile

    def content_preview(self, request: LiveRequest) -> str:
        return preview(request.messages[-1].content if request.messages else "")

    async def dispatch(self, request: LiveRequest) -> LiveResponse:
        self._gemini.ensure_configured()
        text = await self._gemini.generate(
            build_contents(request),
            profile=self._profile,
            system_instruction=LIVE_PERSONA,
            failure_message="Failed to get response from Gemini",
        )
        return LiveResponse(response=text or "Sorry, I could not generate a response.")
