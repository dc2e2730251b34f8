"""Reasoning handler: one templated prompt, one text answer."""

from __future__ import annotations

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.models.requests import BrainRequest, Capability
from dwiju_gateway.models.responses import BrainResponse
from dwiju_gateway.providers.gemini import GeminiClient, text_part
from dwiju_gateway.templates.registry import TemplateRegistry


class BrainHandler(CapabilityHandler):
    capability = Capability.BRAIN

    def __init__(
        self,
        *,
        gemini: GeminiClient,
        templates: TemplateRegistry,
        profiles: dict[str, GenerationProfile],
    ) -> None:
        self._gemini = gemini
        self._templates = templates
        self._profiles = profiles

    def content_preview(self, request: BrainRequest) -> str:
        return preview(request.problem or request.topic)

    async def dispatch(self, request: BrainRequest) -> BrainResponse:
        self._gemini.ensure_configured()
        template = self._templates.get(self.capability, request.type)

        text = await self._gemini.generate(
            [{"role": "user", "parts": [text_part(template.build(request))]}],
            profile=self._profiles[template.profile_name],
            system_instruction=template.system_instruction,
            failure_message="Brain processing failed",
        )
        return BrainResponse(result=text or "No response generated", type=request.type)
