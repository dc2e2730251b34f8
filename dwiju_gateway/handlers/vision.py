"""Vision handler: one image, one templated instruction, one text answer."""

from __future__ import annotations

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.models.requests import Capability, VisionRequest
from dwiju_gateway.models.responses import VisionResponse
from dwiju_gateway.providers.gemini import GeminiClient, image_part, text_part
from dwiju_gateway.templates.registry import TemplateRegistry


class VisionHandler(CapabilityHandler):
    capability = Capability.VISION

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

    def content_preview(self, request: VisionRequest) -> str:
        return preview(request.prompt)

    async def dispatch(self, request: VisionRequest) -> VisionResponse:
        self._gemini.ensure_configured()
        template = self._templates.get(self.capability, request.type)

        parts = [text_part(template.build(request))]
        if request.image_base64:
            parts.append(image_part(request.image_base64))

        text = await self._gemini.generate(
            [{"role": "user", "parts": parts}],
            profile=self._profiles[template.profile_name],
            system_instruction=template.system_instruction,
            failure_message="Vision analysis failed",
        )
        return VisionResponse(result=text or "No analysis available", type=request.type)
