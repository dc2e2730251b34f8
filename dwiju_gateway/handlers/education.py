"""Education handler: quizzes, expert answers and study plans.

Quiz and planner answers are expected to hold a JSON object. When one can
be parsed it is returned as ``data``; otherwise ``data`` is the raw text and
the request still succeeds.
"""

from __future__ import annotations

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.middleware.error_handler import InvalidRequestTypeError
from dwiju_gateway.models.requests import Capability, EducationRequest
from dwiju_gateway.models.responses import EducationResponse
from dwiju_gateway.models.structured import StructuredOutput, Unstructured, extract_structured
from dwiju_gateway.providers.gemini import GeminiClient, text_part
from dwiju_gateway.templates.education import STRUCTURED_TASKS
from dwiju_gateway.templates.registry import TemplateRegistry


class EducationHandler(CapabilityHandler):
    capability = Capability.EDUCATION

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

    def content_preview(self, request: EducationRequest) -> str:
        return preview(request.topic or request.question or request.study_goal or request.subject)

    async def dispatch(self, request: EducationRequest) -> EducationResponse:
        self._gemini.ensure_configured()
        try:
            template = self._templates.get(self.capability, request.type)
        except KeyError:
            raise InvalidRequestTypeError() from None

        text = await self._gemini.generate(
            [{"role": "user", "parts": [text_part(template.build(request))]}],
            profile=self._profiles[template.profile_name],
            system_instruction=template.system_instruction,
            failure_message="Failed to get response",
        ) or ""

        output: StructuredOutput
        if request.type in STRUCTURED_TASKS:
            output = extract_structured(text)
        else:
            output = Unstructured(text)
        return EducationResponse(data=output.payload(), type=request.type)
