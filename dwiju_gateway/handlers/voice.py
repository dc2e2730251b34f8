"""Voice handler: speech synthesis or translation, chosen by ``type``.

``tts`` maps its fields straight onto the speech provider; ``translate``
goes through the language model. Each task needs only its own provider's
credential.
"""

from __future__ import annotations

from dwiju_gateway.config.generation_profiles import GenerationProfile
from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.middleware.error_handler import InvalidRequestTypeError
from dwiju_gateway.models.requests import Capability, VoiceRequest, VoiceTask
from dwiju_gateway.models.responses import Envelope, SpeechResponse, TranslationResponse
from dwiju_gateway.providers.gemini import GeminiClient, text_part
from dwiju_gateway.providers.speech import SpeechClient
from dwiju_gateway.templates.registry import TemplateRegistry


class VoiceHandler(CapabilityHandler):
    capability = Capability.VOICE

    def __init__(
        self,
        *,
        speech: SpeechClient,
        gemini: GeminiClient,
        templates: TemplateRegistry,
        profiles: dict[str, GenerationProfile],
    ) -> None:
        self._speech = speech
        self._gemini = gemini
        self._templates = templates
        self._profiles = profiles

    def content_preview(self, request: VoiceRequest) -> str:
        return preview(request.text)

    async def dispatch(self, request: VoiceRequest) -> Envelope:
        if request.type == VoiceTask.TTS.value:
            audio = await self._speech.synthesize(request.text, request.voice)
            return SpeechResponse(audio_base64=audio)

        try:
            template = self._templates.get(self.capability, request.type)
        except KeyError:
            raise InvalidRequestTypeError() from None

        self._gemini.ensure_configured()
        text = await self._gemini.generate(
            [{"role": "user", "parts": [text_part(template.build(request))]}],
            profile=self._profiles[template.profile_name],
            system_instruction=template.system_instruction,
            failure_message="Translation failed",
        )
        return TranslationResponse(translation=text or "")
