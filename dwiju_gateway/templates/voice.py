"""Translation prompt. Speech synthesis takes parameters, not a prompt."""

from __future__ import annotations

from dwiju_gateway.models.requests import Capability, VoiceRequest, VoiceTask
from dwiju_gateway.templates.base import PromptTemplate


def _translate(req: VoiceRequest) -> str:
    return (
        f"Translate the following text to {req.language}. "
        f"Only return the translation, nothing else:\n\n{req.text}"
    )


VOICE_TEMPLATES = [
    PromptTemplate(
        Capability.VOICE,
        VoiceTask.TRANSLATE.value,
        _translate,
        profile="translate",
    ),
]
