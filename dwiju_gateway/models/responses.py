"""Response envelope models.

Every handler answers with either ``{ success: true, <payload fields> }`` or
``{ success: false, error }``. Payload fields differ per capability and use
the browser's camelCase names on the wire (``audioBase64``,
``totalResults``).
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from dwiju_gateway.models.schemas import SearchResult, VideoResult


class Envelope(BaseModel):
    """Base for success envelopes."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class BrainResponse(Envelope):
    result: str
    type: str | None = None


class EducationResponse(Envelope):
    data: dict[str, Any] | str
    type: str | None = None


class LiveResponse(Envelope):
    response: str


class SearchResponse(Envelope):
    results: list[SearchResult] = Field(default_factory=list)
    total_results: str = Field(default="0", alias="totalResults")


class VisionResponse(Envelope):
    result: str
    type: str | None = None


class SpeechResponse(Envelope):
    audio_base64: str = Field(alias="audioBase64")
    type: str = "tts"


class TranslationResponse(Envelope):
    translation: str
    type: str = "translate"


class VideoSearchResponse(Envelope):
    videos: list[VideoResult] = Field(default_factory=list)


class MusicResponse(Envelope):
    data: dict[str, Any] = Field(default_factory=dict)
