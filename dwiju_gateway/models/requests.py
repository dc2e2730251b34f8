"""Pydantic request models, one per capability.

Field names follow the browser's camelCase wire format through aliases
(``imageBase64``, ``studyGoal``, ``maxResults``); Python code uses the
snake_case attribute names. Every content field is optional: emptiness is
checked by the panels before a call, not re-validated here.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Capability(str, Enum):
    """Backend capabilities, one handler each."""

    BRAIN = "brain"
    EDUCATION = "education"
    LIVE = "live"
    SEARCH = "search"
    VISION = "vision"
    VOICE = "voice"
    TUBE = "tube"
    MUSIC = "music"


class BrainTask(str, Enum):
    MATH = "math"
    LOGIC = "logic"
    CODE = "code"
    EXPLAIN = "explain"
    ANALYZE = "analyze"


class EducationTask(str, Enum):
    QUIZ = "quiz"
    EXPERT = "expert"
    PLANNER = "planner"


class VisionTask(str, Enum):
    ANALYZE = "analyze"
    OCR = "ocr"
    DETECT = "detect"
    EMOTION = "emotion"


class VoiceTask(str, Enum):
    TTS = "tts"
    TRANSLATE = "translate"


class _RequestModel(BaseModel):
    # Numbers sent in text fields are interpolated as text, not rejected
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)


class BrainRequest(_RequestModel):
    """Reasoning request; ``type`` absent or unknown selects the general prompt."""

    type: str | None = None
    problem: str | None = None
    topic: str | None = None
    language: str | None = None
    code: str | None = None


class EducationRequest(_RequestModel):
    type: str | None = None
    subject: str | None = None
    topic: str | None = None
    difficulty: str | None = None
    language: str | None = None
    question: str | None = None
    study_goal: str | None = Field(default=None, alias="studyGoal")


class ChatMessage(_RequestModel):
    """One turn of live chat history."""

    role: Literal["user", "assistant"]
    content: str = ""


class LiveRequest(_RequestModel):
    messages: list[ChatMessage] = Field(default_factory=list)
    image_base64: str | None = Field(default=None, alias="imageBase64")


class SearchRequest(_RequestModel):
    query: str = ""


class VisionRequest(_RequestModel):
    type: str | None = None
    image_base64: str | None = Field(default=None, alias="imageBase64")
    prompt: str | None = None


class VoiceRequest(_RequestModel):
    type: str | None = None
    text: str = ""
    voice: str | None = None
    language: str | None = None


class VideoSearchRequest(_RequestModel):
    query: str = ""
    max_results: int = Field(default=12, ge=1, le=50, alias="maxResults")


class MusicRequest(_RequestModel):
    prompt: str = ""
    style: str = "pop"
    duration: int = Field(default=30, ge=5, le=300)
    instrumental: bool = False
