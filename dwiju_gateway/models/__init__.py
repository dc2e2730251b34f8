"""Public models for the gateway."""

from dwiju_gateway.models.requests import (
    BrainRequest,
    BrainTask,
    Capability,
    ChatMessage,
    EducationRequest,
    EducationTask,
    LiveRequest,
    MusicRequest,
    SearchRequest,
    VideoSearchRequest,
    VisionRequest,
    VisionTask,
    VoiceRequest,
    VoiceTask,
)
from dwiju_gateway.models.responses import (
    BrainResponse,
    EducationResponse,
    Envelope,
    LiveResponse,
    MusicResponse,
    SearchResponse,
    SpeechResponse,
    TranslationResponse,
    VideoSearchResponse,
    VisionResponse,
)
from dwiju_gateway.models.schemas import (
    Quiz,
    QuizQuestion,
    SearchResult,
    StudyDay,
    StudyPlan,
    VideoResult,
)
from dwiju_gateway.models.structured import (
    Structured,
    StructuredOutput,
    Unstructured,
    extract_structured,
    from_payload,
)

__all__ = [
    "BrainRequest",
    "BrainResponse",
    "BrainTask",
    "Capability",
    "ChatMessage",
    "EducationRequest",
    "EducationResponse",
    "EducationTask",
    "Envelope",
    "LiveRequest",
    "LiveResponse",
    "MusicRequest",
    "MusicResponse",
    "Quiz",
    "QuizQuestion",
    "SearchRequest",
    "SearchResponse",
    "SearchResult",
    "SpeechResponse",
    "Structured",
    "StructuredOutput",
    "StudyDay",
    "StudyPlan",
    "TranslationResponse",
    "Unstructured",
    "VideoResult",
    "VideoSearchRequest",
    "VideoSearchResponse",
    "VisionRequest",
    "VisionResponse",
    "VisionTask",
    "VoiceRequest",
    "VoiceTask",
    "extract_structured",
    "from_payload",
]
