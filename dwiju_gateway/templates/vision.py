"""Image understanding prompts: analyze, ocr, detect, emotion.

Only ``analyze`` honours a caller-supplied prompt; the other tasks use
fixed instructions. Without a task, the caller's prompt is sent as is.
"""

from __future__ import annotations

from dwiju_gateway.models.requests import Capability, VisionRequest, VisionTask
from dwiju_gateway.templates.base import PromptTemplate

_ANALYZE_PERSONA = (
    "You are Dwiju Vision AI from BHILODIYA PRIMARY SCHOOL, Gujarat. Analyze images and "
    "describe what you see in detail. Support Gujarati, Hindi, and English."
)
_OCR_PERSONA = (
    "You are Dwiju OCR AI. Extract ALL text from the image accurately. "
    "Preserve formatting where possible."
)
_DETECT_PERSONA = (
    "You are Dwiju Object Detection AI. List all objects you can identify in the image."
)
_EMOTION_PERSONA = (
    "You are Dwiju Emotion AI. Analyze facial expressions and emotions in images."
)


def _analyze(req: VisionRequest) -> str:
    return req.prompt or (
        "Describe this image in detail. What objects, people, text, or scenes do you see?"
    )


def _ocr(_req: VisionRequest) -> str:
    return "Extract all text from this image. Return only the extracted text, preserving layout."


def _detect(_req: VisionRequest) -> str:
    return (
        "List all objects detected in this image with their approximate positions "
        "(top, bottom, left, right, center)."
    )


def _emotion(_req: VisionRequest) -> str:
    return (
        "Analyze the emotions and facial expressions of people in this image. "
        "Describe their mood and feelings."
    )


def _custom(req: VisionRequest) -> str:
    return req.prompt or ""


VISION_TEMPLATES = [
    PromptTemplate(Capability.VISION, VisionTask.ANALYZE.value, _analyze, _ANALYZE_PERSONA),
    PromptTemplate(Capability.VISION, VisionTask.OCR.value, _ocr, _OCR_PERSONA),
    PromptTemplate(Capability.VISION, VisionTask.DETECT.value, _detect, _DETECT_PERSONA),
    PromptTemplate(Capability.VISION, VisionTask.EMOTION.value, _emotion, _EMOTION_PERSONA),
    PromptTemplate(Capability.VISION, None, _custom),
]
