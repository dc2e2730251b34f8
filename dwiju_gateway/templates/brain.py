"""Reasoning prompts: math, logic, code, explain, analyze."""

from __future__ import annotations

from dwiju_gateway.models.requests import BrainRequest, BrainTask, Capability
from dwiju_gateway.templates.base import PromptTemplate

BRAIN_PERSONA = (
    "You are Dwiju Brain AI, an advanced reasoning and problem-solving AI from "
    "BHILODIYA PRIMARY SCHOOL, Gujarat. You excel at logical thinking, mathematics, "
    "coding, and analysis. Support Gujarati, Hindi, and English."
)

DEFAULT_GREETING = "Hello, how can I help you think through a problem today?"


def _math(req: BrainRequest) -> str:
    return f"Solve this math problem step by step. Show all work clearly:\n\n{req.problem or ''}"


def _logic(req: BrainRequest) -> str:
    return (
        "Solve this logic puzzle or reasoning problem. Explain your thinking:"
        f"\n\n{req.problem or ''}"
    )


def _code(req: BrainRequest) -> str:
    body = req.problem or ""
    if req.code:
        body = f"{body}\n\n{req.code}" if body else req.code
    return (
        f"{body}\n\nLanguage: {req.language or 'Python'}\n\n"
        "Provide clean, well-commented code with explanation."
    )


def _explain(req: BrainRequest) -> str:
    return (
        f"Explain this concept in simple terms with examples. Topic: {req.topic or ''}"
        "\n\nMake it easy for students to understand."
    )


def _analyze(req: BrainRequest) -> str:
    return f"Analyze the following and provide insights:\n\n{req.problem or ''}"


def _general(req: BrainRequest) -> str:
    return req.problem or DEFAULT_GREETING


BRAIN_TEMPLATES = [
    PromptTemplate(Capability.BRAIN, BrainTask.MATH.value, _math, BRAIN_PERSONA),
    PromptTemplate(Capability.BRAIN, BrainTask.LOGIC.value, _logic, BRAIN_PERSONA),
    PromptTemplate(Capability.BRAIN, BrainTask.CODE.value, _code, BRAIN_PERSONA),
    PromptTemplate(Capability.BRAIN, BrainTask.EXPLAIN.value, _explain, BRAIN_PERSONA),
    PromptTemplate(Capability.BRAIN, BrainTask.ANALYZE.value, _analyze, BRAIN_PERSONA),
    PromptTemplate(Capability.BRAIN, None, _general, BRAIN_PERSONA),
]
