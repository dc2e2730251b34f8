"""Capability endpoints.

- POST /api/v1/brain      — reasoning (math, logic, code, explain, analyze)
- POST /api/v1/education  — quiz, expert answer, study planner
- POST /api/v1/live       — multimodal chat
- POST /api/v1/search     — web search
- POST /api/v1/vision     — image analysis, OCR, detection, emotion
- POST /api/v1/voice      — speech synthesis, translation
- POST /api/v1/tube       — video search
- POST /api/v1/music      — music generation

Each endpoint is also mounted at ``/functions/v1/dwiju-<capability>``, the
path the browser front-end was first written against.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from dwiju_gateway.handlers import CapabilityHandlers
from dwiju_gateway.models.requests import (
    BrainRequest,
    EducationRequest,
    LiveRequest,
    MusicRequest,
    SearchRequest,
    VideoSearchRequest,
    VisionRequest,
    VoiceRequest,
)

API_PREFIX = "/api/v1"
FUNCTIONS_PREFIX = "/functions/v1/dwiju-"


def capability_paths(name: str) -> tuple[str, str]:
    return f"{API_PREFIX}/{name}", f"{FUNCTIONS_PREFIX}{name}"


def create_capability_router(*, handlers: CapabilityHandlers) -> APIRouter:
    """Factory that creates the capability router with injected handlers."""

    router = APIRouter(tags=["capabilities"])

    def _post(name: str):
        primary, alias = capability_paths(name)

        def decorator(endpoint):
            router.add_api_route(primary, endpoint, methods=["POST"], response_class=JSONResponse)
            router.add_api_route(
                alias,
                endpoint,
                methods=["POST"],
                response_class=JSONResponse,
                include_in_schema=False,
            )
            return endpoint

        return decorator

    @_post("brain")
    async def brain(body: BrainRequest) -> JSONResponse:
        """Solve, explain or analyze with the reasoning persona."""
        return await handlers.brain.handle(body)

    @_post("education")
    async def education(body: EducationRequest) -> JSONResponse:
        """Generate a quiz or study plan, or answer a subject question."""
        return await handlers.education.handle(body)

    @_post("live")
    async def live(body: LiveRequest) -> JSONResponse:
        """Continue a chat conversation, optionally about an image."""
        return await handlers.live.handle(body)

    @_post("search")
    async def search(body: SearchRequest) -> JSONResponse:
        return await handlers.search.handle(body)

    @_post("vision")
    async def vision(body: VisionRequest) -> JSONResponse:
        return await handlers.vision.handle(body)

    @_post("voice")
    async def voice(body: VoiceRequest) -> JSONResponse:
        """Synthesize speech (``tts``) or translate text (``translate``)."""
        return await handlers.voice.handle(body)

    @_post("tube")
    async def tube(body: VideoSearchRequest) -> JSONResponse:
        return await handlers.tube.handle(body)

    @_post("music")
    async def music(body: MusicRequest) -> JSONResponse:
        return await handlers.music.handle(body)

    return router
