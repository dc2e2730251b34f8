"""Music generation handler: request fields map 1:1 onto provider parameters."""

from __future__ import annotations

from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.middleware.error_handler import UpstreamError
from dwiju_gateway.models.requests import Capability, MusicRequest
from dwiju_gateway.models.responses import MusicResponse
from dwiju_gateway.providers.base import provider_error_message
from dwiju_gateway.providers.music import MusicClient


class MusicHandler(CapabilityHandler):
    capability = Capability.MUSIC

    def __init__(self, *, music: MusicClient) -> None:
        self._music = music

    def request_type(self, request: MusicRequest) -> str | None:
        return request.style

    def content_preview(self, request: MusicRequest) -> str:
        return preview(request.prompt)

    async def dispatch(self, request: MusicRequest) -> MusicResponse:
        body = await self._music.generate(
            {
                "prompt": request.prompt,
                "style": request.style,
                "duration": request.duration,
                "instrumental": request.instrumental,
            }
        )
        if body.get("success") is False:
            raise UpstreamError(provider_error_message(body) or "Music generation failed")

        # Some deployments wrap the track in their own { success, data } envelope
        inner = body.get("data")
        return MusicResponse(data=inner if isinstance(inner, dict) else body)
