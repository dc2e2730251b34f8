"""Video search handler."""

from __future__ import annotations

from typing import Any

from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.models.requests import Capability, VideoSearchRequest
from dwiju_gateway.models.responses import VideoSearchResponse
from dwiju_gateway.models.schemas import VideoResult
from dwiju_gateway.providers.youtube import VideoSearchClient

_THUMBNAIL_SIZES = ("high", "medium", "default")


def _thumbnail_url(thumbnails: dict, size: str) -> str | None:
    entry = thumbnails.get(size)
    return entry.get("url") if isinstance(entry, dict) else None


def to_video_result(item: dict[str, Any]) -> VideoResult:
    snippet = item.get("snippet") or {}
    item_id = item.get("id")
    video_id = item_id.get("videoId") if isinstance(item_id, dict) else item_id
    thumbnails = snippet.get("thumbnails") or {}
    thumbnail = next(
        filter(None, (_thumbnail_url(thumbnails, size) for size in _THUMBNAIL_SIZES)),
        None,
    )
    return VideoResult(
        id=video_id,
        title=snippet.get("title"),
        description=snippet.get("description"),
        thumbnail=thumbnail,
        channel_title=snippet.get("channelTitle"),
        published_at=snippet.get("publishedAt"),
    )


class VideoSearchHandler(CapabilityHandler):
    capability = Capability.TUBE

    def __init__(self, *, videos: VideoSearchClient) -> None:
        self._videos = videos

    def content_preview(self, request: VideoSearchRequest) -> str:
        return preview(request.query)

    async def dispatch(self, request: VideoSearchRequest) -> VideoSearchResponse:
        data = await self._videos.search(request.query, request.max_results)
        return VideoSearchResponse(
            videos=[to_video_result(item) for item in data.get("items") or []]
        )
