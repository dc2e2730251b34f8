"""Web search and video search panels."""

from __future__ import annotations

from dwiju_gateway.models.requests import Capability
from dwiju_gateway.models.schemas import SearchResult, VideoResult
from dwiju_gateway.panels.base import Panel, VoiceInputMixin
from dwiju_gateway.panels.devices import Recognizer


class SearchPanel(VoiceInputMixin, Panel):
    capability = Capability.SEARCH

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.query = ""
        self.results: list[SearchResult] = []
        self.total_results = "0"

    def _set_query(self, transcript: str) -> None:
        self.query = transcript

    def toggle_voice_search(self, recognizer: Recognizer | None) -> None:
        self.toggle_voice_input(
            recognizer,
            self._set_query,
            "Listening... Speak your search",
            unsupported="Voice search not supported",
        )

    async def search(self) -> bool:
        if not self.require(self.query, message="Please enter a search query"):
            return False

        envelope = await self.invoke(
            {"query": self.query}, failure_message="Search failed. Please try again."
        )
        if envelope is None:
            return False

        self.results = [SearchResult.model_validate(r) for r in envelope.get("results") or []]
        self.total_results = str(envelope.get("totalResults") or "0")
        self.notifier.success(f"Found {len(self.results)} results")
        return True


class VideoSearchPanel(VoiceInputMixin, Panel):
    capability = Capability.TUBE

    def __init__(self, *args, max_results: int = 12, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.query = ""
        self.max_results = max_results
        self.videos: list[VideoResult] = []
        self.selected: VideoResult | None = None

    def _set_query(self, transcript: str) -> None:
        self.query = transcript

    def toggle_voice_search(self, recognizer: Recognizer | None) -> None:
        self.toggle_voice_input(
            recognizer,
            self._set_query,
            "Listening... Speak your search",
            unsupported="Voice search not supported",
        )

    async def search(self) -> bool:
        if not self.require(self.query, message="Please enter a search query"):
            return False

        envelope = await self.invoke(
            {"query": self.query, "maxResults": self.max_results},
            failure_message="Search failed. Please try again.",
        )
        if envelope is None:
            return False

        self.videos = [VideoResult.model_validate(v) for v in envelope.get("videos") or []]
        self.notifier.success(f"Found {len(self.videos)} videos")
        return True

    def select(self, video: VideoResult) -> str | None:
        """Open *video*; returns the embed URL to load."""
        self.selected = video
        return video.embed_url

    def close(self) -> None:
        self.selected = None
