"""Web search handler: query in, result records out."""

from __future__ import annotations

from typing import Any

from dwiju_gateway.handlers.base import CapabilityHandler, preview
from dwiju_gateway.models.requests import Capability, SearchRequest
from dwiju_gateway.models.responses import SearchResponse
from dwiju_gateway.models.schemas import SearchResult
from dwiju_gateway.providers.search import SearchClient


def _first_src(pagemap: dict, key: str) -> str | None:
    entries = pagemap.get(key) or []
    if entries and isinstance(entries[0], dict):
        return entries[0].get("src")
    return None


def to_search_result(item: dict[str, Any]) -> SearchResult:
    """Map one provider item; thumbnails fall back to the page image."""
    pagemap = item.get("pagemap") or {}
    return SearchResult(
        title=item.get("title"),
        link=item.get("link"),
        snippet=item.get("snippet"),
        thumbnail=_first_src(pagemap, "cse_thumbnail") or _first_src(pagemap, "cse_image"),
    )


class SearchHandler(CapabilityHandler):
    capability = Capability.SEARCH

    def __init__(self, *, search: SearchClient) -> None:
        self._search = search

    def content_preview(self, request: SearchRequest) -> str:
        return preview(request.query)

    async def dispatch(self, request: SearchRequest) -> SearchResponse:
        data = await self._search.search(request.query)
        items = data.get("items") or []
        total = (data.get("searchInformation") or {}).get("totalResults") or "0"
        return SearchResponse(
            results=[to_search_result(item) for item in items],
            total_results=str(total),
        )
