"""Client for the hosted video search API (YouTube Data API v3)."""

from __future__ import annotations

from typing import Any

import httpx

from dwiju_gateway.providers.base import ProviderClient


class VideoSearchClient(ProviderClient):
    provider = "youtube"

    def __init__(
        self,
        *,
        api_key: str | None,
        base_url: str,
        http_client: httpx.AsyncClient,
        timeout_seconds: float = 60.0,
    ) -> None:
        super().__init__(http_client=http_client, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    async def search(self, query: str, max_results: int) -> dict[str, Any]:
        """Return the raw ``search.list`` response body, videos only."""
        api_key = self.require(self._api_key, "YOUTUBE_API_KEY")
        response = await self.send(
            "GET",
            f"{self._base_url}/search",
            failure_message="Video search failed",
            params={
                "part": "snippet",
                "type": "video",
                "q": query,
                "maxResults": max_results,
                "key": api_key,
            },
        )
        return response.json()
