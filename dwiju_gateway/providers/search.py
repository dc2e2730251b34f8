"""Client for the hosted web search API (Google Custom Search JSON API)."""

from __future__ import annotations

from typing import Any

import httpx

from dwiju_gateway.middleware.error_handler import ConfigurationError
from dwiju_gateway.providers.base import ProviderClient


class SearchClient(ProviderClient):
    provider = "google_search"

    def __init__(
        self,
        *,
        api_key: str | None,
        engine_id: str | None,
        base_url: str,
        result_count: int,
        http_client: httpx.AsyncClient,
        timeout_seconds: float = 60.0,
    ) -> None:
        super().__init__(http_client=http_client, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._engine_id = engine_id
        self._base_url = base_url
        self._result_count = result_count

    @property
    def configured(self) -> bool:
        return bool(self._api_key and self._engine_id)

    async def search(self, query: str) -> dict[str, Any]:
        """Return the raw search response body."""
        if not self.configured:
            raise ConfigurationError("Google Search API credentials not configured")
        response = await self.send(
            "GET",
            self._base_url,
            failure_message="Search failed",
            params={
                "key": self._api_key,
                "cx": self._engine_id,
                "q": query,
                "num": self._result_count,
            },
        )
        return response.json()
