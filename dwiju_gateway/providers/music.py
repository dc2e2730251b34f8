"""Client for the hosted music generation API."""

from __future__ import annotations

from typing import Any

import httpx

from dwiju_gateway.providers.base import ProviderClient


class MusicClient(ProviderClient):
    provider = "music"

    def __init__(
        self,
        *,
        api_key: str | None,
        api_url: str | None,
        http_client: httpx.AsyncClient,
        timeout_seconds: float = 60.0,
    ) -> None:
        super().__init__(http_client=http_client, timeout_seconds=timeout_seconds)
        self._api_key = api_key
        self._api_url = api_url

    async def generate(self, parameters: dict[str, Any]) -> dict[str, Any]:
        """Submit one generation and return the provider's JSON body."""
        api_key = self.require(self._api_key, "MUSIC_API_KEY")
        api_url = self.require(self._api_url, "MUSIC_API_URL")
        response = await self.send(
            "POST",
            api_url,
            failure_message="Music generation failed",
            headers={"Authorization": f"Bearer {api_key}"},
            json=parameters,
        )
        body = response.json()
        return body if isinstance(body, dict) else {"result": body}
