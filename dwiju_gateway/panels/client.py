"""HTTP client panels use to reach the gateway."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from dwiju_gateway.config.settings import PanelSettings
from dwiju_gateway.models.requests import Capability

logger = logging.getLogger(__name__)


class GatewayCallError(Exception):
    """The gateway answered with a failure envelope or could not be reached."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.status_code = status_code
        super().__init__(message)


class GatewayClient:
    """Posts request envelopes to ``/api/v1/<capability>``.

    Parameters
    ----------
    base_url:
        Root URL of the running gateway.
    http_client:
        Optional preconfigured client (tests pass one with a mock transport).
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout_seconds: float = 120.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self._http = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout_seconds
        )

    @classmethod
    def from_settings(cls, settings: PanelSettings | None = None) -> "GatewayClient":
        settings = settings or PanelSettings()
        return cls(settings.gateway_url, timeout_seconds=settings.timeout_seconds)

    async def call(self, capability: Capability, payload: dict[str, Any]) -> dict[str, Any]:
        """Send one request and return the success envelope.

        Raises
        ------
        GatewayCallError
            On transport failure, a non-JSON answer, or ``success: false``.
        """
        try:
            response = await self._http.post(f"/api/v1/{capability.value}", json=payload)
        except httpx.HTTPError as exc:
            raise GatewayCallError(str(exc) or "Gateway unreachable") from exc

        try:
            body = response.json()
        except ValueError:
            raise GatewayCallError(
                f"Unexpected response from gateway ({response.status_code})",
                status_code=response.status_code,
            ) from None

        if not response.is_success or not isinstance(body, dict) or not body.get("success"):
            error = body.get("error") if isinstance(body, dict) else None
            raise GatewayCallError(error or "Request failed", status_code=response.status_code)
        return body

    async def aclose(self) -> None:
        await self._http.aclose()
