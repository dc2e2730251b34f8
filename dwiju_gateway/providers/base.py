"""Shared plumbing for hosted provider clients.

Each client wraps one external API. Credentials are injected at
construction and checked before any request is built, so a missing key
fails the call without touching the network. Every client issues exactly
one request per call: no retries, no streaming.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from dwiju_gateway.middleware.error_handler import ConfigurationError, UpstreamError

logger = logging.getLogger(__name__)


def provider_error_message(data: Any) -> str | None:
    """Pull the human-readable message out of a provider error body.

    Providers answer either ``{"error": {"message": ...}}`` or
    ``{"error": "..."}``.
    """
    if not isinstance(data, dict):
        return None
    error = data.get("error")
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str) and error:
        return error
    return None


def _json_or_none(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return None


class ProviderClient:
    """Base class for provider clients sharing one ``httpx.AsyncClient``.

    Parameters
    ----------
    http_client:
        Client owned by the application; closed on shutdown.
    timeout_seconds:
        Per-request timeout passed to httpx.
    """

    provider: str = "provider"

    def __init__(self, *, http_client: httpx.AsyncClient, timeout_seconds: float = 60.0) -> None:
        self._http = http_client
        self._timeout = timeout_seconds

    @staticmethod
    def require(value: str | None, name: str) -> str:
        """Return *value* or raise ConfigurationError naming the credential."""
        if not value:
            raise ConfigurationError(f"{name} is not configured")
        return value

    async def send(
        self,
        method: str,
        url: str,
        *,
        failure_message: str,
        **kwargs: Any,
    ) -> httpx.Response:
        """Issue one request; raise UpstreamError on a non-success status."""
        started = time.monotonic()
        response = await self._http.request(method, url, timeout=self._timeout, **kwargs)
        duration_ms = round((time.monotonic() - started) * 1000, 1)

        if response.is_success:
            logger.debug(
                "%s answered %d",
                self.provider,
                response.status_code,
                extra={
                    "provider": self.provider,
                    "upstream_status": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return response

        message = provider_error_message(_json_or_none(response))
        logger.error(
            "%s API error: %s",
            self.provider,
            message or response.text[:200],
            extra={
                "provider": self.provider,
                "upstream_status": response.status_code,
                "duration_ms": duration_ms,
            },
        )
        raise UpstreamError(message or failure_message, upstream_status=response.status_code)
