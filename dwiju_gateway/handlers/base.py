"""Dispatch handler base class.

A handler owns one capability: it receives a validated request, performs a
single provider call and shapes the result into the success envelope. The
``handle`` boundary turns every exception into the failure envelope, so no
error ever escapes a handler.

Lifecycle of one call: received → dispatched → (success | failure) → responded.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import Any

from fastapi.responses import JSONResponse
from pydantic import BaseModel

from dwiju_gateway.middleware.error_handler import CORS_HEADERS, UpstreamError, error_envelope
from dwiju_gateway.models.requests import Capability
from dwiju_gateway.models.responses import Envelope

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 50


def preview(text: str | None) -> str:
    """Truncate request content for log lines."""
    if not text:
        return ""
    return text[:PREVIEW_LENGTH]


class CapabilityHandler(ABC):
    """Base class for the per-capability handlers.

    Subclasses set ``capability`` and implement ``dispatch``. Dependencies
    (provider clients, templates, profiles) are injected via the constructor
    so handlers are testable without network access.
    """

    capability: Capability

    @abstractmethod
    async def dispatch(self, request: Any) -> Envelope:
        """Call the provider and return the success envelope."""
        ...

    def request_type(self, request: Any) -> str | None:
        return getattr(request, "type", None)

    def content_preview(self, request: Any) -> str:
        return ""

    async def handle(self, request: BaseModel) -> JSONResponse:
        """Run one request through the handler and always return an envelope."""
        request_type = self.request_type(request)
        log_extra = {
            "capability": self.capability.value,
            "request_type": request_type,
        }
        logger.info(
            "Processing %s request type: %s",
            self.capability.value,
            request_type,
            extra={**log_extra, "content_preview": self.content_preview(request)},
        )

        started = time.monotonic()
        try:
            envelope = await self.dispatch(request)
            response = JSONResponse(content=envelope.to_wire(), headers=CORS_HEADERS)
        except Exception as exc:
            duration_ms = round((time.monotonic() - started) * 1000, 1)
            logger.error(
                "Error in %s: %s",
                self.capability.value,
                exc,
                exc_info=not isinstance(exc, UpstreamError),
                extra={
                    **log_extra,
                    "duration_ms": duration_ms,
                    "error_reason": str(exc),
                    "upstream_status": getattr(exc, "upstream_status", None),
                },
            )
            return error_envelope(exc)

        duration_ms = round((time.monotonic() - started) * 1000, 1)
        logger.info(
            "Completed %s request",
            self.capability.value,
            extra={**log_extra, "duration_ms": duration_ms},
        )
        return response
