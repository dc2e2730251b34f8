"""Global error hierarchy and FastAPI exception handlers.

All gateway-specific errors extend GatewayError. Capability handlers convert
these (and any other exception) into a failure envelope at their own
boundary; the FastAPI exception handlers below cover what happens outside a
handler, such as request body validation. Every failure renders as
{ success: false, error, details? }.
"""

from __future__ import annotations

import logging
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
    "Access-Control-Allow-Methods": "POST, GET, OPTIONS",
}


# ---------------------------------------------------------------------------
# Error hierarchy
# ---------------------------------------------------------------------------


class GatewayError(Exception):
    """Base error for all gateway-specific errors."""

    status_code: int = 500
    message: str = "Unknown error"

    def __init__(self, message: str | None = None, **kwargs: object) -> None:
        self.message = message or self.__class__.message
        self.details = kwargs
        super().__init__(self.message)


class ConfigurationError(GatewayError):
    """A provider credential required by the capability is absent."""

    status_code = 500
    message = "Provider credentials not configured"


class UpstreamError(GatewayError):
    """The external provider answered with a non-success status."""

    status_code = 500
    message = "Upstream provider error"

    def __init__(
        self, message: str | None = None, upstream_status: int | None = None, **kwargs: object
    ) -> None:
        super().__init__(message, **kwargs)
        self.upstream_status = upstream_status


class InvalidRequestTypeError(GatewayError):
    """The discriminator names no template of the capability."""

    status_code = 500
    message = "Invalid request type"


class ValidationError(GatewayError):
    """Request body validation failure; carries field-level details."""

    status_code = 422
    message = "Validation error"


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------


def _envelope(
    status_code: int,
    error: str,
    details: dict | None = None,
) -> JSONResponse:
    """Build a JSON failure envelope response."""
    content: dict = {"success": False, "error": error}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content, headers=CORS_HEADERS)


def error_envelope(exc: Exception, fallback: str = "Unknown error") -> JSONResponse:
    """Map any exception to the failure envelope a handler returns."""
    if isinstance(exc, GatewayError):
        return _envelope(exc.status_code, exc.message, details=exc.details or None)
    return _envelope(500, str(exc) or fallback)


async def _gateway_error_handler(_request: Request, exc: GatewayError) -> JSONResponse:
    """Handle GatewayError subclasses."""
    return _envelope(exc.status_code, exc.message, details=exc.details or None)


async def _validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle FastAPI / Pydantic RequestValidationError (422)."""
    field_errors = [
        {
            "field": " -> ".join(str(loc) for loc in err["loc"]),
            "message": err["msg"],
            "type": err["type"],
        }
        for err in exc.errors()
    ]
    return _envelope(
        status_code=422,
        error=ValidationError.message,
        details={"fields": field_errors},
    )


async def _unhandled_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Catch-all for unhandled exceptions: log the traceback, answer 500."""
    logger.error(
        "Unhandled exception: %s\n%s",
        exc,
        traceback.format_exc(),
    )
    return _envelope(status_code=500, error=str(exc) or "Unknown error")


# ---------------------------------------------------------------------------
# Registration helper
# ---------------------------------------------------------------------------


def register_error_handlers(app: FastAPI) -> None:
    """Wire up all exception handlers on the FastAPI application."""
    app.add_exception_handler(GatewayError, _gateway_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, _validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, _unhandled_error_handler)  # type: ignore[arg-type]
