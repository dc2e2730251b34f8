"""Middleware package — error hierarchy, CORS and request ID."""

from dwiju_gateway.middleware.cors import OpenCorsMiddleware
from dwiju_gateway.middleware.error_handler import (
    CORS_HEADERS,
    ConfigurationError,
    GatewayError,
    InvalidRequestTypeError,
    UpstreamError,
    ValidationError,
    error_envelope,
    register_error_handlers,
)
from dwiju_gateway.middleware.request_id import RequestIdMiddleware, request_id_var

__all__ = [
    "CORS_HEADERS",
    "ConfigurationError",
    "GatewayError",
    "InvalidRequestTypeError",
    "OpenCorsMiddleware",
    "RequestIdMiddleware",
    "UpstreamError",
    "ValidationError",
    "error_envelope",
    "register_error_handlers",
    "request_id_var",
]
