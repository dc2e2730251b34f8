"""Structured JSON logging configuration.

Configures Python logging to emit JSON-formatted log entries with required
fields: request_id, level, timestamp. Dispatch-specific fields are added
contextually (capability, request_type, content_preview before the call;
upstream_status, duration_ms, error_reason after it).

SECURITY: Never logs credential values. Provider keys travel in query
strings (``key=...``) and bearer headers, so both are redacted.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

from dwiju_gateway.middleware.request_id import request_id_var

# Patterns that should be redacted from log output
_SENSITIVE_PATTERNS = re.compile(
    r"(api.key|key|secret|password|token|credential|authorization|bearer)"
    r"[\s]*[=:]\s*[^\s&\"']+",
    re.IGNORECASE,
)


def _sanitize(text: str) -> str:
    """Remove sensitive values from log text."""
    return _SENSITIVE_PATTERNS.sub("[REDACTED]", text)


_CONTEXT_FIELDS = (
    "capability",
    "request_type",
    "content_preview",
    "upstream_status",
    "duration_ms",
    "provider",
)


class JsonFormatter(logging.Formatter):
    """Formats log records as JSON with structured fields.

    Each entry contains at minimum: request_id, level, timestamp, message.
    Additional fields can be attached via the ``extra`` dict on log calls.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": _sanitize(record.getMessage()),
            "request_id": getattr(record, "request_id", None) or request_id_var.get(),
        }

        for name in _CONTEXT_FIELDS:
            if hasattr(record, name):
                entry[name] = getattr(record, name)

        if hasattr(record, "error_reason"):
            entry["error_reason"] = _sanitize(
                str(getattr(record, "error_reason"))
            )

        if record.exc_info and record.exc_info[1]:
            entry["exception"] = _sanitize(
                self.formatException(record.exc_info)
            )

        return json.dumps(entry, default=str)


class RedactingFormatter(logging.Formatter):
    """Plain-text formatter with the same credential redaction."""

    def format(self, record: logging.LogRecord) -> str:
        return _sanitize(super().format(record))


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure the root logger.

    Parameters
    ----------
    level:
        Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    json_format:
        Emit JSON entries; plain text lines otherwise (local development).
    """
    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Remove existing handlers to avoid duplicates
    root.handlers.clear()

    handler = logging.StreamHandler()
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            RedactingFormatter("%(asctime)s %(levelname)s %(name)s %(message)s")
        )
    root.addHandler(handler)

    # httpx logs full request URLs, which carry provider keys
    logging.getLogger("httpx").setLevel(logging.WARNING)
