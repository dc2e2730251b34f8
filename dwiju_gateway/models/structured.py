"""Structured output extraction from free-form model text.

A language model asked for JSON may wrap it in prose or code fences, or
ignore the instruction entirely. ``extract_structured`` takes the span from
the first ``{`` to the last ``}`` and parses it; anything that is not a JSON
object degrades to the raw text. Callers match on the two result types
instead of guessing.
"""

from __future__ import annotations

import json
import logging
import math
import re
from dataclasses import dataclass
from typing import Any, Union

logger = logging.getLogger(__name__)

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def _reject_constant(name: str) -> float:
    raise ValueError(f"non-finite number {name} is not valid JSON")


def _finite_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number {text} is out of range")
    return value


@dataclass(frozen=True)
class Structured:
    """A JSON object recovered from the provider text."""

    value: dict[str, Any]

    def payload(self) -> dict[str, Any]:
        return self.value


@dataclass(frozen=True)
class Unstructured:
    """Provider text with no parseable JSON object."""

    text: str

    def payload(self) -> str:
        return self.text


StructuredOutput = Union[Structured, Unstructured]


def extract_structured(text: str) -> StructuredOutput:
    """Parse the outermost ``{...}`` span of *text* into a tagged result."""
    match = _JSON_OBJECT_RE.search(text)
    if match is None:
        return Unstructured(text)

    try:
        value = json.loads(
            match.group(0),
            parse_constant=_reject_constant,
            parse_float=_finite_float,
        )
    except (ValueError, RecursionError) as exc:
        logger.warning("Structured output is not valid JSON: %s", exc)
        return Unstructured(text)

    if not isinstance(value, dict):
        return Unstructured(text)
    return Structured(value)


def from_payload(data: Any) -> StructuredOutput:
    """Rebuild the tagged result from an envelope's ``data`` field."""
    if isinstance(data, dict):
        return Structured(data)
    if data is None:
        return Unstructured("")
    if isinstance(data, str):
        return Unstructured(data)
    return Unstructured(json.dumps(data))
