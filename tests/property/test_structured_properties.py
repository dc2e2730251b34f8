"""Property tests for structured output extraction."""

from __future__ import annotations

import json

from hypothesis import given, settings

from dwiju_gateway.models.structured import Structured, Unstructured, extract_structured, from_payload
from tests.conftest import json_objects, prose


@settings(max_examples=200)
@given(before=prose, obj=json_objects, after=prose)
def test_object_surrounded_by_prose_is_recovered(before: str, obj: dict, after: str) -> None:
    text = f"{before}{json.dumps(obj)}{after}"

    assert extract_structured(text) == Structured(obj)


@settings(max_examples=200)
@given(text=prose)
def test_text_without_braces_is_unstructured(text: str) -> None:
    assert extract_structured(text) == Unstructured(text)


@settings(max_examples=100)
@given(obj=json_objects)
def test_payload_reconstruction_keeps_objects(obj: dict) -> None:
    output = extract_structured(json.dumps(obj))

    assert from_payload(output.payload()) == output
