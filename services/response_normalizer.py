"""Response normalizer — recover a typed record array from free-form LLM text.

LLMs asked for "ONLY a JSON array" still wrap it in commentary, code
fences, trailing commas and raw line breaks.  The pipeline below undoes
exactly those malformations, one pure step at a time:

    strip_code_fences → slice_array_span → repair_json_syntax
        → parse_json_array → validate_records

Any step that cannot produce usable output raises
:class:`MalformedOutputError`; there is no partial result.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from errors.exceptions import MalformedOutputError

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=BaseModel)

# ``` markers with an optional language tag (```json, ```JSON, ```js ...)
_FENCE_RE = re.compile(r"```[A-Za-z0-9_+-]*[ \t]*\r?\n?")
_WHITESPACE_RUN_RE = re.compile(r"\s+")
_TRAILING_COMMA_OBJECT_RE = re.compile(r"(?:,\s*)+}")
_TRAILING_COMMA_ARRAY_RE = re.compile(r"(?:,\s*)+\]")

_PREVIEW_CHARS = 200


def strip_code_fences(text: str) -> str:
    """Remove every triple-backtick fence marker, wherever it appears."""
    return _FENCE_RE.sub("", text)


def slice_array_span(text: str) -> str:
    """Return the inclusive span from the first ``[`` to the last ``]``."""
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or end < start:
        raise MalformedOutputError("no JSON array found in response", text[:_PREVIEW_CHARS])
    return text[start : end + 1]


def repair_json_syntax(text: str) -> str:
    """Apply the targeted syntactic repairs, in order.

    1. newlines → single spaces
    2. whitespace runs → one space
    3. drop commas directly before ``}``
    4. drop commas directly before ``]``

    Applying the function to its own output changes nothing.
    """
    text = text.replace("\r\n", " ").replace("\n", " ").replace("\r", " ")
    text = _WHITESPACE_RUN_RE.sub(" ", text)
    text = _TRAILING_COMMA_OBJECT_RE.sub("}", text)
    text = _TRAILING_COMMA_ARRAY_RE.sub("]", text)
    return text


def parse_json_array(text: str) -> list[Any]:
    """Parse *text* as JSON and require a top-level array."""
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedOutputError(f"invalid JSON: {e.msg}", text[:_PREVIEW_CHARS]) from e
    if not isinstance(value, list):
        raise MalformedOutputError(
            f"expected a JSON array, got {type(value).__name__}", text[:_PREVIEW_CHARS]
        )
    return value


def validate_records(items: list[Any], record_type: type[RecordT]) -> list[RecordT]:
    """Validate each element against *record_type*, dropping invalid ones.

    Order is preserved.  Raises when no element survives.
    """
    records: list[RecordT] = []
    dropped = 0
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            dropped += 1
            logger.warning(
                "Dropped %s element %d: expected an object, got %s",
                record_type.__name__, index, type(item).__name__,
            )
            continue
        try:
            records.append(record_type.model_validate(item))
        except ValidationError as e:
            dropped += 1
            logger.warning(
                "Dropped %s element %d (%d errors): %s",
                record_type.__name__, index, e.error_count(), repr(item)[:_PREVIEW_CHARS],
            )

    if not records:
        raise MalformedOutputError(
            f"no valid {record_type.__name__} elements in response (dropped={dropped})"
        )
    if dropped:
        logger.info(
            "Normalized %s array: kept=%d, dropped=%d",
            record_type.__name__, len(records), dropped,
        )
    return records


def extract_json_array(raw_text: str) -> list[Any]:
    """Steps 1-5: trim, strip fences, slice, repair and parse."""
    text = strip_code_fences(raw_text.strip())
    span = slice_array_span(text)
    return parse_json_array(repair_json_syntax(span))


def normalize_records(raw_text: str, record_type: type[RecordT]) -> list[RecordT]:
    """Turn raw completion text into a validated list of *record_type*."""
    return validate_records(extract_json_array(raw_text), record_type)
