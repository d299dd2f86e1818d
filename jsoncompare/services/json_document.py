"""
JSON Document Service - Parse, validate and re-serialize JSON documents

These helpers prepare documents for the diff engine: both sides of a
comparison are serialized the same way so that equal values give equal lines.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any

from jsoncompare.exceptions import InvalidJsonError
from jsoncompare.models.document import ValidationResult

logger = logging.getLogger(__name__)

DEFAULT_INDENT = 2


# Integral floats below this print as plain integers (1.0 -> 1, 1e2 -> 100),
# larger ones keep exponent notation
_INTEGRAL_FLOAT_LIMIT = 1e21


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def _parse_number(literal: str) -> float | int:
    value = float(literal)
    if not math.isfinite(value):
        raise ValueError(f"number {literal} is out of range")
    if value.is_integer() and abs(value) < _INTEGRAL_FLOAT_LIMIT:
        return int(value)
    return value


def parse_json(text: str, side: str | None = None) -> Any:
    """Parse a document, raising InvalidJsonError on empty or malformed input.

    Numbers with an integral value are read as ints, so ``1.0`` and ``1``
    serialize to the same line.
    """
    if not text.strip():
        raise InvalidJsonError("Empty document", side=side)

    try:
        return json.loads(text, parse_float=_parse_number, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidJsonError(
            f"Invalid JSON: {e.msg}",
            line=e.lineno,
            column=e.colno,
            side=side,
            original_error=e,
        ) from e
    except ValueError as e:
        raise InvalidJsonError(f"Invalid JSON: {e}", side=side, original_error=e) from e


def validate_json(text: str) -> ValidationResult:
    """Parse a document and report the outcome instead of raising"""
    try:
        value = parse_json(text)
    except InvalidJsonError as e:
        return ValidationResult(valid=False, message=e.message, line=e.line, column=e.column)
    return ValidationResult(valid=True, value=value, message="Valid JSON")


def sort_object_keys(value: Any) -> Any:
    """Return a copy of value with every object's keys in sorted order.

    Arrays keep their element order; scalars are returned as is.
    """
    if isinstance(value, dict):
        return {key: sort_object_keys(value[key]) for key in sorted(value)}
    if isinstance(value, list):
        return [sort_object_keys(item) for item in value]
    return value


def format_json(value: Any, indent: int = DEFAULT_INDENT, sort_keys: bool = False) -> str:
    """Pretty-print a parsed value"""
    if sort_keys:
        value = sort_object_keys(value)
    return json.dumps(value, indent=indent, ensure_ascii=False, allow_nan=False)


def minify_json(value: Any, sort_keys: bool = False) -> str:
    """Serialize a parsed value without any whitespace"""
    if sort_keys:
        value = sort_object_keys(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, allow_nan=False)


def canonicalize(
    text: str,
    sort_keys: bool = False,
    indent: int = DEFAULT_INDENT,
    side: str | None = None,
) -> str:
    """Parse then pretty-print a document so it can be diffed line by line"""
    value = parse_json(text, side=side)
    logger.debug("Canonicalized %s document (sort_keys=%s)", side or "a", sort_keys)
    return format_json(value, indent=indent, sort_keys=sort_keys)
