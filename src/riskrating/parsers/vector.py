"""Codec for the ``(KEY:value/KEY:value/...)`` vector text format."""

from __future__ import annotations

import logging

from riskrating.constants.factors import (
    FACTOR_MAX,
    FACTOR_MIN,
    VECTOR_CLOSE,
    VECTOR_KEY_COUNT,
    VECTOR_KEYS,
    VECTOR_OPEN,
    VECTOR_SEGMENT_SEPARATOR,
    VECTOR_VALUE_SEPARATOR,
)
from riskrating.exceptions import FormatError
from riskrating.model import Vector
from riskrating.parsers.numbers import format_number, parse_number

logger = logging.getLogger(__name__)

_KNOWN_KEYS: frozenset[str] = frozenset(VECTOR_KEYS)


def parse_vector(text: str) -> Vector:
    """Parse vector text into a Vector.

    Exactly sixteen ``KEY:value`` segments are required. Keys are
    case-insensitive; unknown keys are logged and dropped, so the factors they
    displaced stay at 0.
    """
    clean = text.strip().removeprefix(VECTOR_OPEN).removesuffix(VECTOR_CLOSE)
    segments = clean.split(VECTOR_SEGMENT_SEPARATOR)
    if len(segments) != VECTOR_KEY_COUNT:
        raise FormatError(f"Vector must have exactly {VECTOR_KEY_COUNT} segments, got {len(segments)}")

    values: dict[str, float] = {}
    for segment in segments:
        key_raw, separator, value_raw = segment.partition(VECTOR_VALUE_SEPARATOR)
        key = key_raw.strip().lower()
        if not separator or not key:
            raise FormatError(f"Invalid vector segment: {segment!r}")
        value = parse_number(value_raw, f"vector segment {segment!r}")
        if not FACTOR_MIN <= value <= FACTOR_MAX:
            raise FormatError(f"Vector value out of range (0..9) in segment: {segment!r}")
        if key not in _KNOWN_KEYS:
            logger.warning("Ignoring unknown vector key %r", key)
            continue
        values[key] = value

    return Vector(**values)


def serialize_vector(vector: Vector, *, wrap: bool = True) -> str:
    """Serialize in canonical key order; ``wrap=False`` omits the parentheses."""
    body = VECTOR_SEGMENT_SEPARATOR.join(
        f"{key.upper()}{VECTOR_VALUE_SEPARATOR}{format_number(value)}" for key, value in vector.as_dict().items()
    )
    if not wrap:
        return body
    return f"{VECTOR_OPEN}{body}{VECTOR_CLOSE}"
