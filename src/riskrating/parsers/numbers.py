"""Number parsing and formatting shared by the text codecs."""

from __future__ import annotations

import math
from decimal import Decimal

from riskrating.exceptions import FormatError


def parse_number(raw: str, context: str) -> float:
    """Parse a finite float, raising FormatError that names *context*."""
    stripped = raw.strip()
    try:
        value = float(stripped)
    except ValueError as exc:
        raise FormatError(f"Non-numeric value {stripped!r} in {context}") from exc
    if not math.isfinite(value):
        raise FormatError(f"Non-finite value {stripped!r} in {context}")
    return value


def format_number(value: float) -> str:
    """Render integral values without a decimal point (``3.0`` -> ``3``) and never in exponent form."""
    number = float(value)
    if number.is_integer():
        return str(int(number))
    return format(Decimal(repr(number)).normalize(), "f")
