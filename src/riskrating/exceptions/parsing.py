"""Parsing-related exceptions."""

from __future__ import annotations

from riskrating.exceptions.base import RiskRatingError


class FormatError(RiskRatingError, ValueError):
    """Raised when vector, range or mapping text is malformed."""
