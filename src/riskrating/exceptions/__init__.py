"""Shared exception hierarchy for riskrating."""

from __future__ import annotations

from .base import RiskRatingError
from .config import ConfigError, MissingParameterError, RangeCoverageError
from .parsing import FormatError

__all__ = [
    "ConfigError",
    "FormatError",
    "MissingParameterError",
    "RangeCoverageError",
    "RiskRatingError",
]
