"""Root of the riskrating exception hierarchy."""

from __future__ import annotations


class RiskRatingError(Exception):
    """Base class for all errors raised by riskrating."""
