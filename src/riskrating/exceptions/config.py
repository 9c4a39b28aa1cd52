"""Configuration-related exceptions."""

from __future__ import annotations

from riskrating.exceptions.base import RiskRatingError


class ConfigError(RiskRatingError, ValueError):
    """Raised when the settings file or the mapping store content is invalid."""


class RangeCoverageError(RiskRatingError, ValueError):
    """Raised when a range configuration does not cover 0-9 without gaps."""

    def __init__(self, axis: str, problems: tuple[str, ...] = ()) -> None:
        self.axis = axis
        self.problems = problems
        detail = "; ".join(problems) if problems else "ranges must cover 0 to 9 continuously"
        super().__init__(f"{axis} ranges are not continuous: {detail}")


class MissingParameterError(RiskRatingError, ValueError):
    """Raised when a custom configuration is missing some of its parameters."""

    def __init__(self, missing: tuple[str, ...]) -> None:
        self.missing = missing
        super().__init__(f"The following parameters are missing: {', '.join(missing)}")
