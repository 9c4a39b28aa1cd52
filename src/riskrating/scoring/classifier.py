"""Map a numeric score to a level label through a range configuration."""

from __future__ import annotations

from riskrating.constants.levels import AXIS_MAX, ERROR_SENTINEL
from riskrating.model import RangeConfig


def classify(score: float, config: RangeConfig) -> str:
    """Return the label of the first range (by minimum) holding *score*.

    Ranges are half-open ``[minimum, maximum)``. Only the top of the axis is
    closed: a score of exactly 9 matches a range whose maximum is 9. A score no
    range holds yields the ``ERROR`` sentinel, which mapping lookup propagates.
    """
    for item in config.sorted_ranges():
        if item.minimum <= score < item.maximum:
            return item.label
        if score == AXIS_MAX and item.maximum == AXIS_MAX:
            return item.label
    return ERROR_SENTINEL
