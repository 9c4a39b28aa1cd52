"""Constants for threshold ranges, level labels and mapping tables."""

from __future__ import annotations

AXIS_MIN: float = 0.0
AXIS_MAX: float = 9.0

RANGE_SEPARATOR: str = ";"
LABEL_SEPARATOR: str = ":"
BOUND_SEPARATOR: str = "-"
MAPPING_SEPARATOR: str = ","
MAPPING_KEY_SEPARATOR: str = "-"

# In-band result of a classification or lookup that cannot resolve.
ERROR_SENTINEL: str = "ERROR"

# The interactive matrix builder caps both axes at this many levels.
MAX_CUSTOM_LEVELS: int = 5
