"""Score reduction, classification and verdict resolution."""

from .classifier import classify
from .engine import impact_score, likelihood_score
from .presets import BUILTIN_RANGE_CONFIGS, DEFAULT_MAPPING_TABLE
from .resolver import (
    calculate,
    custom_profile,
    missing_custom_parameters,
    named_profile,
    resolve,
    select_profile,
)

__all__ = [
    "BUILTIN_RANGE_CONFIGS",
    "DEFAULT_MAPPING_TABLE",
    "calculate",
    "classify",
    "custom_profile",
    "impact_score",
    "likelihood_score",
    "missing_custom_parameters",
    "named_profile",
    "resolve",
    "select_profile",
]
