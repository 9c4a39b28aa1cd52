"""Parsers and serializers for the vector, range and mapping text formats."""

from .mapping import mapping_from_entries, parse_mapping, serialize_mapping
from .ranges import (
    coverage_gaps,
    coverage_problems,
    ends_at_axis_max,
    parse_range_config,
    require_continuous,
    serialize_range_config,
    sorted_levels,
    starts_at_axis_min,
    validate_continuous,
)
from .vector import parse_vector, serialize_vector

__all__ = [
    "coverage_gaps",
    "coverage_problems",
    "ends_at_axis_max",
    "mapping_from_entries",
    "parse_mapping",
    "parse_range_config",
    "parse_vector",
    "require_continuous",
    "serialize_mapping",
    "serialize_range_config",
    "serialize_vector",
    "sorted_levels",
    "starts_at_axis_min",
    "validate_continuous",
]
