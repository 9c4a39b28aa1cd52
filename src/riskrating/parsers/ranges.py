"""Codec and continuity checks for ``LABEL:min-max;...`` range configurations."""

from __future__ import annotations

from riskrating.constants.levels import AXIS_MAX, AXIS_MIN, BOUND_SEPARATOR, LABEL_SEPARATOR, RANGE_SEPARATOR
from riskrating.exceptions import FormatError, RangeCoverageError
from riskrating.model import LevelRange, RangeConfig
from riskrating.parsers.numbers import format_number, parse_number
from riskrating.types import Axis


def parse_range_config(text: str | None) -> RangeConfig:
    """Parse range text; labels are upper-cased and must be unique."""
    if text is None or not text.strip():
        raise FormatError("No range configuration provided")

    ranges: list[LevelRange] = []
    seen: set[str] = set()
    for part in text.split(RANGE_SEPARATOR):
        stripped = part.strip()
        if not stripped:
            continue
        label_raw, separator, bounds_raw = stripped.partition(LABEL_SEPARATOR)
        label = label_raw.strip().upper()
        if not separator or not label or not bounds_raw.strip():
            raise FormatError(f"Invalid range part: {stripped!r}")
        min_raw, bound_separator, max_raw = bounds_raw.partition(BOUND_SEPARATOR)
        if not bound_separator:
            raise FormatError(f"Missing range bounds in {stripped!r}")
        minimum = parse_number(min_raw, f"range {stripped!r}")
        maximum = parse_number(max_raw, f"range {stripped!r}")
        if not (AXIS_MIN <= minimum <= AXIS_MAX and AXIS_MIN <= maximum <= AXIS_MAX):
            raise FormatError(f"Range bounds must lie within 0-9 in {stripped!r}")
        if minimum > maximum:
            raise FormatError(f"Range minimum exceeds maximum in {stripped!r}")
        if label in seen:
            raise FormatError(f"Duplicate level label {label!r}")
        seen.add(label)
        ranges.append(LevelRange(label, minimum, maximum))

    if not ranges:
        raise FormatError(f"Empty range configuration from {text!r}")
    return RangeConfig(tuple(ranges))


def starts_at_axis_min(config: RangeConfig) -> bool:
    ordered = config.sorted_ranges()
    return bool(ordered) and ordered[0].minimum == AXIS_MIN


def ends_at_axis_max(config: RangeConfig) -> bool:
    ordered = config.sorted_ranges()
    return bool(ordered) and ordered[-1].maximum == AXIS_MAX


def coverage_gaps(config: RangeConfig) -> list[tuple[LevelRange, LevelRange]]:
    """Adjacent range pairs (by minimum) that leave part of the axis uncovered."""
    ordered = config.sorted_ranges()
    # Overlap is allowed, a gap is not.
    return [
        (previous, current)
        for previous, current in zip(ordered, ordered[1:])
        if previous.maximum < current.minimum
    ]


def coverage_problems(config: RangeConfig) -> list[str]:
    """Describe every way *config* fails to cover 0-9 without gaps."""
    if not config.ranges:
        return ["no ranges defined"]

    problems: list[str] = []
    if not starts_at_axis_min(config):
        problems.append(f"must start at {format_number(AXIS_MIN)}")
    if not ends_at_axis_max(config):
        problems.append(f"must end at {format_number(AXIS_MAX)}")
    for previous, current in coverage_gaps(config):
        problems.append(
            f"gap between {previous.label} and {current.label} "
            f"({format_number(previous.maximum)}-{format_number(current.minimum)})"
        )
    return problems


def validate_continuous(config: RangeConfig) -> bool:
    """Return True when *config* covers 0-9 continuously; never raises."""
    return not coverage_problems(config)


def require_continuous(config: RangeConfig, axis: Axis) -> RangeConfig:
    """Return *config* unchanged or raise RangeCoverageError for *axis*."""
    problems = coverage_problems(config)
    if problems:
        raise RangeCoverageError(axis, tuple(problems))
    return config


def sorted_levels(config: RangeConfig) -> tuple[str, ...]:
    """Level labels by ascending minimum, the order mapping text is read in."""
    return tuple(item.label for item in config.sorted_ranges())


def serialize_range_config(config: RangeConfig) -> str:
    return RANGE_SEPARATOR.join(
        f"{item.label}{LABEL_SEPARATOR}{format_number(item.minimum)}{BOUND_SEPARATOR}{format_number(item.maximum)}"
        for item in config.ranges
    )
