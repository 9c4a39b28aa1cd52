"""Tests for range configuration parsing and continuity checks."""

from __future__ import annotations

import pytest

from riskrating.exceptions import FormatError, RangeCoverageError
from riskrating.model import LevelRange, RangeConfig
from riskrating.parsers import (
    coverage_gaps,
    coverage_problems,
    parse_range_config,
    require_continuous,
    serialize_range_config,
    sorted_levels,
    validate_continuous,
)

from .conftest import DEFAULT_RANGES_TEXT


def test_parse_range_config_reads_labels_and_bounds() -> None:
    config = parse_range_config(DEFAULT_RANGES_TEXT)

    assert config.ranges == (
        LevelRange("LOW", 0, 3),
        LevelRange("MEDIUM", 3, 6),
        LevelRange("HIGH", 6, 9),
    )


def test_parse_range_config_uppercases_and_strips() -> None:
    config = parse_range_config(" low : 0-4.5 ; high:4.5-9 ;")

    assert config.labels == ("LOW", "HIGH")
    assert config.get("high") == LevelRange("HIGH", 4.5, 9)


@pytest.mark.parametrize(
    "text",
    [
        pytest.param("", id="empty"),
        pytest.param("   ", id="blank"),
        pytest.param(";;", id="only-separators"),
        pytest.param("LOW0-3", id="missing-label-separator"),
        pytest.param(":0-3", id="empty-label"),
        pytest.param("LOW:3", id="missing-bounds"),
        pytest.param("LOW:a-3", id="non-numeric"),
        pytest.param("LOW:5-3", id="min-above-max"),
        pytest.param("LOW:0-3;low:3-9", id="duplicate-label"),
        pytest.param("LOW:0-3;MEDIUM:3-20;HIGH:6-9", id="bound-above-axis"),
    ],
)
def test_parse_range_config_rejects_malformed_text(text: str) -> None:
    with pytest.raises(FormatError):
        parse_range_config(text)


def test_parse_range_config_rejects_none() -> None:
    with pytest.raises(FormatError):
        parse_range_config(None)


def test_default_ranges_are_continuous() -> None:
    assert validate_continuous(parse_range_config(DEFAULT_RANGES_TEXT)) is True


def test_gap_between_ranges_is_not_continuous() -> None:
    config = parse_range_config("LOW:0-3;MEDIUM:4-6;HIGH:6-9")

    assert validate_continuous(config) is False
    assert [(a.label, b.label) for a, b in coverage_gaps(config)] == [("LOW", "MEDIUM")]


def test_overlapping_ranges_are_continuous() -> None:
    assert validate_continuous(parse_range_config("LOW:0-4;MEDIUM:3-6;HIGH:5-9")) is True


def test_continuity_ignores_declaration_order() -> None:
    assert validate_continuous(parse_range_config("HIGH:6-9;LOW:0-3;MEDIUM:3-6")) is True


def test_coverage_problems_report_start_end_and_gap() -> None:
    problems = coverage_problems(parse_range_config("LOW:1-3;HIGH:4-8"))

    assert problems == ["must start at 0", "must end at 9", "gap between LOW and HIGH (3-4)"]


def test_require_continuous_raises_with_axis_name() -> None:
    with pytest.raises(RangeCoverageError, match="impact") as excinfo:
        require_continuous(parse_range_config("LOW:0-3;HIGH:6-9"), "impact")

    assert excinfo.value.axis == "impact"
    assert excinfo.value.problems == ("gap between LOW and HIGH (3-6)",)


def test_require_continuous_returns_config_unchanged() -> None:
    config = parse_range_config(DEFAULT_RANGES_TEXT)

    assert require_continuous(config, "likelihood") is config


def test_sorted_levels_follow_ascending_minimum() -> None:
    assert sorted_levels(parse_range_config("HIGH:6-9;LOW:0-3;MEDIUM:3-6")) == ("LOW", "MEDIUM", "HIGH")


def test_serialize_range_config_keeps_declared_order() -> None:
    text = "HIGH:6-9;LOW:0-2.5;MEDIUM:2.5-6"

    assert serialize_range_config(parse_range_config(text)) == text


def test_tiny_bounds_serialize_without_exponent() -> None:
    config = RangeConfig.from_bounds((("LOW", 0, 0.00001), ("HIGH", 0.00001, 9)))

    text = serialize_range_config(config)

    assert text == "LOW:0-0.00001;HIGH:0.00001-9"
    assert parse_range_config(text) == config
