"""Tests for the vector text codec."""

from __future__ import annotations

import logging

import pytest

from riskrating.exceptions import FormatError
from riskrating.model import Vector
from riskrating.parsers import parse_vector, serialize_vector

from .conftest import LOW_VECTOR_TEXT, vector_text


def test_parse_vector_reads_all_sixteen_factors() -> None:
    vector = parse_vector(LOW_VECTOR_TEXT)

    assert vector.sl == 1
    assert vector.m == 1
    assert vector.s == 2
    assert vector.impact_values == (0.0,) * 8


def test_parse_vector_keys_are_case_insensitive() -> None:
    assert parse_vector(LOW_VECTOR_TEXT.upper()) == parse_vector(LOW_VECTOR_TEXT)


def test_parse_vector_accepts_text_without_parentheses() -> None:
    assert parse_vector(LOW_VECTOR_TEXT.strip("()")) == parse_vector(LOW_VECTOR_TEXT)


def test_parse_vector_accepts_fractional_values() -> None:
    vector = parse_vector(vector_text(4.5, 0.25))

    assert vector.sl == 4.5
    assert vector.pv == 0.25


def test_parse_vector_rejects_fifteen_segments() -> None:
    text = LOW_VECTOR_TEXT.replace("/pv:0", "")

    with pytest.raises(FormatError, match="exactly 16 segments"):
        parse_vector(text)


@pytest.mark.parametrize(
    "segment",
    [
        pytest.param("sl=1", id="missing-separator"),
        pytest.param(":1", id="empty-key"),
        pytest.param("sl:abc", id="non-numeric"),
        pytest.param("sl:10", id="above-range"),
        pytest.param("sl:-1", id="below-range"),
        pytest.param("sl:nan", id="not-finite"),
    ],
)
def test_parse_vector_rejects_bad_segment(segment: str) -> None:
    text = LOW_VECTOR_TEXT.replace("sl:1", segment)

    with pytest.raises(FormatError):
        parse_vector(text)


def test_parse_vector_ignores_unknown_key_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    text = LOW_VECTOR_TEXT.replace("pv:0", "xx:7")

    with caplog.at_level(logging.WARNING, logger="riskrating.parsers.vector"):
        vector = parse_vector(text)

    assert vector.pv == 0
    assert "xx" in caplog.text


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_vector("()")


def test_serialize_vector_uses_canonical_order_and_integers() -> None:
    text = serialize_vector(Vector(sl=1, m=1, s=2, pv=0.5))

    assert text == "(SL:1/M:1/O:0/S:2/ED:0/EE:0/A:0/ID:0/LC:0/LI:0/LAV:0/LAC:0/FD:0/RD:0/NC:0/PV:0.5)"


def test_serialize_vector_without_wrap() -> None:
    assert not serialize_vector(Vector(), wrap=False).startswith("(")


def test_serialized_vector_parses_back_to_same_value() -> None:
    vector = parse_vector(vector_text(3.5, 7))

    assert parse_vector(serialize_vector(vector)) == vector


def test_vector_from_mapping_defaults_missing_factors_to_zero() -> None:
    vector = Vector.from_mapping({"SL": 5, "pv": 2})

    assert vector.sl == 5
    assert vector.pv == 2
    assert vector.m == 0
