"""Tests for the share-URL query string protocol."""

from __future__ import annotations

import pytest

from riskrating.exceptions import MissingParameterError
from riskrating.model import Vector
from riskrating.scoring import custom_profile, named_profile
from riskrating.url import (
    QueryParameters,
    build_query_string,
    build_share_url,
    parse_query,
    profile_query_string,
    resolve_query,
)

from .conftest import DEFAULT_MAPPING_TEXT, DEFAULT_RANGES_TEXT, LOW_VECTOR_TEXT

CUSTOM_QUERY: str = (
    "likelihoodConfig=LOW:0-3;MEDIUM:3-6;HIGH:6-9"
    "&impactConfig=LOW:0-3;MEDIUM:3-6;HIGH:6-9"
    "&mapping=NOTE,LOW,MEDIUM,LOW,MEDIUM,HIGH,MEDIUM,HIGH,CRITICAL"
)


def test_parse_query_reads_all_parameters() -> None:
    params = parse_query(f"{CUSTOM_QUERY}&vector={LOW_VECTOR_TEXT}")

    assert params.likelihood_config == DEFAULT_RANGES_TEXT
    assert params.impact_config == DEFAULT_RANGES_TEXT
    assert params.mapping == DEFAULT_MAPPING_TEXT
    assert params.vector == LOW_VECTOR_TEXT
    assert params.has_custom_configuration() is True


def test_parse_query_accepts_full_url_and_ignores_fragment() -> None:
    params = parse_query(f"https://example.test/calc?vector={LOW_VECTOR_TEXT}#results")

    assert params.vector == LOW_VECTOR_TEXT
    assert params.missing_custom_parameters() == ("likelihoodConfig", "impactConfig", "mapping")


def test_parse_query_decodes_percent_encoding() -> None:
    params = parse_query("likelihoodConfig=LOW%3A0-3%3BHIGH%3A3-9")

    assert params.likelihood_config == "LOW:0-3;HIGH:3-9"


def test_parse_query_first_occurrence_wins_and_blank_is_absent() -> None:
    params = parse_query("mapping=&mapping=A&impactConfig=X&impactConfig=Y&other=1")

    assert params.mapping == "A"
    assert params.impact_config == "X"
    assert params.likelihood_config is None


def test_partial_query_is_reported() -> None:
    params = parse_query("likelihoodConfig=LOW:0-9&impactConfig=LOW:0-9")

    assert params.is_partial() is True
    assert params.missing_custom_parameters() == ("mapping",)


def test_empty_query_is_not_partial() -> None:
    assert QueryParameters().is_partial() is False


def test_resolve_query_custom_mode() -> None:
    result = resolve_query(f"?{CUSTOM_QUERY}&vector={LOW_VECTOR_TEXT}")

    assert result.final_verdict == "NOTE"
    assert result.custom is True


def test_resolve_query_without_vector_uses_zero_vector() -> None:
    result = resolve_query("", configuration="Configuration 1")

    assert result.likelihood_score == 0
    assert result.final_verdict == "NOTE"
    assert result.profile_name == "Configuration 1"


def test_resolve_query_partial_raises() -> None:
    with pytest.raises(MissingParameterError):
        resolve_query("likelihoodConfig=LOW:0-9&impactConfig=LOW:0-9")


def test_build_query_string_orders_custom_parameters_before_vector() -> None:
    query = build_query_string(
        likelihood_config=DEFAULT_RANGES_TEXT,
        impact_config=DEFAULT_RANGES_TEXT,
        mapping=DEFAULT_MAPPING_TEXT,
        vector=Vector(sl=1),
    )

    assert query.startswith("likelihoodConfig=LOW:0-3;MEDIUM:3-6;HIGH:6-9&impactConfig=")
    assert query.endswith("&vector=(SL:1/M:0/O:0/S:0/ED:0/EE:0/A:0/ID:0/LC:0/LI:0/LAV:0/LAC:0/FD:0/RD:0/NC:0/PV:0)")


def test_build_query_string_escapes_unsafe_characters() -> None:
    query = build_query_string(likelihood_config="LOW LEVEL:0-9", impact_config="A&B:0-9", mapping="X")

    assert "LOW%20LEVEL:0-9" in query
    assert "A%26B:0-9" in query


def test_built_query_parses_back() -> None:
    profile = custom_profile(DEFAULT_RANGES_TEXT, "LOW:0-4.5;HIGH:4.5-9", "a,b,c,d,e,f")

    params = parse_query(profile_query_string(profile, Vector(pv=2)))

    assert params.likelihood_config == DEFAULT_RANGES_TEXT
    assert params.impact_config == "LOW:0-4.5;HIGH:4.5-9"
    assert params.mapping == "A,B,C,D,E,F"
    assert params.vector is not None and "PV:2" in params.vector


def test_named_profile_query_carries_only_vector() -> None:
    assert profile_query_string(named_profile(), None) == ""
    assert profile_query_string(named_profile(), Vector()).startswith("vector=")


@pytest.mark.parametrize(
    ("base", "query", "expected"),
    [
        ("https://example.test/", "vector=x", "https://example.test/?vector=x"),
        ("https://example.test/?old=1", "vector=x", "https://example.test/?vector=x"),
        ("https://example.test/?old=1", "", "https://example.test/"),
    ],
)
def test_build_share_url(base: str, query: str, expected: str) -> None:
    assert build_share_url(base, query) == expected


def test_parse_query_decodes_plus_as_space() -> None:
    assert parse_query("mapping=very+high").mapping == "very high"
