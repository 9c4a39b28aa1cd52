"""Shared pytest fixtures for vectors, bundles and settings files."""

from __future__ import annotations

from pathlib import Path

import pytest

from riskrating.model import Vector
from riskrating.parsers import parse_vector

DEFAULT_RANGES_TEXT: str = "LOW:0-3;MEDIUM:3-6;HIGH:6-9"
DEFAULT_MAPPING_TEXT: str = "NOTE,LOW,MEDIUM,LOW,MEDIUM,HIGH,MEDIUM,HIGH,CRITICAL"
LOW_VECTOR_TEXT: str = "(sl:1/m:1/o:0/s:2/ed:0/ee:0/a:0/id:0/lc:0/li:0/lav:0/lac:0/fd:0/rd:0/nc:0/pv:0)"


def vector_text(threat: float, impact: float) -> str:
    """Build vector text with every threat factor at *threat* and every impact factor at *impact*."""
    threat_keys = ("SL", "M", "O", "S", "ED", "EE", "A", "ID")
    impact_keys = ("LC", "LI", "LAV", "LAC", "FD", "RD", "NC", "PV")
    segments = [f"{key}:{threat:g}" for key in threat_keys] + [f"{key}:{impact:g}" for key in impact_keys]
    return "(" + "/".join(segments) + ")"


@pytest.fixture
def low_vector() -> Vector:
    """Vector whose likelihood is 0.5 and impact 0."""
    return parse_vector(LOW_VECTOR_TEXT)


@pytest.fixture
def write_settings(tmp_path: Path):
    """Write ``riskrating.yaml`` into tmp_path and return its path."""

    def _write(content: str, name: str = "riskrating.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
