"""Stable validation error codes and allowed-key sets for settings and custom bundles."""

from __future__ import annotations

CFG001: str = "CFG001"  # settings file not found (explicit --settings)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown top-level key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # invalid configuration levels
CFG007: str = "CFG007"  # configuration ranges not continuous
CFG008: str = "CFG008"  # configuration shadows a built-in name

PRM001: str = "PRM001"  # custom parameter missing
RNG001: str = "RNG001"  # malformed range text
RNG002: str = "RNG002"  # ranges do not start at 0
RNG003: str = "RNG003"  # ranges do not end at 9
RNG004: str = "RNG004"  # gap between ranges
RNG005: str = "RNG005"  # too many levels
MAP001: str = "MAP001"  # mapping entry count mismatch
MAP002: str = "MAP002"  # empty mapping entry
VEC001: str = "VEC001"  # malformed vector text

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset(
    {
        "base_url",
        "configurations",
        "default_configuration",
        "store_path",
    }
)

STRING_CONFIG_KEYS: frozenset[str] = frozenset({"base_url", "default_configuration", "store_path"})
