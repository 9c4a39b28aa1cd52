"""Process-wide built-in configurations, created once at import."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from riskrating.constants.configurations import BUILTIN_CONFIGURATIONS, DEFAULT_LEVELS, DEFAULT_MAPPING
from riskrating.model import MappingTable, RangeConfig
from riskrating.parsers.mapping import mapping_from_entries

BUILTIN_RANGE_CONFIGS: Mapping[str, RangeConfig] = MappingProxyType(
    {name: RangeConfig.from_bounds(bounds) for name, bounds in BUILTIN_CONFIGURATIONS.items()}
)

DEFAULT_MAPPING_TABLE: MappingTable = mapping_from_entries(DEFAULT_LEVELS, DEFAULT_LEVELS, DEFAULT_MAPPING)
