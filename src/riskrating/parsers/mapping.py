"""Codec for the comma-separated, row-major mapping table format."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from riskrating.constants.levels import MAPPING_SEPARATOR
from riskrating.exceptions import FormatError
from riskrating.model import MappingTable, mapping_key


def parse_mapping(likelihood_levels: Sequence[str], impact_levels: Sequence[str], text: str | None) -> MappingTable:
    """Parse mapping text against levels given in ascending-minimum order.

    Entries are consumed likelihood-major: the first ``len(impact_levels)``
    entries form the row of the lowest likelihood level.
    """
    if text is None or not text.strip():
        raise FormatError("No mapping string provided")

    entries = [entry.strip() for entry in text.split(MAPPING_SEPARATOR)]
    expected = len(likelihood_levels) * len(impact_levels)
    if len(entries) != expected:
        raise FormatError(f"Need exactly {expected} mapping entries, but got {len(entries)}")
    for position, entry in enumerate(entries, start=1):
        if not entry:
            raise FormatError(f"Mapping entry {position} is empty")

    return MappingTable(
        likelihood_levels=tuple(level.upper() for level in likelihood_levels),
        impact_levels=tuple(level.upper() for level in impact_levels),
        verdicts=tuple(entry.upper() for entry in entries),
    )


def mapping_from_entries(
    likelihood_levels: Sequence[str],
    impact_levels: Sequence[str],
    entries: Mapping[str, str],
) -> MappingTable:
    """Build a table from ``LIK-IMP`` keyed entries covering every level pair."""
    verdicts: list[str] = []
    for likelihood in likelihood_levels:
        for impact in impact_levels:
            key = mapping_key(likelihood, impact)
            if key not in entries:
                raise FormatError(f"Mapping has no entry for {key}")
            verdicts.append(entries[key].upper())
    return MappingTable(
        likelihood_levels=tuple(level.upper() for level in likelihood_levels),
        impact_levels=tuple(level.upper() for level in impact_levels),
        verdicts=tuple(verdicts),
    )


def serialize_mapping(table: MappingTable) -> str:
    return MAPPING_SEPARATOR.join(table.verdicts)
