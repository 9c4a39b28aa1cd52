"""Immutable value objects passed between parsers, scoring and reporting."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from functools import cached_property

from riskrating.constants.factors import IMPACT_FACTORS, THREAT_AGENT_FACTORS, VECTOR_KEYS
from riskrating.constants.levels import ERROR_SENTINEL, MAPPING_KEY_SEPARATOR
from riskrating.types import JsonObject


@dataclass(frozen=True)
class Vector:
    """The sixteen OWASP factor values; unspecified factors are 0.

    Bounds are only enforced when a vector is parsed from text.
    """

    sl: float = 0.0
    m: float = 0.0
    o: float = 0.0
    s: float = 0.0
    ed: float = 0.0
    ee: float = 0.0
    a: float = 0.0
    id: float = 0.0
    lc: float = 0.0
    li: float = 0.0
    lav: float = 0.0
    lac: float = 0.0
    fd: float = 0.0
    rd: float = 0.0
    nc: float = 0.0
    pv: float = 0.0

    @classmethod
    def from_mapping(cls, values: Mapping[str, float]) -> Vector:
        """Build a vector from a key/value mapping, keys case-insensitive."""
        return cls(**{key.lower(): float(value) for key, value in values.items()})

    def values_for(self, keys: Iterable[str]) -> tuple[float, ...]:
        return tuple(getattr(self, key) for key in keys)

    @property
    def threat_agent_values(self) -> tuple[float, ...]:
        return self.values_for(THREAT_AGENT_FACTORS)

    @property
    def impact_values(self) -> tuple[float, ...]:
        return self.values_for(IMPACT_FACTORS)

    def as_dict(self) -> dict[str, float]:
        """Return factor values keyed in canonical order."""
        return {key: getattr(self, key) for key in VECTOR_KEYS}


@dataclass(frozen=True)
class LevelRange:
    """A named threshold range ``[minimum, maximum)`` on the 0-9 axis."""

    label: str
    minimum: float
    maximum: float


@dataclass(frozen=True)
class RangeConfig:
    """Ordered set of level ranges for one axis."""

    ranges: tuple[LevelRange, ...]

    @classmethod
    def from_bounds(cls, bounds: Iterable[tuple[str, float, float]]) -> RangeConfig:
        return cls(tuple(LevelRange(label.upper(), float(low), float(high)) for label, low, high in bounds))

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(item.label for item in self.ranges)

    def sorted_ranges(self) -> tuple[LevelRange, ...]:
        """Ranges by ascending minimum; ties keep their stored order."""
        return tuple(sorted(self.ranges, key=lambda item: item.minimum))

    def get(self, label: str) -> LevelRange | None:
        wanted = label.upper()
        for item in self.ranges:
            if item.label == wanted:
                return item
        return None


def mapping_key(likelihood_level: str, impact_level: str) -> str:
    """Build the ``LIK-IMP`` key addressing one mapping entry."""
    return f"{likelihood_level}{MAPPING_KEY_SEPARATOR}{impact_level}".upper()


@dataclass(frozen=True)
class MappingTable:
    """Likelihood x impact verdict matrix stored row-major."""

    likelihood_levels: tuple[str, ...]
    impact_levels: tuple[str, ...]
    verdicts: tuple[str, ...]

    @cached_property
    def entries(self) -> dict[str, str]:
        """Verdicts keyed by ``LIK-IMP``."""
        width = len(self.impact_levels)
        return {
            mapping_key(likelihood, impact): self.verdicts[row * width + column]
            for row, likelihood in enumerate(self.likelihood_levels)
            for column, impact in enumerate(self.impact_levels)
        }

    def lookup(self, likelihood_level: str, impact_level: str) -> str:
        """Return the verdict for a level pair, or the ``ERROR`` sentinel."""
        if likelihood_level == ERROR_SENTINEL or impact_level == ERROR_SENTINEL:
            return ERROR_SENTINEL
        return self.entries.get(mapping_key(likelihood_level, impact_level), ERROR_SENTINEL)


@dataclass(frozen=True)
class RiskProfile:
    """Threshold ranges for both axes plus the mapping that combines them."""

    name: str
    likelihood: RangeConfig
    impact: RangeConfig
    mapping: MappingTable
    custom: bool = False


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of one risk calculation."""

    likelihood_score: float
    impact_score: float
    likelihood_level: str
    impact_level: str
    final_verdict: str
    profile_name: str = ""
    custom: bool = False

    @property
    def resolved(self) -> bool:
        """False when the verdict is the ``ERROR`` sentinel."""
        return self.final_verdict != ERROR_SENTINEL

    def to_dict(self) -> JsonObject:
        return {
            "likelihood_score": self.likelihood_score,
            "impact_score": self.impact_score,
            "likelihood_level": self.likelihood_level,
            "impact_level": self.impact_level,
            "final_verdict": self.final_verdict,
            "profile": self.profile_name,
            "custom": self.custom,
        }


@dataclass(frozen=True)
class StoredMapping:
    """One entry of the named-mapping store."""

    name: str
    value: str
