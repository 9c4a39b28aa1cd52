"""Core data models for riskrating."""

from .entities import (
    ClassificationResult,
    LevelRange,
    MappingTable,
    RangeConfig,
    RiskProfile,
    StoredMapping,
    Vector,
    mapping_key,
)

__all__ = [
    "ClassificationResult",
    "LevelRange",
    "MappingTable",
    "RangeConfig",
    "RiskProfile",
    "StoredMapping",
    "Vector",
    "mapping_key",
]
