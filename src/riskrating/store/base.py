"""Interface for storing named configuration bundles.

Values are opaque strings, normally the query string of a custom
configuration. Scoring never depends on a store; callers inject one.
"""

from __future__ import annotations

from typing import Protocol

from riskrating.exceptions import ConfigError
from riskrating.model import StoredMapping


class MappingStore(Protocol):
    """Key-value store of named mappings."""

    def set(self, name: str, value: str) -> None: ...

    def get(self, name: str) -> str | None: ...

    def delete(self, name: str) -> None: ...

    def list(self) -> list[StoredMapping]: ...


def normalize_mapping_name(name: str) -> str:
    """Strip surrounding whitespace; empty names are rejected."""
    normalized = name.strip()
    if not normalized:
        raise ConfigError("Mapping name must not be empty")
    return normalized


def mapping_name_exists(store: MappingStore, name: str) -> bool:
    return store.get(name) is not None
