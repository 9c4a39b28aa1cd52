"""Dict-backed mapping store."""

from __future__ import annotations

from riskrating.model import StoredMapping
from riskrating.store.base import normalize_mapping_name


class InMemoryMappingStore:
    """Mapping store that lives for the lifetime of the object; keeps insertion order."""

    def __init__(self, entries: dict[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {}
        for name, value in (entries or {}).items():
            self.set(name, value)

    def set(self, name: str, value: str) -> None:
        self._entries[normalize_mapping_name(name)] = value

    def get(self, name: str) -> str | None:
        return self._entries.get(name.strip())

    def delete(self, name: str) -> None:
        self._entries.pop(name.strip(), None)

    def list(self) -> list[StoredMapping]:
        return [StoredMapping(name=name, value=value) for name, value in self._entries.items()]
