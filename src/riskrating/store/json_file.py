"""Mapping store persisted as a single JSON object on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from riskrating.constants.config import STORE_TEMP_PREFIX, STORE_TEMP_SUFFIX
from riskrating.exceptions import ConfigError
from riskrating.io.json_io import load_json_object, write_json_atomic
from riskrating.model import StoredMapping
from riskrating.store.base import normalize_mapping_name

logger = logging.getLogger(__name__)


class JsonFileMappingStore:
    """Mapping store backed by ``{"name": "query string", ...}`` in one file.

    Every operation reads the file, so concurrent writers last-write-win. A
    missing file is an empty store.
    """

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def set(self, name: str, value: str) -> None:
        entries = self._load()
        entries[normalize_mapping_name(name)] = value
        self._save(entries)

    def get(self, name: str) -> str | None:
        return self._load().get(name.strip())

    def delete(self, name: str) -> None:
        entries = self._load()
        if entries.pop(name.strip(), None) is None:
            logger.debug("No stored mapping named %r in %s", name, self._path)
            return
        self._save(entries)

    def list(self) -> list[StoredMapping]:
        return [StoredMapping(name=name, value=value) for name, value in sorted(self._load().items())]

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        payload = load_json_object(self._path)
        if not all(isinstance(value, str) for value in payload.values()):
            raise ConfigError(f"Mapping store {self._path} must map names to strings")
        return {name: str(value) for name, value in payload.items()}

    def _save(self, entries: dict[str, str]) -> None:
        write_json_atomic(
            path=self._path,
            payload=entries,
            temp_prefix=STORE_TEMP_PREFIX,
            temp_suffix=STORE_TEMP_SUFFIX,
        )
