"""Settings file names and defaults."""

from __future__ import annotations

from riskrating.constants.url import DEFAULT_BASE_URL

CONFIG_FILENAME: str = "riskrating.yaml"
DEFAULT_STORE_PATH: str = ".riskrating/mappings.json"
DEFAULT_SETTINGS_BASE_URL: str = DEFAULT_BASE_URL

STORE_TEMP_PREFIX: str = ".tmp-mappings-"
STORE_TEMP_SUFFIX: str = ".json"
