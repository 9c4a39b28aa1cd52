"""Settings loading and normalization."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from riskrating.config.model import RiskRatingConfig
from riskrating.config.validator import configuration_problems
from riskrating.constants.config import CONFIG_FILENAME, DEFAULT_SETTINGS_BASE_URL, DEFAULT_STORE_PATH
from riskrating.constants.configurations import BUILTIN_CONFIGURATIONS, DEFAULT_CONFIGURATION_NAME, DEFAULT_LEVELS
from riskrating.constants.validation import ALLOWED_CONFIG_KEYS
from riskrating.exceptions import ConfigError
from riskrating.model import RangeConfig

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> RiskRatingConfig:
    """Load settings from ``riskrating.yaml`` under *root* or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Settings file not found: {path}")
        return RiskRatingConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML settings file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown settings key(s): {', '.join(unknown)}")

    configurations = _build_configurations(raw.get("configurations", {}))
    known_names = (*BUILTIN_CONFIGURATIONS, *(name for name, _ in configurations))

    default_configuration = _ensure_string(
        raw.get("default_configuration", DEFAULT_CONFIGURATION_NAME), "default_configuration"
    )
    if default_configuration not in known_names:
        raise ConfigError(f"default_configuration must be one of {list(known_names)}, got {default_configuration!r}")

    logger.debug("Loaded settings from %s (%d extra configurations)", path, len(configurations))
    return RiskRatingConfig(
        default_configuration=default_configuration,
        base_url=_ensure_string(raw.get("base_url", DEFAULT_SETTINGS_BASE_URL), "base_url"),
        store_path=_ensure_string(raw.get("store_path", DEFAULT_STORE_PATH), "store_path"),
        configurations=configurations,
    )


def _ensure_string(value: Any, key_name: str) -> str:
    """Return a stripped non-empty string, raising ConfigError otherwise."""
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key_name} must be a non-empty string")
    return value.strip()


def _build_configurations(raw: Any) -> tuple[tuple[str, RangeConfig], ...]:
    """Build settings-defined configurations, raising on the first problem."""
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        raise ConfigError("configurations must be a mapping of name to levels")

    built: list[tuple[str, RangeConfig]] = []
    for name_raw, levels_raw in raw.items():
        name = str(name_raw)
        problems = configuration_problems(name, levels_raw)
        if problems:
            _, message = problems[0]
            raise ConfigError(f"configurations.{name}: {message}")
        levels = {str(label).strip().upper(): bounds for label, bounds in levels_raw.items()}
        built.append(
            (name, RangeConfig.from_bounds((label, levels[label][0], levels[label][1]) for label in DEFAULT_LEVELS))
        )
    return tuple(built)
