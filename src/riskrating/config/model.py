"""Settings data model."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from riskrating.constants.config import DEFAULT_SETTINGS_BASE_URL, DEFAULT_STORE_PATH
from riskrating.constants.configurations import BUILTIN_CONFIGURATIONS, DEFAULT_CONFIGURATION_NAME
from riskrating.model import RangeConfig


@dataclass(frozen=True)
class RiskRatingConfig:
    """Resolved settings."""

    default_configuration: str = DEFAULT_CONFIGURATION_NAME
    base_url: str = DEFAULT_SETTINGS_BASE_URL
    store_path: str = DEFAULT_STORE_PATH
    configurations: tuple[tuple[str, RangeConfig], ...] = ()

    @property
    def extra_configurations(self) -> dict[str, RangeConfig]:
        """Named configurations defined in the settings file."""
        return dict(self.configurations)

    @property
    def configuration_names(self) -> tuple[str, ...]:
        """Built-in names followed by settings-defined names."""
        return (*BUILTIN_CONFIGURATIONS, *(name for name, _ in self.configurations))

    def resolve_store_path(self, root: Path) -> Path:
        path = Path(self.store_path).expanduser()
        return path if path.is_absolute() else (root / path)
