"""Built-in threshold configurations and the default OWASP mapping."""

from __future__ import annotations

DEFAULT_CONFIGURATION_NAME: str = "Default Configuration"

DEFAULT_LEVELS: tuple[str, ...] = ("LOW", "MEDIUM", "HIGH")

BUILTIN_CONFIGURATIONS: dict[str, tuple[tuple[str, float, float], ...]] = {
    DEFAULT_CONFIGURATION_NAME: (("LOW", 0, 3), ("MEDIUM", 3, 6), ("HIGH", 6, 9)),
    "Configuration 1": (("LOW", 0, 5), ("MEDIUM", 5, 6), ("HIGH", 6, 9)),
    "Configuration 2": (("LOW", 0, 7.5), ("MEDIUM", 7.5, 8), ("HIGH", 8, 9)),
    "Configuration 3": (("LOW", 0, 6.5), ("MEDIUM", 6.5, 7), ("HIGH", 7, 9)),
}

DEFAULT_MAPPING: dict[str, str] = {
    "LOW-LOW": "NOTE",
    "LOW-MEDIUM": "LOW",
    "LOW-HIGH": "MEDIUM",
    "MEDIUM-LOW": "LOW",
    "MEDIUM-MEDIUM": "MEDIUM",
    "MEDIUM-HIGH": "HIGH",
    "HIGH-LOW": "MEDIUM",
    "HIGH-MEDIUM": "HIGH",
    "HIGH-HIGH": "CRITICAL",
}

CUSTOM_PROFILE_NAME: str = "URL Configuration"
