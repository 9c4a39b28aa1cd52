"""Constants for terminal rendering of classification results."""

from __future__ import annotations

SCORE_DECIMALS: int = 3

VALID_OUTPUT_FORMATS: frozenset[str] = frozenset({"text", "json"})
DEFAULT_OUTPUT_FORMAT: str = "text"

ANSI_RESET: str = "\033[0m"
ANSI_BOLD: str = "\033[1m"
ANSI_MAGENTA: str = "\033[35m"
ANSI_RED: str = "\033[31m"
ANSI_ORANGE: str = "\033[33m"
ANSI_YELLOW: str = "\033[93m"
ANSI_GREEN: str = "\033[32m"

LEVEL_COLORS: dict[str, str] = {
    "CRITICAL": ANSI_MAGENTA,
    "HIGH": ANSI_RED,
    "MEDIUM": ANSI_ORANGE,
    "LOW": ANSI_YELLOW,
    "NOTE": ANSI_GREEN,
}
