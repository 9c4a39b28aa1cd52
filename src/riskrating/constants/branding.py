"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "riskrating"
ASCII_LOGO_LINES: tuple[str, ...] = (
    ">_ RISKRATING",
    "     // OWASP risk rating calculator",
)
RESULT_TITLE: str = "Risk assessment"
CLI_DESCRIPTION: str = "\n".join((*ASCII_LOGO_LINES, "", "Likelihood x impact risk rating from a 16-factor vector"))
