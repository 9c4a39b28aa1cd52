"""Constants for the 16-factor OWASP vector and its text form."""

from __future__ import annotations

THREAT_AGENT_FACTORS: tuple[str, ...] = ("sl", "m", "o", "s", "ed", "ee", "a", "id")
IMPACT_FACTORS: tuple[str, ...] = ("lc", "li", "lav", "lac", "fd", "rd", "nc", "pv")
VECTOR_KEYS: tuple[str, ...] = THREAT_AGENT_FACTORS + IMPACT_FACTORS
VECTOR_KEY_COUNT: int = len(VECTOR_KEYS)

FACTOR_MIN: float = 0.0
FACTOR_MAX: float = 9.0

FACTOR_LABELS: dict[str, str] = {
    "sl": "Skills required",
    "m": "Motive",
    "o": "Opportunity",
    "s": "Population Size",
    "ed": "Ease of Discovery",
    "ee": "Ease of Exploit",
    "a": "Awareness",
    "id": "Intrusion Detection",
    "lc": "Loss of confidentiality",
    "li": "Loss of Integrity",
    "lav": "Loss of Availability",
    "lac": "Loss of Accountability",
    "fd": "Financial damage",
    "rd": "Reputation damage",
    "nc": "Non-Compliance",
    "pv": "Privacy violation",
}

VECTOR_OPEN: str = "("
VECTOR_CLOSE: str = ")"
VECTOR_SEGMENT_SEPARATOR: str = "/"
VECTOR_VALUE_SEPARATOR: str = ":"

# Used when the caller's vector text cannot be parsed.
DEFAULT_VECTOR_TEXT: str = "(SL:1/M:1/O:0/S:2/ED:0/EE:0/A:0/ID:0/LC:0/LI:0/LAV:0/LAC:0/FD:0/RD:0/NC:0/PV:0)"
