"""Query-string parameter names and URL defaults."""

from __future__ import annotations

LIKELIHOOD_CONFIG_PARAM: str = "likelihoodConfig"
IMPACT_CONFIG_PARAM: str = "impactConfig"
MAPPING_PARAM: str = "mapping"
VECTOR_PARAM: str = "vector"

REQUIRED_CUSTOM_PARAMS: tuple[str, ...] = (LIKELIHOOD_CONFIG_PARAM, IMPACT_CONFIG_PARAM, MAPPING_PARAM)

# Protocol punctuation that stays literal when a query string is built.
QUERY_SAFE_CHARS: str = ":;,()/-."

DEFAULT_BASE_URL: str = "https://felmade.github.io/OWASP-Calculator/"
