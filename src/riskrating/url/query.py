"""Parse and build the ``likelihoodConfig``/``impactConfig``/``mapping``/``vector`` query string."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from urllib.parse import parse_qsl, quote, urlencode

from riskrating.constants.url import (
    IMPACT_CONFIG_PARAM,
    LIKELIHOOD_CONFIG_PARAM,
    MAPPING_PARAM,
    QUERY_SAFE_CHARS,
    REQUIRED_CUSTOM_PARAMS,
    VECTOR_PARAM,
)
from riskrating.model import ClassificationResult, RangeConfig, RiskProfile, Vector
from riskrating.parsers.mapping import serialize_mapping
from riskrating.parsers.ranges import serialize_range_config
from riskrating.parsers.vector import parse_vector, serialize_vector
from riskrating.scoring.resolver import missing_custom_parameters, resolve, select_profile

_KNOWN_PARAMS: frozenset[str] = frozenset((*REQUIRED_CUSTOM_PARAMS, VECTOR_PARAM))


@dataclass(frozen=True)
class QueryParameters:
    """The four protocol parameters; ``None`` when absent or blank."""

    likelihood_config: str | None = None
    impact_config: str | None = None
    mapping: str | None = None
    vector: str | None = None

    def missing_custom_parameters(self) -> tuple[str, ...]:
        return missing_custom_parameters(self.likelihood_config, self.impact_config, self.mapping)

    def has_custom_configuration(self) -> bool:
        """True when all three custom parameters are present."""
        return not self.missing_custom_parameters()

    def is_partial(self) -> bool:
        """True when some, but not all, custom parameters are present."""
        return 0 < len(self.missing_custom_parameters()) < len(REQUIRED_CUSTOM_PARAMS)


def parse_query(text: str) -> QueryParameters:
    """Extract protocol parameters from a query string or a full URL.

    A leading ``?`` and anything before it are ignored, as is a fragment. The
    first occurrence of a parameter wins and blank values count as absent.
    """
    query = text.strip()
    if "?" in query:
        query = query.split("?", 1)[1]
    query = query.split("#", 1)[0]

    values: dict[str, str] = {}
    for name, value in parse_qsl(query, keep_blank_values=True):
        if name in _KNOWN_PARAMS and name not in values and value.strip():
            values[name] = value.strip()

    return QueryParameters(
        likelihood_config=values.get(LIKELIHOOD_CONFIG_PARAM),
        impact_config=values.get(IMPACT_CONFIG_PARAM),
        mapping=values.get(MAPPING_PARAM),
        vector=values.get(VECTOR_PARAM),
    )


def resolve_query(
    query: str | QueryParameters,
    *,
    configuration: str | None = None,
    extra_configurations: Mapping[str, RangeConfig] | None = None,
) -> ClassificationResult:
    """Resolve the assessment a query string describes.

    Without a ``vector`` parameter every factor is 0. Errors propagate; falling
    back to a named configuration is the caller's decision.
    """
    params = parse_query(query) if isinstance(query, str) else query
    vector = parse_vector(params.vector) if params.vector else Vector()
    profile = select_profile(
        configuration=configuration,
        likelihood_config=params.likelihood_config,
        impact_config=params.impact_config,
        mapping=params.mapping,
        extra_configurations=extra_configurations,
    )
    return resolve(vector, profile)


def build_query_string(
    *,
    likelihood_config: str | None = None,
    impact_config: str | None = None,
    mapping: str | None = None,
    vector: Vector | str | None = None,
) -> str:
    """Build a query string with custom parameters first and the vector last."""
    pairs = [
        (name, value)
        for name, value in zip(REQUIRED_CUSTOM_PARAMS, (likelihood_config, impact_config, mapping))
        if value
    ]
    if vector is not None:
        pairs.append((VECTOR_PARAM, serialize_vector(vector) if isinstance(vector, Vector) else vector))
    return urlencode(pairs, safe=QUERY_SAFE_CHARS, quote_via=quote)


def profile_query_string(profile: RiskProfile, vector: Vector | None = None) -> str:
    """Query string for *profile*; named profiles contribute only the vector."""
    if not profile.custom:
        return build_query_string(vector=vector)
    return build_query_string(
        likelihood_config=serialize_range_config(profile.likelihood),
        impact_config=serialize_range_config(profile.impact),
        mapping=serialize_mapping(profile.mapping),
        vector=vector,
    )


def build_share_url(base_url: str, query: str) -> str:
    """Join *base_url* and *query*, replacing any query already on the base."""
    base = base_url.split("?", 1)[0]
    return f"{base}?{query}" if query else base
