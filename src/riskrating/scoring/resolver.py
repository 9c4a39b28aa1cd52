"""Risk resolution: choose a profile, score, classify and map to a verdict.

Two modes exist. Named mode uses one of the built-in threshold configurations
(or one defined in ``riskrating.yaml``) for both axes together with the default
OWASP 3x3 mapping. Custom mode takes likelihood ranges, impact ranges and a
mapping as text; all three are required, and a partial set is an error rather
than something to compute with.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from riskrating.constants.configurations import CUSTOM_PROFILE_NAME, DEFAULT_CONFIGURATION_NAME
from riskrating.constants.levels import ERROR_SENTINEL
from riskrating.constants.url import REQUIRED_CUSTOM_PARAMS
from riskrating.exceptions import MissingParameterError
from riskrating.model import ClassificationResult, RangeConfig, RiskProfile, Vector
from riskrating.parsers.mapping import parse_mapping
from riskrating.parsers.ranges import parse_range_config, require_continuous, sorted_levels
from riskrating.scoring.classifier import classify
from riskrating.scoring.engine import impact_score, likelihood_score
from riskrating.scoring.presets import BUILTIN_RANGE_CONFIGS, DEFAULT_MAPPING_TABLE

logger = logging.getLogger(__name__)


def named_profile(
    name: str | None = None,
    *,
    extra_configurations: Mapping[str, RangeConfig] | None = None,
) -> RiskProfile:
    """Profile for a named configuration; unknown names use the default."""
    configurations = {**BUILTIN_RANGE_CONFIGS, **(extra_configurations or {})}
    selected = name if name in configurations else DEFAULT_CONFIGURATION_NAME
    if name is not None and selected != name:
        logger.debug("Unknown configuration %r, using %r", name, selected)
    ranges = configurations[selected]
    return RiskProfile(name=selected, likelihood=ranges, impact=ranges, mapping=DEFAULT_MAPPING_TABLE)


def missing_custom_parameters(
    likelihood_config: str | None,
    impact_config: str | None,
    mapping: str | None,
) -> tuple[str, ...]:
    """Names of the custom parameters that are absent or blank, in protocol order."""
    supplied = (likelihood_config, impact_config, mapping)
    return tuple(name for name, value in zip(REQUIRED_CUSTOM_PARAMS, supplied) if not value or not value.strip())


def custom_profile(
    likelihood_config: str | None,
    impact_config: str | None,
    mapping: str | None,
    *,
    name: str = CUSTOM_PROFILE_NAME,
) -> RiskProfile:
    """Build a profile from the three custom text parameters.

    Raises MissingParameterError, FormatError or RangeCoverageError; nothing is
    partially applied.
    """
    missing = missing_custom_parameters(likelihood_config, impact_config, mapping)
    if missing:
        raise MissingParameterError(missing)
    assert likelihood_config is not None and impact_config is not None

    likelihood = require_continuous(parse_range_config(likelihood_config), "likelihood")
    impact = require_continuous(parse_range_config(impact_config), "impact")
    table = parse_mapping(sorted_levels(likelihood), sorted_levels(impact), mapping)
    return RiskProfile(name=name, likelihood=likelihood, impact=impact, mapping=table, custom=True)


def select_profile(
    *,
    configuration: str | None = None,
    likelihood_config: str | None = None,
    impact_config: str | None = None,
    mapping: str | None = None,
    extra_configurations: Mapping[str, RangeConfig] | None = None,
) -> RiskProfile:
    """Dispatch on mode: no custom parameters means named mode."""
    missing = missing_custom_parameters(likelihood_config, impact_config, mapping)
    if len(missing) == len(REQUIRED_CUSTOM_PARAMS):
        return named_profile(configuration, extra_configurations=extra_configurations)
    return custom_profile(likelihood_config, impact_config, mapping)


def resolve(vector: Vector, profile: RiskProfile) -> ClassificationResult:
    """Score, classify and map *vector* under *profile*.

    An unresolvable pair yields the ``ERROR`` sentinel as the verdict instead
    of raising.
    """
    l_score = likelihood_score(vector)
    i_score = impact_score(vector)
    l_class = classify(l_score, profile.likelihood)
    i_class = classify(i_score, profile.impact)
    verdict = profile.mapping.lookup(l_class, i_class)
    if verdict == ERROR_SENTINEL:
        logger.warning("No verdict for likelihood %s / impact %s under %r", l_class, i_class, profile.name)

    return ClassificationResult(
        likelihood_score=l_score,
        impact_score=i_score,
        likelihood_level=l_class,
        impact_level=i_class,
        final_verdict=verdict,
        profile_name=profile.name,
        custom=profile.custom,
    )


def calculate(
    vector: Vector,
    *,
    configuration: str | None = None,
    likelihood_config: str | None = None,
    impact_config: str | None = None,
    mapping: str | None = None,
    extra_configurations: Mapping[str, RangeConfig] | None = None,
) -> ClassificationResult:
    """Single entry point: select the profile for the given inputs and resolve."""
    profile = select_profile(
        configuration=configuration,
        likelihood_config=likelihood_config,
        impact_config=impact_config,
        mapping=mapping,
        extra_configurations=extra_configurations,
    )
    return resolve(vector, profile)
