"""Reduction of a factor vector to likelihood and impact scores."""

from __future__ import annotations

from riskrating.constants.factors import THREAT_AGENT_FACTORS
from riskrating.model import Vector


def likelihood_score(vector: Vector) -> float:
    """Mean of the eight threat-agent factors.

    The divisor is always eight: a factor left at its default contributes 0
    rather than being excluded.
    """
    return sum(vector.threat_agent_values) / len(THREAT_AGENT_FACTORS)


def impact_score(vector: Vector) -> float:
    """Maximum of the eight impact factors."""
    return max(vector.impact_values)
