"""Settings loading and validation for riskrating.

This package facade re-exports the public names so callers can use
``from riskrating.config import ...``.
"""

from __future__ import annotations

from riskrating.config.loader import load_config
from riskrating.config.model import RiskRatingConfig
from riskrating.config.validator import configuration_problems, validate_config_file

__all__ = [
    "RiskRatingConfig",
    "configuration_problems",
    "load_config",
    "validate_config_file",
]
