"""Settings file validation."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from riskrating.constants.config import CONFIG_FILENAME
from riskrating.constants.configurations import BUILTIN_CONFIGURATIONS, DEFAULT_LEVELS
from riskrating.constants.levels import AXIS_MAX, AXIS_MIN
from riskrating.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    CFG008,
    STRING_CONFIG_KEYS,
)
from riskrating.exceptions.validation import ValidationError, sort_errors
from riskrating.model import RangeConfig
from riskrating.parsers.ranges import coverage_problems


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a riskrating.yaml file and return all validation errors.

    This is the collect-all counterpart of ``load_config``: it never raises.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(code=CFG001, source=path_str, field="", message=f"settings file not found: {path}")
            )
        return errors

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        errors.append(ValidationError(code=CFG002, source=path_str, field="", message=f"invalid YAML: {exc}"))
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                source=path_str,
                field="",
                message=f"settings must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(str(key) for key in raw):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    source=path_str,
                    field=key,
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(key, ALLOWED_CONFIG_KEYS),
                )
            )

    for key in sorted(STRING_CONFIG_KEYS & set(raw)):
        value = raw[key]
        if not isinstance(value, str) or not value.strip():
            errors.append(
                ValidationError(
                    code=CFG005,
                    source=path_str,
                    field=key,
                    message=f"`{key}` must be a non-empty string",
                    hint=f"got: {value!r}",
                )
            )

    configurations = raw.get("configurations")
    names: list[str] = list(BUILTIN_CONFIGURATIONS)
    if configurations is not None:
        if not isinstance(configurations, dict):
            errors.append(
                ValidationError(
                    code=CFG005,
                    source=path_str,
                    field="configurations",
                    message="`configurations` must be a mapping of name to levels",
                )
            )
        else:
            for name, levels in configurations.items():
                names.append(str(name))
                for code, message in configuration_problems(str(name), levels):
                    errors.append(
                        ValidationError(code=code, source=path_str, field=f"configurations.{name}", message=message)
                    )

    default = raw.get("default_configuration")
    if isinstance(default, str) and default.strip() and default not in names:
        errors.append(
            ValidationError(
                code=CFG006,
                source=path_str,
                field="default_configuration",
                message=f"unknown configuration {default!r}",
                hint=f"expected one of: {', '.join(names)}",
            )
        )

    return sort_errors(errors)


def configuration_problems(name: str, raw: Any) -> list[tuple[str, str]]:
    """Return ``(code, message)`` pairs for a settings-defined configuration.

    A valid configuration defines exactly LOW, MEDIUM and HIGH as ``[min, max]``
    pairs covering 0-9 continuously, so it can use the default mapping.
    """
    if name in BUILTIN_CONFIGURATIONS:
        return [(CFG008, f"`{name}` shadows a built-in configuration")]
    if not isinstance(raw, dict):
        return [(CFG005, "must be a mapping of level to [min, max]")]

    levels = {str(label).strip().upper(): bounds for label, bounds in raw.items()}
    if set(levels) != set(DEFAULT_LEVELS) or len(levels) != len(raw):
        return [(CFG006, f"must define exactly the levels {', '.join(DEFAULT_LEVELS)}")]

    problems: list[tuple[str, str]] = []
    for label in DEFAULT_LEVELS:
        bounds = levels[label]
        if not _is_bounds_pair(bounds):
            problems.append((CFG005, f"{label} must be a [min, max] pair of numbers"))
        elif not all(AXIS_MIN <= bound <= AXIS_MAX for bound in bounds):
            problems.append((CFG005, f"{label} bounds must lie within 0-9"))
        elif bounds[0] > bounds[1]:
            problems.append((CFG005, f"{label} minimum exceeds maximum"))
    if problems:
        return problems

    config = RangeConfig.from_bounds((label, levels[label][0], levels[label][1]) for label in DEFAULT_LEVELS)
    return [(CFG007, f"ranges are not continuous: {problem}") for problem in coverage_problems(config)]


def _is_bounds_pair(value: Any) -> bool:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return False
    return all(isinstance(item, (int, float)) and not isinstance(item, bool) for item in value)


def _suggest_key(key: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean' hint if a close match exists."""
    matches = difflib.get_close_matches(key, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
