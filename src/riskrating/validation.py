"""Collect-all validation of custom configuration bundles and vector text.

Unlike the parsers, these functions never raise: every problem is returned as
a :class:`ValidationError` so an interactive caller can report them together.
"""

from __future__ import annotations

from riskrating.constants.levels import MAPPING_SEPARATOR
from riskrating.constants.url import IMPACT_CONFIG_PARAM, LIKELIHOOD_CONFIG_PARAM, MAPPING_PARAM, VECTOR_PARAM
from riskrating.constants.validation import (
    MAP001,
    MAP002,
    PRM001,
    RNG001,
    RNG002,
    RNG003,
    RNG004,
    RNG005,
    VEC001,
)
from riskrating.exceptions import FormatError
from riskrating.exceptions.validation import ValidationError, sort_errors
from riskrating.model import RangeConfig
from riskrating.parsers.ranges import coverage_gaps, ends_at_axis_max, parse_range_config, starts_at_axis_min
from riskrating.parsers.vector import parse_vector
from riskrating.scoring.resolver import missing_custom_parameters

QUERY_SOURCE: str = "query"
RANGE_FORMAT_HINT: str = "use format 'Label:min-max' (e.g. 'LOW:0-1')"


def validate_custom_parameters(
    likelihood_config: str | None,
    impact_config: str | None,
    mapping: str | None,
    *,
    max_levels: int | None = None,
) -> list[ValidationError]:
    """Validate a custom bundle and return all errors in deterministic order.

    Returns an empty list when the bundle would build a profile.
    """
    errors: list[ValidationError] = [
        ValidationError(code=PRM001, source=QUERY_SOURCE, field=name, message="parameter is missing")
        for name in missing_custom_parameters(likelihood_config, impact_config, mapping)
    ]

    level_counts: dict[str, int] = {}
    for param, axis, text in (
        (LIKELIHOOD_CONFIG_PARAM, "Likelihood", likelihood_config),
        (IMPACT_CONFIG_PARAM, "Impact", impact_config),
    ):
        if not text or not text.strip():
            continue
        try:
            config = parse_range_config(text)
        except FormatError as exc:
            errors.append(
                ValidationError(code=RNG001, source=QUERY_SOURCE, field=param, message=str(exc), hint=RANGE_FORMAT_HINT)
            )
            continue
        errors.extend(_coverage_errors(config, param, axis))
        if max_levels is not None and len(config.ranges) > max_levels:
            errors.append(
                ValidationError(
                    code=RNG005,
                    source=QUERY_SOURCE,
                    field=param,
                    message=f"{axis} has {len(config.ranges)} levels",
                    hint=f"choose at most {max_levels} levels",
                )
            )
        level_counts[param] = len(config.ranges)

    if mapping and mapping.strip() and len(level_counts) == 2:
        rows, columns = level_counts[LIKELIHOOD_CONFIG_PARAM], level_counts[IMPACT_CONFIG_PARAM]
        errors.extend(_mapping_errors(mapping, rows, columns))

    return sort_errors(errors)


def validate_vector_text(text: str) -> list[ValidationError]:
    """Return a VEC001 error when *text* is not a valid vector."""
    try:
        parse_vector(text)
    except FormatError as exc:
        return [ValidationError(code=VEC001, source=QUERY_SOURCE, field=VECTOR_PARAM, message=str(exc))]
    return []


def _coverage_errors(config: RangeConfig, param: str, axis: str) -> list[ValidationError]:
    errors: list[ValidationError] = []
    if not starts_at_axis_min(config):
        errors.append(
            ValidationError(code=RNG002, source=QUERY_SOURCE, field=param, message=f"{axis} must start at 0.")
        )
    if not ends_at_axis_max(config):
        errors.append(
            ValidationError(code=RNG003, source=QUERY_SOURCE, field=param, message=f"{axis} must end at 9.")
        )
    gaps = coverage_gaps(config)
    if gaps:
        errors.append(
            ValidationError(
                code=RNG004,
                source=QUERY_SOURCE,
                field=param,
                message=f"{axis} ranges must not have gaps.",
                hint=", ".join(f"{previous.label}/{current.label}" for previous, current in gaps),
            )
        )
    return errors


def _mapping_errors(mapping: str, rows: int, columns: int) -> list[ValidationError]:
    entries = [entry.strip() for entry in mapping.split(MAPPING_SEPARATOR)]
    expected = rows * columns
    if len(entries) != expected:
        return [
            ValidationError(
                code=MAP001,
                source=QUERY_SOURCE,
                field=MAPPING_PARAM,
                message=f"need exactly {expected} mapping entries, but got {len(entries)}",
            )
        ]
    return [
        ValidationError(
            code=MAP002,
            source=QUERY_SOURCE,
            field=MAPPING_PARAM,
            message=f"Mapping field at row {index // columns + 1}, column {index % columns + 1} is empty.",
        )
        for index, entry in enumerate(entries)
        if not entry
    ]
