"""CLI subcommand handlers and the fallback policy."""

from __future__ import annotations

import argparse
import sys
from dataclasses import asdict, replace
from pathlib import Path

from riskrating.config import RiskRatingConfig, validate_config_file
from riskrating.constants.factors import DEFAULT_VECTOR_TEXT
from riskrating.exceptions import ConfigError, FormatError, RiskRatingError
from riskrating.exceptions.validation import ValidationError, format_errors
from riskrating.model import RiskProfile, Vector
from riskrating.parsers.ranges import serialize_range_config
from riskrating.parsers.vector import parse_vector
from riskrating.reporting import ResultReporter, build_payload, render_json
from riskrating.scoring.resolver import custom_profile, named_profile, resolve, select_profile
from riskrating.store import JsonFileMappingStore, MappingStore, mapping_name_exists
from riskrating.url.query import QueryParameters, build_share_url, parse_query, profile_query_string
from riskrating.validation import validate_custom_parameters, validate_vector_text


def collect_parameters(args: argparse.Namespace, base: QueryParameters | None = None) -> QueryParameters:
    """Merge ``--query`` over *base*, then explicit flags over both."""
    params = base or QueryParameters()
    query = getattr(args, "query", None)
    if query:
        params = replace(params, **{field: value for field, value in asdict(parse_query(query)).items() if value})
    overrides = {
        "likelihood_config": getattr(args, "likelihood_config", None),
        "impact_config": getattr(args, "impact_config", None),
        "mapping": getattr(args, "mapping", None),
        "vector": getattr(args, "vector", None),
    }
    return replace(params, **{field: value for field, value in overrides.items() if value})


def select_inputs(
    params: QueryParameters,
    *,
    configuration: str | None,
    settings: RiskRatingConfig,
    strict: bool,
) -> tuple[Vector, RiskProfile]:
    """Parse the vector and choose the profile, applying the fallback policy.

    Unless *strict*, an unparsable vector is replaced by the default vector and
    an unusable custom configuration by the default named configuration, each
    with a warning on stderr.
    """
    try:
        vector = parse_vector(params.vector) if params.vector else Vector()
    except FormatError as exc:
        if strict:
            raise
        print(f"Warning: {exc}. The default vector will be used.", file=sys.stderr)
        vector = parse_vector(DEFAULT_VECTOR_TEXT)

    try:
        profile = select_profile(
            configuration=configuration or settings.default_configuration,
            likelihood_config=params.likelihood_config,
            impact_config=params.impact_config,
            mapping=params.mapping,
            extra_configurations=settings.extra_configurations,
        )
    except RiskRatingError as exc:
        if strict:
            raise
        print(f"Warning: {exc}. Default configuration will be used.", file=sys.stderr)
        profile = named_profile(settings.default_configuration, extra_configurations=settings.extra_configurations)

    return vector, profile


def handle_calc(args: argparse.Namespace, settings: RiskRatingConfig) -> int:
    """Run ``riskrating calc``; exit 1 when the verdict is the ERROR sentinel."""
    try:
        base = _load_named_bundle(args.mapping_name, _open_store(None, settings)) if args.mapping_name else None
        params = collect_parameters(args, base)
        vector, profile = select_inputs(
            params,
            configuration=args.configuration,
            settings=settings,
            strict=args.strict,
        )
    except RiskRatingError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    result = resolve(vector, profile)
    share_url = build_share_url(settings.base_url, profile_query_string(profile, vector))

    if args.output_format == "json":
        print(render_json(build_payload(result, vector=vector, share_url=share_url)))
    else:
        use_color = not args.no_color and sys.stdout.isatty()
        reporter = ResultReporter(result, vector=vector, share_url=share_url, color=use_color, verbose=args.verbose)
        print(reporter.render())

    return 0 if result.resolved else 1


def handle_url(args: argparse.Namespace, settings: RiskRatingConfig) -> int:
    """Print the share URL; inputs must be valid, there is no fallback."""
    params = collect_parameters(args)
    try:
        vector = parse_vector(params.vector) if params.vector else None
        profile = select_profile(
            likelihood_config=params.likelihood_config,
            impact_config=params.impact_config,
            mapping=params.mapping,
        )
    except RiskRatingError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    print(build_share_url(args.base_url or settings.base_url, profile_query_string(profile, vector)))
    return 0


def handle_validate(args: argparse.Namespace) -> int:
    """Validate the custom bundle (if any) and the settings file."""
    params = collect_parameters(args)
    errors: list[ValidationError] = []
    if params.likelihood_config or params.impact_config or params.mapping:
        errors.extend(
            validate_custom_parameters(
                params.likelihood_config,
                params.impact_config,
                params.mapping,
                max_levels=args.max_levels,
            )
        )
    if params.vector:
        errors.extend(validate_vector_text(params.vector))
    errors.extend(validate_config_file(Path.cwd(), args.settings, config_explicit=args.settings is not None))

    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2

    print("Configuration is valid.")
    return 0


def handle_configurations(settings: RiskRatingConfig) -> int:
    """List named configurations; the default is marked with ``*``."""
    for name in settings.configuration_names:
        profile = named_profile(name, extra_configurations=settings.extra_configurations)
        marker = "*" if name == settings.default_configuration else " "
        print(f"{marker} {name}: {serialize_range_config(profile.likelihood)}")
    return 0


def handle_mappings(args: argparse.Namespace, settings: RiskRatingConfig) -> int:
    """Run ``riskrating mappings list|show|delete|save``."""
    try:
        store = _open_store(args.store, settings)
        if args.mapping_command == "list":
            entries = store.list()
            if not entries:
                print("No saved mappings yet.")
            for entry in entries:
                print(f"{entry.name}\t{entry.value}")
            return 0

        if args.mapping_command == "show":
            value = store.get(args.name)
            if value is None:
                print(f"No saved mapping named {args.name!r}", file=sys.stderr)
                return 1
            print(value)
            return 0

        if args.mapping_command == "delete":
            if not mapping_name_exists(store, args.name):
                print(f"No saved mapping named {args.name!r}", file=sys.stderr)
                return 1
            store.delete(args.name)
            print(f"Deleted mapping {args.name!r}.")
            return 0

        return _save_mapping(args, store)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2


def _save_mapping(args: argparse.Namespace, store: MappingStore) -> int:
    params = collect_parameters(args)
    errors = validate_custom_parameters(params.likelihood_config, params.impact_config, params.mapping)
    if errors:
        print(format_errors(errors), file=sys.stderr)
        return 2
    if mapping_name_exists(store, args.name) and not args.force:
        print(f"A mapping named {args.name!r} already exists; use --force to overwrite", file=sys.stderr)
        return 1

    profile = custom_profile(params.likelihood_config, params.impact_config, params.mapping, name=args.name)
    store.set(args.name, profile_query_string(profile))
    print(f"Saved mapping {args.name!r}.")
    return 0


def _open_store(path: Path | None, settings: RiskRatingConfig) -> JsonFileMappingStore:
    return JsonFileMappingStore(path or settings.resolve_store_path(Path.cwd()))


def _load_named_bundle(name: str, store: MappingStore) -> QueryParameters:
    value = store.get(name)
    if value is None:
        raise ConfigError(f"No saved mapping named {name!r}")
    return parse_query(value)
