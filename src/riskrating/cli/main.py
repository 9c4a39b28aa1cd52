"""CLI entrypoint for the riskrating calculator."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from riskrating import __version__
from riskrating.cli.handlers import (
    handle_calc,
    handle_configurations,
    handle_mappings,
    handle_url,
    handle_validate,
)
from riskrating.config import load_config
from riskrating.constants.branding import BRAND_NAME, CLI_DESCRIPTION
from riskrating.constants.levels import MAX_CUSTOM_LEVELS
from riskrating.constants.reporting import DEFAULT_OUTPUT_FORMAT, VALID_OUTPUT_FORMATS
from riskrating.exceptions import ConfigError


def _add_bundle_arguments(parser: argparse.ArgumentParser) -> None:
    """Flags shared by subcommands that accept an assessment."""
    parser.add_argument("-V", "--vector", help="Factor vector, e.g. '(SL:1/M:1/.../PV:0)'")
    parser.add_argument("-q", "--query", help="Query string or full URL carrying the parameters")
    parser.add_argument("--likelihood-config", help="Likelihood ranges, e.g. 'LOW:0-3;MEDIUM:3-6;HIGH:6-9'")
    parser.add_argument("--impact-config", help="Impact ranges, same format as --likelihood-config")
    parser.add_argument("--mapping", help="Comma-separated verdicts, likelihood-major")


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(
        prog=BRAND_NAME,
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-s", "--settings", type=Path, default=None, help="Explicit riskrating.yaml path")
    parser.add_argument("-v", "--verbose", action="store_true", help="Show factor details and diagnostics")
    subparsers = parser.add_subparsers(dest="command", required=True)

    calc = subparsers.add_parser("calc", help="Calculate the risk verdict for a vector")
    _add_bundle_arguments(calc)
    calc.add_argument("-c", "--configuration", default=None, help="Named threshold configuration")
    calc.add_argument("-n", "--mapping-name", default=None, help="Load the custom bundle saved under this name")
    calc.add_argument(
        "--strict",
        action="store_true",
        help="Fail instead of falling back to the default configuration or vector",
    )
    calc.add_argument(
        "-o",
        "--output-format",
        choices=sorted(VALID_OUTPUT_FORMATS),
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: text)",
    )
    calc.add_argument("--no-color", action="store_true", help="Disable colored output")

    validate = subparsers.add_parser("validate", help="Validate a custom bundle and the settings file")
    _add_bundle_arguments(validate)
    validate.add_argument(
        "--max-levels",
        type=int,
        nargs="?",
        const=MAX_CUSTOM_LEVELS,
        default=None,
        help=f"Reject axes with more levels than this (bare flag: {MAX_CUSTOM_LEVELS})",
    )

    url = subparsers.add_parser("url", help="Print the share URL for an assessment")
    _add_bundle_arguments(url)
    url.add_argument("-b", "--base-url", default=None, help="Base URL (default: from settings)")

    subparsers.add_parser("configurations", help="List named threshold configurations")

    mappings = subparsers.add_parser("mappings", help="Manage saved custom bundles")
    mappings.add_argument("--store", type=Path, default=None, help="Mapping store file (default: from settings)")
    mapping_commands = mappings.add_subparsers(dest="mapping_command", required=True)
    mapping_commands.add_parser("list", help="List saved bundles")
    show = mapping_commands.add_parser("show", help="Print a saved bundle")
    show.add_argument("name")
    delete = mapping_commands.add_parser("delete", help="Delete a saved bundle")
    delete.add_argument("name")
    save = mapping_commands.add_parser("save", help="Validate and save a custom bundle")
    save.add_argument("name")
    save.add_argument("-q", "--query", help="Query string or full URL carrying the parameters")
    save.add_argument("--likelihood-config", help="Likelihood ranges")
    save.add_argument("--impact-config", help="Impact ranges")
    save.add_argument("--mapping", help="Comma-separated verdicts, likelihood-major")
    save.add_argument("-f", "--force", action="store_true", help="Overwrite an existing bundle")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING, format="%(levelname)s %(message)s")

    if args.command == "validate":
        return handle_validate(args)

    try:
        settings = load_config(Path.cwd(), args.settings)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 2

    if args.command == "calc":
        return handle_calc(args, settings)
    if args.command == "url":
        return handle_url(args, settings)
    if args.command == "configurations":
        return handle_configurations(settings)
    if args.command == "mappings":
        return handle_mappings(args, settings)

    parser.error(f"Unsupported command: {args.command}")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
