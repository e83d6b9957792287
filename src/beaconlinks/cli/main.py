# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the beaconlinks command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from beaconlinks.config.settings import ConfigError, ValidatorConfig, load_validator_config
from beaconlinks.construction.constructor import construct_links
from beaconlinks.parser.parser import BeaconFileError, ParseError, parse_file
from beaconlinks.validation.checks import validate_file
from beaconlinks.validation.report import format_report

# ###############
# Public Interface
# ###############

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_FAILURE = 2


def main() -> None:
    """Run the beaconlinks CLI."""
    parser = argparse.ArgumentParser(
        prog="beaconlinks",
        description="beaconlinks - parse and validate BEACON link dumps",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate a BEACON file",
        description="Validate a BEACON file and print a report of errors, warnings and notes.",
    )
    check_parser.add_argument("file", help="Path to the BEACON file")
    check_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a validator configuration file (YAML)",
    )
    check_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Print the report without colors",
    )

    # links subcommand
    links_parser = subparsers.add_parser(
        "links",
        help="Print the constructed links of a BEACON file",
        description="Parse a BEACON file and print every link with expanded URIs.",
    )
    links_parser.add_argument("file", help="Path to the BEACON file")
    links_parser.add_argument(
        "--format",
        choices=("tsv", "json"),
        default="tsv",
        help="Output format (default: tsv)",
    )

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(EXIT_OK)

    _configure_logging(args.verbose)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "links":
        return _cmd_links(args)
    return EXIT_OK


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    path = Path(args.file)
    if not path.exists():
        print(f"Error: file '{path}' does not exist.", file=sys.stderr)
        return EXIT_FAILURE

    config = ValidatorConfig()
    if args.config is not None:
        try:
            config = load_validator_config(args.config)
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return EXIT_FAILURE

    print(f"Validating BEACON file: {path}")
    print("=" * 50)
    print()
    result = validate_file(path, config)
    print(format_report(result, color=not args.no_color and sys.stdout.isatty()))
    return EXIT_OK if result.is_valid() else EXIT_INVALID


def _cmd_links(args: argparse.Namespace) -> int:
    """Handle the links subcommand."""
    try:
        dump = parse_file(args.file)
    except BeaconFileError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE
    except ParseError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_INVALID

    links = construct_links(dump)
    if args.format == "json":
        print(json.dumps([link.model_dump() for link in links], indent=2, ensure_ascii=False))
        return EXIT_OK

    for link in links:
        print("\t".join((link.source, link.relation, link.target, link.annotation or "")))
    return EXIT_OK
