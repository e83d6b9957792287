# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser, link constructor and validator for BEACON link dumps."""

from beaconlinks.construction.constructor import construct, construct_links, expand
from beaconlinks.model.entities import BeaconDump, Link, MetaFieldTable, RawLink
from beaconlinks.parser.parser import BeaconFileError, ParseError, parse, parse_file
from beaconlinks.validation.checks import ValidationResult, validate, validate_file

__all__ = [
    "BeaconDump",
    "BeaconFileError",
    "Link",
    "MetaFieldTable",
    "ParseError",
    "RawLink",
    "ValidationResult",
    "construct",
    "construct_links",
    "expand",
    "parse",
    "parse_file",
    "validate",
    "validate_file",
]
