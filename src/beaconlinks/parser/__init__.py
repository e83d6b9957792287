# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line classifier and parser for BEACON link dumps."""

from beaconlinks.parser.parser import BeaconFileError, ParseError, parse, parse_file

__all__ = [
    "parse",
    "parse_file",
    "ParseError",
    "BeaconFileError",
]
