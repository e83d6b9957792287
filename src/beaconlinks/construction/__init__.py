# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""URI pattern expansion and link construction."""

from beaconlinks.construction.constructor import (
    DEFAULT_MESSAGE,
    DEFAULT_PREFIX,
    DEFAULT_RELATION,
    DEFAULT_TARGET,
    construct,
    construct_links,
    expand,
    is_uri_pattern,
)

__all__ = [
    "DEFAULT_MESSAGE",
    "DEFAULT_PREFIX",
    "DEFAULT_RELATION",
    "DEFAULT_TARGET",
    "construct",
    "construct_links",
    "expand",
    "is_uri_pattern",
]
