# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model for BEACON link dumps (meta fields, raw and constructed links)."""

from beaconlinks.model.entities import BeaconDump, Link, MetaFieldTable, RawLink

__all__ = [
    "BeaconDump",
    "Link",
    "MetaFieldTable",
    "RawLink",
]
