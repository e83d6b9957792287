# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Command-line interface for beaconlinks."""
