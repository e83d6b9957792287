# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Configuration of the BEACON validator."""

from beaconlinks.config.settings import (
    CONFIG_FILE_NAME,
    ConfigError,
    ValidatorConfig,
    load_validator_config,
)

__all__ = [
    "CONFIG_FILE_NAME",
    "ConfigError",
    "ValidatorConfig",
    "load_validator_config",
]
