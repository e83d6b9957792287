# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validator configuration loaded from a YAML file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".beacon-validator.yaml"


class ConfigError(Exception):
    """Raised when a validator configuration file cannot be read or is invalid."""


class ValidatorConfig(BaseModel):
    """Tunable settings of the BEACON validator.

    Attributes:
        extra_known_fields: Meta field names accepted in addition to the
            standard BEACON fields.
        format_line_limit: Highest line number at which the ``#FORMAT`` marker
            is accepted without a warning.
        best_practices: Whether best-practice notes are emitted.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    extra_known_fields: list[str] = Field(alias="extra-known-fields", default_factory=list)
    format_line_limit: int = Field(alias="format-line-limit", default=5, ge=1)
    best_practices: bool = Field(alias="best-practices", default=True)

    @field_validator("extra_known_fields")
    @classmethod
    def _uppercase_names(cls, value: list[str]) -> list[str]:
        return [name.upper() for name in value]


def load_validator_config(path: Path) -> ValidatorConfig:
    """Load and validate a validator configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        A validated ValidatorConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file '{path}' must contain a YAML mapping")

    try:
        return ValidatorConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc
