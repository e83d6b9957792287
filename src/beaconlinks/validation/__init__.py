# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation rules and reports for BEACON link dumps."""

from beaconlinks.validation.checks import (
    ValidationResult,
    validate,
    validate_file,
)
from beaconlinks.validation.report import format_report, format_summary

__all__ = [
    "ValidationResult",
    "format_report",
    "format_summary",
    "validate",
    "validate_file",
]
