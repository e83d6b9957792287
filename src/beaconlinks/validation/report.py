# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Plain-text reports for validation results."""

from collections.abc import Callable

from yachalk import chalk

from beaconlinks.validation.checks import ValidationResult

# ###############
# Public Interface
# ###############


def format_summary(result: ValidationResult, color: bool = False) -> str:
    """Return a two-line summary: validity status and issue counts."""
    if result.is_valid():
        status = _paint("BEACON file is valid", chalk.green, color)
    else:
        status = _paint("BEACON file has errors", chalk.red, color)
    counts = f"Errors: {len(result.errors)}, Warnings: {len(result.warnings)}, Info: {len(result.info)}"
    return f"{status}\n{counts}"


def format_report(result: ValidationResult, color: bool = False) -> str:
    """Return the summary followed by one section per non-empty category."""
    report = [format_summary(result, color), ""]
    sections = (
        ("ERRORS", result.errors, chalk.red),
        ("WARNINGS", result.warnings, chalk.yellow),
        ("INFO", result.info, chalk.blue),
    )
    for title, messages, style in sections:
        if not messages:
            continue
        report.append(_paint(f"{title}:", style, color))
        report.extend(f"  - {message}" for message in messages)
        report.append("")
    return "\n".join(report)


# ################
# Implementation
# ################


def _paint(text: str, style: Callable[[str], str], color: bool) -> str:
    return style(text) if color else text
