# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Validation rules for BEACON link dumps.

The validator parses the content itself and then runs independent groups of
checks over the parse output and the raw text. Findings are sorted into
errors, warnings and informational notes; only errors make a file invalid.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path

from beaconlinks.config.settings import ValidatorConfig
from beaconlinks.construction.constructor import construct_links
from beaconlinks.model.entities import BeaconDump
from beaconlinks.parser.lines import (
    DecodedContent,
    LineKind,
    classify_line,
    decode_content,
    is_format_marker,
    split_lines,
)
from beaconlinks.parser.parser import BeaconFileError, ParseError, parse, read_beacon_file
from beaconlinks.validation.uris import is_valid_uri, is_valid_uri_or_pattern

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

KNOWN_META_FIELDS: frozenset[str] = frozenset(
    {
        # Link construction
        "PREFIX",
        "TARGET",
        "MESSAGE",
        "RELATION",
        "ANNOTATION",
        # Link dump description
        "DESCRIPTION",
        "CREATOR",
        "CONTACT",
        "HOMEPAGE",
        "FEED",
        "TIMESTAMP",
        "UPDATE",
        # Datasets
        "SOURCESET",
        "TARGETSET",
        "NAME",
        "INSTITUTION",
    }
)

URI_META_FIELDS: tuple[str, ...] = ("HOMEPAGE", "FEED", "SOURCESET", "TARGETSET")

UPDATE_VALUES: tuple[str, ...] = ("always", "hourly", "daily", "weekly", "monthly", "yearly", "never")

RECOMMENDED_META_FIELDS: tuple[str, ...] = ("DESCRIPTION", "CREATOR")


@dataclass(frozen=True)
class ValidationResult:
    """Immutable outcome of validating one BEACON file.

    Attributes:
        errors: Problems that make the file invalid.
        warnings: Issues that do not affect validity.
        info: Informational notes and recommendations.
    """

    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    info: tuple[str, ...] = ()

    def is_valid(self) -> bool:
        """Return True if no errors were found."""
        return not self.errors

    @property
    def has_errors(self) -> bool:
        """Return True if any errors were found."""
        return len(self.errors) > 0

    @property
    def issue_count(self) -> int:
        """Number of errors and warnings together."""
        return len(self.errors) + len(self.warnings)


def validate(content: bytes | str, config: ValidatorConfig | None = None) -> ValidationResult:
    """Validate BEACON content.

    Checks performed after a successful parse:

    1. **Structure**: position of the ``#FORMAT: BEACON`` marker, casing of
       meta field names, trailing line break, byte-order mark.
    2. **Meta fields**: unknown names, URI-valued fields, RELATION,
       TIMESTAMP, UPDATE and CONTACT values, recommended fields.
    3. **Links**: empty link set, duplicate links, invalid constructed URIs.
    4. **Best practices**: MIME type, file extension, HTTPS.

    A parse failure is reported as a single ``Parse error`` and no other
    checks run.

    Args:
        content: Raw BEACON content.
        config: Optional validator settings; defaults apply when omitted.

    Returns:
        The frozen :class:`ValidationResult`. Never raises for malformed
        content.
    """
    config = config or ValidatorConfig()
    result = _ResultBuilder()

    try:
        dump = parse(content)
    except ParseError as exc:
        logger.debug("Validation stopped by parse error: %s", exc)
        result.errors.append(f"Parse error: {exc.message} (line {exc.line})")
        return result.freeze()

    decoded = decode_content(content)
    _check_structure(decoded, config, result)
    _check_meta_fields(dump, config, result)
    _check_links(dump, result)
    if config.best_practices:
        _check_best_practices(dump.meta_fields, result)

    logger.debug(
        "Validation finished with %d errors, %d warnings",
        len(result.errors),
        len(result.warnings),
    )
    return result.freeze()


def validate_file(path: Path | str, config: ValidatorConfig | None = None) -> ValidationResult:
    """Read and validate a BEACON file.

    A missing or unreadable file yields a result with a single error; no
    parsing is attempted in that case.
    """
    try:
        content = read_beacon_file(path)
    except BeaconFileError as exc:
        return ValidationResult(errors=(str(exc),))
    return validate(content, config)


# ################
# Implementation
# ################

_METAFIELD_GRAMMAR = "METAFIELD = +( %x41-5A )"
_UPPERCASE_NAME_RE = re.compile(r"[A-Z]+")
_CONTACT_RE = re.compile(r"[^@\s<>]+@[^@\s<>]+")

_TIMESTAMP_FORMATS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII), "%Y-%m-%d"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}[+-]\d{2}:\d{2}", re.ASCII), "%Y-%m-%dT%H:%M:%S%z"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", re.ASCII), "%Y-%m-%dT%H:%M:%S%z"),
    (re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}", re.ASCII), "%Y-%m-%dT%H:%M:%S"),
)


@dataclass
class _ResultBuilder:
    """Append-only accumulator frozen into a ValidationResult at the end."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    info: list[str] = field(default_factory=list)

    def freeze(self) -> ValidationResult:
        return ValidationResult(
            errors=tuple(self.errors),
            warnings=tuple(self.warnings),
            info=tuple(self.info),
        )


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _is_valid_timestamp(value: str) -> bool:
    """Return True if value has one of the accepted ISO 8601 shapes and is a real date."""
    for pattern, fmt in _TIMESTAMP_FORMATS:
        if pattern.fullmatch(value) is None:
            continue
        try:
            datetime.strptime(value, fmt)
        except ValueError:
            return False
        return True
    return False


def _check_structure(decoded: DecodedContent, config: ValidatorConfig, result: _ResultBuilder) -> None:
    """Check the FORMAT marker, meta field casing, final line break and BOM."""
    if decoded.had_bom:
        result.info.append("File contains UTF-8 BOM")

    lines = split_lines(decoded.text)

    format_line = next(
        (number for number, text in enumerate(lines, start=1) if is_format_marker(text.strip())),
        None,
    )
    if format_line is None:
        result.warnings.append("No #FORMAT: BEACON line found - recommended for BEACON files")
    elif format_line > config.format_line_limit:
        result.warnings.append(f"FORMAT line found at line {format_line} - should be near the beginning")

    for number, text in enumerate(lines, start=1):
        entry = classify_line(text, number)
        if entry.kind is not LineKind.META_FIELD or entry.name is None:
            continue
        if _UPPERCASE_NAME_RE.fullmatch(entry.name) is None:
            result.warnings.append(
                f"Meta field '#{entry.name}:' on line {number} uses non-standard casing. "
                f"BEACON specification requires uppercase A-Z only ({_METAFIELD_GRAMMAR})"
            )

    if not decoded.text.endswith(("\n", "\r")):
        result.warnings.append("File should end with a line break")


def _check_meta_fields(dump: BeaconDump, config: ValidatorConfig, result: _ResultBuilder) -> None:
    """Check names and values of the meta fields."""
    meta_fields = dump.meta_fields
    result.warnings.extend(dump.warnings)

    known = KNOWN_META_FIELDS | set(config.extra_known_fields)
    for name in meta_fields:
        if name not in known:
            result.warnings.append(f"Unknown meta field: {name}")

    for name in URI_META_FIELDS:
        value = meta_fields.get(name)
        if value is not None and not is_valid_uri(value):
            result.errors.append(f"Invalid URI in {name}: {value}")

    relation = meta_fields.get("RELATION")
    if relation is not None and not is_valid_uri_or_pattern(relation):
        result.errors.append(f"RELATION must be a valid URI or URI pattern: {relation}")

    timestamp = meta_fields.get("TIMESTAMP")
    if timestamp is not None and not _is_valid_timestamp(timestamp):
        result.errors.append(f"Invalid TIMESTAMP format. Expected ISO 8601 date/datetime: {timestamp}")

    update = meta_fields.get("UPDATE")
    if update is not None and update not in UPDATE_VALUES:
        result.errors.append(f"Invalid UPDATE value: {update} (must be one of: {', '.join(UPDATE_VALUES)})")

    contact = meta_fields.get("CONTACT")
    if contact is not None and _CONTACT_RE.search(contact) is None:
        result.warnings.append(f"CONTACT field should contain a valid email address: {contact}")

    for name in RECOMMENDED_META_FIELDS:
        if name not in meta_fields:
            result.info.append(f"Recommended meta field missing: {name}")


def _check_links(dump: BeaconDump, result: _ResultBuilder) -> None:
    """Check the constructed links for duplicates and URI validity."""
    if not dump.raw_links:
        result.warnings.append("No links found in BEACON file")
        return

    links = construct_links(dump)

    seen: set[tuple[str, str, str]] = set()
    duplicates = 0
    invalid = 0
    for link in links:
        key = (link.source, link.target, link.relation)
        if key in seen:
            duplicates += 1
        else:
            seen.add(key)
        invalid += sum(1 for uri in key if not is_valid_uri(uri))

    if duplicates:
        result.warnings.append(f"Found {_plural(duplicates, 'duplicate link')}")
    if invalid:
        result.errors.append(f"Found {_plural(invalid, 'invalid URI')} in constructed links")

    result.info.append(f"Total links: {len(links)}")


def _check_best_practices(meta_fields: Mapping[str, str], result: _ResultBuilder) -> None:
    """Emit recommendations on MIME type, file extension and HTTPS."""
    result.info.append("Recommended MIME type: text/plain")
    result.info.append("Recommended file extension: .txt")

    if any(meta_fields.get(name, "").startswith("http://") for name in URI_META_FIELDS):
        result.info.append("Consider using HTTPS instead of HTTP for security")
