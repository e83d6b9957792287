# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Parser for BEACON link dumps.

Drives the line classifier through a two-state machine (preamble, links) and
builds a :class:`~beaconlinks.model.entities.BeaconDump` from meta field and
link lines.
"""

import enum
import logging
from pathlib import Path

from beaconlinks.model.entities import BeaconDump, MetaFieldTable, RawLink
from beaconlinks.parser.lines import (
    ClassifiedLine,
    LineKind,
    classify_lines,
    decode_content,
    normalize_whitespace,
    split_lines,
)

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

DEFAULT_TARGET_PATTERN = "{+ID}"


class ParseError(Exception):
    """Raised when BEACON content is syntactically invalid.

    Attributes:
        message: Human-readable description without location.
        line: 1-based line number of the offending line.
    """

    def __init__(self, message: str, line: int) -> None:
        super().__init__(f"Line {line}: {message}")
        self.message = message
        self.line = line


class BeaconFileError(Exception):
    """Raised when a BEACON file is missing or cannot be read."""


class ParserState(enum.Enum):
    """Section of the file the parser is currently in.

    PREAMBLE is the initial state; LINKS is terminal.
    """

    PREAMBLE = "preamble"
    LINKS = "links"


def transition(state: ParserState, kind: LineKind) -> ParserState:
    """Return the parser state after a line of the given kind.

    Blank lines and link lines move the parser into the link section; no line
    moves it back.
    """
    if kind in (LineKind.BLANK, LineKind.LINK):
        return ParserState.LINKS
    return state


def parse(content: bytes | str) -> BeaconDump:
    """Parse BEACON content into meta fields and raw links.

    Args:
        content: Raw file content. Bytes are decoded as UTF-8; a leading
            byte-order mark is ignored.

    Returns:
        The parsed :class:`BeaconDump`. Parsing is all-or-nothing.

    Raises:
        ParseError: On undecodable bytes, malformed meta field lines, meta
            fields after the link section has started, or link lines with
            more than three fields.
    """
    try:
        decoded = decode_content(content)
    except UnicodeDecodeError as exc:
        line = len(split_lines(exc.object[: exc.start].decode("utf-8", "replace")))
        raise ParseError(f"Content is not valid UTF-8: {exc.reason}", line) from exc

    lines = split_lines(decoded.text)
    logger.debug("Parsing BEACON content with %d lines", len(lines))
    dump = _Parser().parse(lines)
    logger.debug(
        "Parsed %d meta fields and %d links",
        len(dump.meta_fields),
        dump.link_count,
    )
    return dump


def read_beacon_file(path: Path | str) -> bytes:
    """Read the raw bytes of a BEACON file.

    Raises:
        BeaconFileError: If the file does not exist or cannot be read.
    """
    path = Path(path)
    try:
        return path.read_bytes()
    except FileNotFoundError:
        raise BeaconFileError(f"File not found: {path}") from None
    except OSError as exc:
        raise BeaconFileError(f"File is not readable: {path} ({exc.strerror or exc})") from exc


def parse_file(path: Path | str) -> BeaconDump:
    """Read and parse a BEACON file.

    Raises:
        BeaconFileError: If the file does not exist or cannot be read.
        ParseError: If the content is syntactically invalid.
    """
    return parse(read_beacon_file(path))


# ################
# Implementation
# ################

_MAX_LINK_FIELDS = 3
_HTTP_PREFIXES = ("http://", "https://")


class _Parser:
    """Accumulates meta fields and links for a single parse."""

    def __init__(self) -> None:
        self._meta_fields = MetaFieldTable()
        self._links: list[RawLink] = []
        self._warnings: list[str] = []

    def parse(self, lines: list[str]) -> BeaconDump:
        """Consume all lines and return the finished dump."""
        state = ParserState.PREAMBLE
        for entry in classify_lines(lines):
            if entry.kind is LineKind.META_FIELD:
                if state is ParserState.LINKS:
                    raise ParseError("Meta field found after link section", entry.line)
                self._parse_meta_field(entry)
            elif entry.kind is LineKind.MALFORMED_META_FIELD:
                raise ParseError(f"Invalid meta field format: {entry.text}", entry.line)
            elif entry.kind is LineKind.LINK:
                self._parse_link(entry)
            state = transition(state, entry.kind)

        return BeaconDump(
            meta_fields=self._meta_fields,
            raw_links=tuple(self._links),
            warnings=tuple(self._warnings),
        )

    def _parse_meta_field(self, entry: ClassifiedLine) -> None:
        name = (entry.name or "").upper()
        if not self._meta_fields.add(name, entry.value or ""):
            message = f"Duplicate meta field '{name}' on line {entry.line} ignored"
            logger.warning(message)
            self._warnings.append(message)

    def _parse_link(self, entry: ClassifiedLine) -> None:
        fields = entry.text.split("|")
        if len(fields) > _MAX_LINK_FIELDS:
            raise ParseError(
                f"Invalid link format (more than {_MAX_LINK_FIELDS} fields): {entry.text}",
                entry.line,
            )

        tokens = [normalize_whitespace(f) for f in fields]
        source = tokens[0]
        if not source:
            logger.debug("Skipping link without source token on line %d", entry.line)
            return

        annotation: str | None = None
        target: str | None = None
        if len(tokens) == 2:
            if self._is_target_token(tokens[1]):
                target = tokens[1]
            else:
                annotation = tokens[1]
        elif len(tokens) == 3:
            annotation, target = tokens[1], tokens[2]

        self._links.append(RawLink(source=source, annotation=annotation, target=target))

    def _is_target_token(self, token: str) -> bool:
        """Decide whether the second of two link fields is a target.

        Depends on the TARGET meta field as parsed so far: only the literal
        default pattern (or no TARGET at all) lets an HTTP(S) URI be a target.
        """
        target_pattern = self._meta_fields.get("TARGET", DEFAULT_TARGET_PATTERN)
        return target_pattern == DEFAULT_TARGET_PATTERN and token.startswith(_HTTP_PREFIXES)
