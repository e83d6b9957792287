# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Line classifier for BEACON files.

Normalizes raw content into an ordered list of lines and tags each line with
its syntactic kind. All grammar rules for single lines live here so that the
parser and the structural validation checks agree on what a line is.
"""

import enum
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

# ###############
# Public Interface
# ###############

UTF8_BOM = b"\xef\xbb\xbf"


class LineKind(enum.Enum):
    """Syntactic kinds of a single BEACON line."""

    BLANK = "blank"
    FORMAT_MARKER = "format-marker"
    META_FIELD = "meta-field"
    MALFORMED_META_FIELD = "malformed-meta-field"
    COMMENT = "comment"
    LINK = "link"


@dataclass(frozen=True)
class ClassifiedLine:
    """A trimmed source line together with its kind.

    Attributes:
        kind: The syntactic kind of the line.
        text: The line with surrounding whitespace removed.
        line: 1-based line number in the normalized content.
        name: Meta field name as written (META_FIELD only).
        value: Trimmed meta field value (META_FIELD only).
    """

    kind: LineKind
    text: str
    line: int
    name: str | None = None
    value: str | None = None


@dataclass(frozen=True)
class DecodedContent:
    """Text content with the byte-order mark removed.

    Attributes:
        text: The decoded text without BOM.
        had_bom: True if the raw content started with a UTF-8 BOM.
    """

    text: str
    had_bom: bool


def decode_content(content: bytes | str) -> DecodedContent:
    """Strip a leading UTF-8 BOM and decode bytes as strict UTF-8.

    Raises:
        UnicodeDecodeError: If ``content`` is bytes that are not valid UTF-8.
            The error's ``object`` is the content without the BOM.
    """
    if isinstance(content, str):
        if content.startswith("\ufeff"):
            return DecodedContent(text=content[1:], had_bom=True)
        return DecodedContent(text=content, had_bom=False)
    if content.startswith(UTF8_BOM):
        return DecodedContent(text=content[len(UTF8_BOM) :].decode("utf-8"), had_bom=True)
    return DecodedContent(text=content.decode("utf-8"), had_bom=False)


def split_lines(text: str) -> list[str]:
    """Normalize ``\\r\\n`` and ``\\r`` to ``\\n`` and split into lines.

    A trailing line break yields a final empty line, so line numbers always
    match what an editor shows.
    """
    return text.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def is_format_marker(text: str) -> bool:
    """Return True if a trimmed line is a ``#FORMAT: BEACON`` marker."""
    return _FORMAT_RE.fullmatch(text) is not None


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def classify_line(text: str, line: int) -> ClassifiedLine:
    """Classify a single line without regard to its position in the file.

    A ``#FORMAT: BEACON`` line is reported as an ordinary META_FIELD here;
    only :func:`classify_lines` knows whether it is the leading marker.
    """
    stripped = text.strip()
    if not stripped:
        return ClassifiedLine(LineKind.BLANK, stripped, line)

    match = _META_FIELD_RE.fullmatch(stripped)
    if match is not None:
        return ClassifiedLine(
            LineKind.META_FIELD,
            stripped,
            line,
            name=match.group(1),
            value=match.group(2).strip(),
        )

    if stripped.startswith("#"):
        if _META_START_RE.match(stripped):
            return ClassifiedLine(LineKind.MALFORMED_META_FIELD, stripped, line)
        return ClassifiedLine(LineKind.COMMENT, stripped, line)

    return ClassifiedLine(LineKind.LINK, stripped, line)


def classify_lines(lines: Iterable[str]) -> Iterator[ClassifiedLine]:
    """Classify every line in order.

    The first non-blank line is tagged FORMAT_MARKER when it matches the
    ``#FORMAT: BEACON`` grammar (case-insensitive).
    """
    seen_content = False
    for index, text in enumerate(lines, start=1):
        entry = classify_line(text, index)
        if entry.kind is LineKind.BLANK:
            yield entry
            continue
        if not seen_content and is_format_marker(entry.text):
            entry = ClassifiedLine(LineKind.FORMAT_MARKER, entry.text, index)
        seen_content = True
        yield entry


# ################
# Implementation
# ################

_FORMAT_RE = re.compile(r"#FORMAT\s*:\s*BEACON\s*", re.IGNORECASE)
_META_FIELD_RE = re.compile(r"#([A-Za-z]+)\s*:\s*(.*)")
_META_START_RE = re.compile(r"#[A-Za-z]")
_WHITESPACE_RE = re.compile(r"\s+")
