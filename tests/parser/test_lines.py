# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the BEACON line classifier."""

import pytest

from beaconlinks.parser.lines import (
    ClassifiedLine,
    LineKind,
    classify_line,
    classify_lines,
    decode_content,
    is_format_marker,
    normalize_whitespace,
    split_lines,
)

# ###############
# Test Helpers
# ###############


def _kinds(text: str) -> list[LineKind]:
    """Classify normalized content and return the kinds in order."""
    return [entry.kind for entry in classify_lines(split_lines(text))]


# ###############
# Decoding
# ###############


class TestDecodeContent:
    def test_plain_bytes_are_decoded(self) -> None:
        decoded = decode_content(b"alice\n")
        assert decoded.text == "alice\n"
        assert decoded.had_bom is False

    def test_bom_is_stripped_from_bytes(self) -> None:
        decoded = decode_content(b"\xef\xbb\xbf#FORMAT: BEACON\n")
        assert decoded.text == "#FORMAT: BEACON\n"
        assert decoded.had_bom is True

    def test_bom_is_stripped_from_str(self) -> None:
        decoded = decode_content("\ufeffalice")
        assert decoded.text == "alice"
        assert decoded.had_bom is True

    def test_utf8_multibyte_characters(self) -> None:
        assert decode_content("Gödel\n".encode()).text == "Gödel\n"

    def test_invalid_utf8_raises(self) -> None:
        with pytest.raises(UnicodeDecodeError):
            decode_content(b"alice\n\xff\n")


# ###############
# Line Splitting
# ###############


class TestSplitLines:
    def test_lf(self) -> None:
        assert split_lines("a\nb") == ["a", "b"]

    def test_crlf_and_cr_are_normalized(self) -> None:
        assert split_lines("a\r\nb\rc\n") == ["a", "b", "c", ""]

    def test_empty_text_is_one_empty_line(self) -> None:
        assert split_lines("") == [""]


class TestNormalizeWhitespace:
    def test_runs_are_collapsed(self) -> None:
        assert normalize_whitespace("  hello \t  world  ") == "hello world"

    def test_whitespace_only_becomes_empty(self) -> None:
        assert normalize_whitespace(" \t ") == ""


# ###############
# Single Lines
# ###############


class TestClassifyLine:
    def test_blank(self) -> None:
        assert classify_line("   \t", 1).kind == LineKind.BLANK

    def test_meta_field(self) -> None:
        entry = classify_line("#PREFIX: http://example.org/", 2)
        assert entry == ClassifiedLine(
            LineKind.META_FIELD,
            "#PREFIX: http://example.org/",
            2,
            name="PREFIX",
            value="http://example.org/",
        )

    def test_meta_field_keeps_written_case(self) -> None:
        entry = classify_line("#TimeStamp : 2024-01-01", 1)
        assert entry.kind == LineKind.META_FIELD
        assert entry.name == "TimeStamp"
        assert entry.value == "2024-01-01"

    def test_meta_field_with_empty_value(self) -> None:
        entry = classify_line("#MESSAGE:", 1)
        assert entry.kind == LineKind.META_FIELD
        assert entry.value == ""

    def test_meta_field_surrounding_whitespace_is_trimmed(self) -> None:
        entry = classify_line("   #NAME:   Example   ", 1)
        assert entry.text == "#NAME:   Example"
        assert entry.value == "Example"

    def test_letters_without_colon_is_malformed(self) -> None:
        assert classify_line("#PREFIX http://example.org/", 1).kind == LineKind.MALFORMED_META_FIELD

    def test_name_with_digit_is_malformed(self) -> None:
        assert classify_line("#FIELD1: value", 1).kind == LineKind.MALFORMED_META_FIELD

    @pytest.mark.parametrize("text", ["#", "# a comment", "#1 numbered", "#-- separator"])
    def test_comment(self, text: str) -> None:
        assert classify_line(text, 1).kind == LineKind.COMMENT

    def test_link(self) -> None:
        entry = classify_line("  alice|bob  ", 7)
        assert entry.kind == LineKind.LINK
        assert entry.text == "alice|bob"
        assert entry.line == 7

    def test_format_line_alone_is_a_meta_field(self) -> None:
        assert classify_line("#FORMAT: BEACON", 3).kind == LineKind.META_FIELD


# ###############
# Format Marker
# ###############


class TestFormatMarker:
    @pytest.mark.parametrize("text", ["#FORMAT: BEACON", "#format:beacon", "#FORMAT :  Beacon  "])
    def test_marker_variants(self, text: str) -> None:
        assert is_format_marker(text)

    def test_other_format_is_not_a_marker(self) -> None:
        assert not is_format_marker("#FORMAT: CSV")

    def test_first_content_line_is_marker(self) -> None:
        assert _kinds("#FORMAT: BEACON\n#PREFIX: x\n") == [
            LineKind.FORMAT_MARKER,
            LineKind.META_FIELD,
            LineKind.BLANK,
        ]

    def test_marker_after_leading_blank_lines(self) -> None:
        assert _kinds("\n#FORMAT: BEACON")[1] == LineKind.FORMAT_MARKER

    def test_later_format_line_is_meta_field(self) -> None:
        kinds = _kinds("#PREFIX: x\n#FORMAT: BEACON")
        assert kinds == [LineKind.META_FIELD, LineKind.META_FIELD]

    def test_line_numbers_are_one_based(self) -> None:
        entries = list(classify_lines(["#FORMAT: BEACON", "", "alice"]))
        assert [e.line for e in entries] == [1, 2, 3]
