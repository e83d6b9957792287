# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the BEACON data model."""

import pytest
from pydantic import ValidationError

from beaconlinks.model import BeaconDump, Link, MetaFieldTable, RawLink

# ###############
# MetaFieldTable
# ###############


def test_meta_field_table_first_assignment_wins() -> None:
    """A second add for the same name is rejected and keeps the first value."""
    table = MetaFieldTable()
    assert table.add("PREFIX", "http://a.example/") is True
    assert table.add("PREFIX", "http://b.example/") is False
    assert table["PREFIX"] == "http://a.example/"


def test_meta_field_table_is_case_insensitive() -> None:
    """Names are canonicalised to uppercase on write and read."""
    table = MetaFieldTable({"prefix": "x"})
    assert list(table) == ["PREFIX"]
    assert "Prefix" in table
    assert table.get("prefix") == "x"


def test_meta_field_table_get_with_default() -> None:
    """get() falls back to the default for missing names."""
    table = MetaFieldTable()
    assert table.get("TARGET", "{+ID}") == "{+ID}"
    assert table.get("TARGET") is None
    assert "TARGET" not in table


def test_meta_field_table_preserves_order() -> None:
    """Iteration follows insertion order."""
    table = MetaFieldTable()
    for name in ("NAME", "PREFIX", "CONTACT"):
        table.add(name, "v")
    assert list(table) == ["NAME", "PREFIX", "CONTACT"]
    assert len(table) == 3


def test_meta_field_table_non_string_membership() -> None:
    """Membership tests with non-string keys are simply False."""
    assert 1 not in MetaFieldTable({"NAME": "x"})


def test_meta_field_table_equals_mapping() -> None:
    """A table compares equal to a dict with the same items."""
    assert MetaFieldTable({"NAME": "x"}) == {"NAME": "x"}


# ###############
# RawLink
# ###############


def test_raw_link_defaults() -> None:
    """Only the source token is required."""
    link = RawLink(source="alice")
    assert link.annotation is None
    assert link.target is None
    assert not link.has_annotation
    assert not link.has_target


def test_raw_link_empty_tokens_become_none() -> None:
    """Empty annotation and target strings are stored as absent."""
    link = RawLink(source="alice", annotation="", target="")
    assert link.annotation is None
    assert link.target is None


def test_raw_link_rejects_empty_source() -> None:
    """An empty source token is not a link."""
    with pytest.raises(ValidationError):
        RawLink(source="")


def test_raw_link_is_immutable() -> None:
    """Raw links are frozen once created."""
    link = RawLink(source="alice")
    with pytest.raises(ValidationError):
        link.source = "bob"


def test_raw_link_dump() -> None:
    """model_dump gives the plain dictionary form."""
    link = RawLink(source="alice", annotation="note", target="bob")
    assert link.model_dump() == {"source": "alice", "annotation": "note", "target": "bob"}


# ###############
# Link
# ###############


def test_link_equality_and_hash() -> None:
    """Links with identical fields are equal and hash alike."""
    a = Link(source="s", target="t", relation="r")
    b = Link(source="s", target="t", relation="r")
    assert a == b
    assert hash(a) == hash(b)


def test_link_has_annotation() -> None:
    """has_annotation is False for missing and empty annotations."""
    assert Link(source="s", target="t", relation="r", annotation="a").has_annotation
    assert not Link(source="s", target="t", relation="r").has_annotation
    assert not Link(source="s", target="t", relation="r", annotation="").has_annotation


# ###############
# BeaconDump
# ###############


def test_beacon_dump_defaults() -> None:
    """An empty dump has no meta fields, links or warnings."""
    dump = BeaconDump()
    assert len(dump.meta_fields) == 0
    assert dump.raw_links == ()
    assert dump.warnings == ()
    assert dump.link_count == 0


def test_beacon_dump_link_count() -> None:
    """link_count counts raw links."""
    dump = BeaconDump(raw_links=(RawLink(source="a"), RawLink(source="b")))
    assert dump.link_count == 2
