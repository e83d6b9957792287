# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Core entities of a parsed BEACON link dump."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field

from pydantic import BaseModel, ConfigDict, field_validator

# ###############
# Public Interface
# ###############


class MetaFieldTable(Mapping[str, str]):
    """Ordered mapping of canonical (uppercase) meta field names to values.

    The first assignment of a name wins; later assignments are rejected by
    :meth:`add`. Lookups are case-insensitive so that ``table["prefix"]`` and
    ``table["PREFIX"]`` refer to the same entry.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = {}
        for name, value in (entries or {}).items():
            self.add(name, value)

    def add(self, name: str, value: str) -> bool:
        """Record a value unless the name is already present.

        Returns:
            True if the value was recorded, False if it was a duplicate.
        """
        key = name.upper()
        if key in self._entries:
            return False
        self._entries[key] = value
        return True

    def __getitem__(self, name: str) -> str:
        return self._entries[name.upper()]

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"MetaFieldTable({self._entries!r})"


class RawLink(BaseModel):
    """A link line as tokenized by the parser, before pattern expansion.

    Empty annotation or target tokens are stored as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    source: str
    annotation: str | None = None
    target: str | None = None

    @field_validator("source")
    @classmethod
    def _source_not_empty(cls, value: str) -> str:
        if value == "":
            raise ValueError("source token must not be empty")
        return value

    @field_validator("annotation", "target")
    @classmethod
    def _empty_to_none(cls, value: str | None) -> str | None:
        return value if value else None

    @property
    def has_annotation(self) -> bool:
        return self.annotation is not None

    @property
    def has_target(self) -> bool:
        return self.target is not None


class Link(BaseModel):
    """A fully constructed link between a source and a target identifier."""

    model_config = ConfigDict(frozen=True)

    source: str
    target: str
    relation: str
    annotation: str | None = None

    @property
    def has_annotation(self) -> bool:
        return bool(self.annotation)


@dataclass(frozen=True)
class BeaconDump:
    """Parse output of a single BEACON file.

    Attributes:
        meta_fields: Meta fields in order of first appearance.
        raw_links: Link lines in file order.
        warnings: Non-fatal issues noticed while parsing (duplicate meta fields).
    """

    meta_fields: MetaFieldTable = field(default_factory=MetaFieldTable)
    raw_links: tuple[RawLink, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def link_count(self) -> int:
        return len(self.raw_links)
