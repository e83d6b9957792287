# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Construction of full links from raw link tokens and meta fields.

Expands the URI patterns given by the PREFIX, TARGET and RELATION meta fields
and applies the defaults of the BEACON format. Every function here is pure.
"""

from collections.abc import Mapping
from urllib.parse import quote

from beaconlinks.model.entities import BeaconDump, Link, RawLink

# ###############
# Public Interface
# ###############

DEFAULT_PREFIX = "{+ID}"
DEFAULT_TARGET = "{+ID}"
DEFAULT_MESSAGE = ""
DEFAULT_RELATION = "http://www.w3.org/2000/01/rdf-schema#seeAlso"

RESERVED_PLACEHOLDER = "{+ID}"
SIMPLE_PLACEHOLDER = "{ID}"


def expand(pattern: str, token: str) -> str:
    """Expand a URI pattern with a token.

    ``{+ID}`` is replaced verbatim, ``{ID}`` with the percent-encoded token.
    A pattern without placeholder is treated as if it ended in ``{ID}``.

    Examples:
        >>> expand("{+ID}", "a b")
        'a b'
        >>> expand("http://example.org/{ID}", "a b")
        'http://example.org/a%20b'
        >>> expand("http://example.org/", "a/b")
        'http://example.org/a%2Fb'
    """
    if RESERVED_PLACEHOLDER in pattern:
        return pattern.replace(RESERVED_PLACEHOLDER, token)
    if SIMPLE_PLACEHOLDER in pattern:
        return pattern.replace(SIMPLE_PLACEHOLDER, percent_encode(token))
    return pattern + percent_encode(token)


def percent_encode(token: str) -> str:
    """Percent-encode every character outside the URI unreserved set."""
    return quote(token, safe="", encoding="utf-8")


def is_uri_pattern(value: str) -> bool:
    """Return True if ``value`` contains an ``{ID}`` or ``{+ID}`` placeholder."""
    return SIMPLE_PLACEHOLDER in value or RESERVED_PLACEHOLDER in value


def construct(meta_fields: Mapping[str, str], raw_link: RawLink) -> Link:
    """Construct a full link from a raw link and the meta fields of its file.

    Args:
        meta_fields: Meta fields keyed by uppercase name. Missing PREFIX,
            TARGET, MESSAGE and RELATION fall back to their defaults.
        raw_link: The tokens of one link line.

    Returns:
        The constructed :class:`Link`. Identical inputs always give an equal
        link.
    """
    prefix = meta_fields.get("PREFIX", DEFAULT_PREFIX)
    target_pattern = meta_fields.get("TARGET", DEFAULT_TARGET)
    relation = meta_fields.get("RELATION", DEFAULT_RELATION)
    message = meta_fields.get("MESSAGE", DEFAULT_MESSAGE)

    target_token = raw_link.target if raw_link.target is not None else raw_link.source

    return Link(
        source=expand(prefix, raw_link.source),
        target=expand(target_pattern, target_token),
        relation=_relation_type(relation, raw_link),
        annotation=_annotation(relation, message, raw_link),
    )


def construct_links(dump: BeaconDump) -> list[Link]:
    """Construct all links of a parsed dump in file order."""
    return [construct(dump.meta_fields, raw_link) for raw_link in dump.raw_links]


# ################
# Implementation
# ################


def _relation_type(relation: str, raw_link: RawLink) -> str:
    if is_uri_pattern(relation) and raw_link.annotation is not None:
        return expand(relation, raw_link.annotation)
    return relation


def _annotation(relation: str, message: str, raw_link: RawLink) -> str | None:
    # Any RELATION containing "://" keeps the token, pattern or not.
    if "://" in relation and raw_link.annotation:
        return raw_link.annotation
    return message or None
