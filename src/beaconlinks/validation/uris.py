# Copyright 2026 beaconlinks Contributors
# SPDX-License-Identifier: Apache-2.0

"""Syntactic URI checks used by the validation rules."""

import re
from urllib.parse import urlsplit

from beaconlinks.construction.constructor import is_uri_pattern

# ###############
# Public Interface
# ###############


def is_valid_uri(value: str) -> bool:
    """Return True if ``value`` is a syntactically valid absolute URI.

    The value must consist of RFC 3986 characters only, start with a scheme,
    use well-formed percent escapes, and name a host when the scheme is a
    network scheme such as ``http``.
    """
    if not value or _URI_CHARS_RE.fullmatch(value) is None:
        return False
    if _BAD_ESCAPE_RE.search(value) is not None:
        return False
    if _SCHEME_RE.match(value) is None:
        return False

    try:
        parts = urlsplit(value)
        if parts.scheme in _NETWORK_SCHEMES:
            # Accessing port validates it.
            return bool(parts.hostname) and (parts.port is None or parts.port >= 0)
    except ValueError:
        return False
    return bool(parts.netloc or parts.path)


def is_valid_uri_or_pattern(value: str) -> bool:
    """Return True if ``value`` is a valid URI or contains an ID placeholder."""
    return is_valid_uri(value) or is_uri_pattern(value)


# ################
# Implementation
# ################

_URI_CHARS_RE = re.compile(r"[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=%]+")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
_SCHEME_RE = re.compile(r"[A-Za-z][A-Za-z0-9+.\-]*:")
_NETWORK_SCHEMES = frozenset({"http", "https", "ftp", "ftps", "ws", "wss"})
