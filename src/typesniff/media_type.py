# topmark:header:start
#
#   project      : TypeSniff
#   file         : media_type.py
#   file_relpath : src/typesniff/media_type.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parsing of declared media types (``Content-Type`` style values)."""

from __future__ import annotations

import re
from typing import Final

from typesniff.constants import BINARY

_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[;,\s]+")


def parse_media_type(value: str | None) -> str | None:
    """Extract the bare ``type/subtype`` token from a header-like value.

    The value is lowercased and split on ``;``, ``,`` and whitespace; the first
    non-empty segment is kept if it contains exactly one ``/`` separating two
    non-empty halves.

    Args:
        value (str | None): E.g. ``"text/html; charset=utf-8"``.

    Returns:
        str | None: E.g. ``"text/html"``, or None for empty or invalid input.
    """
    if not value or not value.strip():
        return None
    parts = [p for p in _SEPARATORS.split(value.lower()) if p]
    if not parts:
        return None
    token = parts[0]
    major, sep, minor = token.partition("/")
    if not sep or not major or not minor or "/" in minor:
        return None
    return token


def declared_type(value: str | None) -> str | None:
    """Return the parsed declared type, treating the binary sentinel as undeclared.

    ``application/octet-stream`` carries no information about the content,
    so it yields None and lets the other signals decide.
    """
    parsed = parse_media_type(value)
    if parsed == BINARY:
        return None
    return parsed
