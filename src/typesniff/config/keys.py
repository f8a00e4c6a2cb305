# topmark:header:start
#
#   project      : TypeSniff
#   file         : keys.py
#   file_relpath : src/typesniff/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for TypeSniff configuration.

Keys defined here are the *external configuration API* as it appears in
``typesniff.toml`` and in ``[tool.typesniff]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by TypeSniff configuration."""

    # [types."<label>"]
    SECTION_TYPES: Final[str] = "types"

    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_PARENTS: Final[str] = "parents"
    KEY_DESCRIPTION: Final[str] = "description"

    # [[types."<label>".magic]]
    KEY_MAGIC: Final[str] = "magic"

    KEY_OFFSET: Final[str] = "offset"
    KEY_RANGE: Final[str] = "range"
    KEY_VALUE: Final[str] = "value"
    KEY_HEX: Final[str] = "hex"
    KEY_CHILDREN: Final[str] = "children"

    # Top-level list of labels to drop
    KEY_REMOVE: Final[str] = "remove"
