# topmark:header:start
#
#   project      : TypeSniff
#   file         : definitions.py
#   file_relpath : src/typesniff/registry/definitions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static type definitions.

A `TypeDefinition` bundles everything TypeSniff knows about one label: the
filename extensions that map to it, its parent labels in the type hierarchy,
and the ordered magic patterns that recognize its content. Built-in tables and
plugins both provide lists of these objects; the
[`typesniff.registry.registry.TypeRegistry`][] flattens them into its lookup
tables.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typesniff.magic.pattern import MagicPattern


@dataclass(frozen=True)
class TypeDefinition:
    """Definition of a single media type.

    Attributes:
        label (str): Media type identifier (e.g. ``"image/png"``).
        extensions (tuple[str, ...]): Filename extensions without the leading dot.
        parents (tuple[str, ...]): Direct parent labels. A label may descend from
            several ancestors (e.g. an XML-based format inside a ZIP container).
        patterns (tuple[MagicPattern, ...]): Alternative magic patterns (OR).
        description (str): Human-readable description.
    """

    label: str
    extensions: tuple[str, ...] = ()
    parents: tuple[str, ...] = ()
    patterns: tuple[MagicPattern, ...] = field(default=())
    description: str = ""
