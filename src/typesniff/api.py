# topmark:header:start
#
#   project      : TypeSniff
#   file         : api.py
#   file_relpath : src/typesniff/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public TypeSniff API (stable surface).

Functions here are thin wrappers around the detector, resolver and registry.
Every function accepts an optional ``registry=`` handle; when omitted the
process-wide registry from
[`typesniff.registry.get_default_registry`][] is used.

```python
from typesniff import api

api.detect(b"\\x89PNG\\r\\n\\x1a\\n")                      # "image/png"
api.detect(name="report.pdf")                            # "application/pdf"
api.detect(declared_type="text/html; charset=utf-8")     # "text/html"

api.extend(
    "application/x-acme",
    extensions=["acme"],
    magic=[api.MagicPattern.fixed(0, b"ACME")],
)
```

Mutation contract:
    `extend`, `remove`, `reset` and `load_config` change shared tables
    without locking. Call them during start-up, before detection runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.loaders import ConfigError, apply_config, discover_config
from typesniff.constants import BINARY, TYPESNIFF_VERSION
from typesniff.detector import all_by_magic, by_extension, by_magic, by_path, detect
from typesniff.magic.pattern import MagicPattern
from typesniff.media_type import declared_type, parse_media_type
from typesniff.registry import TypeRegistry, get_default_registry
from typesniff.resolver import is_child_of, most_specific

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

__all__ = [
    "BINARY",
    "ConfigError",
    "MagicPattern",
    "TypeRegistry",
    "all_by_magic",
    "by_extension",
    "by_magic",
    "by_path",
    "declared_type",
    "detect",
    "extend",
    "get_default_registry",
    "is_child_of",
    "load_config",
    "most_specific",
    "parse_media_type",
    "remove",
    "reset",
    "version",
]


def extend(
    label: str,
    *,
    extensions: Iterable[str] | None = None,
    parents: Iterable[str] | None = None,
    magic: Iterable[MagicPattern] | None = None,
    description: str | None = None,
    registry: TypeRegistry | None = None,
) -> None:
    """Define or update a media type.

    See [`TypeRegistry.extend`][typesniff.registry.registry.TypeRegistry.extend]
    for the per-facet semantics. Magic patterns registered here are tried
    before every built-in pattern.
    """
    reg = registry if registry is not None else get_default_registry()
    reg.extend(
        label,
        extensions=extensions,
        parents=parents,
        patterns=magic,
        description=description,
    )


def remove(label: str, *, registry: TypeRegistry | None = None) -> None:
    """Remove a media type with its extensions, parents and magic patterns."""
    reg = registry if registry is not None else get_default_registry()
    reg.remove(label)


def reset(*, registry: TypeRegistry | None = None) -> None:
    """Discard all custom definitions and restore the built-in tables."""
    reg = registry if registry is not None else get_default_registry()
    reg.reset()


def load_config(
    path: Path | None = None,
    *,
    cwd: Path | None = None,
    registry: TypeRegistry | None = None,
) -> Path | None:
    """Discover (or read ``path``) and apply a TypeSniff configuration document.

    Returns:
        Path | None: The configuration file that was applied, or None if no
            configuration was found.

    Raises:
        ConfigError: If the document is malformed.
    """
    table, source = discover_config(cwd, explicit=path)
    if source is None:
        return None
    apply_config(table, registry if registry is not None else get_default_registry())
    return source


def version() -> str:
    """Return the installed TypeSniff version."""
    return TYPESNIFF_VERSION
