# topmark:header:start
#
#   project      : TypeSniff
#   file         : detector.py
#   file_relpath : src/typesniff/detector.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Detection entry points.

Combines the three classification signals:

1. content: magic patterns evaluated in registry priority order,
2. the declared type (``Content-Type`` value),
3. the filename or explicit extension,

and reduces them with [`typesniff.resolver.most_specific`][] in that order.

Content detection snapshots the source's cursor and restores it on return;
during the call the cursor moves. A source must not be shared by concurrent
detection calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.constants import BINARY
from typesniff.magic.evaluator import match_any
from typesniff.magic.source import as_byte_source
from typesniff.media_type import declared_type as parse_declared_type
from typesniff.registry import get_default_registry
from typesniff.resolver import most_specific

if TYPE_CHECKING:
    from collections.abc import Iterator

    from typesniff.magic.source import ByteInput, ByteSource
    from typesniff.registry import TypeRegistry

logger: TypesniffLogger = get_logger(__name__)


def _registry(registry: TypeRegistry | None) -> TypeRegistry:
    return registry if registry is not None else get_default_registry()


def _iter_magic_matches(source: ByteSource, registry: TypeRegistry) -> Iterator[str]:
    """Yield matching labels in priority order, restoring the cursor when done."""
    original = source.tell()
    try:
        for label, patterns in registry.priority_entries():
            source.seek(original)
            if match_any(source, patterns):
                logger.trace("Content matches %s", label)
                yield label
    finally:
        source.seek(original)


def by_magic(data: ByteInput | None, *, registry: TypeRegistry | None = None) -> str | None:
    """Return the first label whose magic patterns match ``data``.

    Args:
        data (ByteInput | None): Bytes or a seekable binary stream.
        registry (TypeRegistry | None): Registry to consult; defaults to the
            process-wide registry.

    Returns:
        str | None: The matching label, or None if nothing matches or the
            input is not a usable byte source.
    """
    source = as_byte_source(data)
    if source is None:
        return None
    matches = _iter_magic_matches(source, _registry(registry))
    try:
        return next(matches, None)
    finally:
        matches.close()


def all_by_magic(
    data: ByteInput | None,
    *,
    registry: TypeRegistry | None = None,
) -> list[str]:
    """Return every label whose magic patterns match ``data``, in priority order."""
    source = as_byte_source(data)
    if source is None:
        return []
    return list(_iter_magic_matches(source, _registry(registry)))


def by_extension(extension: str | None, *, registry: TypeRegistry | None = None) -> str | None:
    """Return the label registered for ``extension`` (leading dot optional, any case)."""
    return _registry(registry).lookup_by_extension(extension)


def extension_of(path: str | None) -> str | None:
    """Return the extension of the final component of ``path``, without the dot.

    Both ``/`` and ``\\`` are treated as separators so Windows-style names work
    on any platform. Everything after the last dot counts, so ``.bashrc`` has
    the extension ``bashrc`` while ``archive.`` and ``README`` have none.
    """
    if not path:
        return None
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    _stem, dot, ext = name.rpartition(".")
    if not dot or not ext:
        return None
    return ext


def by_path(path: str | None, *, registry: TypeRegistry | None = None) -> str | None:
    """Return the label registered for the extension of ``path``."""
    if not path or not path.strip():
        return None
    return by_extension(extension_of(path), registry=registry)


def detect(
    data: ByteInput | None = None,
    *,
    name: str | None = None,
    extension: str | None = None,
    declared_type: str | None = None,
    registry: TypeRegistry | None = None,
) -> str:
    """Determine the most appropriate media type for the given signals.

    Detection priority:
        1. Magic bytes from ``data``.
        2. ``declared_type`` (unless it is ``application/octet-stream``).
        3. The extension of ``name``, else ``extension``.
        4. ``application/octet-stream``.

    A later signal only overrides an earlier one when it names a descendant
    (e.g. PDF content with an ``.ai`` name gives ``application/illustrator``).

    Args:
        data (ByteInput | None): Content to inspect.
        name (str | None): Filename or path.
        extension (str | None): Explicit extension.
        declared_type (str | None): Declared ``Content-Type`` value.
        registry (TypeRegistry | None): Registry to consult; defaults to the
            process-wide registry.

    Returns:
        str: The detected label; never None.
    """
    reg = _registry(registry)
    content_type = by_magic(data, registry=reg)
    declared = parse_declared_type(declared_type)
    extension_type = by_path(name, registry=reg) or by_extension(extension, registry=reg)
    result = most_specific(content_type, declared, extension_type, BINARY, registry=reg)
    logger.debug(
        "Resolved content=%s declared=%s extension=%s -> %s",
        content_type,
        declared,
        extension_type,
        result,
    )
    return result or BINARY
