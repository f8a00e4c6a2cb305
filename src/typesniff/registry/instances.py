# topmark:header:start
#
#   project      : TypeSniff
#   file         : instances.py
#   file_relpath : src/typesniff/registry/instances.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in and plugin type definitions.

Collects [`TypeDefinition`][typesniff.registry.definitions.TypeDefinition]
objects from the built-in topical modules and optionally from plugin entry
points. The collection is built lazily on first access and cached thereafter.

Notes:
    * Built-ins are imported lazily from topical modules, in a fixed order
      that doubles as the magic priority order (earlier wins).
    * Plugins are discovered via the ``typesniff.types`` entry point group and
      are appended after the built-ins.
    * The returned tuple is immutable; runtime changes go through
      [`typesniff.registry.registry.TypeRegistry`][].
"""

from __future__ import annotations

from collections.abc import Iterable as IterABC
from functools import lru_cache
from importlib import import_module
from importlib.metadata import EntryPoints, entry_points
from typing import TYPE_CHECKING, Any, Final, Iterable, Sequence, cast

from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.constants import ENTRYPOINT_GROUP

from .definitions import TypeDefinition

if TYPE_CHECKING:
    from types import ModuleType

logger: TypesniffLogger = get_logger(__name__)

_BUILTIN_MODULES: Final[tuple[str, ...]] = (
    "typesniff.registry.builtins.images",
    "typesniff.registry.builtins.documents",
    "typesniff.registry.builtins.archives",
    "typesniff.registry.builtins.media",
    "typesniff.registry.builtins.text",
)


def _iter_builtin_definitions() -> Iterable[TypeDefinition]:
    """Yield built-in TypeDefinition objects from topical modules (lazy import)."""
    for modname in _BUILTIN_MODULES:
        try:
            mod: ModuleType = import_module(modname)
        except ImportError:
            logger.exception("Failed to import built-in types from %s", modname)
            continue
        types: Any = getattr(mod, "TYPES", None)
        if not isinstance(types, list):
            logger.warning("Module %s has no TYPES list; skipping", modname)
            continue
        for obj in cast("Sequence[object]", types):
            if isinstance(obj, TypeDefinition):
                yield obj
            else:
                logger.warning("Non-TypeDefinition entry in %s.TYPES: %r", modname, obj)


def _iter_plugin_definitions() -> Iterable[TypeDefinition]:
    """Yield TypeDefinition objects provided by external plugins (entry points)."""
    try:
        eps = entry_points()
    except Exception:
        logger.exception("Failed to read entry points")
        return

    candidates: EntryPoints = eps.select(group=ENTRYPOINT_GROUP)

    for ep in candidates:
        try:
            provider: Any = ep.load()
            provided: Any = provider() if callable(provider) else provider
        except Exception:
            logger.exception("Failed loading types from entry point %s", getattr(ep, "name", ep))
            continue
        if not isinstance(provided, IterABC):
            logger.warning(
                "Entry point %s did not return an iterable of TypeDefinition objects: %r",
                getattr(ep, "name", ep),
                provided,
            )
            continue
        for obj in cast("IterABC[object]", provided):
            if isinstance(obj, TypeDefinition):
                yield obj
            else:
                logger.warning(
                    "Entry point %s provided non-TypeDefinition: %r",
                    getattr(ep, "name", ep),
                    obj,
                )


def _dedupe_by_label(items: Iterable[TypeDefinition]) -> list[TypeDefinition]:
    """Deduplicate by label (case-insensitive), preserving first occurrence order."""
    seen: set[str] = set()
    acc: list[TypeDefinition] = []
    for td in items:
        key = td.label.lower()
        if key in seen:
            logger.warning("Duplicate type label detected: %s (keeping first)", td.label)
            continue
        seen.add(key)
        acc.append(td)
    return acc


@lru_cache(maxsize=1)
def get_builtin_definitions() -> tuple[TypeDefinition, ...]:
    """Return (and cache) built-in plus plugin-provided definitions in priority order."""
    ordered: list[TypeDefinition] = list(_iter_builtin_definitions())
    ordered.extend(_iter_plugin_definitions())
    definitions = tuple(_dedupe_by_label(ordered))
    logger.debug("Loaded %d type definitions", len(definitions))
    return definitions
