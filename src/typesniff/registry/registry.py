# topmark:header:start
#
#   project      : TypeSniff
#   file         : registry.py
#   file_relpath : src/typesniff/registry/registry.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Mutable registry of media types.

The registry holds three logical tables:

* extension -> label (plus the reverse label -> extensions record),
* label -> parent labels (the type hierarchy),
* an ordered list of ``(label, patterns)`` entries that defines the order in
  which content detection tries each label.

It is pre-populated from [`typesniff.registry.instances`][] and only changes
through `TypeRegistry.extend`, `TypeRegistry.remove` and `TypeRegistry.reset`.

Typical usage:
    ```python
    from typesniff.magic import MagicPattern
    from typesniff.registry import get_default_registry

    registry = get_default_registry()
    registry.extend(
        "application/x-acme",
        extensions=["acme"],
        patterns=[MagicPattern.fixed(0, b"ACME")],
    )
    ```

Warning:
    Mutations are **initialization-time only**. No lock is taken: perform all
    `extend`/`remove`/`reset` calls single-threaded, before any detection call
    can observe the registry. Detection itself only reads and is safe for any
    number of concurrent callers once mutation has stopped.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from types import MappingProxyType
from typing import TYPE_CHECKING

from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.registry.instances import get_builtin_definitions

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Mapping

    from typesniff.magic.pattern import MagicPattern
    from typesniff.registry.definitions import TypeDefinition

logger: TypesniffLogger = get_logger(__name__)

MagicEntry = tuple[str, tuple["MagicPattern", ...]]


def normalize_extension(extension: str | None) -> str | None:
    """Normalize an extension for lookup: trimmed, leading dots removed, lowercased.

    Args:
        extension (str | None): Extension with or without leading dot.

    Returns:
        str | None: The normalized key, or None if nothing is left.
    """
    if not extension:
        return None
    key = extension.strip().lstrip(".").lower()
    return key or None


@dataclass(frozen=True)
class RegistrySnapshot:
    """Immutable copy of all registry tables.

    Attributes:
        extensions (Mapping[str, str]): Extension -> label.
        type_extensions (Mapping[str, tuple[str, ...]]): Label key -> extensions.
        parents (Mapping[str, tuple[str, ...]]): Label key -> parent labels.
        magic (tuple[MagicEntry, ...]): ``(label, patterns)`` in priority order.
        descriptions (Mapping[str, str]): Label key -> human-readable description.
    """

    extensions: Mapping[str, str]
    type_extensions: Mapping[str, tuple[str, ...]]
    parents: Mapping[str, tuple[str, ...]]
    magic: tuple[MagicEntry, ...]
    descriptions: Mapping[str, str]


class TypeRegistry:
    """Lookup tables for extension, hierarchy and magic-byte detection.

    Label keys in the extension-record and parent tables are lowercased, so
    lookups by label are case-insensitive. Labels are returned as registered.

    Args:
        definitions (Iterable[TypeDefinition] | None): Initial definitions in
            priority order. Defaults to the built-in (and plugin) definitions.
    """

    def __init__(self, definitions: Iterable[TypeDefinition] | None = None) -> None:
        self._extensions: dict[str, str] = {}
        self._type_extensions: dict[str, tuple[str, ...]] = {}
        self._parents: dict[str, tuple[str, ...]] = {}
        self._magic: list[MagicEntry] = []
        self._descriptions: dict[str, str] = {}

        self._load(get_builtin_definitions() if definitions is None else definitions)
        self._initial: RegistrySnapshot = self.snapshot()

    def _load(self, definitions: Iterable[TypeDefinition]) -> None:
        """Populate the tables from static definitions (first claim of an extension wins)."""
        for td in definitions:
            key = td.label.lower()
            if td.extensions:
                self._type_extensions[key] = tuple(td.extensions)
                for ext in td.extensions:
                    norm = normalize_extension(ext)
                    if norm is None:
                        continue
                    if norm in self._extensions:
                        logger.debug(
                            "Extension '%s' already maps to %s; ignoring claim by %s",
                            norm,
                            self._extensions[norm],
                            td.label,
                        )
                        continue
                    self._extensions[norm] = td.label
            if td.parents:
                self._parents[key] = tuple(td.parents)
            if td.patterns:
                self._magic.append((td.label, tuple(td.patterns)))
            if td.description:
                self._descriptions[key] = td.description

    # --- Read access ---

    def lookup_by_extension(self, extension: str | None) -> str | None:
        """Return the label registered for ``extension``, or None.

        Args:
            extension (str | None): Extension with or without leading dot; any case.

        Returns:
            str | None: The label, or None for an empty or unknown extension.
        """
        key = normalize_extension(extension)
        if key is None:
            return None
        return self._extensions.get(key)

    def priority_entries(self) -> tuple[MagicEntry, ...]:
        """Return ``(label, patterns)`` entries in content-detection order."""
        return tuple(self._magic)

    def parents_of(self, label: str | None) -> tuple[str, ...]:
        """Return the direct parents registered for ``label`` (empty if none)."""
        if not label:
            return ()
        return self._parents.get(label.lower(), ())

    def extensions_of(self, label: str | None) -> tuple[str, ...]:
        """Return the extensions recorded for ``label`` (empty if none)."""
        if not label:
            return ()
        return self._type_extensions.get(label.lower(), ())

    def patterns_of(self, label: str | None) -> tuple[MagicPattern, ...]:
        """Return all magic patterns registered for ``label``, in priority order."""
        if not label:
            return ()
        key = label.lower()
        return tuple(p for lbl, patterns in self._magic if lbl.lower() == key for p in patterns)

    def description_of(self, label: str | None) -> str:
        """Return the description recorded for ``label`` (empty if none)."""
        if not label:
            return ""
        return self._descriptions.get(label.lower(), "")

    def labels(self) -> tuple[str, ...]:
        """Return every label known to any table (sorted, case-insensitively unique)."""
        seen: dict[str, str] = {}
        for label in self._extensions.values():
            seen.setdefault(label.lower(), label)
        for label, _patterns in self._magic:
            seen.setdefault(label.lower(), label)
        for key in [*self._parents, *self._type_extensions, *self._descriptions]:
            seen.setdefault(key, key)
        return tuple(sorted(seen.values(), key=str.lower))

    def extension_map(self) -> Mapping[str, str]:
        """Return a read-only view of the extension -> label table."""
        return MappingProxyType(self._extensions)

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str) or not label:
            return False
        return label.lower() in {lbl.lower() for lbl in self.labels()}

    def __iter__(self) -> Iterator[str]:
        return iter(self.labels())

    def snapshot(self) -> RegistrySnapshot:
        """Return an immutable copy of the current tables."""
        return RegistrySnapshot(
            extensions=MappingProxyType(dict(self._extensions)),
            type_extensions=MappingProxyType(dict(self._type_extensions)),
            parents=MappingProxyType(dict(self._parents)),
            magic=tuple(self._magic),
            descriptions=MappingProxyType(dict(self._descriptions)),
        )

    # --- Mutation (initialization time only) ---

    def extend(
        self,
        label: str,
        *,
        extensions: Iterable[str] | None = None,
        parents: Iterable[str] | None = None,
        patterns: Iterable[MagicPattern] | None = None,
        description: str | None = None,
    ) -> None:
        """Add or update a media type.

        Each facet is optional; a missing or empty facet leaves the existing
        data for that facet untouched.

        Args:
            label (str): Media type to define or update.
            extensions (Iterable[str] | None): Replaces the label's extension set.
                Every extension key is (re)pointed at ``label``; the newest call
                wins when several labels claim the same extension.
            parents (Iterable[str] | None): Replaces the label's parent set.
            patterns (Iterable[MagicPattern] | None): Added as a new entry at the
                **front** of the priority list, so later registrations are
                tried before built-in and earlier ones.
            description (str | None): Replaces the label's description.

        Notes:
            Not safe to interleave with concurrent detection; call during
            application start-up.
        """
        if not label:
            return
        key = label.lower()

        ext_pairs = [(e, n) for e in (extensions or ()) if (n := normalize_extension(e))]
        if ext_pairs:
            self._type_extensions[key] = tuple(ext for ext, _norm in ext_pairs)
            for _ext, norm in ext_pairs:
                self._extensions[norm] = label
            logger.debug("Mapped extensions %s to %s", [ext for ext, _norm in ext_pairs], label)

        parent_list = [p for p in (parents or ()) if p]
        if parent_list:
            self._parents[key] = tuple(parent_list)
            logger.debug("Set parents of %s to %s", label, parent_list)

        pattern_list = tuple(patterns or ())
        if pattern_list:
            self._magic.insert(0, (label, pattern_list))
            logger.debug("Prepended %d magic pattern(s) for %s", len(pattern_list), label)

        if description:
            self._descriptions[key] = description

    def remove(self, label: str) -> None:
        """Remove ``label`` from every table.

        Drops each extension mapped to ``label``, its extension record, its
        parent record and its magic entries. References to ``label`` in *other*
        labels' parent lists are kept; they never match a hierarchy query
        because ``label`` no longer has parents of its own.

        Notes:
            Not safe to interleave with concurrent detection; call during
            application start-up.
        """
        if not label:
            return
        key = label.lower()
        for ext in [e for e, lbl in self._extensions.items() if lbl.lower() == key]:
            del self._extensions[ext]
        self._type_extensions.pop(key, None)
        self._parents.pop(key, None)
        self._descriptions.pop(key, None)
        self._magic = [entry for entry in self._magic if entry[0].lower() != key]
        logger.debug("Removed type %s", label)

    def reset(self) -> None:
        """Restore the tables captured when this registry was created."""
        initial = self._initial
        self._extensions = dict(initial.extensions)
        self._type_extensions = dict(initial.type_extensions)
        self._parents = dict(initial.parents)
        self._magic = list(initial.magic)
        self._descriptions = dict(initial.descriptions)
        logger.debug("Registry reset to its initial state")


@lru_cache(maxsize=1)
def get_default_registry() -> TypeRegistry:
    """Return (and cache) the process-wide registry built from the built-in tables."""
    return TypeRegistry()
