# topmark:header:start
#
#   project      : TypeSniff
#   file         : resolver.py
#   file_relpath : src/typesniff/resolver.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type hierarchy queries and specificity resolution.

Both functions read only the registry's parent table.

`most_specific` is a left fold, not a true maximum over the partial order:
starting from the first candidate, a later candidate replaces the running
value only if it descends from it. With unrelated candidates the earliest
one wins, so callers pass candidates in precedence order (content, declared
type, extension). For example ``most_specific("text/csv", "text/plain")``
and ``most_specific("text/plain", "text/csv")`` both return ``"text/csv"``,
while ``most_specific("image/png", "text/plain")`` returns ``"image/png"``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.registry import get_default_registry

if TYPE_CHECKING:
    from typesniff.registry import TypeRegistry


def _is_child_of(
    candidate: str,
    ancestor: str,
    registry: TypeRegistry,
    visited: set[str],
) -> bool:
    if candidate.lower() == ancestor.lower():
        return True
    key = candidate.lower()
    if key in visited:
        # Cyclic parent data: fail safe for this branch
        return False
    visited.add(key)
    return any(
        _is_child_of(parent, ancestor, registry, visited)
        for parent in registry.parents_of(candidate)
        if parent
    )


def is_child_of(
    candidate: str | None,
    ancestor: str | None,
    registry: TypeRegistry | None = None,
) -> bool:
    """Return True if ``candidate`` equals or descends from ``ancestor``.

    Args:
        candidate (str | None): Potential descendant label.
        ancestor (str | None): Potential ancestor label.
        registry (TypeRegistry | None): Registry to consult; defaults to the
            process-wide registry.

    Returns:
        bool: True for equal labels (case-insensitive) or when ``ancestor`` is
            reachable through the registered parents of ``candidate``; False
            for empty input on either side.
    """
    if not candidate or not ancestor:
        return False
    reg = registry if registry is not None else get_default_registry()
    return _is_child_of(candidate, ancestor, reg, set())


def most_specific(
    *candidates: str | None,
    registry: TypeRegistry | None = None,
) -> str | None:
    """Select the most specific label among ``candidates``.

    Args:
        *candidates (str | None): Candidate labels in precedence order. Empty
            values and case-insensitive duplicates are dropped (first kept).
        registry (TypeRegistry | None): Registry to consult; defaults to the
            process-wide registry.

    Returns:
        str | None: The selected label, or None if no candidate remains.
    """
    valid: list[str] = []
    seen: set[str] = set()
    for candidate in candidates:
        if candidate is None or not candidate.strip():
            continue
        if candidate.lower() in seen:
            continue
        seen.add(candidate.lower())
        valid.append(candidate)

    if not valid:
        return None
    if len(valid) == 1:
        return valid[0]

    reg = registry if registry is not None else get_default_registry()
    current = valid[0]
    for candidate in valid[1:]:
        if is_child_of(candidate, current, reg):
            current = candidate
    return current
