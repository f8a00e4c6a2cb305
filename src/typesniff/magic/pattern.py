# topmark:header:start
#
#   project      : TypeSniff
#   file         : pattern.py
#   file_relpath : src/typesniff/magic/pattern.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Magic byte patterns used for content-based type detection.

A `MagicPattern` checks a byte value either at a fixed offset or anywhere in
a bounded offset range. A pattern may own child patterns; when the parent
matches, **all** children must match as well. Child offsets are absolute
(measured from the start of the content), not relative to the parent.

Example:
    PDF content produced by Adobe Illustrator::

        MagicPattern.fixed(
            0,
            b"%PDF-",
            children=(MagicPattern.range(1, 4096, b"<</Creator (Adobe Illustrator"),),
        )
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class MagicPattern:
    """A single magic byte check with optional nested children.

    Attributes:
        offset_start (int): Exact position for a fixed pattern, or the first
            position of the search window for a range pattern.
        value (bytes): Byte sequence to look for. An empty value,
            a negative offset or a range ending before it starts never matches.
        offset_end (int | None): Last position at which a match may *start*
            for a range pattern; ``None`` for a fixed pattern.
        children (tuple[MagicPattern, ...]): Patterns that must all match
            (AND) once this pattern matched.
    """

    offset_start: int
    value: bytes
    offset_end: int | None = None
    children: tuple[MagicPattern, ...] = field(default=())

    def __post_init__(self) -> None:
        # Accept any iterable of children but store an immutable tuple
        if not isinstance(self.children, tuple):
            object.__setattr__(self, "children", tuple(self.children))

    @classmethod
    def fixed(
        cls,
        offset: int,
        value: bytes,
        children: tuple[MagicPattern, ...] | list[MagicPattern] = (),
    ) -> MagicPattern:
        """Build a pattern matching ``value`` at exactly ``offset``."""
        return cls(offset_start=offset, value=bytes(value), children=tuple(children))

    @classmethod
    def range(
        cls,
        start: int,
        end: int,
        value: bytes,
        children: tuple[MagicPattern, ...] | list[MagicPattern] = (),
    ) -> MagicPattern:
        """Build a pattern matching ``value`` starting anywhere in ``[start, end]``."""
        return cls(offset_start=start, value=bytes(value), offset_end=end, children=tuple(children))

    @property
    def is_range(self) -> bool:
        """Return True if this pattern uses a range offset rather than a fixed offset."""
        return self.offset_end is not None

    @property
    def has_children(self) -> bool:
        """Return True if this pattern carries nested child patterns."""
        return bool(self.children)

    def describe(self) -> str:
        """Return a compact, human-readable description (used in logs and the CLI)."""
        where = (
            f"{self.offset_start}..{self.offset_end}" if self.is_range else f"{self.offset_start}"
        )
        text = f"@{where} {self.value!r}"
        if self.children:
            text += " & (" + ", ".join(child.describe() for child in self.children) + ")"
        return text
