# topmark:header:start
#
#   project      : TypeSniff
#   file         : evaluator.py
#   file_relpath : src/typesniff/magic/evaluator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Recursive evaluation of magic pattern trees.

Semantics:
    * A list of sibling patterns is OR-combined (`match_any`), evaluated left
      to right with short-circuit.
    * A pattern with children is AND-combined with all of them (`match_one`).
      Children use absolute offsets; the cursor is reset to the start of the
      content before each child is evaluated.

Evaluation depends only on the source's content: every check seeks to the
position it needs, so the cursor position before a call is irrelevant.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.magic.matcher import match_pattern_bytes

if TYPE_CHECKING:
    from collections.abc import Iterable

    from typesniff.magic.pattern import MagicPattern
    from typesniff.magic.source import ByteSource

logger: TypesniffLogger = get_logger(__name__)


def _rewind(source: ByteSource) -> None:
    try:
        source.seek(0)
    except (OSError, ValueError):
        # The next check seeks on its own and reports the failure as a non-match
        pass


def match_one(source: ByteSource, pattern: MagicPattern) -> bool:
    """Return True if ``pattern`` and all of its children match ``source``.

    Args:
        source (ByteSource): Seekable byte source.
        pattern (MagicPattern): Pattern to evaluate.

    Returns:
        bool: True if the pattern's own check succeeds and every child matches.
    """
    if not match_pattern_bytes(source, pattern):
        return False
    if not pattern.children:
        return True

    _rewind(source)
    for child in pattern.children:
        if not match_any(source, (child,)):
            logger.trace("Child %s failed under %s", child.describe(), pattern.describe())
            return False
        _rewind(source)
    return True


def match_any(source: ByteSource, patterns: Iterable[MagicPattern]) -> bool:
    """Return True as soon as one of ``patterns`` matches ``source``.

    Args:
        source (ByteSource): Seekable byte source.
        patterns (Iterable[MagicPattern]): Alternatives, evaluated in order.

    Returns:
        bool: True if any alternative matches; False for an empty list.
    """
    return any(match_one(source, pattern) for pattern in patterns)
