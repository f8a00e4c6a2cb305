# topmark:header:start
#
#   project      : TypeSniff
#   file         : matcher.py
#   file_relpath : src/typesniff/magic/matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-pattern byte checks.

These functions decide whether *one* pattern matches a byte source, ignoring
its children (see [`typesniff.magic.evaluator`][] for tree evaluation).

Both checks are total: insufficient content, a malformed pattern or any I/O
failure while seeking or reading collapses to ``False``. They move the
source's cursor; callers must not rely on its position afterwards.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from typesniff.config.logging import TypesniffLogger, get_logger
from typesniff.magic.source import read_exactly, read_up_to, source_length

if TYPE_CHECKING:
    from typesniff.magic.pattern import MagicPattern
    from typesniff.magic.source import ByteSource

logger: TypesniffLogger = get_logger(__name__)


def match_fixed(source: ByteSource, offset: int, value: bytes) -> bool:
    """Return True if ``value`` occurs at exactly ``offset`` in ``source``.

    Args:
        source (ByteSource): Seekable byte source.
        offset (int): Absolute position of the first byte of ``value``.
        value (bytes): Expected bytes.

    Returns:
        bool: True on a byte-for-byte match; False otherwise.
    """
    if not value or offset < 0:
        logger.trace("Malformed fixed pattern at offset %d ignored", offset)
        return False
    try:
        if source_length(source) < offset + len(value):
            return False
        source.seek(offset)
        data = read_exactly(source, len(value))
    except (OSError, ValueError) as exc:
        logger.trace("Read failed at offset %d: %s", offset, exc)
        return False
    return data == value


def match_range(source: ByteSource, start: int, end: int, value: bytes) -> bool:
    """Return True if ``value`` starts anywhere in ``[start, end]`` of ``source``.

    The search window spans ``end - start + len(value)`` bytes from ``start``,
    clamped to the content that is actually available.

    Args:
        source (ByteSource): Seekable byte source.
        start (int): First allowed start position.
        end (int): Last allowed start position.
        value (bytes): Bytes to search for.

    Returns:
        bool: True if the window contains ``value``; False otherwise.
    """
    if not value or start < 0 or end < start:
        logger.trace("Malformed range pattern %d..%d ignored", start, end)
        return False
    try:
        window = min(end - start + len(value), source_length(source) - start)
        if window <= 0:
            return False
        source.seek(start)
        data = read_up_to(source, window)
    except (OSError, ValueError) as exc:
        logger.trace("Read failed in range %d..%d: %s", start, end, exc)
        return False
    if len(data) < len(value):
        return False
    return value in data


def match_pattern_bytes(source: ByteSource, pattern: MagicPattern) -> bool:
    """Check ``pattern``'s own bytes against ``source`` (children are ignored)."""
    if pattern.offset_end is not None:
        return match_range(source, pattern.offset_start, pattern.offset_end, pattern.value)
    return match_fixed(source, pattern.offset_start, pattern.value)
