# topmark:header:start
#
#   project      : TypeSniff
#   file         : source.py
#   file_relpath : src/typesniff/magic/source.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Byte sources for magic matching.

The matcher needs a finite, randomly seekable, length-reporting byte sequence.
Binary file objects (``open(path, "rb")``, ``io.BytesIO``) satisfy this
directly; raw ``bytes``-like values are wrapped in ``io.BytesIO``.
"""

from __future__ import annotations

import io
import os
from typing import IO, Union

from typesniff.config.logging import TypesniffLogger, get_logger

logger: TypesniffLogger = get_logger(__name__)

ByteSource = IO[bytes]
"""A seekable binary stream."""

ByteInput = Union[bytes, bytearray, memoryview, IO[bytes]]
"""Anything accepted by the public detection functions."""


def as_byte_source(data: ByteInput | None) -> ByteSource | None:
    """Return a seekable byte source for ``data``, or None if it cannot be used.

    Args:
        data (ByteInput | None): Raw bytes or a binary file object.

    Returns:
        ByteSource | None: A seekable stream, or ``None`` for ``None`` input and
            for streams that are closed or not seekable.
    """
    if data is None:
        return None
    if isinstance(data, (bytes, bytearray, memoryview)):
        return io.BytesIO(bytes(data))
    try:
        if data.closed or not data.seekable():
            return None
    except (AttributeError, ValueError, OSError):
        logger.debug("Object %r is not a usable byte source", data)
        return None
    return data


def source_length(source: ByteSource) -> int:
    """Return the total length of ``source`` in bytes.

    The current cursor position is preserved.

    Raises:
        OSError: If the underlying stream cannot seek.
    """
    current = source.tell()
    try:
        return source.seek(0, os.SEEK_END)
    finally:
        source.seek(current)


def read_exactly(source: ByteSource, size: int) -> bytes | None:
    """Read ``size`` bytes from the current position, or None on a short read.

    File objects may return fewer bytes than requested per call, so reads are
    repeated until ``size`` bytes were collected or the stream is exhausted.
    """
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            return None
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_up_to(source: ByteSource, size: int) -> bytes:
    """Read at most ``size`` bytes from the current position."""
    chunks: list[bytes] = []
    remaining = size
    while remaining > 0:
        chunk = source.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)
