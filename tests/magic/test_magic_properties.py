# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_magic_properties.py
#   file_relpath : tests/magic/test_magic_properties.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for the magic matching engine.

Filler bytes are drawn from ``0x00..0x7f`` and pattern values from
``0x80..0xff`` so a value can never occur in a buffer by accident.
"""

from __future__ import annotations

import io

from hypothesis import given, settings
from hypothesis import strategies as st

from typesniff.magic import MagicPattern, match_one

s_filler = st.binary(max_size=96).map(lambda b: bytes(x & 0x7F for x in b))
s_value = st.binary(min_size=1, max_size=8).map(lambda b: bytes(x | 0x80 for x in b))
s_offset = st.integers(min_value=0, max_value=64)


@settings(max_examples=200)
@given(offset=s_offset, value=s_value, data=st.binary(max_size=80))
def test_fixed_pattern_never_matches_short_source(offset: int, value: bytes, data: bytes) -> None:
    """A source shorter than ``offset + len(value)`` never matches a fixed pattern."""
    truncated = data[: max(0, offset + len(value) - 1)]
    pattern = MagicPattern.fixed(offset, value)
    assert not match_one(io.BytesIO(truncated), pattern)


@settings(max_examples=200)
@given(
    start=s_offset,
    span=st.integers(min_value=0, max_value=32),
    value=s_value,
    filler=s_filler,
    data=st.data(),
)
def test_range_pattern_matches_exactly_inside_window(
    start: int,
    span: int,
    value: bytes,
    filler: bytes,
    data: st.DataObject,
) -> None:
    """Inserting the value at a start position in ``[s, e]`` matches; after ``e`` it does not."""
    end = start + span
    pattern = MagicPattern.range(start, end, value)

    inside = data.draw(st.integers(min_value=start, max_value=end), label="inside")
    buf = filler.ljust(inside, b"\x00")[:inside] + value + filler
    assert match_one(io.BytesIO(buf), pattern)

    outside = data.draw(st.integers(min_value=end + 1, max_value=end + 40), label="outside")
    buf = filler.ljust(outside, b"\x00")[:outside] + value + filler
    assert not match_one(io.BytesIO(buf), pattern)


@settings(max_examples=200)
@given(
    parent_value=s_value,
    child_value=s_value,
    child_offset=st.integers(min_value=8, max_value=40),
    filler=s_filler,
)
def test_child_is_and_combined_with_parent(
    parent_value: bytes,
    child_value: bytes,
    child_offset: int,
    filler: bytes,
) -> None:
    """Breaking either the parent's or the child's bytes flips a match to a non-match."""
    pattern = MagicPattern.fixed(0, parent_value, (MagicPattern.fixed(child_offset, child_value),))
    # child_offset >= 8 keeps the child clear of the (at most 8 byte) parent value
    size = child_offset + len(child_value) + len(filler)
    base = bytearray(filler.ljust(size, b"\x00"))

    both = bytearray(base)
    both[0 : len(parent_value)] = parent_value
    both[child_offset : child_offset + len(child_value)] = child_value
    assert match_one(io.BytesIO(bytes(both)), pattern)

    no_parent = bytearray(both)
    no_parent[0] = 0x00
    assert not match_one(io.BytesIO(bytes(no_parent)), pattern)

    no_child = bytearray(both)
    no_child[child_offset] = 0x00
    assert not match_one(io.BytesIO(bytes(no_child)), pattern)
