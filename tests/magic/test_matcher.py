# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_matcher.py
#   file_relpath : tests/magic/test_matcher.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for fixed and range byte checks."""

from __future__ import annotations

import io

import pytest

from typesniff.magic.matcher import match_fixed, match_pattern_bytes, match_range
from typesniff.magic.pattern import MagicPattern


def _src(data: bytes) -> io.BytesIO:
    return io.BytesIO(data)


def test_fixed_matches_at_offset_zero() -> None:
    assert match_fixed(_src(b"%PDF-1.7"), 0, b"%PDF")


def test_fixed_matches_at_nonzero_offset() -> None:
    assert match_fixed(_src(b"RIFF\x00\x00\x00\x00WEBPVP8 "), 8, b"WEBP")


def test_fixed_rejects_mismatch() -> None:
    assert not match_fixed(_src(b"%PDX-1.7"), 0, b"%PDF")


@pytest.mark.parametrize(("data", "offset"), [(b"", 0), (b"%PD", 0), (b"xx%PD", 2)])
def test_fixed_rejects_short_content(data: bytes, offset: int) -> None:
    assert not match_fixed(_src(data), offset, b"%PDF")


def test_fixed_needs_whole_value_inside_content() -> None:
    # length == offset + len(value) is the tightest accepted case
    assert match_fixed(_src(b"abcd"), 2, b"cd")
    assert not match_fixed(_src(b"abc"), 2, b"cd")


def test_fixed_empty_value_never_matches() -> None:
    assert not match_fixed(_src(b"anything"), 0, b"")


def test_range_finds_value_within_window() -> None:
    data = b"....OUTER...."
    assert match_range(_src(data), 0, 8, b"OUTER")
    assert match_range(_src(data), 4, 4, b"OUTER")


def test_range_window_excludes_late_start() -> None:
    data = b"0123456789OUTER"
    # The value starts at 10, beyond the last allowed start position 9
    assert not match_range(_src(data), 0, 9, b"OUTER")
    assert match_range(_src(data), 0, 10, b"OUTER")


def test_range_clamps_window_to_available_content() -> None:
    assert match_range(_src(b"..abc"), 0, 1000, b"abc")


def test_range_start_beyond_content() -> None:
    assert not match_range(_src(b"abc"), 10, 20, b"abc")


def test_range_content_shorter_than_value() -> None:
    assert not match_range(_src(b"ab"), 0, 5, b"abc")


def test_inverted_range_never_matches() -> None:
    data = b"x" * 32
    assert not match_range(_src(data), 10, 2, b"x")
    assert not match_pattern_bytes(_src(data), MagicPattern.range(10, 2, b"x"))


def test_negative_offsets_never_match() -> None:
    data = b"abcdef"
    assert not match_fixed(_src(data), -1, b"a")
    assert not match_range(_src(data), -4, 2, b"a")


def test_match_pattern_bytes_ignores_children() -> None:
    pattern = MagicPattern.fixed(0, b"AB", (MagicPattern.fixed(5, b"ZZ"),))
    assert match_pattern_bytes(_src(b"ABxxxxx"), pattern)


class _BrokenStream(io.BytesIO):
    def seek(self, *args: object, **kwargs: object) -> int:
        raise OSError("device gone")


def test_io_failure_is_a_non_match() -> None:
    stream = _BrokenStream(b"%PDF-1.7")
    assert not match_fixed(stream, 0, b"%PDF")
    assert not match_range(stream, 0, 4, b"PDF")
