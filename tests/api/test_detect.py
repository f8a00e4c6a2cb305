# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_detect.py
#   file_relpath : tests/api/test_detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""End-to-end detection tests through the public API."""

from __future__ import annotations

import io

import pytest

from typesniff import api
from typesniff.detector import extension_of


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        (b"\xff\xd8\xff\xe0\x00\x10", "image/jpeg"),
        (b"\x89PNG\r\n\x1a\n", "image/png"),
        (b"GIF87a\x01\x00", "image/gif"),
        (b"GIF89a\x01\x00", "image/gif"),
        (b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n", "application/pdf"),
        (b"PK\x03\x04\x14\x00\x00\x00", "application/zip"),
        (b"RIFF\x24\x00\x00\x00WEBPVP8 ", "image/webp"),
        (b"RIFF\x24\x00\x00\x00WAVEfmt ", "audio/vnd.wave"),
        (b"fLaC\x00\x00\x00\x22", "audio/flac"),
        (b"OggS\x00\x02" + b"\x00" * 23 + b"vorbis", "audio/vorbis"),
        (b"\x1f\x8b\x08\x00", "application/gzip"),
        (b"\x7fELF\x02\x01\x01", "application/x-executable"),
    ],
)
def test_by_magic(data: bytes, expected: str) -> None:
    assert api.by_magic(data) == expected


def test_by_magic_no_match() -> None:
    assert api.by_magic(b"\x01\x02\x03\x04") is None
    assert api.by_magic(b"") is None
    assert api.by_magic(None) is None


def test_illustrator_content_beats_plain_pdf() -> None:
    data = b"%PDF-1.5\n%\xe2\xe3\n1 0 obj\n<</Creator (Adobe Illustrator CS6)>>\n"
    assert api.by_magic(data) == "application/illustrator"


def test_all_by_magic_lists_matches_in_priority_order() -> None:
    data = b"%PDF-1.5\n<</Creator (Adobe Illustrator CS6)>>\n"
    assert api.all_by_magic(data)[:2] == ["application/illustrator", "application/pdf"]
    assert api.all_by_magic(b"\x01\x02") == []


def test_stream_cursor_is_restored() -> None:
    stream = io.BytesIO(b"xx\x89PNG\r\n\x1a\n")
    stream.seek(2)
    # Matching uses absolute offsets within the whole stream
    assert api.by_magic(stream) is None
    assert stream.tell() == 2

    stream = io.BytesIO(b"\x89PNG\r\n\x1a\n")
    stream.seek(5)
    assert api.detect(stream) == "image/png"
    assert stream.tell() == 5


def test_closed_stream_is_not_a_source() -> None:
    stream = io.BytesIO(b"\x89PNG\r\n\x1a\n")
    stream.close()
    assert api.by_magic(stream) is None


@pytest.mark.parametrize(
    ("ext", "expected"),
    [
        ("jpg", "image/jpeg"),
        (".jpg", "image/jpeg"),
        ("JPG", "image/jpeg"),
        ("Pdf", "application/pdf"),
        ("   ", None),
        ("", None),
        (None, None),
        ("no-such-extension", None),
    ],
)
def test_by_extension(ext: str | None, expected: str | None) -> None:
    assert api.by_extension(ext) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("C:\\Documents\\file.pdf", "application/pdf"),
        ("/home/user/photo.JPEG", "image/jpeg"),
        ("archive.tar.gz", "application/gzip"),
        ("filename", None),
        (".bashrc", None),
        ("", None),
        (None, None),
    ],
)
def test_by_path(path: str | None, expected: str | None) -> None:
    assert api.by_path(path) == expected


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("dir/report.PDF", "PDF"),
        ("C:\\Temp\\archive.tar.gz", "gz"),
        (".bashrc", "bashrc"),
        ("/home/user/.profile", "profile"),
        ("archive.", None),
        ("README", None),
        ("", None),
    ],
)
def test_extension_of(path: str, expected: str | None) -> None:
    assert extension_of(path) == expected


def test_dotfile_name_resolves_through_its_suffix() -> None:
    api.extend("text/x-shellrc", extensions=["bashrc"])
    assert api.by_path("/home/user/.bashrc") == "text/x-shellrc"


def test_detect_content_and_extension_refinement() -> None:
    assert api.detect(b"%PDF-1.4\n", name="drawing.ai") == "application/illustrator"
    assert api.detect(b"%PDF-1.4\n", extension="ai") == "application/illustrator"


def test_detect_unrelated_extension_does_not_override_content() -> None:
    assert api.detect(b"\x89PNG\r\n\x1a\n", name="notes.txt") == "image/png"


def test_detect_empty_content_falls_back_to_other_signals() -> None:
    assert api.detect(b"", name="report.pdf") == "application/pdf"
    assert api.detect(b"", declared_type="text/html; charset=utf-8") == "text/html"
    assert api.detect(b"") == api.BINARY
    assert api.detect() == api.BINARY


def test_detect_ignores_binary_declared_type() -> None:
    assert api.detect(declared_type="application/octet-stream", extension="csv") == "text/csv"


def test_detect_declared_then_extension() -> None:
    assert api.detect(declared_type="text/plain", name="data.csv") == "text/csv"
    assert api.detect(declared_type="image/png", name="data.csv") == "image/png"


def test_detect_name_wins_over_extension() -> None:
    assert api.detect(name="a.pdf", extension="png") == "application/pdf"
    assert api.detect(name="noext", extension="png") == "image/png"
