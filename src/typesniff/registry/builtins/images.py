# topmark:header:start
#
#   project      : TypeSniff
#   file         : images.py
#   file_relpath : src/typesniff/registry/builtins/images.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Raster and vector image formats.

Exports:
    TYPES: JPEG, PNG, GIF, BMP, TIFF, WebP, ICO, PSD, HEIC/HEIF, AVIF and SVG.

Notes:
    - WebP shares the RIFF container with WAV and AVI; the form type at
      offset 8 is checked as a nested pattern.
    - BMP's two-byte ``BM`` signature is too common in text, so it is
      combined with the DIB header size at offset 14.
    - SVG is XML; it is listed here (before ``application/xml``) so the
      narrower label wins.
"""

from __future__ import annotations

from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

_fixed = MagicPattern.fixed
_range = MagicPattern.range

# DIB header sizes: OS/2 1.x, BITMAPINFOHEADER, OS/2 2.x, V4, V5
_BMP_HEADER_SIZES: tuple[bytes, ...] = (
    b"\x0c\x00\x00\x00",
    b"\x28\x00\x00\x00",
    b"\x40\x00\x00\x00",
    b"\x6c\x00\x00\x00",
    b"\x7c\x00\x00\x00",
)

TYPES: list[TypeDefinition] = [
    TypeDefinition(
        label="image/jpeg",
        extensions=("jpg", "jpeg", "jpe", "jif", "jfif", "jfi"),
        patterns=(_fixed(0, b"\xff\xd8\xff"),),
        description="JPEG image",
    ),
    TypeDefinition(
        label="image/png",
        extensions=("png",),
        patterns=(_fixed(0, b"\x89PNG\r\n\x1a\n"),),
        description="Portable Network Graphics",
    ),
    TypeDefinition(
        label="image/gif",
        extensions=("gif",),
        patterns=(_fixed(0, b"GIF87a"), _fixed(0, b"GIF89a")),
        description="Graphics Interchange Format",
    ),
    TypeDefinition(
        label="image/bmp",
        extensions=("bmp", "dib"),
        patterns=tuple(_fixed(0, b"BM", (_fixed(14, size),)) for size in _BMP_HEADER_SIZES),
        description="Windows bitmap",
    ),
    TypeDefinition(
        label="image/tiff",
        extensions=("tiff", "tif"),
        patterns=(_fixed(0, b"II*\x00"), _fixed(0, b"MM\x00*")),
        description="Tagged Image File Format",
    ),
    TypeDefinition(
        label="image/webp",
        extensions=("webp",),
        patterns=(_fixed(0, b"RIFF", (_fixed(8, b"WEBP"),)),),
        description="WebP image",
    ),
    TypeDefinition(
        label="image/vnd.microsoft.icon",
        extensions=("ico",),
        patterns=(_fixed(0, b"\x00\x00\x01\x00"),),
        description="Windows icon",
    ),
    TypeDefinition(
        label="image/vnd.adobe.photoshop",
        extensions=("psd",),
        patterns=(_fixed(0, b"8BPS"),),
        description="Adobe Photoshop document",
    ),
    TypeDefinition(
        label="image/heic",
        extensions=("heic",),
        patterns=(_fixed(4, b"ftypheic"), _fixed(4, b"ftypheix")),
        description="High Efficiency Image Coding",
    ),
    TypeDefinition(
        label="image/heif",
        extensions=("heif",),
        patterns=(_fixed(4, b"ftypmif1"), _fixed(4, b"ftypmsf1")),
        description="High Efficiency Image File Format",
    ),
    TypeDefinition(
        label="image/avif",
        extensions=("avif",),
        patterns=(_fixed(4, b"ftypavif"), _fixed(4, b"ftypavis")),
        description="AV1 Image File Format",
    ),
    TypeDefinition(
        label="image/svg+xml",
        extensions=("svg", "svgz"),
        parents=("application/xml",),
        patterns=(
            _fixed(0, b"<svg"),
            _fixed(0, b"<?xml", (_range(0, 4096, b"<svg"),)),
        ),
        description="Scalable Vector Graphics",
    ),
]
