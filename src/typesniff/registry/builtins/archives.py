# topmark:header:start
#
#   project      : TypeSniff
#   file         : archives.py
#   file_relpath : src/typesniff/registry/builtins/archives.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Archives, compressed streams and executables.

Exports:
    TYPES: JAR/APK, ZIP, gzip, bzip2, xz, zstd, 7-Zip, RAR, TAR, SQLite,
        WebAssembly, ELF and PE executables.
"""

from __future__ import annotations

from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

_fixed = MagicPattern.fixed
_range = MagicPattern.range

TYPES: list[TypeDefinition] = [
    TypeDefinition(
        label="application/java-archive",
        extensions=("jar",),
        parents=("application/zip",),
        patterns=(_fixed(0, b"PK\x03\x04", (_range(30, 256, b"META-INF/"),)),),
        description="Java archive",
    ),
    TypeDefinition(
        label="application/vnd.android.package-archive",
        extensions=("apk",),
        parents=("application/java-archive",),
        description="Android package",
    ),
    TypeDefinition(
        label="application/zip",
        extensions=("zip",),
        patterns=(
            _fixed(0, b"PK\x03\x04"),
            _fixed(0, b"PK\x05\x06"),
            _fixed(0, b"PK\x07\x08"),
        ),
        description="ZIP archive",
    ),
    TypeDefinition(
        label="application/gzip",
        extensions=("gz", "tgz", "gzip"),
        patterns=(_fixed(0, b"\x1f\x8b"),),
        description="gzip compressed data",
    ),
    TypeDefinition(
        label="application/x-bzip2",
        extensions=("bz2", "tbz2", "boz"),
        patterns=(_fixed(0, b"BZh"),),
        description="bzip2 compressed data",
    ),
    TypeDefinition(
        label="application/x-xz",
        extensions=("xz", "txz"),
        patterns=(_fixed(0, b"\xfd7zXZ\x00"),),
        description="xz compressed data",
    ),
    TypeDefinition(
        label="application/zstd",
        extensions=("zst",),
        patterns=(_fixed(0, b"\x28\xb5\x2f\xfd"),),
        description="Zstandard compressed data",
    ),
    TypeDefinition(
        label="application/x-7z-compressed",
        extensions=("7z",),
        patterns=(_fixed(0, b"7z\xbc\xaf\x27\x1c"),),
        description="7-Zip archive",
    ),
    TypeDefinition(
        label="application/x-rar-compressed",
        extensions=("rar",),
        patterns=(_fixed(0, b"Rar!\x1a\x07"),),
        description="RAR archive",
    ),
    TypeDefinition(
        label="application/x-tar",
        extensions=("tar",),
        patterns=(_fixed(257, b"ustar"),),
        description="POSIX tar archive",
    ),
    TypeDefinition(
        label="application/vnd.sqlite3",
        extensions=("sqlite", "sqlite3", "db3"),
        patterns=(_fixed(0, b"SQLite format 3\x00"),),
        description="SQLite 3 database",
    ),
    TypeDefinition(
        label="application/wasm",
        extensions=("wasm",),
        patterns=(_fixed(0, b"\x00asm"),),
        description="WebAssembly binary",
    ),
    TypeDefinition(
        label="application/x-executable",
        extensions=("elf",),
        patterns=(_fixed(0, b"\x7fELF"),),
        description="ELF executable or shared object",
    ),
    TypeDefinition(
        label="application/x-msdownload",
        extensions=("exe", "dll", "com", "sys"),
        patterns=(_fixed(0, b"MZ"),),
        description="Windows executable",
    ),
]
