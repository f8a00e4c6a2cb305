# topmark:header:start
#
#   project      : TypeSniff
#   file         : documents.py
#   file_relpath : src/typesniff/registry/builtins/documents.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Office and publishing document formats.

Exports:
    TYPES: Illustrator, PDF, PostScript, RTF, legacy Office (OLE2), Office
        Open XML, OpenDocument and EPUB.

Notes:
    - Container formats are recognized by a nested marker: OOXML and ODF
      are ZIP archives with a known first entry; legacy Office files are OLE2
      compound files whose directory names the main stream (UTF-16LE).
    - These entries must precede ``application/zip`` (see ``archives``) and
      ``application/x-ole-storage`` so the narrow label wins.
"""

from __future__ import annotations

from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

_fixed = MagicPattern.fixed
_range = MagicPattern.range

_ZIP_LOCAL_HEADER = b"PK\x03\x04"
_OLE2_HEADER = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def _utf16(text: str) -> bytes:
    return text.encode("utf-16-le")


def _ooxml(folder: bytes) -> tuple[MagicPattern, ...]:
    """ZIP whose first entry is ``[Content_Types].xml`` and which names ``folder``."""
    return (
        _fixed(
            0,
            _ZIP_LOCAL_HEADER,
            (
                _fixed(30, b"[Content_Types].xml"),
                _range(30, 8192, folder),
            ),
        ),
    )


def _opendocument(media_type: str) -> tuple[MagicPattern, ...]:
    """ZIP whose first, stored ``mimetype`` entry holds ``media_type``."""
    return (
        _fixed(
            0,
            _ZIP_LOCAL_HEADER,
            (
                _fixed(30, b"mimetype"),
                _fixed(38, media_type.encode("ascii")),
            ),
        ),
    )


def _ole2(stream_name: str) -> tuple[MagicPattern, ...]:
    return (_fixed(0, _OLE2_HEADER, (_range(512, 16384, _utf16(stream_name)),)),)


TYPES: list[TypeDefinition] = [
    TypeDefinition(
        label="application/illustrator",
        extensions=("ai",),
        parents=("application/pdf",),
        patterns=(
            _fixed(0, b"%PDF-", (_range(0, 4096, b"Adobe Illustrator"),)),
            _fixed(0, b"%!PS-Adobe-", (_range(0, 1024, b"%%Creator: Adobe Illustrator"),)),
        ),
        description="Adobe Illustrator artwork",
    ),
    TypeDefinition(
        label="application/pdf",
        extensions=("pdf",),
        patterns=(_fixed(0, b"%PDF-"), _range(1, 512, b"%PDF-")),
        description="Portable Document Format",
    ),
    TypeDefinition(
        label="application/postscript",
        extensions=("ps", "eps", "epsf", "epsi"),
        patterns=(_fixed(0, b"%!"), _fixed(0, b"\x04%!"), _fixed(0, b"\xc5\xd0\xd3\xc6")),
        description="PostScript",
    ),
    TypeDefinition(
        label="application/rtf",
        extensions=("rtf",),
        patterns=(_fixed(0, b"{\\rtf"),),
        description="Rich Text Format",
    ),
    # Legacy Microsoft Office (OLE2 compound documents)
    TypeDefinition(
        label="application/msword",
        extensions=("doc", "dot"),
        parents=("application/x-ole-storage",),
        patterns=_ole2("WordDocument"),
        description="Microsoft Word 97-2003 document",
    ),
    TypeDefinition(
        label="application/vnd.ms-excel",
        extensions=("xls", "xlt", "xla"),
        parents=("application/x-ole-storage",),
        patterns=_ole2("Workbook") + _ole2("Book"),
        description="Microsoft Excel 97-2003 workbook",
    ),
    TypeDefinition(
        label="application/vnd.ms-powerpoint",
        extensions=("ppt", "pps", "pot"),
        parents=("application/x-ole-storage",),
        patterns=_ole2("PowerPoint Document"),
        description="Microsoft PowerPoint 97-2003 presentation",
    ),
    TypeDefinition(
        label="application/vnd.ms-outlook",
        extensions=("msg",),
        parents=("application/x-ole-storage",),
        patterns=_ole2("__substg1.0_"),
        description="Microsoft Outlook message",
    ),
    TypeDefinition(
        label="application/x-ole-storage",
        extensions=("ole",),
        patterns=(_fixed(0, _OLE2_HEADER),),
        description="OLE2 compound document",
    ),
    # Office Open XML
    TypeDefinition(
        label="application/vnd.openxmlformats-officedocument.wordprocessingml.document",
        extensions=("docx",),
        parents=("application/x-tika-ooxml",),
        patterns=_ooxml(b"word/"),
        description="Microsoft Word document",
    ),
    TypeDefinition(
        label="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
        extensions=("xlsx",),
        parents=("application/x-tika-ooxml",),
        patterns=_ooxml(b"xl/"),
        description="Microsoft Excel workbook",
    ),
    TypeDefinition(
        label="application/vnd.openxmlformats-officedocument.presentationml.presentation",
        extensions=("pptx",),
        parents=("application/x-tika-ooxml",),
        patterns=_ooxml(b"ppt/"),
        description="Microsoft PowerPoint presentation",
    ),
    TypeDefinition(
        label="application/x-tika-ooxml",
        parents=("application/zip",),
        patterns=(_fixed(0, _ZIP_LOCAL_HEADER, (_fixed(30, b"[Content_Types].xml"),)),),
        description="Office Open XML package",
    ),
    # OpenDocument
    TypeDefinition(
        label="application/vnd.oasis.opendocument.text",
        extensions=("odt",),
        parents=("application/zip",),
        patterns=_opendocument("application/vnd.oasis.opendocument.text"),
        description="OpenDocument text",
    ),
    TypeDefinition(
        label="application/vnd.oasis.opendocument.spreadsheet",
        extensions=("ods",),
        parents=("application/zip",),
        patterns=_opendocument("application/vnd.oasis.opendocument.spreadsheet"),
        description="OpenDocument spreadsheet",
    ),
    TypeDefinition(
        label="application/vnd.oasis.opendocument.presentation",
        extensions=("odp",),
        parents=("application/zip",),
        patterns=_opendocument("application/vnd.oasis.opendocument.presentation"),
        description="OpenDocument presentation",
    ),
    TypeDefinition(
        label="application/epub+zip",
        extensions=("epub",),
        parents=("application/zip",),
        patterns=_opendocument("application/epub+zip"),
        description="EPUB e-book",
    ),
]
