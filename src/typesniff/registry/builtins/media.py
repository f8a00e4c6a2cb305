# topmark:header:start
#
#   project      : TypeSniff
#   file         : media.py
#   file_relpath : src/typesniff/registry/builtins/media.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Audio and video formats.

Exports:
    TYPES: MP3, FLAC, Ogg (Vorbis, Opus, Theora), WAV, AVI, AIFF, MIDI, AAC,
        AMR, ISO BMFF (MP4, M4A, M4V, QuickTime), Matroska/WebM and FLV.

Notes:
    - Ogg codecs are recognized by the identification header of the first
      page (offset 28/29); the specific codec entries precede the generic
      ``application/ogg`` entry.
    - ISO BMFF files carry ``ftyp`` plus a major brand at offset 4.
"""

from __future__ import annotations

from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

_fixed = MagicPattern.fixed
_range = MagicPattern.range


def _riff(form_type: bytes) -> tuple[MagicPattern, ...]:
    return (_fixed(0, b"RIFF", (_fixed(8, form_type),)),)


def _ogg(codec_marker: bytes, offset: int) -> tuple[MagicPattern, ...]:
    return (_fixed(0, b"OggS", (_fixed(offset, codec_marker),)),)


def _brands(*brands: bytes) -> tuple[MagicPattern, ...]:
    return tuple(_fixed(4, b"ftyp" + brand) for brand in brands)


TYPES: list[TypeDefinition] = [
    TypeDefinition(
        label="audio/mpeg",
        extensions=("mp3", "mpga", "mp2", "m2a"),
        patterns=(
            _fixed(0, b"ID3"),
            _fixed(0, b"\xff\xfb"),
            _fixed(0, b"\xff\xf3"),
            _fixed(0, b"\xff\xf2"),
        ),
        description="MPEG audio",
    ),
    TypeDefinition(
        label="audio/flac",
        extensions=("flac",),
        patterns=(_fixed(0, b"fLaC"),),
        description="Free Lossless Audio Codec",
    ),
    TypeDefinition(
        label="audio/vorbis",
        parents=("audio/ogg",),
        patterns=_ogg(b"vorbis", 29),
        description="Ogg Vorbis audio",
    ),
    TypeDefinition(
        label="audio/opus",
        extensions=("opus",),
        parents=("audio/ogg",),
        patterns=_ogg(b"OpusHead", 28),
        description="Ogg Opus audio",
    ),
    TypeDefinition(
        label="video/ogg",
        extensions=("ogv",),
        parents=("application/ogg",),
        patterns=_ogg(b"\x80theora", 28),
        description="Ogg Theora video",
    ),
    TypeDefinition(
        label="audio/ogg",
        extensions=("oga", "ogg", "spx"),
        parents=("application/ogg",),
        description="Ogg audio",
    ),
    TypeDefinition(
        label="application/ogg",
        extensions=("ogx",),
        patterns=(_fixed(0, b"OggS"),),
        description="Ogg container",
    ),
    TypeDefinition(
        label="audio/vnd.wave",
        extensions=("wav",),
        patterns=_riff(b"WAVE"),
        description="Waveform audio",
    ),
    TypeDefinition(
        label="video/x-msvideo",
        extensions=("avi",),
        patterns=_riff(b"AVI "),
        description="Audio Video Interleave",
    ),
    TypeDefinition(
        label="audio/x-aiff",
        extensions=("aif", "aiff", "aifc"),
        patterns=(
            _fixed(0, b"FORM", (_fixed(8, b"AIFF"),)),
            _fixed(0, b"FORM", (_fixed(8, b"AIFC"),)),
        ),
        description="Audio Interchange File Format",
    ),
    TypeDefinition(
        label="audio/midi",
        extensions=("mid", "midi", "kar"),
        patterns=(_fixed(0, b"MThd"),),
        description="MIDI sequence",
    ),
    TypeDefinition(
        label="audio/aac",
        extensions=("aac", "adts"),
        patterns=(_fixed(0, b"\xff\xf1"), _fixed(0, b"\xff\xf9")),
        description="AAC audio (ADTS)",
    ),
    TypeDefinition(
        label="audio/amr",
        extensions=("amr",),
        patterns=(_fixed(0, b"#!AMR"),),
        description="Adaptive Multi-Rate audio",
    ),
    TypeDefinition(
        label="audio/mp4",
        extensions=("m4a", "m4b"),
        patterns=_brands(b"M4A ", b"M4B "),
        description="MPEG-4 audio",
    ),
    TypeDefinition(
        label="video/x-m4v",
        extensions=("m4v",),
        parents=("video/mp4",),
        patterns=_brands(b"M4V ", b"M4VH", b"M4VP"),
        description="MPEG-4 video (Apple)",
    ),
    TypeDefinition(
        label="video/quicktime",
        extensions=("mov", "qt"),
        patterns=_brands(b"qt  ") + (_fixed(4, b"moov"), _fixed(4, b"mdat")),
        description="QuickTime movie",
    ),
    TypeDefinition(
        label="video/mp4",
        extensions=("mp4", "mp4v", "mpg4"),
        patterns=_brands(b"isom", b"iso2", b"mp41", b"mp42", b"avc1", b"dash", b"MSNV"),
        description="MPEG-4 video",
    ),
    TypeDefinition(
        label="video/webm",
        extensions=("webm",),
        parents=("video/x-matroska",),
        patterns=(_fixed(0, b"\x1a\x45\xdf\xa3", (_range(4, 64, b"webm"),)),),
        description="WebM video",
    ),
    TypeDefinition(
        label="video/x-matroska",
        extensions=("mkv", "mka", "mks", "mk3d"),
        patterns=(_fixed(0, b"\x1a\x45\xdf\xa3"),),
        description="Matroska container",
    ),
    TypeDefinition(
        label="video/x-flv",
        extensions=("flv",),
        patterns=(_fixed(0, b"FLV\x01"),),
        description="Flash video",
    ),
]
