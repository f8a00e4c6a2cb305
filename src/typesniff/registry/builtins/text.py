# topmark:header:start
#
#   project      : TypeSniff
#   file         : text.py
#   file_relpath : src/typesniff/registry/builtins/text.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text-based formats.

Exports:
    TYPES: Feeds, XML, HTML, scripts, calendar/contact data, the ``text/plain``
        family (CSV, TSV, Markdown, JSON, JavaScript, CSS, YAML, TOML) and
        ``text/plain`` itself.

Notes:
    - Most text formats have no reliable magic; they are recognized by
      extension, declared type, or as refinements of ``text/plain``.
    - ``text/plain`` only claims content starting with a Unicode byte order
      mark and is listed last.
"""

from __future__ import annotations

from typesniff.magic.pattern import MagicPattern
from typesniff.registry.definitions import TypeDefinition

_fixed = MagicPattern.fixed
_range = MagicPattern.range

_XML_DECLARATIONS: tuple[bytes, ...] = (
    b"<?xml",
    b"\xef\xbb\xbf<?xml",
    "<?xml".encode("utf-16-le"),
    "<?xml".encode("utf-16-be"),
    b"\xff\xfe" + "<?xml".encode("utf-16-le"),
    b"\xfe\xff" + "<?xml".encode("utf-16-be"),
)

_HTML_MARKERS: tuple[bytes, ...] = (
    b"<!DOCTYPE html",
    b"<!DOCTYPE HTML",
    b"<!doctype html",
    b"<html",
    b"<HTML",
    b"<head",
    b"<HEAD",
    b"<body",
    b"<BODY",
)


def _xml_with_root(root: bytes) -> tuple[MagicPattern, ...]:
    return (_fixed(0, b"<?xml", (_range(0, 1024, root),)), _fixed(0, root))


TYPES: list[TypeDefinition] = [
    TypeDefinition(
        label="application/rss+xml",
        extensions=("rss",),
        parents=("application/xml",),
        patterns=_xml_with_root(b"<rss"),
        description="RSS feed",
    ),
    TypeDefinition(
        label="application/atom+xml",
        extensions=("atom",),
        parents=("application/xml",),
        patterns=_xml_with_root(b"<feed"),
        description="Atom feed",
    ),
    TypeDefinition(
        label="application/xhtml+xml",
        extensions=("xhtml", "xht"),
        parents=("application/xml",),
        patterns=(_fixed(0, b"<?xml", (_range(0, 1024, b"<html xmlns="),)),),
        description="XHTML document",
    ),
    TypeDefinition(
        label="application/xml",
        extensions=("xml", "xsl", "xsd", "xslt"),
        parents=("text/plain",),
        patterns=tuple(_fixed(0, decl) for decl in _XML_DECLARATIONS),
        description="XML document",
    ),
    TypeDefinition(
        label="text/html",
        extensions=("html", "htm", "shtml"),
        parents=("text/plain",),
        patterns=tuple(_range(0, 64, marker) for marker in _HTML_MARKERS),
        description="HTML document",
    ),
    TypeDefinition(
        label="text/x-python",
        extensions=("py", "pyw"),
        parents=("text/plain",),
        patterns=(_fixed(0, b"#!/usr/bin/env python"), _fixed(0, b"#!/usr/bin/python")),
        description="Python source",
    ),
    TypeDefinition(
        label="application/x-sh",
        extensions=("sh", "bash"),
        parents=("text/plain",),
        patterns=(
            _fixed(0, b"#!/bin/sh"),
            _fixed(0, b"#!/bin/bash"),
            _fixed(0, b"#!/usr/bin/env sh"),
            _fixed(0, b"#!/usr/bin/env bash"),
        ),
        description="Shell script",
    ),
    TypeDefinition(
        label="text/calendar",
        extensions=("ics", "ifb"),
        parents=("text/plain",),
        patterns=(_fixed(0, b"BEGIN:VCALENDAR"),),
        description="iCalendar data",
    ),
    TypeDefinition(
        label="text/vcard",
        extensions=("vcf", "vcard"),
        parents=("text/plain",),
        patterns=(_fixed(0, b"BEGIN:VCARD"),),
        description="vCard contact",
    ),
    TypeDefinition(
        label="text/csv",
        extensions=("csv",),
        parents=("text/plain",),
        description="Comma-separated values",
    ),
    TypeDefinition(
        label="text/tab-separated-values",
        extensions=("tsv",),
        parents=("text/plain",),
        description="Tab-separated values",
    ),
    TypeDefinition(
        label="text/x-web-markdown",
        extensions=("md", "markdown", "mkd"),
        parents=("text/plain",),
        description="Markdown document",
    ),
    TypeDefinition(
        label="application/json",
        extensions=("json",),
        parents=("text/javascript",),
        description="JSON data",
    ),
    TypeDefinition(
        label="text/javascript",
        extensions=("js", "mjs", "cjs"),
        parents=("text/plain",),
        description="JavaScript source",
    ),
    TypeDefinition(
        label="text/css",
        extensions=("css",),
        parents=("text/plain",),
        description="Cascading Style Sheets",
    ),
    TypeDefinition(
        label="application/yaml",
        extensions=("yaml", "yml"),
        parents=("text/plain",),
        description="YAML document",
    ),
    TypeDefinition(
        label="application/toml",
        extensions=("toml",),
        parents=("text/plain",),
        description="TOML document",
    ),
    TypeDefinition(
        label="text/plain",
        extensions=("txt", "text", "log", "conf", "def", "list", "in"),
        patterns=(
            _fixed(0, b"\xef\xbb\xbf"),
            _fixed(0, b"\xfe\xff"),
            _fixed(0, b"\xff\xfe"),
        ),
        description="Plain text",
    ),
]
