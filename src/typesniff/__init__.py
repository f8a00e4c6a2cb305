# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff package.

TypeSniff classifies byte content into a media type. It combines three
signals (magic bytes, a filename extension and a declared ``Content-Type``
value) and prefers the most specific label in the type hierarchy when they
disagree. The public surface lives in [`typesniff.api`][].
"""

from __future__ import annotations
