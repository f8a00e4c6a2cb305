# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer for TypeSniff.

This package holds the logging setup and the TOML loaders that turn a
``typesniff.toml`` (or ``[tool.typesniff]`` in ``pyproject.toml``) document
into registry mutations performed at initialization time.
"""

from __future__ import annotations
