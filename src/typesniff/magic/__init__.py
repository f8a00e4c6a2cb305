# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/magic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Magic-byte matching engine.

* [`typesniff.magic.pattern`][] – the recursive `MagicPattern` value type.
* [`typesniff.magic.source`][] – helpers turning bytes or file objects into
  seekable byte sources.
* [`typesniff.magic.matcher`][] – single-pattern byte checks (fixed and range).
* [`typesniff.magic.evaluator`][] – OR/AND evaluation over pattern trees.
"""

from __future__ import annotations

from .evaluator import match_any, match_one
from .pattern import MagicPattern

__all__ = [
    "MagicPattern",
    "match_any",
    "match_one",
]
