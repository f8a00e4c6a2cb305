# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type registry and built-in type tables.

This package exposes:

* [`typesniff.registry.TypeRegistry`][] – the mutable lookup tables
  (extensions, hierarchy, magic priority list).
* [`typesniff.registry.get_default_registry`][] – the process-wide instance
  used when no explicit registry is passed to a detection function.
* [`typesniff.registry.TypeDefinition`][] – the static definition shape used by
  built-in tables and plugins.
"""

from __future__ import annotations

from .definitions import TypeDefinition
from .registry import RegistrySnapshot, TypeRegistry, get_default_registry, normalize_extension

__all__ = [
    "RegistrySnapshot",
    "TypeDefinition",
    "TypeRegistry",
    "get_default_registry",
    "normalize_extension",
]
