# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/registry/builtins/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in type definitions, grouped by topic.

Each module exports ``TYPES: list[TypeDefinition]``. Within a module, and
across modules in the order listed by
[`typesniff.registry.instances`][], earlier entries take magic priority, so
narrow formats are listed before the containers they live in.
"""
