# topmark:header:start
#
#   project      : TypeSniff
#   file         : __init__.py
#   file_relpath : src/typesniff/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff CLI subcommands."""
