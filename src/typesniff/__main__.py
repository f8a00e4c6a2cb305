# topmark:header:start
#
#   project      : TypeSniff
#   file         : __main__.py
#   file_relpath : src/typesniff/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TypeSniff via ``python -m typesniff``.

Delegates directly to :func:`typesniff.cli.main.cli`, so the module interface
and the ``typesniff`` console script share a single entry point.

Examples:
    Classify a file using the module interface::

        python -m typesniff detect photo.jpg
"""

from __future__ import annotations

from typesniff.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
