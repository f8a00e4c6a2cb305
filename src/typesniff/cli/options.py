# topmark:header:start
#
#   project      : TypeSniff
#   file         : options.py
#   file_relpath : src/typesniff/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, output format)
and their resolution logic, so commands and the group can stay thin.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Callable, TypeVar

import click

from typesniff.cli.cli_types import EnumChoiceParam, OutputFormat
from typesniff.cli.errors import TypesniffUsageError
from typesniff.config.logging import TRACE_LEVEL

F = TypeVar("F", bound=Callable[..., object])


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the logging level from the ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: The logging level.

    Raises:
        TypesniffUsageError: If both flags are used.

    Behavior:
        ``-vvv`` sets TRACE, ``-vv`` DEBUG, ``-v`` INFO, ``-q`` ERROR.
        Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TypesniffUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: F) -> F:
    """Add ``-v/--verbose`` and ``-q/--quiet`` counting options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity (-v info, -vv debug, -vvv trace).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: OutputFormat | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Args:
        cli_mode (ColorMode | None): Explicit color mode from CLI options.
        output_format (OutputFormat | None): Output format, if known.
        stdout_isatty (bool | None): Whether stdout is a TTY; auto-detected if None.

    Returns:
        bool: True if color output should be enabled.

    Behavior:
        Disables color for JSON/NDJSON output formats.
        Honors ``--color`` and ``--no-color``, then ``FORCE_COLOR`` and
        ``NO_COLOR``, and finally enables color only on a TTY.
    """
    if output_format is not None and output_format.is_machine:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        stdout_isatty = sys.stdout.isatty()
    return bool(stdout_isatty)


def common_color_options(f: F) -> F:
    """Add ``--color {auto,always,never}`` and ``--no-color`` options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=EnumChoiceParam(ColorMode),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def output_format_option(f: F) -> F:
    """Add the ``--format`` option shared by listing commands."""
    return click.option(
        "--format",
        "output_format",
        type=EnumChoiceParam(OutputFormat),
        default=None,
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
