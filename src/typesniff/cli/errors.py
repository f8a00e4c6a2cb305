# topmark:header:start
#
#   project      : TypeSniff
#   file         : errors.py
#   file_relpath : src/typesniff/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the TypeSniff CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no
    console is present in the Click context, they fall back to Click's default
    styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from typesniff.cli.exit_codes import ExitCode


class TypesniffError(click.ClickException):
    """Base class for all TypeSniff CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorized later by `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class TypesniffUsageError(TypesniffError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class TypesniffConfigError(TypesniffError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TypesniffFileNotFoundError(TypesniffError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TypesniffIOError(TypesniffError):
    """Error for I/O errors reading inputs."""

    exit_code = ExitCode.IO_ERROR
