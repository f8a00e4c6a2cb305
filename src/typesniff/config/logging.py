# topmark:header:start
#
#   project      : TypeSniff
#   file         : logging.py
#   file_relpath : src/typesniff/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic logging for TypeSniff.

Detection is chatty when asked to be: every magic pattern tried against a
byte source is reported at ``TRACE``, a level below ``DEBUG``. Registry
changes and configuration loading report at ``DEBUG`` and ``INFO``.

Records go to stderr, coloured per level with `yachalk`, so that the CLI's
JSON and NDJSON output on stdout is never interleaved with diagnostics.

Usage:
    ```python
    from typesniff.config.logging import get_logger

    logger = get_logger(__name__)
    logger.trace("Pattern %s did not match", pattern.describe())
    ```
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from typesniff.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TypesniffLogger(logging.Logger):
    """Logger that also offers `trace` for per-pattern matching decisions."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Emit ``msg % args`` at ``TRACE`` level, if enabled.

        Args:
            msg (object): Message format string.
            *args (object): Arguments merged into ``msg``.
            extra (Mapping[str, object] | None): Extra record attributes.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg=msg, args=args, extra=extra, stacklevel=2)


logging.addLevelName(TRACE_LEVEL, "TRACE")
logging.setLoggerClass(TypesniffLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

# Highest threshold first; a record takes the colour of the first one it reaches
_LEVEL_COLORS: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Colour each formatted record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        for threshold, paint in _LEVEL_COLORS:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim(message)


_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level() -> int | None:
    """Read the level requested through ``TYPESNIFF_LOG_LEVEL``.

    Accepts a level name in any case (``trace``, ``Debug``) or a number.

    Returns:
        int | None: The level, or None when the variable is unset, empty or
            not recognised.
    """
    raw = os.environ.get(LOG_LEVEL_ENV_VAR)
    if not raw:
        return None
    name = raw.strip().upper()
    if name.isdigit():
        return int(name)
    return _LEVEL_NAMES.get(name)


def setup_logging(level: int | None = None) -> None:
    """Install a single coloured stderr handler on the root logger.

    Calling it again replaces the previous handler, so the CLI and the test
    suite can both reconfigure logging freely.

    Args:
        level (int | None): Level to apply. When None, the environment
            decides, and everything below CRITICAL stays silent otherwise.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root = logging.getLogger()
    root.setLevel(level)
    for old in list(root.handlers):
        root.removeHandler(old)

    handler = logging.StreamHandler(sys.stderr)
    # Source locations only help when looking at DEBUG and TRACE records
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> TypesniffLogger:
    """Return the module logger for ``name`` typed as a `TypesniffLogger`."""
    return cast("TypesniffLogger", logging.getLogger(name))
