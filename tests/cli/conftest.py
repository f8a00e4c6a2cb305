# topmark:header:start
#
#   project      : TypeSniff
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running TypeSniff in a controlled working directory.

`run_cli_in()` changes the process working directory to the given
``tmp_path`` before invoking the Click CLI, so configuration discovery
(``typesniff.toml``, ``pyproject.toml``) and relative paths resolve against
the temporary directory.
"""

from __future__ import annotations

import os
from typing import IO, TYPE_CHECKING, Any, Iterator, Sequence

import pytest
from click.testing import CliRunner, Result

from typesniff.cli.exit_codes import ExitCode
from typesniff.cli.main import cli
from typesniff.config.logging import TRACE_LEVEL, setup_logging

if TYPE_CHECKING:
    from pathlib import Path

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR"
PDF_BYTES = b"%PDF-1.4\n%\xe2\xe3\xcf\xd3\n"


@pytest.fixture(autouse=True)
def restore_test_logging() -> Iterator[None]:
    """Reinstall TRACE logging after each CLI run (the CLI reconfigures the root logger)."""
    yield
    setup_logging(level=TRACE_LEVEL)


def run_cli_in(
    tmp_path: Path,
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI with ``tmp_path`` as the working directory.

    Args:
        tmp_path (Path): Directory used as the CWD for the invocation.
        argv (str | Sequence[str] | None): CLI argument vector.
        input_data (str | bytes | IO[Any] | None): Optional standard input.

    Returns:
        Result: The `click.testing.Result` of the invocation.
    """
    cwd: str = os.getcwd()
    try:
        os.chdir(tmp_path)
        return CliRunner().invoke(cli, argv, input=input_data)
    finally:
        os.chdir(cwd)


def run_cli(
    argv: str | Sequence[str] | None,
    *,
    input_data: str | bytes | IO[Any] | None = None,
) -> Result:
    """Invoke the CLI without changing the working directory.

    Use this helper when the test does not depend on configuration
    discovery and all provided paths are absolute.
    """
    return CliRunner().invoke(cli, argv, input=input_data)


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0)."""
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_exit(result: Result, code: ExitCode) -> None:
    """Assert that the command exited with ``code``."""
    assert result.exit_code == code, result.output
