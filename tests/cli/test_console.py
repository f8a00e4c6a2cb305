# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_console.py
#   file_relpath : tests/cli/test_console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the user-facing `ClickConsole`."""

from __future__ import annotations

import io

from typesniff.cli.console import ClickConsole


def _console(enable_color: bool = False) -> tuple[ClickConsole, io.StringIO, io.StringIO]:
    out, err = io.StringIO(), io.StringIO()
    return ClickConsole(enable_color=enable_color, out=out, err=err), out, err


def test_print_goes_to_stdout_and_error_to_stderr() -> None:
    console, out, err = _console()
    console.print("report.pdf: application/pdf")
    console.error("Error: boom")
    assert out.getvalue() == "report.pdf: application/pdf\n"
    assert err.getvalue() == "Error: boom\n"


def test_styled_is_plain_without_color() -> None:
    console, _out, _err = _console(enable_color=False)
    assert console.styled("image/png", bold=True) == "image/png"


def test_styled_adds_ansi_codes_with_color() -> None:
    console, _out, _err = _console(enable_color=True)
    styled = console.styled("image/png", bold=True)
    assert styled != "image/png"
    assert "image/png" in styled


def test_console_surface_is_print_error_styled() -> None:
    public = {name for name in vars(ClickConsole) if not name.startswith("_")}
    assert public == {"print", "error", "styled"}
