# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_cli_global_options.py
#   file_relpath : tests/cli/test_cli_global_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: group-level options (verbosity, config discovery, help)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli, run_cli_in
from typesniff.cli.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

ACME_CONFIG = """
[types."application/x-acme"]
extensions = ["acme"]

[[types."application/x-acme".magic]]
offset = 0
value = "ACME"
"""


def test_no_subcommand_prints_help() -> None:
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "Usage:" in result.output
    assert "detect" in result.output


def test_verbose_and_quiet_are_mutually_exclusive() -> None:
    result = run_cli(["-v", "-q", "version"])
    assert_exit(result, ExitCode.USAGE_ERROR)


def test_discovered_config_is_applied(tmp_path: Path) -> None:
    (tmp_path / "typesniff.toml").write_text(ACME_CONFIG, encoding="utf-8")
    (tmp_path / "sample.bin").write_bytes(b"ACME\x00")
    result = run_cli_in(tmp_path, ["--no-color", "detect", "sample.bin"])
    assert_SUCCESS(result)
    assert result.output.strip() == "sample.bin: application/x-acme"


def test_pyproject_section_is_applied(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.typesniff.types."application/x-acme"]\nextensions = ["acme"]\n',
        encoding="utf-8",
    )
    (tmp_path / "a.acme").write_bytes(b"")
    result = run_cli_in(tmp_path, ["--no-color", "detect", "a.acme"])
    assert_SUCCESS(result)
    assert "application/x-acme" in result.output


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    (tmp_path / "typesniff.toml").write_text(ACME_CONFIG, encoding="utf-8")
    (tmp_path / "sample.bin").write_bytes(b"ACME\x00")
    result = run_cli_in(tmp_path, ["--no-color", "--no-config", "detect", "sample.bin"])
    assert_SUCCESS(result)
    assert "application/octet-stream" in result.output


def test_explicit_config(tmp_path: Path) -> None:
    cfg = tmp_path / "custom.toml"
    cfg.write_text(ACME_CONFIG, encoding="utf-8")
    result = run_cli_in(tmp_path, ["--config", str(cfg), "types"])
    assert_SUCCESS(result)
    assert "application/x-acme" in result.output


def test_missing_explicit_config(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["--config", str(tmp_path / "nope.toml"), "types"])
    assert_exit(result, ExitCode.CONFIG_ERROR)


def test_malformed_config(tmp_path: Path) -> None:
    (tmp_path / "typesniff.toml").write_text(
        '[types."x/bad"]\n[[types."x/bad".magic]]\noffset = 0\n', encoding="utf-8"
    )
    result = run_cli_in(tmp_path, ["types"])
    assert_exit(result, ExitCode.CONFIG_ERROR)
    assert "Invalid configuration" in result.output
