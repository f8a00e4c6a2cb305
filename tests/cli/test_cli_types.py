# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_cli_types.py
#   file_relpath : tests/cli/test_cli_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `types` command."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli


def test_types_lists_builtin_labels() -> None:
    result = run_cli(["--no-color", "types"])
    assert_SUCCESS(result)
    assert "image/png (png)" in result.output
    assert "application/pdf" in result.output


def test_types_long_shows_details() -> None:
    result = run_cli(["--no-color", "types", "--long"])
    assert_SUCCESS(result)
    assert "parents    : application/pdf" in result.output
    assert "magic      : @0" in result.output
    assert "description: Portable Network Graphics" in result.output


def test_types_json_format() -> None:
    result = run_cli(["types", "--format", "json"])
    assert_SUCCESS(result)
    payload = json.loads(result.output)
    by_label = {r["type"]: r for r in payload}
    assert by_label["text/csv"]["parents"] == ["text/plain"]
    assert "csv" in by_label["text/csv"]["extensions"]
    assert "patterns" not in by_label["text/csv"]


def test_types_ndjson_long_format() -> None:
    result = run_cli(["types", "--format", "ndjson", "--long"])
    assert_SUCCESS(result)
    records = [json.loads(line) for line in result.output.splitlines() if line.strip()]
    png = next(r for r in records if r["type"] == "image/png")
    assert png["patterns"]
    assert png["description"]


def test_types_rejects_unknown_format() -> None:
    result = run_cli(["types", "--format", "yaml"])
    assert result.exit_code != 0
    assert "Invalid value" in result.output
