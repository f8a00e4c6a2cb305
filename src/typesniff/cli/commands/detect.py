# topmark:header:start
#
#   project      : TypeSniff
#   file         : detect.py
#   file_relpath : src/typesniff/cli/commands/detect.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `detect` command.

Classifies each PATH from its content and file name (plus an optional
declared type) and prints one result per input. ``-`` reads the content
from STDIN; STDIN content has no file name.
"""

from __future__ import annotations

import io
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from typesniff import api
from typesniff.cli.cli_types import OutputFormat
from typesniff.cli.errors import TypesniffFileNotFoundError, TypesniffIOError
from typesniff.cli.options import output_format_option
from typesniff.config.logging import get_logger

if TYPE_CHECKING:
    from typing import BinaryIO

    from typesniff.cli.console import ConsoleLike

logger = get_logger(__name__)

STDIN_MARKER = "-"


def _classify(
    source: BinaryIO,
    *,
    display: str,
    name: str | None,
    declared_type: str | None,
    list_all: bool,
) -> dict[str, Any]:
    record: dict[str, Any] = {
        "path": display,
        "type": api.detect(source, name=name, declared_type=declared_type),
    }
    if list_all:
        record["matches"] = api.all_by_magic(source)
    return record


def _check_paths(paths: tuple[str, ...]) -> None:
    for raw in paths:
        if raw == STDIN_MARKER:
            continue
        path = Path(raw)
        if not path.exists():
            raise TypesniffFileNotFoundError(f"No such file: {raw}")
        if not path.is_file():
            raise TypesniffFileNotFoundError(f"Not a regular file: {raw}")


def _render_text(console: ConsoleLike, record: dict[str, Any], *, verbose: bool) -> None:
    label = console.styled(record["type"], bold=True)
    console.print(f"{record['path']}: {label}")
    if "matches" in record:
        matches = record["matches"]
        detail = ", ".join(matches) if matches else "(no content match)"
        console.print(f"    {console.styled('content matches:', dim=True)} {detail}")
    elif verbose and record["type"] == api.BINARY:
        console.print(console.styled("    (no signal identified a specific type)", dim=True))


@click.command(
    name="detect",
    help="Identify the media type of each PATH ('-' reads content from STDIN).",
)
@click.argument("paths", nargs=-1, required=True, type=str)
@click.option(
    "--declared-type",
    "declared_type",
    default=None,
    help="Declared Content-Type to combine with the content and file name.",
)
@click.option(
    "--all",
    "list_all",
    is_flag=True,
    help="Also list every content match in priority order.",
)
@output_format_option
@click.pass_context
def detect_command(
    ctx: click.Context,
    paths: tuple[str, ...],
    declared_type: str | None,
    list_all: bool,
    output_format: OutputFormat | None,
) -> None:
    """Identify the media type of each input.

    Args:
        ctx (click.Context): Click context carrying the console.
        paths (tuple[str, ...]): Files to classify; ``-`` for STDIN.
        declared_type (str | None): Declared ``Content-Type`` value.
        list_all (bool): Whether to include all content matches.
        output_format (OutputFormat | None): Output format.

    Raises:
        TypesniffFileNotFoundError: If a path does not exist or is not a file.
        TypesniffIOError: If a file cannot be read.
    """
    console: ConsoleLike = ctx.obj["console"]
    fmt = output_format or OutputFormat.TEXT
    verbose = ctx.obj.get("verbosity_level", 0) > 0

    _check_paths(paths)

    records: list[dict[str, Any]] = []
    for raw in paths:
        if raw == STDIN_MARKER:
            data = sys.stdin.buffer.read()
            with io.BytesIO(data) as stream:
                record = _classify(
                    stream,
                    display="<stdin>",
                    name=None,
                    declared_type=declared_type,
                    list_all=list_all,
                )
        else:
            try:
                with open(raw, "rb") as fh:
                    record = _classify(
                        fh,
                        display=raw,
                        name=raw,
                        declared_type=declared_type,
                        list_all=list_all,
                    )
            except OSError as exc:
                raise TypesniffIOError(f"Cannot read {raw}: {exc.strerror or exc}") from exc
        logger.debug("%s -> %s", record["path"], record["type"])

        if fmt == OutputFormat.NDJSON:
            console.print(json.dumps(record))
        elif fmt == OutputFormat.TEXT:
            _render_text(console, record, verbose=verbose)
        records.append(record)

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(records, indent=2))
