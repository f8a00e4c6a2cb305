# topmark:header:start
#
#   project      : TypeSniff
#   file         : types.py
#   file_relpath : src/typesniff/cli/commands/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `types` command.

Lists every media type known to the registry (built-ins, plugins and
configuration) with its extensions and parents.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import click

from typesniff import api
from typesniff.cli.cli_types import OutputFormat
from typesniff.cli.options import output_format_option

if TYPE_CHECKING:
    from typesniff.cli.console import ConsoleLike
    from typesniff.registry import TypeRegistry


def _serialize(registry: TypeRegistry, label: str, *, long: bool) -> dict[str, Any]:
    record: dict[str, Any] = {
        "type": label,
        "extensions": list(registry.extensions_of(label)),
        "parents": list(registry.parents_of(label)),
    }
    if long:
        record["description"] = registry.description_of(label)
        record["patterns"] = [p.describe() for p in registry.patterns_of(label)]
    return record


@click.command(
    name="types",
    help="List all known media types.",
)
@click.option(
    "--long",
    "show_details",
    is_flag=True,
    help="Show descriptions and magic patterns.",
)
@output_format_option
@click.pass_context
def types_command(
    ctx: click.Context,
    show_details: bool,
    output_format: OutputFormat | None,
) -> None:
    """List known media types.

    Args:
        ctx (click.Context): Click context carrying the console.
        show_details (bool): Include descriptions and magic patterns.
        output_format (OutputFormat | None): Output format.
    """
    console: ConsoleLike = ctx.obj["console"]
    fmt = output_format or OutputFormat.TEXT
    registry = api.get_default_registry()
    records = [_serialize(registry, label, long=show_details) for label in registry.labels()]

    if fmt == OutputFormat.JSON:
        console.print(json.dumps(records, indent=2))
        return
    if fmt == OutputFormat.NDJSON:
        for record in records:
            console.print(json.dumps(record))
        return

    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("Known media types:\n", bold=True, underline=True))

    num_width = len(str(len(records)))
    for idx, record in enumerate(records, start=1):
        exts = ", ".join(record["extensions"])
        line = f"{idx:>{num_width}}. {record['type']}"
        if exts:
            line += f" {console.styled('(' + exts + ')', dim=True)}"
        console.print(line)
        if not show_details:
            continue
        if record["description"]:
            console.print(f"      description: {record['description']}")
        if record["parents"]:
            console.print(f"      parents    : {', '.join(record['parents'])}")
        for pattern in record["patterns"]:
            console.print(f"      magic      : {pattern}")
