# topmark:header:start
#
#   project      : TypeSniff
#   file         : version.py
#   file_relpath : src/typesniff/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff `version` command.

Prints the current TypeSniff version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from typesniff import api
from typesniff.cli.cli_types import OutputFormat
from typesniff.cli.options import output_format_option

if TYPE_CHECKING:
    from typesniff.cli.console import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TypeSniff.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, output_format: OutputFormat | None = None) -> None:
    """Show the current version of TypeSniff.

    Args:
        ctx (click.Context): Click context carrying the console.
        output_format (OutputFormat | None): Optional output format.
    """
    console: ConsoleLike = ctx.obj["console"]
    fmt = output_format or OutputFormat.TEXT

    if fmt.is_machine:
        console.print(json.dumps({"version": api.version()}))
    elif ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled("TypeSniff version:", bold=True, underline=True))
        console.print(f"    {console.styled(api.version(), bold=True)}")
    else:
        console.print(console.styled(api.version(), bold=True))
