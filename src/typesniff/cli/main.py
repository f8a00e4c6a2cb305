# topmark:header:start
#
#   project      : TypeSniff
#   file         : main.py
#   file_relpath : src/typesniff/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TypeSniff command-line entry point.

Group-level options are resolved once and placed into ``ctx.obj``:

* ``verbosity_level``: program-output verbosity (count of ``-v``),
* ``log_level``: level applied to internal logging,
* ``console``: the [`ClickConsole`][typesniff.cli.console.ClickConsole],
* ``config_path``: the configuration file applied to the registry, if any.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from typesniff import api
from typesniff.cli.commands.detect import detect_command
from typesniff.cli.commands.types import types_command
from typesniff.cli.commands.version import version_command
from typesniff.cli.console import ClickConsole
from typesniff.cli.errors import TypesniffConfigError
from typesniff.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from typesniff.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from typesniff.cli.console import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging and color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color``.
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.ensure_object(dict)

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = verbose

    # TYPESNIFF_LOG_LEVEL wins over -v/-q for internal logging
    level_env = resolve_env_log_level()
    log_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = log_level
    setup_logging(level=log_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


def apply_configuration(
    ctx: click.Context,
    *,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Apply the configuration document to the default registry.

    Raises:
        TypesniffConfigError: If ``config_path`` is not a file or the document
            is malformed.
    """
    ctx.obj["config_path"] = None
    if no_config:
        logger.debug("Configuration discovery disabled (--no-config)")
        return
    if config_path is not None and not config_path.is_file():
        raise TypesniffConfigError(f"Configuration file not found: {config_path}")
    try:
        ctx.obj["config_path"] = api.load_config(config_path)
    except api.ConfigError as exc:
        raise TypesniffConfigError(f"Invalid configuration: {exc}") from exc
    if ctx.obj["config_path"] is not None:
        logger.info("Applied configuration from %s", ctx.obj["config_path"])


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="Identify media types from content, file names and declared types.",
)
@common_verbose_options
@common_color_options
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Read custom type definitions from this TOML file.",
)
@click.option(
    "--no-config",
    is_flag=True,
    help="Do not discover typesniff.toml or [tool.typesniff] in pyproject.toml.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: Path | None,
    no_config: bool,
) -> None:
    """Entry point for the TypeSniff CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'typesniff detect [PATHS...]' to identify files.")
        console.print()
        console.print(ctx.get_help())
        return

    apply_configuration(ctx, config_path=config_path, no_config=no_config)


cli.add_command(detect_command)

cli.add_command(types_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
