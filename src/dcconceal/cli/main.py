# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : main.py
#   file_relpath : src/dcconceal/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click CLI entry point: a group with shared state and real subcommands.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the console from there.
"""

from __future__ import annotations

import click

from dcconceal.cli.commands.config import config_command
from dcconceal.cli.commands.render import render_command
from dcconceal.cli.commands.scan import scan_command
from dcconceal.cli.commands.version import version_command
from dcconceal.cli.console import ClickConsole
from dcconceal.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from dcconceal.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    level_cli = resolve_verbosity(verbose, quiet)
    ctx.obj["verbosity_level"] = level_cli

    # The environment wins over -v/-q for internal logging.
    level_env = resolve_env_log_level()
    effective_level = level_env if level_env is not None else level_cli
    ctx.obj["log_level"] = effective_level
    setup_logging(level=effective_level)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode, output_format=None)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="DoubleColonConceal CLI",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the DoubleColonConceal CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ClickConsole = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'dcconceal render [PATH]' to render a note.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(render_command)

cli.add_command(scan_command)

cli.add_command(config_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
