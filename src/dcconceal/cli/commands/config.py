# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : config.py
#   file_relpath : src/dcconceal/cli/commands/config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal `config` command group.

- ``config dump``: print the effective settings (defaults, discovered config,
  ``--config`` file) as TOML.
- ``config init``: print the default settings as a ``dcconceal.toml`` template,
  or write it with ``--output``.
"""

from __future__ import annotations

import click

from dcconceal.cli.cmd_common import get_console, resolve_settings, write_output_text
from dcconceal.cli.options import common_config_options
from dcconceal.config.model import Settings
from dcconceal.constants import CONFIG_FILE_NAME


@click.group(name="config", help="Inspect or create DoubleColonConceal configuration.")
def config_command() -> None:
    """Configuration commands."""


@config_command.command(name="dump", help="Print the effective settings as TOML.")
@common_config_options
def config_dump_command(*, config_file: str | None, no_config: bool) -> None:
    console = get_console(click.get_current_context())
    settings = resolve_settings(config_file=config_file, no_config=no_config)
    for source in settings.config_files:
        console.print(f"# source: {source}")
    console.print(settings.to_toml(), nl=False)


@config_command.command(name="init", help=f"Print a default {CONFIG_FILE_NAME}.")
@click.option(
    "--output",
    "-o",
    "output_path",
    default=None,
    help=f"Write the template to this file (e.g. {CONFIG_FILE_NAME}).",
)
def config_init_command(*, output_path: str | None) -> None:
    console = get_console(click.get_current_context())
    write_output_text(output_path, Settings().to_toml(), console)
