# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : version.py
#   file_relpath : src/dcconceal/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal `version` command."""

from __future__ import annotations

import json

import click

from dcconceal.cli.cmd_common import get_console
from dcconceal.cli.options import OutputFormat
from dcconceal.constants import DCCONCEAL_VERSION


@click.command(
    name="version",
    help="Show the current version of DoubleColonConceal.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.DEFAULT.value,
    help="Output format.",
)
def version_command(*, output_format: str) -> None:
    """Print the version installed in the active Python environment."""
    console = get_console(click.get_current_context())
    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps({"version": DCCONCEAL_VERSION}))
    else:
        console.print(console.styled(DCCONCEAL_VERSION, bold=True))
