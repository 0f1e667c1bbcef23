# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : render.py
#   file_relpath : src/dcconceal/cli/commands/render.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal `render` command.

Converts a markdown document to HTML through Python-Markdown with the
concealment extension registered, i.e. the rendered surface.
"""

from __future__ import annotations

import click

from dcconceal.cli.cmd_common import (
    get_console,
    read_input_text,
    resolve_settings,
    write_output_text,
)
from dcconceal.cli.options import common_config_options
from dcconceal.config.logging import get_logger
from dcconceal.plugin import ConcealPlugin

logger = get_logger(__name__)


@click.command(
    name="render",
    help="Render markdown to HTML with field separators concealed.",
)
@click.argument("path", default="-", required=False)
@common_config_options
@click.option(
    "--replacement",
    "-r",
    default=None,
    help="Glyph replacing '::' (overrides read_replacement; '' hides the separator).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    default=None,
    help="Write the HTML to this file instead of STDOUT.",
)
def render_command(
    *,
    path: str,
    config_file: str | None,
    no_config: bool,
    replacement: str | None,
    output_path: str | None,
) -> None:
    """Render PATH (or STDIN when PATH is '-') to HTML."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    settings = resolve_settings(
        config_file=config_file,
        no_config=no_config,
        overrides={"read_replacement": replacement},
    )
    source: str = read_input_text(path)

    plugin = ConcealPlugin(settings)
    plugin.load()
    html: str = plugin.render(source)
    logger.info("Rendered %s with replacement %r", path, settings.read_replacement)

    write_output_text(output_path, html, console)
