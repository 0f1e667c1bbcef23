# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : scan.py
#   file_relpath : src/dcconceal/cli/commands/scan.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal `scan` command.

Runs the live-surface scanner over a document as an editor would see it,
with an optional cursor/selection and visible ranges, and reports the
concealment regions (or the text as displayed with ``--preview``).
The scan runs regardless of ``edit_mode``.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from dcconceal.cli.cmd_common import get_console, read_input_text, resolve_settings
from dcconceal.cli.errors import DcConcealUsageError
from dcconceal.cli.options import OFFSET_RANGE, OutputFormat, common_config_options
from dcconceal.config.logging import get_logger
from dcconceal.live.controller import editor_conceal_plugin
from dcconceal.live.document import EditorState, EditorView, SelectionRange
from dcconceal.live.scanner import apply_regions

if TYPE_CHECKING:
    from dcconceal.core.spans import TextRange
    from dcconceal.live.document import Document
    from dcconceal.live.scanner import ConcealRegion

logger = get_logger(__name__)


def _region_payload(doc: Document, region: ConcealRegion) -> dict[str, object]:
    line = doc.line_at(region.start)
    return {
        "line": line.number,
        "column": region.start - line.start + 1,
        "start": region.start,
        "end": region.end,
        "replacement": region.widget.replacement,
    }


@click.command(
    name="scan",
    help="Report the separators the live editor would conceal.",
)
@click.argument("path")
@common_config_options
@click.option(
    "--replacement",
    "-r",
    default=None,
    help="Glyph replacing '::' (overrides edit_replacement).",
)
@click.option(
    "--selection",
    "selection",
    type=OFFSET_RANGE,
    default=None,
    help="Main selection as START:END or a cursor OFFSET; touched lines stay unconcealed.",
)
@click.option(
    "--visible",
    "visible",
    type=OFFSET_RANGE,
    multiple=True,
    help="Visible range START:END (repeatable). Defaults to the whole document.",
)
@click.option(
    "--source-mode",
    is_flag=True,
    default=False,
    help="Simulate the raw source editing mode (nothing is concealed).",
)
@click.option(
    "--preview",
    is_flag=True,
    default=False,
    help="Print the document as displayed instead of the region list.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat]),
    default=OutputFormat.DEFAULT.value,
    help="Output format for the region list.",
)
def scan_command(
    *,
    path: str,
    config_file: str | None,
    no_config: bool,
    replacement: str | None,
    selection: TextRange | None,
    visible: tuple[TextRange, ...],
    source_mode: bool,
    preview: bool,
    output_format: str,
) -> None:
    """Scan PATH (or STDIN when PATH is '-')."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    settings = resolve_settings(
        config_file=config_file,
        no_config=no_config,
        overrides={"edit_replacement": replacement},
    )
    text: str = read_input_text(path)

    state = EditorState.from_text(
        text,
        selection=SelectionRange(selection.start, selection.end) if selection else None,
        live_preview=not source_mode,
    )
    doc = state.doc
    for rng in visible:
        if rng.end > len(doc):
            raise DcConcealUsageError(
                f"Visible range {rng.start}:{rng.end} exceeds document length {len(doc)}"
            )
    view = EditorView(state=state, visible_ranges=visible)
    controller = editor_conceal_plugin(settings.edit_replacement).create(view)
    regions = controller.decorations
    logger.info("Found %d concealable separator(s) in %s", len(regions), path)

    if preview:
        console.print(apply_regions(doc.text, regions), nl=False)
        return

    if output_format == OutputFormat.JSON.value:
        console.print(json.dumps([_region_payload(doc, r) for r in regions], ensure_ascii=False))
        return

    for region in regions:
        payload = _region_payload(doc, region)
        location = console.styled(f"{path}:{payload['line']}:{payload['column']}", bold=True)
        console.print(f"{location} {region.start}-{region.end} -> {region.widget.replacement!r}")
