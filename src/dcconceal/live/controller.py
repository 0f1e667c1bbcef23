# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : controller.py
#   file_relpath : src/dcconceal/live/controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""View-attached controller keeping the live concealment regions current.

A `LiveOverlayController` belongs to one `EditorView`. It scans on creation
and again whenever an update reports a document edit, a viewport change or a
new selection. In raw source mode every region is dropped. The regions are
display-only: the document keeps its ``::`` and offsets are never shifted.

`editor_conceal_plugin` is the editor extension handed to a host: it creates
one controller per attached view, all sharing the glyph they were built with.
Changing the glyph means building a new plugin.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from dcconceal.config.logging import get_logger
from dcconceal.live.scanner import scan_conceal_regions

if TYPE_CHECKING:
    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.live.document import EditorState, EditorView
    from dcconceal.live.scanner import ConcealRegion

logger: DcConcealLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ViewUpdate:
    """Change notification delivered to controllers.

    Attributes:
        view (EditorView): The view after the change.
        doc_changed (bool): The document content changed.
        viewport_changed (bool): The visible ranges changed.
        selection_set (bool): A new selection was dispatched.
    """

    view: EditorView
    doc_changed: bool = False
    viewport_changed: bool = False
    selection_set: bool = False

    @property
    def state(self) -> EditorState:
        return self.view.state

    @classmethod
    def between(cls, before: EditorView, after: EditorView) -> ViewUpdate:
        """Build the update describing the move from ``before`` to ``after``."""
        return cls(
            view=after,
            doc_changed=before.state.doc.text != after.state.doc.text,
            viewport_changed=tuple(before.visible_ranges) != tuple(after.visible_ranges),
            selection_set=before.state.selection != after.state.selection,
        )


class LiveOverlayController:
    """Concealment regions of one editor view."""

    def __init__(self, view: EditorView, replacement: str | None) -> None:
        self.replacement: str = replacement or ""
        self.decorations: tuple[ConcealRegion, ...] = ()
        if view.state.live_preview:
            self.decorations = scan_conceal_regions(view, self.replacement)

    def update(self, update: ViewUpdate) -> None:
        if not update.state.live_preview:
            self.decorations = ()
            return

        if update.doc_changed or update.viewport_changed or update.selection_set:
            self.decorations = scan_conceal_regions(update.view, self.replacement)

    def destroy(self) -> None:
        self.decorations = ()


class ViewPlugin:
    """Editor extension creating a `LiveOverlayController` per view."""

    def __init__(self, replacement: str | None) -> None:
        self.replacement: str = replacement or ""

    def __repr__(self) -> str:
        return f"ViewPlugin(replacement={self.replacement!r})"

    def create(self, view: EditorView) -> LiveOverlayController:
        logger.debug("Attaching live overlay controller (replacement=%r)", self.replacement)
        return LiveOverlayController(view, self.replacement)


def editor_conceal_plugin(replacement: str | None) -> ViewPlugin:
    """Return the editor extension concealing separators with ``replacement``."""
    return ViewPlugin(replacement)
