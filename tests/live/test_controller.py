# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : test_controller.py
#   file_relpath : tests/live/test_controller.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the view-attached overlay controller and its update triggers."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from dcconceal.core.spans import TextRange
from dcconceal.live.controller import (
    LiveOverlayController,
    ViewPlugin,
    ViewUpdate,
    editor_conceal_plugin,
)
from dcconceal.live.document import EditorState, SelectionRange

if TYPE_CHECKING:
    from tests.conftest import ViewFactory

TEXT = "Status:: Done\nOwner:: Ann"


def _starts(controller: LiveOverlayController) -> list[int]:
    return [r.start for r in controller.decorations]


@pytest.mark.live
def test_controller_scans_on_creation(make_view: ViewFactory) -> None:
    controller = LiveOverlayController(make_view(TEXT), "→")
    assert _starts(controller) == [6, 19]
    assert {r.widget.replacement for r in controller.decorations} == {"→"}


@pytest.mark.live
def test_controller_starts_empty_in_source_mode(make_view: ViewFactory) -> None:
    controller = LiveOverlayController(make_view(TEXT, live_preview=False), ":")
    assert controller.decorations == ()


@pytest.mark.live
def test_switching_to_source_mode_drops_regions(make_view: ViewFactory) -> None:
    view = make_view(TEXT)
    controller = LiveOverlayController(view, ":")
    source = view.with_state(EditorState(doc=view.state.doc, live_preview=False))
    controller.update(ViewUpdate(view=source))
    assert controller.decorations == ()


@pytest.mark.live
def test_selection_update_rescans(make_view: ViewFactory) -> None:
    view = make_view(TEXT)
    controller = LiveOverlayController(view, ":")
    moved = view.with_state(EditorState(doc=view.state.doc, selection=SelectionRange.cursor(2)))
    controller.update(ViewUpdate.between(view, moved))
    assert _starts(controller) == [19]


@pytest.mark.live
def test_doc_change_rescans(make_view: ViewFactory) -> None:
    view = make_view(TEXT)
    controller = LiveOverlayController(view, ":")
    edited = view.with_state(EditorState.from_text("X:: 1\n" + TEXT))
    update = ViewUpdate.between(view, edited)
    assert update.doc_changed
    controller.update(update)
    assert _starts(controller) == [1, 12, 25]


@pytest.mark.live
def test_viewport_change_rescans(make_view: ViewFactory) -> None:
    view = make_view(TEXT, visible=[(0, 13)])
    controller = LiveOverlayController(view, ":")
    assert _starts(controller) == [6]
    scrolled = view.with_visible_ranges([TextRange(14, len(TEXT))])
    update = ViewUpdate.between(view, scrolled)
    assert (update.viewport_changed, update.doc_changed, update.selection_set) == (
        True,
        False,
        False,
    )
    controller.update(update)
    assert _starts(controller) == [19]


@pytest.mark.live
def test_update_without_trigger_keeps_previous_regions(make_view: ViewFactory) -> None:
    view = make_view(TEXT)
    controller = LiveOverlayController(view, ":")
    before = controller.decorations
    # Same view content, no flag set: no rescan even though the selection would hide a line.
    hidden = view.with_state(EditorState(doc=view.state.doc, selection=SelectionRange.cursor(0)))
    controller.update(ViewUpdate(view=hidden))
    assert controller.decorations is before


@pytest.mark.live
def test_destroy_clears_regions(make_view: ViewFactory) -> None:
    controller = LiveOverlayController(make_view(TEXT), ":")
    controller.destroy()
    assert controller.decorations == ()


@pytest.mark.live
def test_view_plugin_creates_controllers_with_its_glyph(make_view: ViewFactory) -> None:
    plugin = editor_conceal_plugin(None)
    assert isinstance(plugin, ViewPlugin)
    assert plugin.replacement == ""
    controller = plugin.create(make_view(TEXT))
    assert [r.widget.replacement for r in controller.decorations] == ["", ""]
