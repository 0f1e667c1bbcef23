# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : scanner.py
#   file_relpath : src/dcconceal/live/scanner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Offset-based scanner producing concealment regions for the live surface.

`scan_conceal_regions` is a pure function of the view: document, main
selection, visible ranges and syntax labels. For each visible line it
considers only the first ``::`` and emits a region when:

* the line does not touch the main selection (the user is editing it),
* the line is not part of a fenced code block,
* the text before the first ``::`` is a valid field name,
* the separator is not covered by an inline code span.

Lines outside the visible ranges are never scanned; scrolling re-triggers a
scan through the controller.
"""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from dcconceal.config.logging import get_logger
from dcconceal.constants import CONCEAL_CSS_CLASS, FIELD_SEPARATOR
from dcconceal.core.predicate import includes_field
from dcconceal.core.spans import has_overlap
from dcconceal.live.syntax import NodeType

if TYPE_CHECKING:
    from collections.abc import Iterable

    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.live.document import EditorView
    from dcconceal.live.syntax import SyntaxNode

logger: DcConcealLogger = get_logger(__name__)


class ConcealWidget:
    """Inline replacement drawn over a concealed separator.

    All widgets of one controller carry the same glyph, so any two widgets
    compare equal for redraw purposes.
    """

    __slots__ = ("replacement",)

    def __init__(self, replacement: str | None) -> None:
        self.replacement: str = replacement or ""

    def __repr__(self) -> str:
        return f"ConcealWidget({self.replacement!r})"

    def eq(self, other: object) -> bool:  # noqa: ARG002
        return True

    def ignore_event(self) -> bool:
        """Events on the glyph still reach the underlying document offsets."""
        return False

    def to_html(self) -> str:
        return f'<span class="{CONCEAL_CSS_CLASS}">{html.escape(self.replacement)}</span>'


@dataclass(frozen=True, slots=True, order=True)
class ConcealRegion:
    """A separator span approved for display-only replacement.

    Equality and ordering use the offsets only.

    Attributes:
        start (int): Offset of the first ``:``.
        end (int): ``start + 2``.
        widget (ConcealWidget): Glyph drawn in place of the separator.
        inclusive (bool): Whether text typed at the edges joins the region (never).
        block (bool): Whether the replacement is block-level (never).
    """

    start: int
    end: int
    widget: ConcealWidget = field(compare=False)
    inclusive: bool = field(default=False, compare=False)
    block: bool = field(default=False, compare=False)


def scan_conceal_regions(view: EditorView, replacement: str | None) -> tuple[ConcealRegion, ...]:
    """Return the concealment regions of the visible part of ``view``.

    Args:
        view (EditorView): View to scan.
        replacement (str | None): Glyph shown instead of ``::`` (``None`` means ``""``).

    Returns:
        tuple[ConcealRegion, ...]: Regions ordered by ascending start offset.
    """
    doc = view.state.doc
    selection = view.state.selection
    widget = ConcealWidget(replacement)
    regions: dict[int, ConcealRegion] = {}
    excluded_lines: set[int] = set()
    excluded_ranges: list[tuple[int, int]] = []

    def collect(node: SyntaxNode) -> None:
        if node.type is NodeType.INLINE_CODE:
            excluded_ranges.append((node.start, node.end))
        elif node.type is NodeType.CODE_BLOCK:
            excluded_lines.add(node.start)

    for visible in view.visible_ranges:
        start_line = doc.line_at(visible.start)
        end_line = doc.line_at(visible.end)

        view.tree().iterate(visible.start, visible.end, collect)

        for number in range(start_line.number, end_line.number + 1):
            line = doc.line(number)

            if selection is not None and has_overlap(
                line.start, line.end, selection.start, selection.end
            ):
                continue

            if line.start in excluded_lines:
                continue

            if not includes_field(line.text):
                continue

            sign_from = line.start + line.text.index(FIELD_SEPARATOR)
            sign_to = sign_from + len(FIELD_SEPARATOR)

            if any(
                has_overlap(code_from, code_to, sign_from, sign_to)
                for code_from, code_to in excluded_ranges
            ):
                continue

            regions[sign_from] = ConcealRegion(sign_from, sign_to, widget)

    result = tuple(regions[key] for key in sorted(regions))
    logger.trace("Scanned %d visible range(s): %d region(s)", len(view.visible_ranges), len(result))
    return result


def apply_regions(text: str, regions: Iterable[ConcealRegion]) -> str:
    """Return ``text`` as displayed with ``regions`` drawn over it.

    The input is not modified; this is the text a reader of the live surface sees.
    """
    parts: list[str] = []
    cursor = 0
    for region in sorted(regions):
        if region.start < cursor:
            continue
        parts.append(text[cursor : region.start])
        parts.append(region.widget.replacement)
        cursor = region.end
    parts.append(text[cursor:])
    return "".join(parts)
