# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : document.py
#   file_relpath : src/dcconceal/live/document.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Editable document, selection and view state consumed by the live scanner.

These are small immutable stand-ins for an editor host: the scanner only
needs line lookup by offset or number, the main selection, the set of
visible ranges and a syntax tree to find code spans. Line endings are
normalized to ``\\n`` so offsets are flat character indexes.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING

from dcconceal.core.spans import TextRange

if TYPE_CHECKING:
    from collections.abc import Iterator, Sequence

    from dcconceal.live.syntax import SyntaxTree


@dataclass(frozen=True, slots=True)
class Line:
    """One document line.

    Attributes:
        number (int): 1-based line number.
        start (int): Offset of the first character of the line.
        end (int): Offset of the end of the line, newline excluded.
        text (str): Line content without the newline.
    """

    number: int
    start: int
    end: int
    text: str


class Document:
    """Immutable text buffer with line lookup by offset or by line number."""

    __slots__ = ("_line_starts", "_lines", "text")

    def __init__(self, text: str = "") -> None:
        self.text: str = text.replace("\r\n", "\n").replace("\r", "\n")
        self._lines: list[str] = self.text.split("\n")
        starts: list[int] = []
        offset = 0
        for line in self._lines:
            starts.append(offset)
            offset += len(line) + 1
        self._line_starts: list[int] = starts

    def __len__(self) -> int:
        return len(self.text)

    def __repr__(self) -> str:
        return f"Document(lines={self.line_count}, length={len(self)})"

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line(self, number: int) -> Line:
        """Return the line with the given 1-based number.

        Raises:
            IndexError: If ``number`` is outside ``1..line_count``.
        """
        if not 1 <= number <= self.line_count:
            raise IndexError(f"Line {number} out of range 1..{self.line_count}")
        start = self._line_starts[number - 1]
        text = self._lines[number - 1]
        return Line(number=number, start=start, end=start + len(text), text=text)

    def line_at(self, offset: int) -> Line:
        """Return the line containing ``offset`` (clamped to the document)."""
        offset = min(max(offset, 0), len(self.text))
        return self.line(bisect_right(self._line_starts, offset))

    def lines(self) -> Iterator[Line]:
        for number in range(1, self.line_count + 1):
            yield self.line(number)

    def slice(self, start: int, end: int) -> str:
        return self.text[start:end]


@dataclass(frozen=True, slots=True)
class SelectionRange:
    """Main selection; ``anchor == head`` is a plain cursor."""

    anchor: int
    head: int

    @classmethod
    def cursor(cls, offset: int) -> SelectionRange:
        return cls(anchor=offset, head=offset)

    @property
    def start(self) -> int:
        return min(self.anchor, self.head)

    @property
    def end(self) -> int:
        return max(self.anchor, self.head)

    @property
    def empty(self) -> bool:
        return self.anchor == self.head


@dataclass(frozen=True, slots=True)
class EditorState:
    """Snapshot of the editable surface.

    Attributes:
        doc (Document): Current document.
        selection (SelectionRange | None): Main selection, ``None`` when the
            editor has no focus/cursor.
        live_preview (bool): True in the rendered editing mode, False in raw
            source mode.
    """

    doc: Document
    selection: SelectionRange | None = None
    live_preview: bool = True

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        selection: SelectionRange | None = None,
        live_preview: bool = True,
    ) -> EditorState:
        return cls(doc=Document(text), selection=selection, live_preview=live_preview)


@dataclass(frozen=True)
class EditorView:
    """A view over an `EditorState` with its materialized ranges.

    ``visible_ranges`` defaults to the whole document. ``syntax_tree`` is built
    lazily from the document with `MarkdownSyntaxTree` when not supplied.
    """

    state: EditorState
    visible_ranges: Sequence[TextRange] = ()
    syntax_tree: SyntaxTree | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not self.visible_ranges:
            object.__setattr__(self, "visible_ranges", (TextRange(0, len(self.state.doc)),))
        if self.syntax_tree is None:
            from dcconceal.live.syntax import MarkdownSyntaxTree

            object.__setattr__(self, "syntax_tree", MarkdownSyntaxTree(self.state.doc))

    def tree(self) -> SyntaxTree:
        assert self.syntax_tree is not None
        return self.syntax_tree

    def with_state(self, state: EditorState) -> EditorView:
        """Return a view over ``state``.

        When the document changed, the syntax tree is rebuilt and the visible
        ranges fall back to the whole new document.
        """
        if state.doc is self.state.doc:
            return replace(self, state=state)
        return EditorView(state=state, visible_ranges=())

    def with_visible_ranges(self, ranges: Sequence[TextRange]) -> EditorView:
        return replace(self, visible_ranges=tuple(ranges))
