# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : syntax.py
#   file_relpath : src/dcconceal/live/syntax.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Code-span labeling for the live surface.

The live scanner only needs to know two things about the markdown syntax:
which offset ranges hold inline code, and which lines belong to a fenced
code block. Any object implementing `SyntaxTree` can supply those labels;
`MarkdownSyntaxTree` is a line-oriented implementation built directly from a
`Document`.

Markdown-specific behavior:
    * A fence opens on a line starting (after up to three spaces) with at
      least three backticks or tildes, and closes on a line with the same
      character repeated at least as many times. The fence lines themselves
      are labeled as code block lines; an unclosed fence runs to the end of
      the document.
    * Inline code spans are matched per line: an opening run of N backticks
      closes at the next run of exactly N backticks. The labeled range covers
      the code content only, not the backticks.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Protocol

from dcconceal.config.logging import get_logger
from dcconceal.core.spans import has_overlap

if TYPE_CHECKING:
    from collections.abc import Callable, Iterator
    from re import Pattern

    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.live.document import Document

logger: DcConcealLogger = get_logger(__name__)

FENCE_RE: Pattern[str] = re.compile(r"^ {0,3}(`{3,}|~{3,})")
BACKTICK_RUN_RE: Pattern[str] = re.compile(r"`+")


class NodeType(str, Enum):
    """Labels the live scanner cares about."""

    INLINE_CODE = "inline-code"
    CODE_BLOCK = "codeblock"


@dataclass(frozen=True, slots=True)
class SyntaxNode:
    """A labeled ``[start, end)`` range of the document."""

    type: NodeType
    start: int
    end: int


class SyntaxTree(Protocol):
    """Labeling service consumed by the live scanner."""

    def iterate(
        self,
        start: int,
        end: int,
        enter: Callable[[SyntaxNode], object],
    ) -> None:
        """Call ``enter`` for every node touching ``[start, end]``, in document order."""
        ...


class MarkdownSyntaxTree:
    """Line-oriented `SyntaxTree` for markdown documents."""

    def __init__(self, doc: Document) -> None:
        self._nodes: tuple[SyntaxNode, ...] = tuple(self._build(doc))
        logger.trace("Labeled %d code node(s) in %r", len(self._nodes), doc)

    @property
    def nodes(self) -> tuple[SyntaxNode, ...]:
        return self._nodes

    def iterate(
        self,
        start: int,
        end: int,
        enter: Callable[[SyntaxNode], object],
    ) -> None:
        for node in self._nodes:
            if node.start > end:
                break
            if has_overlap(node.start, node.end, start, end):
                enter(node)

    @staticmethod
    def _build(doc: Document) -> Iterator[SyntaxNode]:
        fence: str | None = None
        for line in doc.lines():
            match = FENCE_RE.match(line.text)
            if fence is None and match:
                fence = match.group(1)
                yield SyntaxNode(NodeType.CODE_BLOCK, line.start, line.end)
                continue
            if fence is not None:
                yield SyntaxNode(NodeType.CODE_BLOCK, line.start, line.end)
                if (
                    match
                    and match.group(1)[0] == fence[0]
                    and len(match.group(1)) >= len(fence)
                    and not line.text[match.end() :].strip()
                ):
                    fence = None
                continue
            for span_start, span_end in iter_inline_code_spans(line.text):
                yield SyntaxNode(NodeType.INLINE_CODE, line.start + span_start, line.start + span_end)


def iter_inline_code_spans(text: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` offsets of inline code content within ``text``.

    A backtick run without a matching closer is literal text.
    """
    runs: list[re.Match[str]] = list(BACKTICK_RUN_RE.finditer(text))
    i = 0
    while i < len(runs):
        opener = runs[i]
        width = len(opener.group(0))
        closer_index = next(
            (j for j in range(i + 1, len(runs)) if len(runs[j].group(0)) == width),
            None,
        )
        if closer_index is None:
            i += 1
            continue
        yield opener.end(), runs[closer_index].start()
        i = closer_index + 1
