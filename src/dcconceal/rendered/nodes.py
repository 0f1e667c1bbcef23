# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : nodes.py
#   file_relpath : src/dcconceal/rendered/nodes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Content-node view of a rendered ElementTree block.

ElementTree keeps character data in ``text``/``tail`` attributes instead of
text nodes. `iter_content_nodes` presents a block element as the flat child
sequence a reader sees: the block's leading text, then each child element
followed by its tail. Each text run is exposed as a `TextSlot`, a writable
handle on the attribute that holds it, so the rewriter can replace text in
place without keeping any reference after the call.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final, Literal

if TYPE_CHECKING:
    from collections.abc import Iterator
    from xml.etree.ElementTree import Element

#: Inline styling elements that can hold a field name.
STYLE_TAGS: Final[frozenset[str]] = frozenset({"strong", "em", "mark", "del"})

#: Block elements whose children are scanned for separators.
BLOCK_TAGS: Final[frozenset[str]] = frozenset({"p", "li", "h1", "h2", "h3", "h4", "h5", "h6"})

LINE_BREAK_TAG: Final[str] = "br"


class NodeKind(Enum):
    """Closed set of node kinds the traversal distinguishes."""

    TEXT = "text"
    STYLED = "styled"
    LINE_BREAK = "line_break"
    LIST_MARKER = "list_marker"
    OTHER = "other"


@dataclass(slots=True)
class TextSlot:
    """Writable handle on ``owner.text`` or ``owner.tail``."""

    owner: Element
    attr: Literal["text", "tail"]

    @property
    def text(self) -> str:
        return getattr(self.owner, self.attr) or ""

    @text.setter
    def text(self, value: str) -> None:
        setattr(self.owner, self.attr, value)


@dataclass(frozen=True, slots=True)
class ContentNode:
    """One child of a rendered block, classified once.

    Attributes:
        kind (NodeKind): Node classification.
        slot (TextSlot | None): The text held by a TEXT node, or the single
            text child of a STYLED element.
        element (Element | None): The child element (``None`` for TEXT).
    """

    kind: NodeKind
    slot: TextSlot | None = None
    element: Element | None = None


def is_list_marker(element: Element) -> bool:
    """Return True for list bullet or collapse indicator wrappers."""
    if element.tag != "div":
        return False
    css_class: str = element.get("class", "")
    return css_class.startswith("list-") or "collapse-indicator" in css_class


def classify_element(element: Element) -> ContentNode:
    """Classify a child element of a block."""
    if element.tag == LINE_BREAK_TAG:
        return ContentNode(NodeKind.LINE_BREAK, element=element)
    if is_list_marker(element):
        return ContentNode(NodeKind.LIST_MARKER, element=element)
    if element.tag in STYLE_TAGS and len(element) == 0 and element.text:
        return ContentNode(NodeKind.STYLED, slot=TextSlot(element, "text"), element=element)
    return ContentNode(NodeKind.OTHER, element=element)


def iter_content_nodes(block: Element) -> Iterator[ContentNode]:
    """Yield the classified child sequence of ``block`` in reading order."""
    if block.text:
        yield ContentNode(NodeKind.TEXT, slot=TextSlot(block, "text"))
    for child in block:
        yield classify_element(child)
        if child.tail:
            yield ContentNode(NodeKind.TEXT, slot=TextSlot(child, "tail"))
