# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : rewriter.py
#   file_relpath : src/dcconceal/rendered/rewriter.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tree-walking rewriter for rendered markdown output.

Each visual line of a block (text up to a ``<br>``) is examined from its
first content-bearing child only:

* a styled label (``<strong>Status</strong>:: Done``) is accepted when its
  text is a valid field name; the text that follows it is then rewritten
  if it starts with ``::``;
* a styled run already holding ``Name:: value`` is rewritten itself;
* a plain text run is rewritten when it includes a field.

Whitespace-only runs, empty styled runs and list bullet wrappers do not
count as content. The first ``::`` of a qualifying run is replaced with the
glyph; running the rewriter twice leaves nothing more to replace.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dcconceal.config.logging import get_logger
from dcconceal.constants import FIELD_SEPARATOR
from dcconceal.core.predicate import conceal_double_colon, includes_field, is_valid_field_name
from dcconceal.rendered.nodes import BLOCK_TAGS, NodeKind, iter_content_nodes

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.rendered.nodes import TextSlot

logger: DcConcealLogger = get_logger(__name__)


def _conceal(slot: TextSlot, replacement: str | None) -> None:
    slot.text = conceal_double_colon(slot.text, replacement)


def rewrite_block(element: Element, replacement: str | None) -> int:
    """Conceal field separators among the direct children of one block element.

    Args:
        element (Element): A ``p``, ``li`` or ``h1``-``h6`` element; mutated in place.
        replacement (str | None): Glyph replacing ``::`` (``None`` means ``""``).

    Returns:
        int: Number of text runs rewritten.
    """
    if FIELD_SEPARATOR not in "".join(element.itertext()):
        return 0

    position = 0
    after_styled_label = False
    rewritten = 0

    for node in iter_content_nodes(element):
        position += 1

        if node.kind is NodeKind.LINE_BREAK:
            position = 0
            after_styled_label = False
            continue

        if position > 1:
            continue

        if node.kind is NodeKind.LIST_MARKER:
            position -= 1
            continue

        if node.kind is NodeKind.STYLED:
            assert node.slot is not None
            content = node.slot.text.strip()
            if not content:
                position -= 1
            elif includes_field(content):
                _conceal(node.slot, replacement)
                rewritten += 1
            elif is_valid_field_name(content):
                # The separator is expected at the start of the next sibling.
                after_styled_label = True
                position -= 1
            continue

        if node.kind is NodeKind.TEXT:
            assert node.slot is not None
            content = node.slot.text.strip()
            if not content:
                position -= 1
                continue
            if after_styled_label:
                if content.startswith(FIELD_SEPARATOR):
                    _conceal(node.slot, replacement)
                    rewritten += 1
            elif includes_field(content):
                _conceal(node.slot, replacement)
                rewritten += 1

    return rewritten


def conceal_rendered_tree(root: Element, replacement: str | None) -> int:
    """Apply `rewrite_block` to ``root`` and every block element below it.

    Returns:
        int: Total number of text runs rewritten.
    """
    blocks: list[Element] = [el for el in root.iter() if el.tag in BLOCK_TAGS]
    rewritten = sum(rewrite_block(block, replacement) for block in blocks)
    logger.trace("Rewrote %d separator(s) in %d block(s)", rewritten, len(blocks))
    return rewritten
