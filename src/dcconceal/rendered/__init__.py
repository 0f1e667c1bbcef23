# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/rendered/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendered surface: in-place rewriting of Python-Markdown output trees."""

from __future__ import annotations

from dcconceal.rendered.extension import (
    ConcealTreeprocessor,
    DoubleColonConcealExtension,
    makeExtension,
)
from dcconceal.rendered.guard import GenerationCounter, create_conceal_postprocessor
from dcconceal.rendered.nodes import ContentNode, NodeKind, TextSlot, iter_content_nodes
from dcconceal.rendered.renderer import MarkdownRenderer
from dcconceal.rendered.rewriter import conceal_rendered_tree, rewrite_block

__all__ = [
    "ConcealTreeprocessor",
    "ContentNode",
    "DoubleColonConcealExtension",
    "GenerationCounter",
    "MarkdownRenderer",
    "NodeKind",
    "TextSlot",
    "conceal_rendered_tree",
    "create_conceal_postprocessor",
    "iter_content_nodes",
    "makeExtension",
    "rewrite_block",
]
