# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/live/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Live (editable) surface: display-only concealment regions."""

from __future__ import annotations

from dcconceal.live.controller import (
    LiveOverlayController,
    ViewPlugin,
    ViewUpdate,
    editor_conceal_plugin,
)
from dcconceal.live.document import Document, EditorState, EditorView, Line, SelectionRange
from dcconceal.live.scanner import ConcealRegion, ConcealWidget, apply_regions, scan_conceal_regions
from dcconceal.live.syntax import MarkdownSyntaxTree, NodeType, SyntaxNode, SyntaxTree

__all__ = [
    "ConcealRegion",
    "ConcealWidget",
    "Document",
    "EditorState",
    "EditorView",
    "Line",
    "LiveOverlayController",
    "MarkdownSyntaxTree",
    "NodeType",
    "SelectionRange",
    "SyntaxNode",
    "SyntaxTree",
    "ViewPlugin",
    "ViewUpdate",
    "apply_regions",
    "editor_conceal_plugin",
    "scan_conceal_regions",
]
