# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : renderer.py
#   file_relpath : src/dcconceal/rendered/renderer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Rendered surface: one Python-Markdown instance plus the last rendered source.

`MarkdownRenderer` plays the part of a reading view. Extensions registered
with it stay registered for its lifetime, and `rerender` converts the last
source again so a changed glyph becomes visible immediately.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import markdown

from dcconceal.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable

    from markdown.extensions import Extension

    from dcconceal.config.logging import DcConcealLogger

logger: DcConcealLogger = get_logger(__name__)


class MarkdownRenderer:
    """Markdown to HTML converter remembering its last input and output."""

    def __init__(self, extensions: Iterable[str | Extension] = ()) -> None:
        self.md: markdown.Markdown = markdown.Markdown(extensions=list(extensions))
        self.source: str | None = None
        self.html: str | None = None
        self.render_count: int = 0

    def register(self, extension: Extension) -> None:
        """Add an extension to the pipeline (extensions are never removed)."""
        self.md.registerExtensions([extension], {})

    def render(self, source: str) -> str:
        """Convert ``source`` and remember it as the displayed document."""
        self.source = source
        self.md.reset()
        self.html = self.md.convert(source)
        self.render_count += 1
        logger.debug("Rendered %d character(s) of markdown", len(source))
        return self.html

    def rerender(self, *, force: bool = False) -> str | None:
        """Render the last source again.

        Without ``force`` the cached HTML is returned when available.
        Returns ``None`` when nothing was rendered yet.
        """
        if self.source is None:
            return None
        if not force and self.html is not None:
            return self.html
        return self.render(self.source)
