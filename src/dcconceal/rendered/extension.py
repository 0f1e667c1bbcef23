# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : extension.py
#   file_relpath : src/dcconceal/rendered/extension.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Python-Markdown extension concealing field separators in rendered output.

The extension installs a tree processor that runs after inline parsing and
after backslash escapes are restored, so ``**Status**:: Done`` is already
split into a ``<strong>`` element and its tail, and field names are checked
against the text the reader sees (``\\[draft:: note`` keeps its separator).

Every call to ``extendMarkdown`` issues a new generation from the shared
`GenerationCounter` and registers its processor under a unique name; older
registrations stay in the pipeline but no longer do anything.

Usage:
    ```python
    import markdown

    html = markdown.markdown(
        "Status:: Done",
        extensions=["dcconceal.rendered.extension"],
        extension_configs={"dcconceal.rendered.extension": {"replacement": "→"}},
    )
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from dcconceal.config.logging import get_logger
from dcconceal.constants import DEFAULT_REPLACEMENT
from dcconceal.rendered.guard import GenerationCounter, create_conceal_postprocessor

if TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown

    from dcconceal.config.logging import DcConcealLogger
    from dcconceal.rendered.guard import ConcealPostProcessor

logger: DcConcealLogger = get_logger(__name__)

# After "inline" (20) and "prettify" (10), before "unescape" (0).
# Below "unescape" (0), which restores escaped characters from placeholders.
TREEPROCESSOR_PRIORITY: int = -1


class ConcealTreeprocessor(Treeprocessor):
    """Runs one guarded conceal postprocessor over the document tree."""

    def __init__(self, md: Markdown, postprocessor: ConcealPostProcessor) -> None:
        super().__init__(md)
        self.postprocessor = postprocessor

    def run(self, root: Element) -> None:
        self.postprocessor(root)


class DoubleColonConcealExtension(Extension):
    """Register the rendered-surface rewriter with a Markdown instance.

    Config:
        replacement: Glyph replacing ``::`` (``None`` is treated as ``""``).
        counter: `GenerationCounter` shared by every registration that should
            supersede the others. Each extension owns a private one by default.
    """

    def __init__(self, **kwargs: Any) -> None:
        self.config = {
            "replacement": [DEFAULT_REPLACEMENT, "Glyph replacing '::' - Default: ':'"],
            "counter": [GenerationCounter(), "Shared registration counter"],
        }
        super().__init__(**kwargs)

    def extendMarkdown(self, md: Markdown) -> None:  # noqa: N802
        counter: GenerationCounter = self.getConfig("counter")
        replacement: str | None = self.getConfig("replacement")
        generation = counter.issue()
        postprocessor = create_conceal_postprocessor(replacement, generation, counter)
        md.treeprocessors.register(
            ConcealTreeprocessor(md, postprocessor),
            f"dcconceal_{generation}",
            TREEPROCESSOR_PRIORITY,
        )
        md.registerExtension(self)
        logger.debug(
            "Registered conceal tree processor generation %d (replacement=%r)",
            generation,
            replacement,
        )


def makeExtension(**kwargs: Any) -> DoubleColonConcealExtension:  # noqa: N802
    return DoubleColonConcealExtension(**kwargs)
