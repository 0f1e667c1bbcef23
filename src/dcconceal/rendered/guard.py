# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : guard.py
#   file_relpath : src/dcconceal/rendered/guard.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Registration guard for the rendered-surface rewriter.

Rendering pipelines append postprocessors and rarely let you remove one, so
each reconfiguration would stack another rewriter over the same output. A
`GenerationCounter` owned by whoever manages the rewriter lifecycle issues a
new generation on every registration; each postprocessor captures its own
generation and does nothing once a newer one has been issued.

Typical usage:
    ```python
    counter = GenerationCounter()
    first = create_conceal_postprocessor(":", counter.issue(), counter)
    second = create_conceal_postprocessor("→", counter.issue(), counter)
    first(root)   # no-op, stale
    second(root)  # rewrites
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dcconceal.config.logging import get_logger
from dcconceal.rendered.rewriter import conceal_rendered_tree

if TYPE_CHECKING:
    from collections.abc import Callable
    from xml.etree.ElementTree import Element

    from dcconceal.config.logging import DcConcealLogger

    ConcealPostProcessor = Callable[[Element], int]

logger: DcConcealLogger = get_logger(__name__)


class GenerationCounter:
    """Shared counter cell; the latest issued generation is the active one."""

    __slots__ = ("current",)

    def __init__(self) -> None:
        self.current: int = 0

    def __repr__(self) -> str:
        return f"GenerationCounter(current={self.current})"

    def issue(self) -> int:
        """Start a new generation and return it."""
        self.current += 1
        logger.debug("Issued rewriter generation %d", self.current)
        return self.current

    def is_current(self, generation: int) -> bool:
        return generation == self.current


def create_conceal_postprocessor(
    replacement: str | None,
    generation: int,
    active: GenerationCounter,
) -> ConcealPostProcessor:
    """Return a rewriter that only runs while ``generation`` is the active one.

    Args:
        replacement (str | None): Glyph replacing ``::``.
        generation (int): Generation issued for this registration.
        active (GenerationCounter): Counter shared by every registration.

    Returns:
        ConcealPostProcessor: Callable rewriting a rendered tree in place and
            returning the number of rewritten text runs (0 when stale).
    """

    def conceal_postprocessor(el: Element) -> int:
        if not active.is_current(generation):
            logger.trace("Skipping stale rewriter generation %d", generation)
            return 0
        return conceal_rendered_tree(el, replacement)

    return conceal_postprocessor
