# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : spans.py
#   file_relpath : src/dcconceal/core/spans.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Offset ranges and the overlap test used by the live surface."""

from __future__ import annotations

from dataclasses import dataclass


def has_overlap(first_from: int, first_to: int, second_from: int, second_to: int) -> bool:
    """Return True if two offset ranges intersect, touching boundaries included.

    ``has_overlap(0, 5, 5, 10)`` is ``True``; ``has_overlap(0, 4, 5, 10)`` is ``False``.
    """
    return first_from <= second_to and second_from <= first_to


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open ``[start, end)`` offset range over a flat document index.

    Attributes:
        start (int): First offset covered by the range.
        end (int): Offset just past the range.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start > self.end:
            raise ValueError(f"Invalid range: start ({self.start}) > end ({self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def overlaps(self, other: TextRange) -> bool:
        """Return True if ``other`` intersects this range (see `has_overlap`)."""
        return has_overlap(self.start, self.end, other.start, other.end)
