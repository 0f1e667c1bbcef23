# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : predicate.py
#   file_relpath : src/dcconceal/core/predicate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field separator predicate shared by the live and rendered surfaces.

A text run "includes a field" when it contains ``::`` and the text before the
*first* ``::`` is a non-empty, valid field name. Validity only checks that
square brackets and parentheses do not remain open, which keeps names such
as ``Tags (optional)`` eligible while rejecting ``[draft:: note``.

Examples:
    ```python
    includes_field("Status:: Done")      # True
    includes_field(":: Done")            # False, no field name
    includes_field("a::b::c")            # True, split on the first "::"
    conceal_double_colon("a:: b", "")    # "a b"
    ```
"""

from __future__ import annotations

from dcconceal.constants import FIELD_SEPARATOR


def is_valid_field_name(text: str | None) -> bool:
    """Return True if no ``[`` or ``(`` is left open in ``text``.

    Closers decrement their running count but never below zero, so an
    over-closed name such as ``Tags)`` still counts as balanced. The empty
    string is vacuously valid.

    Args:
        text (str | None): Candidate field name; ``None`` is treated as ``""``.

    Returns:
        bool: ``True`` if both running counts end at zero.
    """
    square = 0
    round_ = 0
    for ch in text or "":
        if ch == "[":
            square += 1
        elif ch == "]":
            square = max(0, square - 1)
        elif ch == "(":
            round_ += 1
        elif ch == ")":
            round_ = max(0, round_ - 1)
    return square == 0 and round_ == 0


def includes_field(text: str | None) -> bool:
    """Return True if ``text`` starts with a valid field name followed by ``::``.

    Args:
        text (str | None): Text run to classify; ``None`` is treated as ``""``.

    Returns:
        bool: ``True`` if the prefix before the first ``::`` is non-empty and valid.
    """
    name, sep, _ = (text or "").partition(FIELD_SEPARATOR)
    if not sep or not name:
        return False
    return is_valid_field_name(name)


def conceal_double_colon(text: str | None, replacement: str | None) -> str:
    """Replace the first ``::`` in ``text`` with ``replacement``.

    Text already rewritten (no ``::`` left) is returned unchanged, which makes
    repeated passes harmless.
    """
    return (text or "").replace(FIELD_SEPARATOR, replacement or "", 1)
