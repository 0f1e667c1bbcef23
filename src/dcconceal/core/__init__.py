# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pure helpers shared by both surfaces: the field predicate and offset ranges."""

from __future__ import annotations

from dcconceal.core.predicate import conceal_double_colon, includes_field, is_valid_field_name
from dcconceal.core.spans import TextRange, has_overlap

__all__ = [
    "TextRange",
    "conceal_double_colon",
    "has_overlap",
    "includes_field",
    "is_valid_field_name",
]
