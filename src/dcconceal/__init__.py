# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal package.

DoubleColonConceal shortens the ``::`` separator of inline fields
(``Status:: Done``) in two surfaces: a live, editable document where the
separator is hidden behind display-only overlays, and rendered markdown
output where the separator text is rewritten in place.
"""

from __future__ import annotations
