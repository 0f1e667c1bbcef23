# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : keys.py
#   file_relpath : src/dcconceal/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names for DoubleColonConceal configuration.

These constants are the external configuration API as it appears in
``dcconceal.toml`` and in ``[tool.dcconceal]`` inside ``pyproject.toml``.
Renaming or removing a key is a breaking change.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by DoubleColonConceal configuration."""

    # [conceal]
    SECTION_CONCEAL: Final[str] = "conceal"

    KEY_EDIT_MODE: Final[str] = "edit_mode"
    KEY_READ_REPLACEMENT: Final[str] = "read_replacement"
    KEY_EDIT_REPLACEMENT: Final[str] = "edit_replacement"

    # [render]
    SECTION_RENDER: Final[str] = "render"

    KEY_EXTENSIONS: Final[str] = "extensions"
