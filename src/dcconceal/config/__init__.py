# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : __init__.py
#   file_relpath : src/dcconceal/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model, TOML I/O and logging for DoubleColonConceal."""

from __future__ import annotations

from dcconceal.config.io import SettingsError
from dcconceal.config.model import MutableSettings, Settings, save_settings

__all__ = [
    "MutableSettings",
    "Settings",
    "SettingsError",
    "save_settings",
]
