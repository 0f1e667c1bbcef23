# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : constants.py
#   file_relpath : src/dcconceal/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DoubleColonConceal Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    DCCONCEAL_VERSION: str = get_version("dcconceal")
except PackageNotFoundError:  # running from a source checkout
    DCCONCEAL_VERSION = "0.0.0"

# The token marking a name/value pair in inline text.
FIELD_SEPARATOR: str = "::"

DEFAULT_REPLACEMENT: str = ":"

# Config discovery
CONFIG_FILE_NAME: str = "dcconceal.toml"
PYPROJECT_FILE_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "tool.dcconceal"

# Environment variable forcing the internal log level.
LOG_LEVEL_ENV_VAR: str = "DCCONCEAL_LOG_LEVEL"

# CSS class attached to the glyph shown over a concealed separator.
CONCEAL_CSS_CLASS: str = "cm-double-colon-conceal"
