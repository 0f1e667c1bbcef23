# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : io.py
#   file_relpath : src/dcconceal/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load, query and write TOML configuration sources.

This module provides I/O helpers for reading DoubleColonConceal settings from
``dcconceal.toml`` files and from the ``[tool.dcconceal]`` table in
``pyproject.toml``, plus the value getters used while parsing them.

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Value getters never raise: a value of the wrong shape is logged as a warning
and reported as absent, so defaults stay in effect.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from dcconceal.config.logging import get_logger
from dcconceal.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from dcconceal.config.logging import DcConcealLogger

TomlTable = dict[str, Any]

logger: DcConcealLogger = get_logger(__name__)


class SettingsError(ValueError):
    """Raised when a configuration source cannot be read or parsed."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


# --- TOML file I/O ---


def parse_toml_text(text: str, *, path: Path | None = None) -> TomlTable:
    """Parse TOML text into a plain dict.

    Raises:
        SettingsError: If the text is not valid TOML.
    """
    try:
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SettingsError(f"Invalid TOML in {path or '<string>'}: {exc}", path=path) from exc
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document (``dcconceal.toml`` or ``pyproject.toml``).

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        SettingsError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Error loading TOML from %s: %s", path, exc)
        raise SettingsError(f"Cannot read config file {path}: {exc}", path=path) from exc
    return parse_toml_text(text, path=path)


def extract_settings_table(data: TomlTable, *, path: Path) -> TomlTable:
    """Return the settings table of a parsed config source.

    ``pyproject.toml`` keeps its settings under ``[tool.dcconceal]``; every
    other file is a settings table itself.

    Raises:
        SettingsError: If ``[tool.dcconceal]`` exists but is not a table.
    """
    if path.name != PYPROJECT_FILE_NAME:
        return data
    table: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        table = table.get(part, {}) if isinstance(table, dict) else None
        if table is None:
            break
    if not isinstance(table, dict):
        raise SettingsError(f"[{PYPROJECT_TOOL_SECTION}] in {path} is not a table", path=path)
    return cast("TomlTable", table)


def has_settings_table(path: Path) -> bool:
    """Return True if ``path`` is a usable config source for discovery."""
    if path.name == CONFIG_FILE_NAME:
        return path.is_file()
    if path.name == PYPROJECT_FILE_NAME and path.is_file():
        try:
            data = load_toml_dict(path)
        except SettingsError:
            return False
        return isinstance(data.get("tool"), dict) and "dcconceal" in data["tool"]
    return False


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config source walking up from ``start``.

    In each directory ``dcconceal.toml`` wins over ``pyproject.toml``.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        for name in (CONFIG_FILE_NAME, PYPROJECT_FILE_NAME):
            candidate = directory / name
            if has_settings_table(candidate):
                logger.debug("Discovered config file: %s", candidate)
                return candidate
    return None


def to_toml(data: TomlTable) -> str:
    """Serialize a TOML table to text (``None`` entries are dropped)."""
    cleaned: dict[str, Any] = {
        section: {k: v for k, v in values.items() if v is not None}
        if isinstance(values, dict)
        else values
        for section, values in data.items()
        if values is not None
    }
    return tomlkit.dumps(cleaned)


# --- Value getters ---


def get_table_value(table: TomlTable, key: str) -> TomlTable:
    """Return a sub-table, or an empty dict when missing or of the wrong type."""
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return cast("TomlTable", value)
    logger.warning("Expected a table for [%s], got %s; ignoring", key, type(value).__name__)
    return {}


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any = table.get(key)
    if value is None or isinstance(value, bool):
        return value
    logger.warning("Expected a boolean for %r, got %r; ignoring", key, value)
    return None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Numbers are coerced with ``str(...)``; any other type is ignored.
    """
    value: Any = table.get(key)
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    logger.warning("Expected a string for %r, got %r; ignoring", key, value)
    return None


def get_string_list_value_or_none(table: TomlTable, key: str) -> list[str] | None:
    """Extract an optional list of strings from a TOML table."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, list) and all(isinstance(item, str) for item in cast("list[Any]", value)):
        return list(cast("list[str]", value))
    logger.warning("Expected a list of strings for %r, got %r; ignoring", key, value)
    return None
