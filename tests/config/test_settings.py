# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : test_settings.py
#   file_relpath : tests/config/test_settings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for settings loading, discovery, precedence and export."""

from __future__ import annotations

import textwrap
from typing import TYPE_CHECKING

import pytest

from dcconceal.config import MutableSettings, Settings, SettingsError, save_settings
from dcconceal.config.io import discover_config_file, extract_settings_table, parse_toml_text
from dcconceal.config.model import DEFAULT_MARKDOWN_EXTENSIONS

if TYPE_CHECKING:
    from pathlib import Path


def _write(path: Path, content: str) -> Path:
    """Helper: write dedented content to a file, creating parents."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(content).lstrip("\n"), encoding="utf-8")
    return path


def test_defaults() -> None:
    settings = Settings()
    assert settings.edit_mode is False
    assert settings.read_replacement == ":"
    assert settings.edit_replacement == ":"
    assert settings.markdown_extensions == DEFAULT_MARKDOWN_EXTENSIONS
    assert MutableSettings.defaults().freeze() == settings


def test_freeze_turns_missing_glyphs_into_empty_strings() -> None:
    draft = MutableSettings(read_replacement=None, edit_replacement=None)
    settings = draft.freeze()
    assert (settings.read_replacement, settings.edit_replacement) == ("", "")
    assert settings.edit_mode is False


def test_thaw_freeze_roundtrip_is_lossless() -> None:
    settings = Settings(edit_mode=True, read_replacement="→", markdown_extensions=("tables",))
    assert settings.thaw().freeze() == settings


def test_dcconceal_toml_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "dcconceal.toml",
        """
        [conceal]
        edit_mode = true
        read_replacement = "→"

        [render]
        extensions = ["tables"]
        """,
    )
    settings = MutableSettings.from_file(path).freeze()
    assert settings.edit_mode is True
    assert settings.read_replacement == "→"
    assert settings.edit_replacement == ""
    assert settings.markdown_extensions == ("tables",)
    assert settings.config_files == (path,)


def test_pyproject_tool_table_is_parsed(tmp_path: Path) -> None:
    path = _write(
        tmp_path / "pyproject.toml",
        """
        [project]
        name = "notes"

        [tool.dcconceal.conceal]
        edit_replacement = "="
        """,
    )
    assert MutableSettings.from_file(path).edit_replacement == "="


def test_values_of_the_wrong_type_are_ignored() -> None:
    draft = MutableSettings.from_toml_dict(
        {
            "conceal": {"edit_mode": "yes", "read_replacement": 7, "edit_replacement": ["x"]},
            "render": {"extensions": "tables"},
        }
    )
    assert draft.edit_mode is None
    assert draft.read_replacement == "7"
    assert draft.edit_replacement is None
    assert draft.markdown_extensions is None


def test_non_table_section_is_ignored() -> None:
    draft = MutableSettings.from_toml_dict({"conceal": "nope"})
    assert draft == MutableSettings()


def test_invalid_toml_raises_settings_error(tmp_path: Path) -> None:
    path = _write(tmp_path / "dcconceal.toml", "[conceal\nedit_mode = true\n")
    with pytest.raises(SettingsError) as excinfo:
        MutableSettings.from_file(path)
    assert excinfo.value.path == path


def test_pyproject_tool_entry_must_be_a_table(tmp_path: Path) -> None:
    data = parse_toml_text('[tool]\ndcconceal = "on"\n')
    with pytest.raises(SettingsError):
        extract_settings_table(data, path=tmp_path / "pyproject.toml")


def test_discovery_walks_up_and_prefers_dcconceal_toml(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", "[tool.dcconceal.conceal]\nedit_mode = true\n")
    nested = tmp_path / "notes" / "daily"
    nested.mkdir(parents=True)
    assert discover_config_file(nested) == (tmp_path / "pyproject.toml").resolve()

    _write(tmp_path / "notes" / "dcconceal.toml", "[conceal]\n")
    assert discover_config_file(nested) == (tmp_path / "notes" / "dcconceal.toml").resolve()


def test_pyproject_without_tool_table_is_not_discovered(tmp_path: Path) -> None:
    _write(tmp_path / "pyproject.toml", '[project]\nname = "x"\n')
    found = discover_config_file(tmp_path)
    assert found != (tmp_path / "pyproject.toml").resolve()


def test_load_merged_precedence(tmp_path: Path) -> None:
    _write(
        tmp_path / "dcconceal.toml",
        """
        [conceal]
        edit_mode = true
        read_replacement = "a"
        edit_replacement = "a"
        """,
    )
    explicit = _write(tmp_path / "extra" / "override.toml", '[conceal]\nread_replacement = "b"\n')
    settings = MutableSettings.load_merged(
        search_from=tmp_path,
        config_file=explicit,
        overrides={"edit_replacement": "c", "read_replacement": None},
    ).freeze()
    assert settings.edit_mode is True
    assert settings.read_replacement == "b"
    assert settings.edit_replacement == "c"
    assert settings.config_files == ((tmp_path / "dcconceal.toml").resolve(), explicit)


def test_no_config_skips_discovery(tmp_path: Path) -> None:
    _write(tmp_path / "dcconceal.toml", "[conceal]\nedit_mode = true\n")
    settings = MutableSettings.load_merged(search_from=tmp_path, no_config=True).freeze()
    assert settings == Settings()


def test_save_and_reload(tmp_path: Path) -> None:
    settings = Settings(edit_mode=True, read_replacement="", edit_replacement="→")
    target = tmp_path / "dcconceal.toml"
    save_settings(settings, target)
    reloaded = MutableSettings.from_file(target).freeze()
    assert reloaded.edit_mode is True
    assert reloaded.read_replacement == ""
    assert reloaded.edit_replacement == "→"
    assert reloaded.markdown_extensions == settings.markdown_extensions
