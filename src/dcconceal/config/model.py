# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : model.py
#   file_relpath : src/dcconceal/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Settings model and merge policy.

This module defines:
    - `Settings`: an immutable snapshot read by the live scanner, the rendered
      rewriter and the plugin.
    - `MutableSettings`: a mutable builder used while merging defaults, config
      files and CLI overrides; it can be frozen into `Settings` and thawed back.

Precedence (lowest first): built-in defaults, discovered config file
(``dcconceal.toml`` or ``[tool.dcconceal]``), explicit config file, overrides.
A replacement glyph of ``None`` is normalized to the empty string.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dcconceal.config.io import (
    discover_config_file,
    extract_settings_table,
    get_bool_value_or_none,
    get_string_list_value_or_none,
    get_string_value_or_none,
    get_table_value,
    load_toml_dict,
    to_toml,
)
from dcconceal.config.keys import Toml
from dcconceal.config.logging import get_logger
from dcconceal.constants import DEFAULT_REPLACEMENT

if TYPE_CHECKING:
    from dcconceal.config.io import TomlTable
    from dcconceal.config.logging import DcConcealLogger

logger: DcConcealLogger = get_logger(__name__)

DEFAULT_MARKDOWN_EXTENSIONS: tuple[str, ...] = ("fenced_code", "nl2br")


@dataclass(frozen=True, slots=True)
class Settings:
    """Immutable runtime settings.

    Attributes:
        edit_mode (bool): Conceal separators in the live (editable) surface.
            Disabled by default.
        read_replacement (str): Glyph shown instead of ``::`` in rendered output.
        edit_replacement (str): Glyph shown instead of ``::`` in the live surface.
        markdown_extensions (tuple[str, ...]): Python-Markdown extensions loaded
            next to the concealment extension when rendering.
        config_files (tuple[Path, ...]): Config sources merged into this snapshot.
    """

    edit_mode: bool = False
    read_replacement: str = DEFAULT_REPLACEMENT
    edit_replacement: str = DEFAULT_REPLACEMENT
    markdown_extensions: tuple[str, ...] = DEFAULT_MARKDOWN_EXTENSIONS
    config_files: tuple[Path, ...] = ()

    def thaw(self) -> MutableSettings:
        """Return a mutable copy of this snapshot."""
        return MutableSettings(
            edit_mode=self.edit_mode,
            read_replacement=self.read_replacement,
            edit_replacement=self.edit_replacement,
            markdown_extensions=list(self.markdown_extensions),
            config_files=list(self.config_files),
        )

    def to_toml_dict(self) -> TomlTable:
        """Return the settings as a TOML table (config sources are not exported)."""
        return {
            Toml.SECTION_CONCEAL: {
                Toml.KEY_EDIT_MODE: self.edit_mode,
                Toml.KEY_READ_REPLACEMENT: self.read_replacement,
                Toml.KEY_EDIT_REPLACEMENT: self.edit_replacement,
            },
            Toml.SECTION_RENDER: {
                Toml.KEY_EXTENSIONS: list(self.markdown_extensions),
            },
        }

    def to_toml(self) -> str:
        """Render the settings as a TOML document."""
        return to_toml(self.to_toml_dict())


@dataclass
class MutableSettings:
    """Mutable settings builder.

    Fields left as ``None`` inherit the value of the layer below when merged.
    """

    edit_mode: bool | None = None
    read_replacement: str | None = None
    edit_replacement: str | None = None
    markdown_extensions: list[str] | None = None
    config_files: list[Path] = field(default_factory=lambda: [])

    @classmethod
    def defaults(cls) -> MutableSettings:
        """Return a builder holding the built-in defaults."""
        return Settings().thaw()

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, config_file: Path | None = None) -> MutableSettings:
        """Build a settings layer from a parsed settings table.

        Unknown keys are ignored; keys of the wrong type are logged and ignored.
        """
        conceal_tbl: TomlTable = get_table_value(data, Toml.SECTION_CONCEAL)
        render_tbl: TomlTable = get_table_value(data, Toml.SECTION_RENDER)

        draft = cls(
            edit_mode=get_bool_value_or_none(conceal_tbl, Toml.KEY_EDIT_MODE),
            read_replacement=get_string_value_or_none(conceal_tbl, Toml.KEY_READ_REPLACEMENT),
            edit_replacement=get_string_value_or_none(conceal_tbl, Toml.KEY_EDIT_REPLACEMENT),
            markdown_extensions=get_string_list_value_or_none(render_tbl, Toml.KEY_EXTENSIONS),
        )
        if config_file is not None:
            draft.config_files.append(config_file)
        return draft

    @classmethod
    def from_file(cls, path: Path) -> MutableSettings:
        """Load a settings layer from ``dcconceal.toml`` or ``pyproject.toml``.

        Raises:
            SettingsError: If the file cannot be read or parsed.
        """
        logger.debug("Loading settings from %s", path)
        data: TomlTable = load_toml_dict(path)
        return cls.from_toml_dict(extract_settings_table(data, path=path), config_file=path)

    @classmethod
    def load_merged(
        cls,
        *,
        search_from: Path | None = None,
        config_file: Path | None = None,
        no_config: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> MutableSettings:
        """Merge defaults, discovered config, explicit config and overrides.

        Args:
            search_from (Path | None): Directory where discovery starts (CWD if None).
            config_file (Path | None): Explicit config file layered over the discovered one.
            no_config (bool): Skip discovery entirely.
            overrides (Mapping[str, Any] | None): Field overrides; ``None`` values
                are ignored.

        Returns:
            MutableSettings: The merged draft.
        """
        draft: MutableSettings = cls.defaults()
        if not no_config:
            discovered = discover_config_file(search_from or Path.cwd())
            if discovered is not None:
                draft = draft.merge_with(cls.from_file(discovered))
        if config_file is not None:
            draft = draft.merge_with(cls.from_file(config_file))
        if overrides:
            draft = draft.merge_with(cls(**{k: v for k, v in overrides.items() if v is not None}))
        return draft

    def merge_with(self, other: MutableSettings) -> MutableSettings:
        """Return a new draft where non-None fields of ``other`` win."""
        return MutableSettings(
            edit_mode=other.edit_mode if other.edit_mode is not None else self.edit_mode,
            read_replacement=(
                other.read_replacement
                if other.read_replacement is not None
                else self.read_replacement
            ),
            edit_replacement=(
                other.edit_replacement
                if other.edit_replacement is not None
                else self.edit_replacement
            ),
            markdown_extensions=(
                list(other.markdown_extensions)
                if other.markdown_extensions is not None
                else self.markdown_extensions
            ),
            config_files=[*self.config_files, *other.config_files],
        )

    def freeze(self) -> Settings:
        """Return an immutable snapshot; unset glyphs become the empty string."""
        return Settings(
            edit_mode=bool(self.edit_mode),
            read_replacement=self.read_replacement or "",
            edit_replacement=self.edit_replacement or "",
            markdown_extensions=tuple(
                self.markdown_extensions
                if self.markdown_extensions is not None
                else DEFAULT_MARKDOWN_EXTENSIONS
            ),
            config_files=tuple(self.config_files),
        )


def save_settings(settings: Settings, path: Path) -> None:
    """Persist ``settings`` to a ``dcconceal.toml`` style file."""
    logger.debug("Saving settings to %s", path)
    path.write_text(settings.to_toml(), encoding="utf-8")
