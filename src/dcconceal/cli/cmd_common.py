# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : cmd_common.py
#   file_relpath : src/dcconceal/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers only encapsulate plumbing: resolving settings from config
sources, reading input text and writing output. They translate filesystem,
encoding and configuration failures into CLI errors with proper exit codes.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from dcconceal.cli.errors import (
    DcConcealConfigError,
    DcConcealEncodingError,
    DcConcealFileNotFoundError,
    DcConcealIOError,
)
from dcconceal.config.io import SettingsError
from dcconceal.config.logging import get_logger
from dcconceal.config.model import MutableSettings

if TYPE_CHECKING:
    from collections.abc import Mapping

    from dcconceal.cli.console import ClickConsole
    from dcconceal.config.model import Settings

logger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    ctx.ensure_object(dict)
    return ctx.obj["console"]


def resolve_settings(
    *,
    config_file: str | None,
    no_config: bool,
    overrides: Mapping[str, Any] | None = None,
) -> Settings:
    """Merge config sources and CLI overrides into frozen settings.

    Raises:
        DcConcealFileNotFoundError: If ``config_file`` does not exist.
        DcConcealConfigError: If a config source cannot be parsed.
    """
    path: Path | None = Path(config_file) if config_file else None
    if path is not None and not path.exists():
        raise DcConcealFileNotFoundError(f"Config file not found: {path}")
    try:
        draft = MutableSettings.load_merged(
            config_file=path,
            no_config=no_config,
            overrides=overrides,
        )
    except SettingsError as exc:
        raise DcConcealConfigError(str(exc)) from exc
    settings = draft.freeze()
    logger.debug("Effective settings: %r", settings)
    return settings


def read_input_text(path: str) -> str:
    """Read UTF-8 text from ``path`` (``-`` reads STDIN)."""
    if path == "-":
        return click.get_text_stream("stdin").read()
    p = Path(path)
    if not p.exists():
        raise DcConcealFileNotFoundError(f"No such file: {p}")
    try:
        return p.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DcConcealEncodingError(f"{p} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise DcConcealIOError(f"Cannot read {p}: {exc}") from exc


def write_output_text(path: str | None, text: str, console: ClickConsole) -> None:
    """Write ``text`` to ``path``, or print it when ``path`` is None or ``-``."""
    if path is None or path == "-":
        console.print(text)
        return
    try:
        Path(path).write_text(text, encoding="utf-8")
    except OSError as exc:
        raise DcConcealIOError(f"Cannot write {path}: {exc}") from exc
