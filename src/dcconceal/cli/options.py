# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : options.py
#   file_relpath : src/dcconceal/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities.

This module centralizes reusable options (verbosity, color, config sources,
replacement glyph) and their resolution logic, so commands and groups can
stay thin. The helpers here are Click-aware.
"""

from __future__ import annotations

import logging
import os
import sys
from enum import Enum
from typing import Any, Callable, ParamSpec, TypeVar

import click

from dcconceal.cli.errors import DcConcealUsageError
from dcconceal.config.logging import TRACE_LEVEL
from dcconceal.core.spans import TextRange

P = ParamSpec("P")
R = TypeVar("R")

LOG_LEVELS = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Members:
      DEFAULT: Human-friendly text output; may include ANSI color if enabled.
      JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    JSON = "json"


class ColorMode(str, Enum):
    """User intent for colorized terminal output."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level based on verbose and quiet counts.

    Raises:
        DcConcealUsageError: If both verbose and quiet flags are used simultaneously.

    Behavior:
        Three or more -v flags set TRACE, two set DEBUG, one sets INFO.
        One or more -q flags set ERROR. Default level is WARNING.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise DcConcealUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")

    if verbose_count >= 3:
        return LOG_LEVELS["TRACE"]
    if verbose_count == 2:
        return LOG_LEVELS["DEBUG"]
    if verbose_count == 1:
        return LOG_LEVELS["INFO"]
    if quiet_count >= 1:
        return LOG_LEVELS["ERROR"]
    return LOG_LEVELS["WARNING"]


def resolve_color_mode(
    *,
    cli_mode: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
) -> bool:
    """Determine whether color output should be enabled.

    Behavior:
        Disables color for JSON output.
        Honors --color and --no-color CLI flags.
        Honors FORCE_COLOR and NO_COLOR environment variables.
        Defaults to enabling color if stdout is a TTY.
    """
    if output_format and output_format.lower() == OutputFormat.JSON.value:
        return False
    if cli_mode == ColorMode.ALWAYS:
        return True
    if cli_mode == ColorMode.NEVER:
        return False
    force_color = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    if stdout_isatty is None:
        try:
            stdout_isatty = sys.stdout.isatty()
        except (AttributeError, ValueError):
            stdout_isatty = False
    return bool(stdout_isatty)


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds counting -v/--verbose and -q/--quiet options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to three times for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command."""
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command."""
    f = click.option(
        "--config",
        "config_file",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Extra config file (dcconceal.toml or pyproject.toml) layered over discovery.",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore discovered dcconceal.toml / [tool.dcconceal] files.",
    )(f)
    return f


class OffsetRangeParam(click.ParamType):
    """Parse ``START:END`` (or a single ``OFFSET``) into a `TextRange`."""

    name = "range"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Any:
        if isinstance(value, TextRange):
            return value
        text = str(value).strip()
        start_s, sep, end_s = text.partition(":")
        try:
            start = int(start_s)
            end = int(end_s) if sep else start
            if start < 0:
                raise ValueError("negative offset")
            return TextRange(start, end)
        except ValueError as exc:
            self.fail(f"{value!r} is not a valid offset range ({exc})", param, ctx)


OFFSET_RANGE = OffsetRangeParam()
