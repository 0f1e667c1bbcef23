# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : console.py
#   file_relpath : src/dcconceal/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console abstraction for user-facing program output.

This module provides a `ClickConsole` class that separates CLI output from
internal logging. Use this for messages intended for end users, while
reserving `logging` for diagnostics.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click


class ClickConsole:
    """Program-output console, independent from the logger.

    Args:
        enable_color (bool): If True, enables ANSI color codes in the output.
        out (TextIO | None): Stream for standard output (defaults to sys.stdout).
        err (TextIO | None): Stream for error output (defaults to sys.stderr).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out = out
        self.err = err

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out or sys.stdout, color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="yellow"
        )

    def error(self, text: str, *, nl: bool = True) -> None:
        click.secho(
            text, nl=nl, file=self.err or sys.stderr, color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return a styled string using click.style (plain text if color is disabled)."""
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
