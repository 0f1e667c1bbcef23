# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the DoubleColonConceal test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
ensuring consistent and verbose logging output during testing.

Notes:
    - Build settings with `MutableSettings` and `freeze()` them; never mutate a
      frozen `Settings`.
    - Live-surface tests build an `EditorView` through the `make_view` fixture,
      which computes offsets from the text so tests stay readable.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

import pytest
from click.testing import CliRunner, Result

from dcconceal.cli.main import cli
from dcconceal.config import logging
from dcconceal.constants import LOG_LEVEL_ENV_VAR
from dcconceal.core.spans import TextRange
from dcconceal.live.document import EditorState, EditorView, SelectionRange

ViewFactory = Callable[..., EditorView]
CliInvoker = Callable[..., Result]


@pytest.fixture(autouse=True)
def silence_dcconceal_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so scanner log records are exercised."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory so config discovery finds nothing.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


@pytest.fixture
def run_cli(isolation: Path) -> CliInvoker:
    """Return a helper invoking the Click CLI in-process from ``isolation``."""

    def _run(argv: Sequence[str], *, input_text: str | None = None) -> Result:
        return CliRunner().invoke(cli, list(argv), input=input_text)

    return _run


def _make_view(
    text: str,
    *,
    cursor: int | None = None,
    selection: tuple[int, int] | None = None,
    visible: Sequence[tuple[int, int]] = (),
    live_preview: bool = True,
) -> EditorView:
    sel: SelectionRange | None = None
    if selection is not None:
        sel = SelectionRange(*selection)
    elif cursor is not None:
        sel = SelectionRange.cursor(cursor)
    state = EditorState.from_text(text, selection=sel, live_preview=live_preview)
    return EditorView(state=state, visible_ranges=tuple(TextRange(a, b) for a, b in visible))


@pytest.fixture
def make_view() -> ViewFactory:
    """Return a factory building an `EditorView` over a text.

    Keyword arguments: ``cursor`` (offset), ``selection`` (``(anchor, head)``),
    ``visible`` (sequence of ``(start, end)``; whole document when empty) and
    ``live_preview`` (False simulates source mode).
    """
    return _make_view
