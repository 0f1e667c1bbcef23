# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : test_cli.py
#   file_relpath : tests/cli/test_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `dcconceal` commands, run in-process with Click's runner.

Each test runs from an empty project directory (see the ``isolation`` fixture),
so config discovery only sees files the test writes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from dcconceal.cli.exit_codes import ExitCode
from dcconceal.constants import DCCONCEAL_VERSION

if TYPE_CHECKING:
    from click.testing import Result

    from tests.conftest import CliInvoker

NOTE = "Status:: Done\nOwner:: Ann\n\n`a::b` and **Due**:: Friday\n"


@pytest.mark.cli
def test_help_lists_commands(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["--help"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    for name in ("render", "scan", "config", "version"):
        assert name in result.output


@pytest.mark.cli
def test_no_subcommand_prints_hint_and_help(run_cli: CliInvoker) -> None:
    result: Result = run_cli([])
    assert result.exit_code == ExitCode.SUCCESS
    assert "Hint:" in result.output
    assert "Usage:" in result.output


@pytest.mark.cli
def test_version_plain_and_json(run_cli: CliInvoker) -> None:
    plain: Result = run_cli(["version"])
    assert plain.exit_code == ExitCode.SUCCESS
    assert plain.output.strip() == DCCONCEAL_VERSION

    as_json: Result = run_cli(["version", "--format", "json"])
    assert json.loads(as_json.stdout) == {"version": DCCONCEAL_VERSION}


@pytest.mark.cli
def test_verbose_and_quiet_are_mutually_exclusive(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["-v", "-q", "version"])
    assert result.exit_code == ExitCode.USAGE_ERROR


@pytest.mark.cli
def test_render_file(run_cli: CliInvoker, isolation: Path) -> None:
    (isolation / "note.md").write_text(NOTE, encoding="utf-8")
    result: Result = run_cli(["render", "note.md"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert "Status: Done" in result.stdout
    assert "Owner: Ann" in result.stdout
    assert "<code>a::b</code>" in result.stdout
    assert "**Due**" not in result.stdout


@pytest.mark.cli
def test_render_stdin_with_replacement(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["render", "-r", "→"], input_text="Status:: Done")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert result.stdout.strip() == "<p>Status→ Done</p>"


@pytest.mark.cli
def test_render_to_output_file(run_cli: CliInvoker, isolation: Path) -> None:
    result: Result = run_cli(["render", "-o", "out.html"], input_text="A:: 1")
    assert result.exit_code == ExitCode.SUCCESS, result.output
    assert (isolation / "out.html").read_text(encoding="utf-8") == "<p>A: 1</p>"


@pytest.mark.cli
def test_render_uses_discovered_config(run_cli: CliInvoker, isolation: Path) -> None:
    (isolation / "dcconceal.toml").write_text(
        '[conceal]\nread_replacement = " ="\n', encoding="utf-8"
    )
    result: Result = run_cli(["render"], input_text="A:: 1")
    assert result.stdout.strip() == "<p>A = 1</p>"

    ignored: Result = run_cli(["render", "--no-config"], input_text="A:: 1")
    assert ignored.stdout.strip() == "<p>A: 1</p>"


@pytest.mark.cli
def test_render_missing_file(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["render", "missing.md"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "missing.md" in result.output


@pytest.mark.cli
def test_render_non_utf8_input(run_cli: CliInvoker, isolation: Path) -> None:
    (isolation / "latin1.md").write_bytes("Clé:: valeur".encode("latin-1"))
    result: Result = run_cli(["render", "latin1.md"])
    assert result.exit_code == ExitCode.ENCODING_ERROR


@pytest.mark.cli
def test_invalid_config_maps_to_config_error(run_cli: CliInvoker, isolation: Path) -> None:
    (isolation / "dcconceal.toml").write_text("[conceal\n", encoding="utf-8")
    result: Result = run_cli(["render"], input_text="A:: 1")
    assert result.exit_code == ExitCode.CONFIG_ERROR


@pytest.mark.cli
def test_missing_explicit_config(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["render", "--config", "nope.toml"], input_text="A:: 1")
    assert result.exit_code == ExitCode.FILE_NOT_FOUND


@pytest.mark.cli
def test_scan_default_output(run_cli: CliInvoker, isolation: Path) -> None:
    (isolation / "note.md").write_text(NOTE, encoding="utf-8")
    result: Result = run_cli(["scan", "note.md"])
    assert result.exit_code == ExitCode.SUCCESS, result.output
    lines = result.stdout.splitlines()
    assert lines == [
        "note.md:1:7 6-8 -> ':'",
        "note.md:2:6 19-21 -> ':'",
    ]


@pytest.mark.cli
def test_scan_json_with_selection(run_cli: CliInvoker) -> None:
    result: Result = run_cli(
        ["scan", "-", "--format", "json", "--selection", "2", "-r", "→"],
        input_text=NOTE,
    )
    assert result.exit_code == ExitCode.SUCCESS, result.output
    payload = json.loads(result.stdout)
    assert payload == [
        {"line": 2, "column": 6, "start": 19, "end": 21, "replacement": "→"},
    ]


@pytest.mark.cli
def test_scan_preview_and_source_mode(run_cli: CliInvoker) -> None:
    preview: Result = run_cli(["scan", "-", "--preview", "-r", ""], input_text="A:: 1\nB:: 2")
    assert preview.stdout == "A 1\nB 2"

    source: Result = run_cli(
        ["scan", "-", "--preview", "--source-mode"], input_text="A:: 1\nB:: 2"
    )
    assert source.stdout == "A:: 1\nB:: 2"


@pytest.mark.cli
def test_scan_visible_range(run_cli: CliInvoker) -> None:
    result: Result = run_cli(
        ["scan", "-", "--format", "json", "--visible", "6:11"], input_text="A:: 1\nB:: 2\nC:: 3"
    )
    assert [r["start"] for r in json.loads(result.stdout)] == [7]


@pytest.mark.cli
def test_scan_visible_range_beyond_document(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["scan", "-", "--visible", "0:99"], input_text="A:: 1")
    assert result.exit_code == ExitCode.USAGE_ERROR


@pytest.mark.cli
@pytest.mark.parametrize("value", ["x", "5:2", "-1"])
def test_scan_rejects_malformed_ranges(run_cli: CliInvoker, value: str) -> None:
    result: Result = run_cli(["scan", "-", "--selection", value], input_text="A:: 1")
    assert result.exit_code == 2


@pytest.mark.cli
def test_config_init_and_dump(run_cli: CliInvoker, isolation: Path) -> None:
    init: Result = run_cli(["config", "init", "-o", "dcconceal.toml"])
    assert init.exit_code == ExitCode.SUCCESS, init.output
    written = (isolation / "dcconceal.toml").read_text(encoding="utf-8")
    assert "[conceal]" in written
    assert "edit_mode = false" in written

    dump: Result = run_cli(["config", "dump"])
    assert dump.exit_code == ExitCode.SUCCESS, dump.output
    assert dump.stdout.startswith("# source: ")
    assert "dcconceal.toml" in dump.stdout.splitlines()[0]
    assert 'read_replacement = ":"' in dump.stdout


@pytest.mark.cli
def test_config_dump_without_sources(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["config", "dump", "--no-config"])
    assert result.exit_code == ExitCode.SUCCESS
    assert "# source:" not in result.stdout
    assert "[render]" in result.stdout


@pytest.mark.cli
def test_config_init_prints_template(run_cli: CliInvoker) -> None:
    result: Result = run_cli(["config", "init"])
    assert result.exit_code == ExitCode.SUCCESS
    assert 'extensions = ["fenced_code", "nl2br"]' in result.stdout
