"""Regression tests for the optional Rich dependency.

These tests verify that every command keeps working when Rich is not
importable: diagnostics fall back to plain stderr output and command
results are unaffected.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from hexacli.cli import exit_codes
from hexacli.cli.app import main
from hexacli.cli.console import get_rich_console
from hexacli.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)


def test_get_rich_console_raises_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        get_rich_console()


def test_help_works_without_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--help"])
    assert exc_info.value.code == 0


def test_commands_work_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    data_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    assert main(["add", "hello"]) == exit_codes.SUCCESS
    assert main(["list"]) == exit_codes.SUCCESS
    assert capsys.readouterr().out == "OK\n1: hello\n"


def test_errors_render_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    data_file: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main(["delete-last"])
    assert code == exit_codes.GENERAL_ERROR
    assert capsys.readouterr().err == "error: nothing to delete: file is empty\n"


def test_usage_renders_plain_without_rich(
    monkeypatch: pytest.MonkeyPatch,
    capsys: pytest.CaptureFixture[str],
) -> None:
    _hide_rich(monkeypatch)

    code = main([])
    err = capsys.readouterr().err
    assert code == exit_codes.USAGE_ERROR
    assert err.startswith("usage: hexacli")
