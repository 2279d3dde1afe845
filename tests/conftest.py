"""Shared pytest fixtures and configuration for the hexacli test suite.

Guidelines
----------
* Every test runs inside its own temporary working directory.
* The data file always lives under ``tmp_path``.
* Tests must not depend on the caller's environment variables.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

from hexacli.config import DATA_FILE_ENV, LOG_LEVEL_ENV


@pytest.fixture(autouse=True)
def _isolated_env(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch,
) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(DATA_FILE_ENV, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    yield
    logging.getLogger("hexacli").setLevel(logging.WARNING)


@pytest.fixture()
def data_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ``HEXACLI_FILE`` at a not-yet-existing file and return it."""
    path = tmp_path / "store" / "data.txt"
    monkeypatch.setenv(DATA_FILE_ENV, str(path))
    return path
