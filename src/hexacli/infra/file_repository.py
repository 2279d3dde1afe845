"""File-backed implementation of :class:`~hexacli.core.protocols.EntryRepository`.

The store is a UTF-8 text file with one entry per line.  Bytes that do
not decode are carried as lone surrogates (``surrogateescape``) and
written back unchanged, so a stray byte never locks the user out of the
store.  This module is
the **only** place in the codebase that touches the data file.  Every
``OSError`` is caught here and re-raised as a typed
:class:`~hexacli.exceptions.HexacliError` subclass — nothing raw escapes
the infrastructure boundary.

Concurrency
-----------
A :class:`threading.Lock` serialises all operations on one instance.
There is no cross-process locking: two processes writing the same file
may interleave.
"""

from __future__ import annotations

import logging
import os
import threading
from pathlib import Path
from typing import IO

from hexacli.exceptions import ConfigurationError, NothingToDeleteError, StorageError

logger = logging.getLogger(__name__)


class FileRepository:
    """Concrete :class:`EntryRepository` over a newline-delimited text file.

    Usage::

        repo = FileRepository("./data.txt")
        repo.add("hello")
        repo.list()  # ["hello"]

    The file (and its parent directories) is created empty on first
    access.  The path is not validated until an operation runs.
    """

    _ENCODING: str = "utf-8"
    _ERRORS: str = "surrogateescape"

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path: str = os.fspath(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> str:
        return self._path

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def add(self, value: str) -> None:
        """Append *value* as one line.

        Carriage returns and newlines inside *value* are replaced by
        spaces so that an entry always occupies exactly one line.
        """
        single_line = value.replace("\r", " ").replace("\n", " ")
        with self._lock:
            path = self._ensure_exists()
            try:
                with self._open(path, "a") as handle:
                    handle.write(single_line + "\n")
            except OSError as exc:
                raise StorageError(f"cannot write {self._path}: {exc}") from exc
        logger.debug("Appended entry to %s", self._path)

    def list(self) -> list[str]:
        """Return every line of the file in order."""
        with self._lock:
            path = self._ensure_exists()
            return self._read_lines(path)

    def delete_last(self) -> None:
        """Remove the last non-blank line.

        Trailing whitespace-only lines are dropped along with it.  When
        every line is blank the file is truncated to empty.

        Raises
        ------
        NothingToDeleteError
            When the file holds no lines.
        """
        with self._lock:
            path = self._ensure_exists()
            lines = self._read_lines(path)
            if not lines:
                raise NothingToDeleteError("nothing to delete: file is empty")

            index = len(lines) - 1
            while index >= 0 and not lines[index].strip():
                index -= 1

            if index < 0:
                logger.debug("Only blank lines in %s, truncating", self._path)
                self._write(path, "")
                return

            content = "\n".join(lines[:index])
            if content:
                content += "\n"
            self._write(path, content)
        logger.debug("Deleted line %d of %s", index + 1, self._path)

    # ------------------------------------------------------------------
    # File helpers (call with the lock held)
    # ------------------------------------------------------------------

    def _ensure_exists(self) -> Path:
        """Create parent directories and an empty file when missing."""
        if not self._path:
            raise ConfigurationError(
                "file path is empty",
                hint="Set HEXACLI_FILE or pass --file.",
            )
        path = Path(self._path)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            if not path.exists():
                path.touch()
                logger.debug("Created empty store at %s", self._path)
        except OSError as exc:
            raise StorageError(f"cannot create {self._path}: {exc}") from exc
        return path

    def _open(self, path: Path, mode: str, newline: str = "") -> IO[str]:
        """Open the store as text; bytes that are not UTF-8 round-trip."""
        return path.open(
            mode,
            encoding=self._ENCODING,
            errors=self._ERRORS,
            newline=newline,
        )

    def _read_lines(self, path: Path) -> list[str]:
        """Read the file, splitting only on ``\\n``.

        A ``\\r`` left at the end of a line by CRLF files is dropped.
        """
        lines: list[str] = []
        try:
            with self._open(path, "r", newline="\n") as handle:
                for raw in handle:
                    line = raw[:-1] if raw.endswith("\n") else raw
                    lines.append(line.removesuffix("\r"))
        except OSError as exc:
            raise StorageError(f"cannot read {self._path}: {exc}") from exc
        return lines

    def _write(self, path: Path, content: str) -> None:
        """Replace the whole file with *content*."""
        try:
            with self._open(path, "w") as handle:
                handle.write(content)
        except OSError as exc:
            raise StorageError(f"cannot write {self._path}: {exc}") from exc
