"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol


class EntryRepository(Protocol):
    """Contract for entry persistence backends.

    Any object that implements :meth:`add`, :meth:`list` and
    :meth:`delete_last` with the correct signatures satisfies this
    protocol structurally (no explicit inheritance required).

    Implementations must map all backend-specific exceptions to
    :class:`~hexacli.exceptions.HexacliError` subclasses.
    """

    def add(self, value: str) -> None:
        """Append *value* as a single entry at the end of the store.

        Raises
        ------
        StorageError
            When the backend cannot persist the entry.
        """
        ...  # pragma: no cover

    def list(self) -> list[str]:
        """Return every entry in insertion order (possibly empty).

        Raises
        ------
        StorageError
            When the backend cannot be read.
        """
        ...  # pragma: no cover

    def delete_last(self) -> None:
        """Remove the last non-blank entry.

        Raises
        ------
        NothingToDeleteError
            When the store holds no lines at all.
        StorageError
            When the backend cannot be read or rewritten.
        """
        ...  # pragma: no cover
