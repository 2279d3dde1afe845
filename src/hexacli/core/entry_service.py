"""Core entry service — the use cases behind every CLI command.

The service depends on an
:class:`~hexacli.core.protocols.EntryRepository` injected at
construction time (dependency inversion), keeping the core free of any
filesystem access.

Guarantees
----------
* Pure orchestration — no I/O, no ``print()``.
* Only :class:`~hexacli.exceptions.HexacliError` subclasses escape.
"""

from __future__ import annotations

import logging

from hexacli.core.protocols import EntryRepository
from hexacli.exceptions import HexacliError, StorageError

logger = logging.getLogger(__name__)


class EntryService:
    """Stateless service forwarding validated calls to a repository.

    Parameters
    ----------
    repository:
        Any object satisfying the :class:`EntryRepository` protocol.
    """

    def __init__(self, repository: EntryRepository) -> None:
        self._repository: EntryRepository = repository

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def add_value(self, value: str) -> None:
        """Store *value* as a new entry.

        An empty value is accepted and silently ignored: the repository
        is not called.
        """
        if value == "":
            logger.debug("Empty value, nothing to add")
            return
        try:
            self._repository.add(value)
        except HexacliError:
            raise
        except Exception as exc:
            raise StorageError(f"Unexpected repository error: {exc}") from exc

    def list_values(self) -> list[str]:
        """Return all entries exactly as the repository reports them."""
        try:
            return self._repository.list()
        except HexacliError:
            raise
        except Exception as exc:
            raise StorageError(f"Unexpected repository error: {exc}") from exc

    def delete_last(self) -> None:
        """Remove the last entry.

        Raises
        ------
        NothingToDeleteError
            When the store is empty.
        StorageError
            When the repository fails.
        """
        try:
            self._repository.delete_last()
        except HexacliError:
            # Already one of ours — propagate unchanged.
            raise
        except Exception as exc:
            raise StorageError(f"Unexpected repository error: {exc}") from exc
