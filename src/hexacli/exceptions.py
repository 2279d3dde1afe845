"""Custom exception hierarchy for hexacli.

All exceptions that cross layer boundaries must inherit from
:class:`HexacliError`.  Raw ``OSError``s raised by the filesystem must
NEVER propagate beyond the infrastructure layer — they are caught there
and re-raised as a typed subclass defined here.

Hierarchy
---------
HexacliError
├── ConfigurationError
├── StorageError
├── NothingToDeleteError
├── UsageError
├── UnknownCommandError
└── EnvironmentError
"""

from __future__ import annotations


class HexacliError(Exception):
    """Base exception for all hexacli errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean ``error: ...`` line
    without leaking a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigurationError(HexacliError):
    """Raised when the store is configured with an unusable path."""


# --- Storage ---------------------------------------------------------------

class StorageError(HexacliError):
    """Raised when the data file cannot be created, read, or written."""


class NothingToDeleteError(HexacliError):
    """Raised when ``delete-last`` runs against a store with no lines."""


# --- Command line ----------------------------------------------------------

class UsageError(HexacliError):
    """Raised when the command line cannot be interpreted.

    An empty message means "no command given"; the CLI then prints only
    the usage banner.
    """


class UnknownCommandError(HexacliError):
    """Raised when the first positional token is not a known command."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(HexacliError):
    """Raised when an optional runtime dependency is not available."""
