"""Core / service layer — use cases and the ports they depend on.

Rules
-----
* No ``print()`` calls.
* No filesystem access.
* No imports from ``cli`` or ``infra``.
"""

from hexacli.core.entry_service import EntryService
from hexacli.core.protocols import EntryRepository

__all__: list[str] = [
    "EntryRepository",
    "EntryService",
]
