"""Infrastructure layer — filesystem integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~hexacli.exceptions.HexacliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must satisfy the protocols declared in ``core.protocols``.
"""

from hexacli.infra.file_repository import FileRepository

__all__: list[str] = ["FileRepository"]
