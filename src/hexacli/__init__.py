"""hexacli — append, list, and delete-last over a line-delimited text file.

Built as a small hexagonal application: a core service talks to a
repository port, implemented here by a file-backed adapter.
"""

from hexacli.version import __version__

__all__: list[str] = ["__version__"]
