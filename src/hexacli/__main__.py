"""Allow ``python -m hexacli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m hexacli`` behaves identically to the ``hexacli`` console
script.
"""

from __future__ import annotations

from hexacli.cli.app import cli

if __name__ == "__main__":
    cli()
