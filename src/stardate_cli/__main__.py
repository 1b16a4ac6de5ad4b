"""Allow ``python -m stardate_cli`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m stardate_cli`` behaves identically to the ``stardate``
console script.
"""

from __future__ import annotations

from stardate_cli.cli.app import cli

if __name__ == "__main__":
    cli()
