"""Allow ``python -m go_scaffold`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m go_scaffold`` behaves identically to the ``go-scaffold``
console script.
"""

from __future__ import annotations

from go_scaffold.cli.app import cli

if __name__ == "__main__":
    cli()
