"""Allow ``python -m cli_support`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m cli_support`` behaves identically to the ``cli-support``
console script.
"""

from __future__ import annotations

from cli_support.cli.app import cli

if __name__ == "__main__":
    cli()
