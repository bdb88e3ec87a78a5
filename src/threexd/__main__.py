"""Allow ``python -m threexd`` invocation.

Delegates to the CLI error-boundary entry point so that
``python -m threexd`` behaves identically to the ``3xd`` console script.
"""

from __future__ import annotations

from threexd.cli.app import cli

if __name__ == "__main__":
    cli()
