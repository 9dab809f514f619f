"""Allow ``python -m rojo_cli`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m rojo_cli`` behaves identically to the ``rojo`` console
script.
"""

from __future__ import annotations

from rojo_cli.cli.app import cli

if __name__ == "__main__":
    cli()
