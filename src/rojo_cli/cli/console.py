"""Rich console used by the CLI error boundary.

Diagnostics go to stderr so that stdout stays free for help output and
for anything the command library prints.
"""

from __future__ import annotations

from rich.console import Console

console = Console(stderr=True, soft_wrap=True)
