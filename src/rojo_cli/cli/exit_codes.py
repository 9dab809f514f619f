"""Exit-code constants used by the CLI layer.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""Invalid flag value, a failed command, or a known RojoError."""

USAGE_ERROR: int = 2
"""Schema violation reported by argparse (unknown or missing flag)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries.

Shares its value with :data:`USAGE_ERROR`; the stderr message tells them apart.
"""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
