"""Custom exception hierarchy for rojo-cli.

Everything the CLI layer knows how to report inherits from
:class:`RojoError`.  Failures raised by the external command library are
*not* wrapped here: they are opaque to this package and are reported
verbatim by the dispatcher.

Hierarchy
---------
RojoError
├── InvalidArgumentError
├── EnvironmentError
│   └── WorkingDirectoryError
└── CommandLibraryError
"""

from __future__ import annotations


class RojoError(Exception):
    """Base exception for all rojo-cli errors.

    The CLI error boundary renders these as a one-line message plus an
    optional hint, never as a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Argument validation ---------------------------------------------------

class InvalidArgumentError(RojoError):
    """Raised when a command-line value is syntactically invalid."""


# --- Environment -----------------------------------------------------------

class EnvironmentError(RojoError):
    """Raised when the host environment cannot satisfy a request."""


class WorkingDirectoryError(EnvironmentError):
    """Raised when the current working directory cannot be determined."""


# --- Command library -------------------------------------------------------

class CommandLibraryError(RojoError):
    """Raised when the external command library cannot be loaded."""
