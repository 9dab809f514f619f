"""Path resolution for command-line path arguments.

This is absolutization, not canonicalization: relative paths are joined
onto the current working directory, absolute paths pass through
untouched, and the filesystem is never consulted beyond ``os.getcwd()``.
"""

from __future__ import annotations

import os
from pathlib import Path

from rojo_cli.exceptions import WorkingDirectoryError


def current_dir() -> Path:
    """Return the process working directory.

    Raises
    ------
    WorkingDirectoryError
        When the host cannot report a working directory (e.g. it was
        deleted out from under the process).
    """
    try:
        return Path(os.getcwd())
    except OSError as exc:
        raise WorkingDirectoryError(
            f"Could not determine the current working directory: {exc}",
        ) from exc


def make_path_absolute(value: str | os.PathLike[str]) -> Path:
    """Anchor *value* at the working directory unless it is already absolute.

    The empty string means the working directory itself.
    """
    path = Path(value)
    if path.is_absolute():
        return path
    return current_dir() / path


def resolve_project_path(value: str | None) -> Path:
    """Resolve an optional positional project argument.

    ``None`` (argument omitted) resolves to the working directory.
    """
    if value is None:
        return current_dir()
    return make_path_absolute(value)
