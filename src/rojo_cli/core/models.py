"""Domain models for rojo-cli.

Options records are **frozen** dataclasses built once per invocation and
handed straight to the command library.  Construction enforces the
invariants the command library relies on: paths are absolute and numeric
fields are within their unsigned range.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from rojo_cli.core.validation import U16_MAX, U64_MAX


class Subcommand(str, enum.Enum):
    """The mutually exclusive top-level operations."""

    INIT = "init"
    SERVE = "serve"
    BUILD = "build"
    UPLOAD = "upload"


def _require_absolute(name: str, path: Path) -> None:
    if not path.is_absolute():
        raise ValueError(f"{name} must be an absolute path, got {path}")


def _require_range(name: str, value: int, maximum: int) -> None:
    if not 0 <= value <= maximum:
        raise ValueError(f"{name} must be between 0 and {maximum}, got {value}")


# ---------------------------------------------------------------------------
# Options records
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class InitOptions:
    """Arguments for creating a new project."""

    project_path: Path
    """Directory to create the project in."""

    kind: str | None = None
    """``"place"`` or ``"model"``; ``None`` lets the command library decide."""

    def __post_init__(self) -> None:
        _require_absolute("project_path", self.project_path)


@dataclass(frozen=True, slots=True)
class ServeOptions:
    """Arguments for serving a project to the Studio plugin."""

    project_path: Path
    port: int | None = None

    def __post_init__(self) -> None:
        _require_absolute("project_path", self.project_path)
        if self.port is not None:
            _require_range("port", self.port, U16_MAX)


@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Arguments for building a model file from a project."""

    project_path: Path
    output_file: Path
    output_kind: str | None = None
    """Reserved; no command-line flag sets it yet."""

    def __post_init__(self) -> None:
        _require_absolute("project_path", self.project_path)
        _require_absolute("output_file", self.output_file)


@dataclass(frozen=True, slots=True)
class UploadOptions:
    """Arguments for building a project and uploading it as an asset."""

    project_path: Path
    security_cookie: str = field(repr=False)
    """Opaque credential, forwarded verbatim and kept out of ``repr``."""

    asset_id: int
    kind: str | None = None

    def __post_init__(self) -> None:
        _require_absolute("project_path", self.project_path)
        _require_range("asset_id", self.asset_id, U64_MAX)
