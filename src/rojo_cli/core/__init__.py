"""Core layer — option records, path resolution and argument validation.

Rules
-----
* No ``print()`` calls.
* No filesystem access beyond reading the working directory.
* No imports from ``cli`` or ``infra``.
"""

from rojo_cli.core.models import (
    BuildOptions,
    InitOptions,
    ServeOptions,
    Subcommand,
    UploadOptions,
)
from rojo_cli.core.paths import make_path_absolute, resolve_project_path
from rojo_cli.core.protocols import CommandLibrary
from rojo_cli.core.validation import parse_asset_id, parse_port

__all__: list[str] = [
    "BuildOptions",
    "CommandLibrary",
    "InitOptions",
    "ServeOptions",
    "Subcommand",
    "UploadOptions",
    "make_path_absolute",
    "parse_asset_id",
    "parse_port",
    "resolve_project_path",
]
