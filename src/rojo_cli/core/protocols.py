"""Protocols (interfaces) consumed by the dispatcher.

The command library that actually initializes, serves, builds and
uploads projects lives outside this package.  The dispatcher depends
only on this structural contract, so a plain module exposing four
functions satisfies it just as well as an object does.
"""

from __future__ import annotations

from typing import Protocol

from rojo_cli.core.models import BuildOptions, InitOptions, ServeOptions, UploadOptions


class CommandLibrary(Protocol):
    """Contract for the external command library.

    Every operation blocks until it completes.  Success is signalled by
    returning normally; failure by raising any exception, whose string
    form is all the dispatcher reports.
    """

    def init(self, options: InitOptions) -> None:
        """Create a new project at ``options.project_path``."""
        ...  # pragma: no cover

    def serve(self, options: ServeOptions) -> None:
        """Serve the project until the process is terminated."""
        ...  # pragma: no cover

    def build(self, options: BuildOptions) -> None:
        """Build the project into ``options.output_file``."""
        ...  # pragma: no cover

    def upload(self, options: UploadOptions) -> None:
        """Build the project and upload it to ``options.asset_id``."""
        ...  # pragma: no cover
