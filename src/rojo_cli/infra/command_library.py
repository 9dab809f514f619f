"""Infrastructure: locating the external command library.

The command library is an ordinary importable module exposing
``init``, ``serve``, ``build`` and ``upload``.  Which module is used can
be overridden through ``ROJO_COMMAND_MODULE``, which is how alternative
back ends (and test doubles) are plugged in.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
* Import failures surface as :class:`~rojo_cli.exceptions.CommandLibraryError`.
"""

from __future__ import annotations

import importlib
import logging
import os
from typing import cast

from rojo_cli.core.models import Subcommand
from rojo_cli.core.protocols import CommandLibrary
from rojo_cli.exceptions import CommandLibraryError

logger = logging.getLogger(__name__)

COMMAND_MODULE_ENV: str = "ROJO_COMMAND_MODULE"
DEFAULT_COMMAND_MODULE: str = "librojo.commands"


def command_module_name() -> str:
    """Return the configured command module, falling back to the default."""
    return os.environ.get(COMMAND_MODULE_ENV) or DEFAULT_COMMAND_MODULE


def _module_and_parents(name: str) -> set[str]:
    """``"a.b.c"`` -> ``{"a", "a.b", "a.b.c"}``."""
    parts = name.split(".")
    return {".".join(parts[:i]) for i in range(1, len(parts) + 1)}


def load_command_library(module_name: str | None = None) -> CommandLibrary:
    """Import the command library and check that it is complete.

    Parameters
    ----------
    module_name:
        Dotted module path.  When ``None``, :func:`command_module_name`
        decides.

    Raises
    ------
    CommandLibraryError
        When the module is not installed or lacks one of the operations.
    """
    name = module_name or command_module_name()
    logger.debug("Loading command library %s", name)

    try:
        module = importlib.import_module(name)
    except ModuleNotFoundError as exc:
        if exc.name not in _module_and_parents(name):
            # The library is installed but one of its own imports is not.
            raise CommandLibraryError(
                f"Command library '{name}' failed to import: {exc}",
            ) from exc
        raise CommandLibraryError(
            f"Command library '{name}' is not installed.",
            hint=(
                "Install the package providing it, or point "
                f"{COMMAND_MODULE_ENV} at another module."
            ),
        ) from exc

    missing = [
        subcommand.value
        for subcommand in Subcommand
        if not callable(getattr(module, subcommand.value, None))
    ]
    if missing:
        raise CommandLibraryError(
            f"Command library '{name}' does not provide: {', '.join(missing)}",
        )

    return cast(CommandLibrary, module)
