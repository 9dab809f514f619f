"""Logging setup for the ``rojo`` command.

Verbosity follows the ``ROJO_LOG`` environment variable
(``trace``/``debug``/``info``/``warn``/``error``/``off``) and defaults
to errors only, so a successful run prints nothing.
"""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler
from rich.markup import escape

from rojo_cli.cli.console import console
from rojo_cli.exceptions import InvalidArgumentError

LOG_LEVEL_ENV: str = "ROJO_LOG"
DEFAULT_LOG_LEVEL: str = "error"

_LEVELS: dict[str, int] = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off": logging.CRITICAL + 1,
}


def parse_log_level(name: str) -> int:
    """Map a level name to a :mod:`logging` level.

    Raises
    ------
    InvalidArgumentError
        For names outside the accepted set.
    """
    try:
        return _LEVELS[name.strip().lower()]
    except KeyError:
        raise InvalidArgumentError(
            f"Invalid log level {name}",
            hint=f"{LOG_LEVEL_ENV} accepts: {', '.join(_LEVELS)}",
        ) from None


def configure_logging(level: str | None = None) -> logging.Logger:
    """Attach a Rich handler to the package logger and set its level.

    Safe to call repeatedly; only one handler is ever installed.  An
    unrecognised level name is reported once and replaced by the default
    instead of aborting the command.
    """
    name = level or os.environ.get(LOG_LEVEL_ENV) or DEFAULT_LOG_LEVEL
    package_logger = logging.getLogger("rojo_cli")
    try:
        package_logger.setLevel(parse_log_level(name))
    except InvalidArgumentError as exc:
        package_logger.setLevel(parse_log_level(DEFAULT_LOG_LEVEL))
        console.print(
            f"[yellow]Warning:[/yellow] {escape(str(exc))}, "
            f"using {DEFAULT_LOG_LEVEL}",
        )

    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(
            console=console,
            show_time=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)

    return package_logger
