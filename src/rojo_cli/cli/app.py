"""CLI application entry point and command dispatch for rojo.

Flow for a single invocation:

1. Parse ``argv`` against the subcommand schema (argparse handles
   unknown and missing flags itself).
2. No subcommand → print help and exit 0.
3. Extract the chosen subcommand's arguments into an options record,
   resolving paths and validating numeric flags.
4. Load the command library and make exactly one blocking call.
5. Translate the outcome into a process exit code.

:func:`cli` is the **sole error boundary**: it renders
:class:`~rojo_cli.exceptions.RojoError`, ``KeyboardInterrupt`` and any
unexpected ``Exception`` as short messages with well-defined exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

from rich.markup import escape

from rojo_cli.cli import exit_codes
from rojo_cli.cli.console import console
from rojo_cli.cli.log import configure_logging
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
from rojo_cli.exceptions import InvalidArgumentError, RojoError
from rojo_cli.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Construct the top-level parser with one subparser per command.

    Numeric flags are taken as strings here and validated during
    extraction, so a bad value is reported as ``Invalid port 70000``
    with exit status 1 rather than as an argparse usage error.
    """
    parser = argparse.ArgumentParser(
        prog="rojo",
        description=(
            "Syncs a project's files on disk with Roblox Studio, "
            "builds them into models, and uploads them."
        ),
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    sub = parser.add_subparsers(dest="command", metavar="<command>")

    init = sub.add_parser(
        Subcommand.INIT.value,
        help="Creates a new Rojo project.",
        description="Creates a new Rojo project.",
    )
    init.add_argument(
        "PATH",
        nargs="?",
        help="Path to the place to create the project. Defaults to the current directory.",
    )
    init.add_argument(
        "--kind",
        metavar="{place,model}",
        help="The kind of project to create, 'place' or 'model'. Defaults to place.",
    )

    serve = sub.add_parser(
        Subcommand.SERVE.value,
        help="Serves the project's files for use with the Rojo Studio plugin.",
        description="Serves the project's files for use with the Rojo Studio plugin.",
    )
    serve.add_argument(
        "PROJECT",
        nargs="?",
        help="Path to the project to serve. Defaults to the current directory.",
    )
    serve.add_argument(
        "--port",
        help="The port to listen on. Defaults to 8000.",
    )

    build = sub.add_parser(
        Subcommand.BUILD.value,
        help="Generates an rbxmx model file from the project.",
        description="Generates an rbxmx model file from the project.",
    )
    build.add_argument(
        "PROJECT",
        nargs="?",
        help="Path to the project to build. Defaults to the current directory.",
    )
    build.add_argument(
        "-o",
        "--output",
        required=True,
        help="Where to output the result.",
    )

    upload = sub.add_parser(
        Subcommand.UPLOAD.value,
        help="Generates a place or model file out of the project and uploads it to Roblox.",
        description="Generates a place or model file out of the project and uploads it to Roblox.",
    )
    upload.add_argument(
        "PROJECT",
        nargs="?",
        help="Path to the project to upload. Defaults to the current directory.",
    )
    upload.add_argument(
        "--kind",
        metavar="{place,model}",
        help="The kind of asset to generate, 'place' or 'model'. Defaults to place.",
    )
    upload.add_argument(
        "--cookie",
        required=True,
        help="Security cookie to authenticate with.",
    )
    upload.add_argument(
        "--asset_id",
        required=True,
        help="Asset ID to upload to.",
    )

    return parser


# ---------------------------------------------------------------------------
# Argument extraction
# ---------------------------------------------------------------------------

def _init_options(args: argparse.Namespace) -> InitOptions:
    return InitOptions(
        project_path=resolve_project_path(args.PATH),
        kind=args.kind,
    )


def _serve_options(args: argparse.Namespace) -> ServeOptions:
    port = parse_port(args.port) if args.port is not None else None
    return ServeOptions(
        project_path=resolve_project_path(args.PROJECT),
        port=port,
    )


def _build_options(args: argparse.Namespace) -> BuildOptions:
    return BuildOptions(
        project_path=resolve_project_path(args.PROJECT),
        output_file=make_path_absolute(args.output),
        output_kind=None,
    )


def _upload_options(args: argparse.Namespace) -> UploadOptions:
    asset_id = parse_asset_id(args.asset_id)
    return UploadOptions(
        project_path=resolve_project_path(args.PROJECT),
        security_cookie=args.cookie,
        asset_id=asset_id,
        kind=args.kind,
    )


_OPTION_BUILDERS: dict[Subcommand, Callable[[argparse.Namespace], Any]] = {
    Subcommand.INIT: _init_options,
    Subcommand.SERVE: _serve_options,
    Subcommand.BUILD: _build_options,
    Subcommand.UPLOAD: _upload_options,
}


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------

def _run_command(operation: Callable[[Any], object], options: object) -> int:
    """Call *operation* once and map its outcome to an exit code.

    Failures from the command library are opaque: whatever it raises is
    logged verbatim and the invocation ends with ``GENERAL_ERROR``.
    """
    try:
        operation(options)
    except Exception as exc:  # noqa: BLE001
        logger.error("%s", exc)
        return exit_codes.GENERAL_ERROR
    return exit_codes.SUCCESS


def main(
    argv: Sequence[str] | None = None,
    commands: CommandLibrary | None = None,
) -> int:
    """Run the rojo CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    commands:
        Command library to dispatch to.  When ``None``, it is loaded with
        :func:`~rojo_cli.infra.command_library.load_command_library`, and
        only once a subcommand has been validated.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    subcommand = Subcommand(args.command)

    try:
        options = _OPTION_BUILDERS[subcommand](args)
    except InvalidArgumentError as exc:
        logger.error("%s", exc)
        return exit_codes.GENERAL_ERROR

    logger.debug("Running %s with %r", subcommand.value, options)

    if commands is None:
        from rojo_cli.infra.command_library import load_command_library

        commands = load_command_library()

    return _run_command(getattr(commands, subcommand.value), options)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        configure_logging()
        code = main()
        sys.exit(code)
    except RojoError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
