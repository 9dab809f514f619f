"""rojo-cli — command-line front end for the Rojo file-synchronization tool.

Validates and normalizes command-line arguments, then hands typed option
records to the external command library that does the real work.
"""

from rojo_cli.version import __version__

__all__: list[str] = ["__version__"]
