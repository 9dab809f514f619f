"""Infrastructure layer — integration with the external command library.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from rojo_cli.infra.command_library import (
    COMMAND_MODULE_ENV,
    DEFAULT_COMMAND_MODULE,
    command_module_name,
    load_command_library,
)

__all__: list[str] = [
    "COMMAND_MODULE_ENV",
    "DEFAULT_COMMAND_MODULE",
    "command_module_name",
    "load_command_library",
]
