"""Strict parsing of unsigned integer flag values.

``int()`` is far too lenient for command-line numbers: it accepts
surrounding whitespace, ``_`` separators, a leading ``-`` and non-ASCII
digits.  The grammar accepted here is an optional ``+`` followed by
ASCII digits, bounded by the target type's maximum.
"""

from __future__ import annotations

import re

from rojo_cli.exceptions import InvalidArgumentError

U16_MAX: int = 2**16 - 1
U64_MAX: int = 2**64 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")


def parse_unsigned(text: str, maximum: int) -> int | None:
    """Return *text* as an int in ``0..maximum``, or ``None`` if it is not one."""
    if _UNSIGNED_RE.fullmatch(text) is None:
        return None
    value = int(text)
    if value > maximum:
        return None
    return value


def parse_port(text: str) -> int:
    """Parse a TCP port (unsigned 16-bit).

    Raises
    ------
    InvalidArgumentError
        Naming the offending literal.
    """
    port = parse_unsigned(text, U16_MAX)
    if port is None:
        raise InvalidArgumentError(f"Invalid port {text}")
    return port


def parse_asset_id(text: str) -> int:
    """Parse an asset ID (unsigned 64-bit).

    Raises
    ------
    InvalidArgumentError
        Naming the offending literal.
    """
    asset_id = parse_unsigned(text, U64_MAX)
    if asset_id is None:
        raise InvalidArgumentError(f"Invalid asset ID {text}")
    return asset_id
