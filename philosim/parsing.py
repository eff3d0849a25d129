"""Parsing and validation of the numeric command-line arguments."""

from __future__ import annotations

import string
from collections.abc import Iterable
from itertools import takewhile

_DECIMAL = frozenset(string.digits)
_HEX = frozenset(string.hexdigits)


class ArgumentError(ValueError):
    """Raised when the simulation arguments are malformed."""


def _prefix(text: str, allowed: frozenset[str]) -> str:
    return "".join(takewhile(allowed.__contains__, text))


def parse_number(text: str) -> int:
    """Read the leading number of ``text``.

    A ``0x`` prefix selects hexadecimal; otherwise an optional leading ``-``
    is followed by decimal digits. Reading stops at the first character that
    is not a digit, and a string with no digits reads as zero.
    """
    if text.startswith("0x"):
        digits = _prefix(text[2:], _HEX)
        return int(digits, 16) if digits else 0
    negative = text.startswith("-")
    if negative:
        text = text[1:]
    digits = _prefix(text, _DECIMAL)
    value = int(digits) if digits else 0
    return -value if negative else value


def validate_arguments(args: Iterable[str]) -> tuple[int, ...]:
    """Check that every argument is a positive decimal number and parse them.

    Raises ArgumentError if an argument holds anything but digits or is zero.
    """
    values = []
    for arg in args:
        if not all(ch in _DECIMAL for ch in arg):
            raise ArgumentError("invalid arguments")
        value = parse_number(arg)
        if value == 0:
            raise ArgumentError("invalid arguments")
        values.append(value)
    return tuple(values)