"""Validation of push_swap command-line arguments."""

from __future__ import annotations

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


class ArgumentError(ValueError):
    """An argument is not a valid, unique 32-bit integer."""

    def __init__(self, message: str = "Error"):
        super().__init__(message)


def _parse_long(text: str) -> int:
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    digits = ""
    for ch in rest:
        if ch not in _DIGITS:
            break
        digits += ch
    return sign * int(digits) if digits else 0


def check_min_max(text: str) -> bool:
    """True if text is shorter than 12 characters and its number fits in 32 bits."""
    return INT_MIN <= _parse_long(text) <= INT_MAX and len(text) < 12


def parse_int(text: str) -> int:
    """Parse one argument as an integer with an optional leading minus."""
    sign = 1
    digits = text
    if digits.startswith("-"):
        sign = -1
        digits = digits[1:]
    if not digits:
        return 1
    if any(ch not in _DIGITS for ch in digits) or not check_min_max(digits):
        raise ArgumentError()
    return sign * int(digits)


def parse_args(args) -> list[int]:
    """Turn the argument strings into a list of distinct integers."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        if not arg:
            continue
        if arg[0] not in "+- " and arg[0] not in _DIGITS:
            raise ArgumentError()
        value = parse_int(arg)
        if value in seen:
            raise ArgumentError()
        seen.add(value)
        values.append(value)
    return values