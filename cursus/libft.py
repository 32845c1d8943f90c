"""String helpers with the exact edge-case semantics of the classic libft routines."""

from __future__ import annotations

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def _wrap32(number: int) -> int:
    """Wrap an integer to a signed 32-bit value."""
    number &= 0xFFFFFFFF
    return number - 0x100000000 if number & 0x80000000 else number


def atoi(text: str) -> int:
    """Parse a leading integer, giving up with 0 or -1 past ten characters."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    count = 0
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        count = 1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if ch not in _DIGITS:
            break
        result = _wrap32(result * 10 + int(ch))
        count += 1
        if count > 10:
            return 0 if sign < 0 else -1
    return _wrap32(result * sign)


def itoa(number: int) -> str:
    """Return the decimal text of a 32-bit integer."""
    return str(_wrap32(number))


def split(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty words."""
    return [word for word in text.split(sep) if word]


def strjoin(first: str, second: str) -> str:
    """Return the two strings joined together."""
    return first + second


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n bytes; the result is the difference of the first differing bytes."""
    if n == 0:
        return 0
    left = first.encode("utf-8")[:n] + b"\0"
    right = second.encode("utf-8")[:n] + b"\0"
    for a, b in zip(left[:n], right[:n]):
        if a != b or a == 0:
            return a - b
    return left[n - 1] - right[n - 1] if n <= min(len(left), len(right)) else 0


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Return the tail of haystack starting at needle, searching only the first length chars."""
    if not needle:
        return haystack
    position = haystack[:length].find(needle)
    return haystack[position:] if position >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Strip characters in charset from both ends."""
    return text.strip(charset) if charset else text


def substr(text: str, start: int, length: int) -> str:
    """Return at most length characters of text beginning at start."""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters; return the copy and the length of src."""
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size; return the result and the intended length."""
    if size == 0:
        return dst, len(src)
    if size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)