"""String helpers used to parse command lines and environment entries."""

from __future__ import annotations

import re

_INT64_MAX = 9223372036854775807
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_NUMBER_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)([0-9]*)")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping whitespace and one sign.

    Parsing stops at the first non-digit. A value that grows past the
    signed 64-bit range gives -1 when positive and 0 when negative.
    """
    match = _NUMBER_PREFIX.match(text)
    sign_text, digits = match.groups()
    negative = sign_text == "-"
    result = 0
    for digit in digits:
        result *= 10
        if result >= _INT64_MAX:
            return 0 if negative else -1
        result += int(digit)
    return -result if negative else result


def itoa(number: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise OverflowError(f"{number} does not fit in a 32-bit integer")
    return str(number)


def split(text: str | None, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty words."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    if not text:
        return []
    return [word for word in text.split(sep) if word]


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters.

    Returns the difference of the first differing code points, treating
    the end of a string as code point zero, or 0 when they match.
    """
    if count < 0:
        raise ValueError("count must not be negative")
    for position in range(count):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(haystack: str, needle: str, length: int) -> str | None:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Returns the rest of ``haystack`` from the match, or None.
    """
    if length < 0:
        raise ValueError("length must not be negative")
    if len(haystack) < len(needle):
        return None
    if not needle:
        return haystack
    index = haystack.find(needle, 0, length)
    if index < 0:
        return None
    return haystack[index:]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]