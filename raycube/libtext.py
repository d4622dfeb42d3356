"""Small text helpers with the exact semantics the scene parser relies on."""

from __future__ import annotations

import re

WHITESPACE = " \t\n\v\f\r"

_NUMBER = re.compile(r"([+-]?)([0-9]*)")


def is_space(char: str) -> bool:
    """Return True for a blank character: space, tab, newline, vt, ff or cr."""
    return len(char) == 1 and char in WHITESPACE


def atoi(text: str) -> int:
    """Parse a leading integer, skipping blanks; stop at the first non-digit.

    Text without digits gives 0.
    """
    match = _NUMBER.match(text.lstrip(WHITESPACE))
    sign, digits = match.groups()
    value = int(digits) if digits else 0
    return -value if sign == "-" else value


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character.

    Runs of separators keep the empty fields between them, but one empty
    field is dropped at each end, so a single leading or trailing separator
    leaves nothing behind.
    """
    parts = text.split(sep)
    if parts and parts[0] == "":
        parts.pop(0)
    if parts and parts[-1] == "":
        parts.pop()
    return parts


def strtrim(text: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``text``."""
    if not chars:
        return text
    return text.strip(chars)


def strnstr(haystack: str, needle: str, length: int) -> int:
    """Find ``needle`` within the first ``length`` characters of ``haystack``.

    Return the index of the match or -1.  As with the classic bounded
    search, a needle longer than ``length`` matches at index 0 when its
    first ``length`` characters agree with the start of the haystack.
    """
    if len(haystack) < len(needle):
        return -1
    if not needle:
        return 0
    if length <= 0:
        return -1
    if length < len(needle) and haystack[:length] == needle[:length]:
        return 0
    return haystack.find(needle, 0, length)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start``."""
    if start >= len(text) or length <= 0:
        return ""
    return text[start:start + length]