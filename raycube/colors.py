"""Validation and parsing of floor and ceiling colour lines."""

from __future__ import annotations

from .libtext import WHITESPACE, atoi, is_space


class SceneError(ValueError):
    """Raised when a scene description is malformed."""


def count_commas(line: str) -> int:
    """Return how many commas ``line`` holds."""
    return line.count(",")


def color_is_valid(text: str) -> bool:
    """Tell whether a colour component holds only blanks and digits, at most 255."""
    if any(not is_space(char) and not char.isascii() for char in text):
        return False
    if any(not is_space(char) and not char.isdigit() for char in text):
        return False
    return atoi(text) <= 255


def layer_one(line: str) -> bool:
    """Check the line starts with F or C, a blank, and holds exactly two commas."""
    return (
        count_commas(line) == 2
        and len(line) >= 2
        and line[0] in "FC"
        and line[1] in " \t"
    )


def layer_two(line: str) -> bool:
    """Check everything after the identifier is blanks, digits or commas."""
    return all(
        is_space(char) or ("0" <= char <= "9") or char == ","
        for char in line[2:]
    )


def _segments(body: str) -> list[str]:
    if not body:
        return []
    if body.endswith(","):
        parts = body[:-1].split(",")
        parts[-1] += ","
        return parts
    return body.split(",")


def parse_color_values(line: str) -> list[int]:
    """Parse the comma separated components after the identifier.

    Empty components count as 0.  Raises SceneError on a component that is
    not a number from 0 to 255.
    """
    body = line[2:].lstrip(WHITESPACE)
    values = []
    for segment in _segments(body):
        if not color_is_valid(segment):
            raise SceneError("Misconfigured color")
        values.append(atoi(segment))
    return values


def parse_color_line(line: str) -> tuple[str, tuple[int, int, int]]:
    """Parse an ``F r,g,b`` or ``C r,g,b`` line into its kind and components."""
    if not (layer_one(line) and layer_two(line)):
        raise SceneError("Misconfigured color")
    values = parse_color_values(line)
    if len(values) != 3:
        raise SceneError("Misconfigured color")
    red, green, blue = values
    return line[0], (red, green, blue)


def pack_rgb(rgb: tuple[int, int, int]) -> int:
    """Pack red, green and blue into a 0xRRGGBB integer."""
    red, green, blue = rgb
    return ((red & 0xFF) << 16) + ((green & 0xFF) << 8) + (blue & 0xFF)