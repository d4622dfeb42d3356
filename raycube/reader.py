"""Reading scene files and checking the command line."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import TextIO

from .colors import SceneError
from .libtext import split, strnstr

_CHUNK_SIZE = 4096


def iter_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of ``stream``, each with its trailing newline if it has one.

    Only ``\\n`` ends a line; a final line without a newline is yielded as is.
    """
    pending = ""
    while True:
        chunk = stream.read(_CHUNK_SIZE)
        if not chunk:
            break
        pending += chunk
        *complete, pending = pending.split("\n")
        for line in complete:
            yield line + "\n"
    if pending:
        yield pending


def read_lines(path: str) -> list[str]:
    """Read a scene file and split it into lines.

    A single leading or trailing newline leaves no empty line behind, while
    blank lines between others are kept.  Raises SceneError when the file
    cannot be opened.
    """
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as stream:
            content = "".join(iter_lines(stream))
    except OSError as error:
        raise SceneError("Invalid argument") from error
    return split(content, "\n")


def check_argument(argv: Sequence[str]) -> str:
    """Return the scene path from a program-name-first argument list.

    Exactly one argument is accepted, and it must contain ``.cub``.
    """
    if len(argv) != 2:
        raise SceneError("Invalid argument")
    path = argv[1]
    if strnstr(path, ".cub", len(path)) < 0:
        raise SceneError("Invalid argument")
    return path