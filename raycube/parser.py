"""Parsing of scene descriptions: texture and colour lines followed by a map."""

from __future__ import annotations

import math
import os
from collections.abc import Iterable
from dataclasses import dataclass, field

from .colors import SceneError, pack_rgb, parse_color_line
from .libtext import strnstr, strtrim
from .reader import read_lines

TEXTURE_DIR = "./../texture/"
TEXTURE_FILES = tuple(f"{TEXTURE_DIR}{name}.xpm" for name in ("SO", "NO", "WE", "EA"))
DOOR_FILE = f"{TEXTURE_DIR}DOOR.xpm"
GUN_FILES = tuple(f"{TEXTURE_DIR}{number}.xpm" for number in range(1, 6))

_IDENTIFIERS = {"N": "NO ", "S": "SO ", "W": "WE ", "E": "EA "}
_START_ANGLES = {
    "N": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
    "S": 3 * math.pi / 2,
}
_MAP_LINE_CHARS = frozenset("1 \t*")
_REQUIRED_SETTINGS = 6


@dataclass
class Scene:
    """A parsed scene: the padded map, the player start and the textures and colours."""

    grid: list[list[str]]
    player_col: int
    player_row: int
    direction: str
    textures: dict[str, str | None]
    ceiling: tuple[int, int, int] = (-1, -1, -1)
    floor: tuple[int, int, int] = (-1, -1, -1)
    door: str | None = None
    gun_frames: tuple[str, ...] = ()

    def start_angle(self) -> float:
        """Return the angle the player faces at start, in radians."""
        return _START_ANGLES[self.direction]

    def ceiling_color(self) -> int:
        """Return the ceiling colour as 0xRRGGBB."""
        return pack_rgb(self.ceiling)

    def floor_color(self) -> int:
        """Return the floor colour as 0xRRGGBB."""
        return pack_rgb(self.floor)


@dataclass
class _Settings:
    textures: dict[str, str | None] = field(
        default_factory=lambda: dict.fromkeys(_IDENTIFIERS)
    )
    ceiling: tuple[int, int, int] = (-1, -1, -1)
    floor: tuple[int, int, int] = (-1, -1, -1)
    door: str | None = None
    gun_frames: tuple[str, ...] = ()
    empty_lines: int = 0


def is_map_line(line: str) -> bool:
    """Tell whether ``line`` holds only walls, blanks and filler (an empty line does)."""
    return all(char in _MAP_LINE_CHARS for char in line)


def _resolve(root: str | None, path: str) -> str:
    return os.path.join(root, path) if root else path


def _readable(path: str) -> bool:
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def _texture_line(
    settings: _Settings, line: str, key: str, bonus: bool, root: str | None
) -> None:
    identifier = _IDENTIFIERS[key]
    start = strnstr(line, TEXTURE_DIR, len(line))
    if not (line.startswith(identifier) or line[2:3] == "\t") or start < 0:
        raise SceneError("Texture file error")
    path = line[start:]
    resolved = _resolve(root, path)
    if not _readable(resolved) or path not in TEXTURE_FILES:
        raise SceneError("Texture file error")
    if bonus:
        extras = (DOOR_FILE, *GUN_FILES)
        if not all(_readable(_resolve(root, extra)) for extra in extras):
            raise SceneError("missing door texture file.")
        settings.door = _resolve(root, DOOR_FILE)
        settings.gun_frames = tuple(_resolve(root, gun) for gun in GUN_FILES)
    if settings.textures[key] is not None:
        raise SceneError("Duplicate symbol")
    settings.textures[key] = resolved


def _settings_line(
    settings: _Settings, line: str, bonus: bool, root: str | None
) -> None:
    if not line:
        settings.empty_lines += 1
        return
    first = line[0]
    if first in _IDENTIFIERS:
        _texture_line(settings, line, first, bonus, root)
    elif first in "FC":
        kind, rgb = parse_color_line(line)
        if kind == "C":
            settings.ceiling = rgb
        else:
            settings.floor = rgb
    else:
        raise SceneError("Map Error")


def _neighbour(grid, row: int, col: int) -> str:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return "*"


def _enclosed(grid, row: int, col: int) -> bool:
    neighbours = (
        _neighbour(grid, row - 1, col),
        _neighbour(grid, row + 1, col),
        _neighbour(grid, row, col - 1),
        _neighbour(grid, row, col + 1),
    )
    return "*" not in neighbours


def check_door(grid, row: int, col: int) -> bool:
    """Tell whether the door at (row, col) sits between walls on one axis.

    A door on a row whose first or last cell is a door is never valid.
    """
    cells = grid[row]
    if cells[0] == "2" or cells[-1] == "2":
        return False
    vertical_open = (
        _neighbour(grid, row - 1, col) in "*0"
        or _neighbour(grid, row + 1, col) in "*0"
    )
    horizontal_open = (
        _neighbour(grid, row, col - 1) in "*0"
        or _neighbour(grid, row, col + 1) in "*0"
    )
    return not (vertical_open and horizontal_open)


def _build_grid(rows: list[str]) -> list[list[str]]:
    width = max((len(row) for row in rows), default=0)
    return [list(row.ljust(width, "*")) for row in rows]


def _place_player(grid: list[list[str]], bonus: bool) -> tuple[str | None, int, int]:
    blanks = " " if bonus else " \t"
    allowed = "01*2" if bonus else "01*"
    direction = None
    player_col = player_row = -1
    for row, cells in enumerate(grid):
        for col, cell in enumerate(cells):
            if cell in blanks:
                cells[col] = "*"
            elif cell in _IDENTIFIERS:
                if direction is not None:
                    raise SceneError("Direction full")
                direction = cell
                player_col, player_row = col, row
                cells[col] = "0"
            elif cell not in allowed:
                raise SceneError("invalid map")
    return direction, player_col, player_row


def _check_map(grid: list[list[str]], bonus: bool) -> None:
    last = len(grid) - 1
    for row, cells in enumerate(grid):
        if cells and row == last and not is_map_line("".join(cells)):
            raise SceneError("Map error")
        for col, cell in enumerate(cells):
            if cell == "0" and not _enclosed(grid, row, col):
                raise SceneError("Map error")
            if bonus and cell == "2" and not check_door(grid, row, col):
                raise SceneError("Map error")


def parse_scene(
    lines: Iterable[str], bonus: bool = False, root: str | None = None
) -> Scene:
    """Parse scene lines into a Scene.

    Texture paths are checked relative to ``root`` (the working directory
    when None).  With ``bonus`` doors are allowed in the map and the door
    and gun textures must exist.  Raises SceneError on any problem.
    """
    lines = list(lines)
    settings = _Settings()
    start = len(lines)
    for index, raw in enumerate(lines):
        line = strtrim(raw, "\t \n")
        if line and is_map_line(line):
            start = index
            break
        _settings_line(settings, line, bonus, root)

    if start - settings.empty_lines < _REQUIRED_SETTINGS:
        raise SceneError("Missing data")

    grid = _build_grid([strtrim(raw, "\n") for raw in lines[start:]])
    direction, player_col, player_row = _place_player(grid, bonus)
    _check_map(grid, bonus)
    if direction is None:
        raise SceneError("no direction")

    return Scene(
        grid=grid,
        player_col=player_col,
        player_row=player_row,
        direction=direction,
        textures=settings.textures,
        ceiling=settings.ceiling,
        floor=settings.floor,
        door=settings.door,
        gun_frames=settings.gun_frames,
    )


def load_scene(path: str, bonus: bool = False, root: str | None = None) -> Scene:
    """Read and parse the scene file at ``path``."""
    return parse_scene(read_lines(path), bonus, root)