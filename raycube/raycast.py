"""Grid ray casting: horizontal and vertical grid-line intersections."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

TILE = 50
WIDTH = 1280
HEIGHT = 960
FOV = 60
MAP_SIZE = 30
SPEED = 0.1

HORIZONTAL = 1
VERTICAL = 0

Grid = Sequence[Sequence[str]]


@dataclass(frozen=True)
class RayHit:
    """Where a ray stopped, how far it went and which cell stopped it."""

    distance: float
    x: float
    y: float
    horizontal: bool
    cell: tuple[int, int] | None = None

    @property
    def texture_coordinate(self) -> float:
        """Hit position along the wall, in tiles."""
        return (self.x if self.horizontal else self.y) / TILE


def normalize_angle(angle: float) -> float:
    """Bring ``angle`` into the range [0, 2*pi)."""
    angle = math.fmod(angle, 2 * math.pi)
    if angle < 0:
        angle += 2 * math.pi
    return angle


def distance(x: float, y: float, x1: float, y1: float) -> float:
    """Euclidean distance between two points."""
    dx = x1 - x
    dy = y1 - y
    return math.sqrt(dx * dx + dy * dy)


def _divide(numerator: float, denominator: float) -> float:
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def _size(grid: Grid) -> tuple[int, int]:
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    return rows, cols


def probe(
    grid: Grid, x: float, y: float, check: int, face: int, bonus: bool = False
) -> tuple[bool, tuple[int, int] | None]:
    """Test one intersection point.

    Returns whether the ray may go on, and the (column, row) of the cell
    that was looked at, or None when the point lies outside the map.
    ``check`` nudges the point across the grid line on the side given by
    ``face``.  Walls stop the ray; with ``bonus`` closed doors do too.
    """
    if face == HORIZONTAL:
        y += check
    else:
        x += check
    rows, cols = _size(grid)
    if not (math.isfinite(x) and math.isfinite(y)):
        return False, None
    if y > rows * TILE or x > cols * TILE:
        return False, None
    col = math.floor(x / TILE)
    row = math.floor(y / TILE)
    if not (0 <= row < rows and 0 <= col < cols):
        return False, None
    cell = grid[row][col]
    blocked = cell == "1" or (bonus and cell == "2")
    return not blocked, (col, row)


def _march(
    grid: Grid,
    x: float,
    y: float,
    step_x: float,
    step_y: float,
    check: int,
    face: int,
    bonus: bool,
) -> tuple[float, float, tuple[int, int] | None]:
    last_cell = None
    while True:
        passable, cell = probe(grid, x, y, check, face, bonus)
        if cell is not None:
            last_cell = cell
        if not passable:
            return x, y, last_cell
        x += step_x
        y += step_y


def _facing_down(angle: float) -> bool:
    return 0 < angle < math.pi


def _facing_right(angle: float) -> bool:
    return angle < 0.5 * math.pi or angle > 1.5 * math.pi


def horizontal_hit(
    grid: Grid, px: float, py: float, angle: float, bonus: bool = False
) -> RayHit:
    """Follow a ray across horizontal grid lines until something stops it."""
    angle = normalize_angle(angle)
    tangent = math.tan(angle)
    first_y = math.floor(py / TILE) * TILE
    if _facing_down(angle):
        first_y += TILE
    first_x = px + _divide(first_y - py, tangent)
    step_y = float(TILE)
    check = 0
    if not _facing_down(angle):
        step_y = -step_y
        check = -1
    step_x = _divide(step_y, tangent)
    if _facing_right(angle) and step_x < 0:
        step_x = -step_x
    if not _facing_right(angle) and step_x > 0:
        step_x = -step_x
    x, y, cell = _march(grid, first_x, first_y, step_x, step_y, check, HORIZONTAL, bonus)
    return RayHit(distance(px, py, x, y), x, y, True, cell)


def vertical_hit(
    grid: Grid, px: float, py: float, angle: float, bonus: bool = False
) -> RayHit:
    """Follow a ray across vertical grid lines until something stops it."""
    angle = normalize_angle(angle)
    tangent = math.tan(angle)
    first_x = math.floor(px / TILE) * TILE
    if _facing_right(angle):
        first_x += TILE
    first_y = py + (first_x - px) * tangent
    step_x = float(TILE)
    check = 0
    if not _facing_right(angle):
        step_x = -step_x
        check = -1
    step_y = step_x * tangent
    if not _facing_down(angle) and step_y > 0:
        step_y = -step_y
    if _facing_down(angle) and step_y < 0:
        step_y = -step_y
    x, y, cell = _march(grid, first_x, first_y, step_x, step_y, check, VERTICAL, bonus)
    return RayHit(distance(px, py, x, y), x, y, False, cell)


def cast_ray(
    grid: Grid, px: float, py: float, angle: float, bonus: bool = False
) -> RayHit:
    """Cast one ray and return the nearer of its two grid-line hits."""
    horizontal = horizontal_hit(grid, px, py, angle, bonus)
    vertical = vertical_hit(grid, px, py, angle, bonus)
    if horizontal.distance < vertical.distance:
        return horizontal
    return vertical