"""Keyboard state, player movement and turning, mouse look and door toggling."""

from __future__ import annotations

import math
from collections.abc import MutableSequence, Sequence
from dataclasses import dataclass
from enum import IntEnum

from .raycast import HEIGHT, SPEED, TILE, WIDTH

FULL_TURN = 6.29

Grid = Sequence[Sequence[str]]


class Key(IntEnum):
    """Key codes the game reacts to."""

    A = 0
    S = 1
    D = 2
    F = 3
    W = 13
    SPACE = 49
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124


_HELD = {
    Key.W: "forward",
    Key.A: "strafe_left",
    Key.S: "backward",
    Key.D: "strafe_right",
    Key.LEFT: "turn_left",
    Key.RIGHT: "turn_right",
    Key.F: "fire",
}


def _as_key(key: int) -> Key | None:
    try:
        return Key(key)
    except ValueError:
        return None


@dataclass
class Controls:
    """Which movement, turning and firing keys are currently held."""

    forward: bool = False
    strafe_left: bool = False
    backward: bool = False
    strafe_right: bool = False
    turn_left: bool = False
    turn_right: bool = False
    fire: bool = False

    def press(self, key: int) -> bool:
        """Record a key press.

        Returns True when the key asks for nearby doors to be toggled.
        """
        code = _as_key(key)
        if code is None:
            return False
        if code in _HELD:
            setattr(self, _HELD[code], True)
        return code is Key.SPACE

    def release(self, key: int) -> bool:
        """Record a key release.

        Returns True when the key asks the game to quit.
        """
        code = _as_key(key)
        if code is None:
            return False
        if code in _HELD:
            setattr(self, _HELD[code], False)
        return code is Key.ESCAPE


def _c_round(value: float) -> int:
    """Round half away from zero."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _cell(grid: Grid, row: int, col: int) -> str | None:
    if 0 <= row < len(grid) and 0 <= col < len(grid[row]):
        return grid[row][col]
    return None


@dataclass
class Player:
    """Player position in map cells and heading in radians."""

    x: float
    y: float
    angle: float

    def _displacement(self, controls: Controls, step: float) -> tuple[float, float]:
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        dx = dy = 0.0
        if controls.forward:
            dx += cos_a * step
            dy += sin_a * step
        if controls.strafe_left:
            dx += sin_a * step
            dy += cos_a * -step
        if controls.backward:
            dx += cos_a * -step
            dy += sin_a * -step
        if controls.strafe_right:
            dx += sin_a * -step
            dy += cos_a * step
        return dx, dy

    def turn(self, controls: Controls) -> None:
        """Apply the held turning keys to the heading."""
        if controls.turn_left:
            if self.angle <= SPEED:
                self.angle = FULL_TURN - self.angle - SPEED
            else:
                self.angle -= SPEED
        if controls.turn_right:
            self.angle += SPEED
        if self.angle >= FULL_TURN or self.angle <= -FULL_TURN:
            self.angle = 0.0

    def can_move(self, controls: Controls, grid: Grid, bonus: bool = False) -> bool:
        """Tell whether a double-length step lands on a free cell.

        Open doors count as free when ``bonus`` is set.
        """
        dx, dy = self._displacement(controls, SPEED * 2)
        cell = _cell(grid, _c_round(self.y + dy), _c_round(self.x + dx))
        return cell == "0" or (bonus and cell == "3")

    def update(self, controls: Controls, grid: Grid, bonus: bool = False) -> None:
        """Move by the held keys when the way is free, then turn."""
        if self.can_move(controls, grid, bonus):
            dx, dy = self._displacement(controls, SPEED)
            self.x += dx
            self.y += dy
        self.turn(controls)


@dataclass
class MouseLook:
    """Turns the player as the pointer moves sideways across the window."""

    last_x: int = 0

    def move(self, player: Player, x: int, y: int) -> bool:
        """Turn ``player`` one step toward the pointer's motion.

        Positions outside the window are ignored.  Returns True if the
        player turned.
        """
        if x < 0 or x > WIDTH or y < 0 or y > HEIGHT:
            return False
        if x < self.last_x:
            player.turn(Controls(turn_left=True))
        elif x > self.last_x:
            player.turn(Controls(turn_right=True))
        else:
            return False
        self.last_x = x
        return True


def toggle_doors(grid: Sequence[MutableSequence[str]], px: float, py: float) -> None:
    """Open closed doors and close open doors next to the player.

    ``px`` and ``py`` are the player's position in pixels.
    """
    col = int(px / TILE)
    row = int(py / TILE)
    for r, c in ((row, col + 1), (row + 1, col), (row - 1, col), (row, col - 1)):
        cell = _cell(grid, r, c)
        if cell == "2":
            grid[r][c] = "3"
        elif cell == "3":
            grid[r][c] = "2"