import math

import pytest

from raycube.player import Controls, Key, MouseLook, Player, toggle_doors
from raycube.raycast import SPEED, TILE


def make_grid(rows):
    return [list(row) for row in rows]


OPEN = make_grid(["11111", "10001", "10001", "10001", "11111"])
WALLED = make_grid(["11111", "10001", "10011", "10001", "11111"])
DOORED = make_grid(["11111", "10001", "10031", "10001", "11111"])


def test_raw_key_codes():
    controls = Controls()
    controls.press(13)
    controls.press(123)
    controls.press(124)
    assert controls.forward is True
    assert controls.turn_left is True
    assert controls.turn_right is True
    assert controls.release(53) is True


def test_press_and_release_forward():
    controls = Controls()
    assert controls.press(Key.W) is False
    assert controls.forward is True
    assert controls.release(Key.W) is False
    assert controls.forward is False


@pytest.mark.parametrize(
    "key, attribute",
    [
        (Key.A, "strafe_left"),
        (Key.S, "backward"),
        (Key.D, "strafe_right"),
        (Key.LEFT, "turn_left"),
        (Key.RIGHT, "turn_right"),
        (Key.F, "fire"),
    ],
)
def test_press_sets_flag(key, attribute):
    controls = Controls()
    controls.press(int(key))
    assert getattr(controls, attribute) is True
    controls.release(int(key))
    assert getattr(controls, attribute) is False


def test_space_requests_door_toggle():
    controls = Controls()
    assert controls.press(Key.SPACE) is True
    assert controls == Controls()


def test_escape_release_requests_quit():
    assert Controls().release(Key.ESCAPE) is True


def test_unknown_key_ignored():
    controls = Controls()
    assert controls.press(999) is False
    assert controls.release(999) is False
    assert controls == Controls()


def test_turn_right_then_left_restores_angle():
    player = Player(2.0, 2.0, 1.0)
    player.turn(Controls(turn_right=True))
    assert player.angle == pytest.approx(1.0 + SPEED)
    player.turn(Controls(turn_left=True))
    assert player.angle == pytest.approx(1.0)


def test_turn_left_wraps_near_zero():
    player = Player(2.0, 2.0, 0.05)
    player.turn(Controls(turn_left=True))
    assert player.angle == pytest.approx(6.14)


def test_turn_right_past_full_turn_resets():
    player = Player(2.0, 2.0, 6.2)
    player.turn(Controls(turn_right=True))
    assert player.angle == 0.0


def test_can_move_in_open_space():
    player = Player(2.0, 2.0, 0.0)
    assert player.can_move(Controls(forward=True), OPEN) is True


def test_can_move_blocked_by_wall():
    player = Player(2.4, 2.0, 0.0)
    assert player.can_move(Controls(forward=True), WALLED) is False


def test_open_door_passable_only_in_bonus():
    player = Player(2.4, 2.0, 0.0)
    controls = Controls(forward=True)
    assert player.can_move(controls, DOORED, bonus=True) is True
    assert player.can_move(controls, DOORED, bonus=False) is False


def test_update_moves_forward():
    player = Player(2.0, 2.0, 0.0)
    player.update(Controls(forward=True), OPEN)
    assert player.x == pytest.approx(2.0 + SPEED)
    assert player.y == pytest.approx(2.0)


def test_update_forward_then_backward_returns():
    player = Player(2.0, 2.0, 0.7)
    player.update(Controls(forward=True), OPEN)
    player.update(Controls(backward=True), OPEN)
    assert player.x == pytest.approx(2.0)
    assert player.y == pytest.approx(2.0)


def test_update_blocked_keeps_position():
    player = Player(2.4, 2.0, 0.0)
    player.update(Controls(forward=True), WALLED)
    assert (player.x, player.y) == (2.4, 2.0)


def test_strafe_moves_perpendicular():
    player = Player(2.0, 2.0, 0.0)
    player.update(Controls(strafe_right=True), OPEN)
    assert player.x == pytest.approx(2.0)
    assert player.y == pytest.approx(2.0 + SPEED)


def test_mouse_look_turns_right_and_left():
    player = Player(2.0, 2.0, 1.0)
    look = MouseLook()
    assert look.move(player, 100, 100) is True
    assert player.angle == pytest.approx(1.0 + SPEED)
    assert look.move(player, 50, 100) is True
    assert player.angle == pytest.approx(1.0)


def test_mouse_look_ignores_outside_and_still():
    player = Player(2.0, 2.0, 1.0)
    look = MouseLook()
    assert look.move(player, -5, 10) is False
    assert look.move(player, 0, 10) is False
    assert player.angle == 1.0


def test_toggle_doors_round_trip():
    grid = make_grid(["11111", "10201", "10001", "11111"])
    px = 1 * TILE + TILE / 2
    py = 1 * TILE + TILE / 2
    toggle_doors(grid, px, py)
    assert grid[1][2] == "3"
    toggle_doors(grid, px, py)
    assert grid[1][2] == "2"


def test_toggle_doors_all_sides():
    grid = make_grid(["11211", "12021", "11211"])
    px = 2 * TILE + TILE / 2
    py = 1 * TILE + TILE / 2
    toggle_doors(grid, px, py)
    assert [grid[0][2], grid[2][2], grid[1][1], grid[1][3]] == ["3"] * 4
    assert grid[1][2] == "0"


def test_movement_preserves_finite_state():
    player = Player(2.0, 2.0, math.pi / 3)
    controls = Controls(forward=True, turn_right=True)
    for _ in range(20):
        player.update(controls, OPEN)
    assert 0 < player.x < 5 and 0 < player.y < 5
    assert math.isfinite(player.angle)