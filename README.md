# raycube

The game logic for a first-person maze explorer. The maze is described by a
`.cub` scene file. The package reads and checks scene files. It casts rays
through the map grid with the classic horizontal and vertical grid-line
method. It also keeps track of held keys, player movement, turning and doors.
It needs only the standard library.

## Installing

```
pip install .
```

The tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Scene files

A scene starts with six settings. Blank lines between them are allowed.

```
NO ./../texture/NO.xpm
SO ./../texture/SO.xpm
WE ./../texture/WE.xpm
EA ./../texture/EA.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE` and `EA` name the wall textures.
  - Each path must be one of `./../texture/NO.xpm`, `SO.xpm`, `WE.xpm` or `EA.xpm`.
  - The file must be readable relative to the `root` directory. When `root` is not given, the working directory is used.
  - Each setting may appear only once.
- `F` sets the floor colour and `C` sets the ceiling colour.
  - Each takes three comma-separated values from 0 to 255.

The map follows the settings:

```
111111
100101
1000N1
111111
```

- `1` is a wall and `0` is floor.
- `N`, `S`, `E` or `W` marks the player's start and the direction the player faces. There must be exactly one.
- Spaces, and tabs outside bonus mode, are outside the map. Every floor cell must be closed off from them.
- Shorter rows are padded to the width of the widest row.

In bonus mode, `2` marks a closed door and `3` an open one. A door must sit between walls on one axis. Bonus mode also needs these files under `./../texture/`: `DOOR.xpm` and the gun frames `1.xpm` to `5.xpm`.

A malformed scene raises `raycube.colors.SceneError`. It is a subclass of `ValueError`.

## Library use

```python
from raycube.parser import load_scene
from raycube.raycast import TILE, cast_ray

scene = load_scene("maps/level.cub", bonus=False, root="maps")
px = scene.player_col * TILE + TILE / 2
py = scene.player_row * TILE + TILE / 2
hit = cast_ray(scene.grid, px, py, scene.start_angle())
print(hit.distance, hit.horizontal, hit.texture_coordinate)
```

- `raycube.parser`
  - `load_scene(path, bonus, root)` reads a file and returns a `Scene`.
  - `parse_scene(lines, bonus, root)` does the same for lines already in memory.
  - A `Scene` holds:
    - the padded `grid`
    - the player's `player_col`, `player_row` and `direction`
    - the texture paths
    - the door and gun frame paths in bonus mode
  - `Scene` also has `start_angle()`, `ceiling_color()` and `floor_color()`. The two colour methods give `0xRRGGBB` values.
- `raycube.raycast`
  - `cast_ray(grid, px, py, angle, bonus)` returns the nearer of the horizontal and vertical hits as a `RayHit`. Positions are in pixels, with `TILE` pixels per cell.
  - `horizontal_hit`, `vertical_hit`, `probe`, `normalize_angle` and `distance` are also available.
- `raycube.player`
  - `Controls.press(key)` and `Controls.release(key)` record held keys.
    - Key codes are listed in the `Key` enum.
    - `press` returns `True` for Space, which asks for doors to be toggled.
    - `release` returns `True` for Escape, which asks to quit.
  - `Player.update(controls, grid, bonus)` moves the player when the way is free, then turns.
  - `MouseLook.move(player, x, y)` turns the player as the pointer moves sideways.
  - `toggle_doors(grid, px, py)` opens or closes the doors next to a pixel position.
- `raycube.reader`
  - `read_lines(path)` splits a scene file into lines.
  - `check_argument(argv)` accepts exactly one argument containing `.cub`.
- `raycube.colors`
  - `parse_color_line(line)` parses one `F` or `C` line.
  - `pack_rgb(rgb)` packs a colour into `0xRRGGBB`.

## What the package does not do

The package has no window, no drawing and no command to start a game:

- Nothing turns ray hits into textured wall columns, a minimap or a gun animation on screen.
- Nothing loads texture images; only their paths are checked.
- Nothing runs an event loop.

A program that wants to show the maze has to do the drawing and input
handling itself, using the pieces above.