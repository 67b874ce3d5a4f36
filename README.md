# wolfcast

wolfcast is a small raycasting engine for first-person games set in a
grid-based maze. It reads a plain-text map, casts one ray per screen column to
find the nearest wall, and draws textured walls, floor, ceiling, a weapon
sprite and a crosshair into an in-memory image.

It uses only the standard library. You pass it key presses and it gives you
pixel data back.

## Map files

A map is a text file with one row of the maze on each line. Cells are
separated by whitespace, and each cell is an integer obstacle code: `0` is
free floor and anything else blocks rays. The player is stopped only by cells
whose code is `1`. The starting cell is written as `a` followed by the angle
the player faces, in degrees (0 faces east, 90 faces north), and counts as
free floor:

```
1 1 1 1 1 1
1 0 0 0 0 1
1 0 1 1 0 1
1 a90 0 0 0 1
1 1 1 1 1 1
```

The map is as wide as its widest row. Shorter rows are padded with free
cells. The player starts in the middle of the marked cell. `load_map` raises
`MapError` if the file cannot be opened or is a directory, and `parse_map`
raises it if the wall size is below 1.

## Usage

```python
from wolfcast.controls import Key
from wolfcast.engine import Game, compass_heading
from wolfcast.mapfile import MapError, load_map
from wolfcast.render import Image, Texture

try:
    game_map = load_map("level.map", 64)
except MapError as exc:
    raise SystemExit(f"cannot load map: {exc}")

# Textures are raw 4-byte pixels in blue, green, red, padding order.
wall = Texture(64, 64, bytes([200, 120, 40, 0]) * (64 * 64))
aimed = Texture(32, 32, bytes([0, 0, 0, 0]) * (32 * 32))
held = Texture(32, 32, bytes([0, 0, 0, 0]) * (32 * 32))

game = Game(game_map, [wall, aimed, held], Image(320, 200))
game.keys.press(Key.UP)
image = game.frame()              # apply held keys, then redraw
print(image.pixel(160, 100))      # (blue, green, red)
for x, y, color, text in game.overlay():
    print(x, y, hex(color), text)

print(compass_heading(90.0))      # "North"
```

The modules are:

- `wolfcast.mapfile`: `load_map` and `parse_map` build a `GameMap` of `Cell`
  objects. `GameMap.blocked` tells whether a cell holds an obstacle or lies
  off the grid, `GameMap.scale` multiplies cell coordinates by the wall size,
  and `count_columns` counts the tokens on a map line.
- `wolfcast.geometry`: `Point`, `deg_to_rad`, `cell_of` and `step_increment`,
  the grid arithmetic that the ray caster uses.
- `wolfcast.raycast`: `cast_ray` follows a ray across horizontal and vertical
  grid lines and returns the nearer wall as a `Hit` (distance, point, side).
- `wolfcast.player`: `Player.move` steps in a `Direction` (forward covers the
  full run distance, back and sideways half of it). Each axis moves only if it
  does not enter a wall cell, so the player slides along walls.
- `wolfcast.controls`: `InputState.press` and `InputState.release` track which
  `Key` is held. Pressing a key clears its opposite. Releasing `Key.ESCAPE`
  raises `QuitRequested`.
- `wolfcast.render`: `render_view` draws a whole frame into an `Image` from
  the wall, aimed-weapon and held-weapon `Texture` objects. `draw_floor_ceiling`,
  `draw_column`, `draw_weapon` and `draw_crosshair` draw the separate parts, and
  `Image.pixel` and `Image.clear` read and reset the buffer. The weapon sprite
  uses the blue byte of its first pixel as the transparent key.
- `wolfcast.engine`: `Game` ties everything together. `Game.update` applies the
  held keys. `Game.frame` calls it, clears the image and redraws it. The
  crosshair is drawn only when not aiming. `Game.overlay` returns the text
  labels as `(x, y, color, text)`: controls help, position, angle and the
  `compass_heading`.
- `wolfcast.textutil`: small text helpers (`atoi`, `itoa`, `int_len`,
  character-class tests, `compare_strings`, `compare_bytes`, `contains_char`,
  `contains_in_order`, `sort_words`, `sort_words_desc`, `prefix_before`).

## Controls

Each tick, the movement keys walk forward, back, left and right. The turn
keys rotate the view by 3.5 degrees, and the look keys move the horizon row
(`Game.mid`) by 50 pixels, kept between 51 and the image height minus 2.
Holding the run key raises the speed from 4 to 8.5 units per tick. Holding
the aim key narrows the field of view from 60 to 40 degrees, draws walls 1.5
times taller and shows the aimed weapon. While the forward key is held, the
held weapon bobs.

## What it does not do

wolfcast does not open a window, read the keyboard or draw text. It has no
command-line program. It does not load image files either: the caller builds
the `Texture` objects from raw bytes, turns its own key events into `Key`
values, shows the `Image` data and draws the `Game.overlay` labels.

## Running the tests

Install the `test` extra and run `pytest` from the project root.