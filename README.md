# batcave

A compact top-down arcade shooter engine that keeps the whole game state
in plain Python objects: positions, speeds, collision, rooms, items, HUD
text and sprite display flags.

## What is in it

- `batcave.config` – screen and map geometry, tile indexes, palette slots
  and fixed-point helpers. Positions and speeds are fixed-point integers
  with 6 fractional bits: `fix16(2)` is `128`, and `fix16_to_int` converts
  back, rounding towards minus infinity. `clamp` limits a value to a range.
- `batcave.utils` – `Button` flags, `InputState` (current and previous
  joypad readings with `key_down`, `key_pressed`, `key_released`),
  `wrap`, `make_box`, `format_bits`, palette rotation
  (`rotate_colors`, `rotate_colors_left`, `rotate_colors_right`),
  `ColorGlow` for ping-pong colour cycling and `TextLine` for building
  comma-separated debug lines.
- `batcave.gameobject` – `GameObject` with a `BoundBox`, created from a
  `SpriteDefinition` with `GameObject.from_sprite`; `update_boundbox`,
  `clamp_screen`, `wrap_screen`, `bounce_off_screen`, `collides_with` and
  `sync_sprite`. `GameObjectPool` hands out objects with `alloc`, takes
  them back with `free` and lists them with `active`.
- `batcave.level` – `TileMap` (a grid of 16x16 metatile indexes) and
  `Level`, which holds one screen of the map, its collision map, wall
  checks (`wall_at`, `check_wall`), wall sliding (`move_and_slide`, with
  the sides hit in `collision_result` as `CollisionFlag`s), item removal
  (`remove_tile_xy`), room changes that remember collected items
  (`update_camera`, `scroll_and_update_collision`) and text dumps
  (`tilemap_dump`, `collision_map_text`).
- `batcave.background` – `ParallaxBackground`, one scroll offset per row of
  tiles; `update()` advances them and returns the integer offsets.
- `batcave.hud` – `Hud`, a text row with an energy bar (`update_health`)
  and a gem counter (`gem_collected`, wrapping at 256); `row(0)` returns
  the text.
- `batcave.player` – `Player`, with eight-way movement (`read_input_dir8`,
  used by `update`), alternative four-way and platformer controls, and up
  to eight bullets fired with the A button (`shoot`, `update_bullets`).
- `batcave.enemy` – `EnemySystem`, up to five bats that fly sideways,
  bounce at the screen edges and lose health when a bullet hits them.
- `batcave.game` – `Game`, which builds all of the above on a level and
  runs frames, and `demo_tilemap()`, a walled map with a few items.

## Install

```
pip install .
```

## Running

The `batcave` command runs the demo level for a number of frames with no
buttons held and prints the frame count, the player's health, the gems
collected and the number of live bats:

```
batcave --frames 120
```

`--frames` defaults to 60 and must not be negative.

## Using it from code

```python
from batcave.game import Game
from batcave.utils import Button

game = Game()
# one frame with right and fire held on joypad 1
game.update([Button.RIGHT | Button.A, 0])
print(game.player.obj.x, game.hud.row(0))
```

`Game.update` takes one reading per joypad (two by default).
`Game.run(frames)` advances several frames without input and returns the
total frame count. A `Game` can be built on any `TileMap` large enough to
hold the screens it visits.

## What it does not do

There is no display, sound or real gamepad. Sprites, the tile plane and
the HUD are kept as data (`Sprite` fields such as `x`, `y`, `visible`,
`hflip`, `anim`; `Level.plane`; `Hud.row`) for a front end to draw, and
input comes only from the readings passed to `Game.update`. The
`batcave` command is a headless run, not a playable game.

## Tests

```
pip install .[test]
pytest
```