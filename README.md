# hearbund

A small tile-map game prototype built on pygame. A 20 × 15 grid of 32-pixel
tiles is drawn in a 640 × 480 window, and you steer one 32 × 32 sprite around
it. Solid tiles block the sprite: movement is resolved on the X axis first and
then on the Y axis.

## Installing

```
pip install .
```

This installs `pygame`.

## Playing

```
hearbund
```

The game loads two images from the current working directory:
`Solider.png` (registered as the `testTexture` sprite sheet) and `tilemap.png`
(registered as `tilemap`). If the window cannot be opened or either image cannot
be loaded, the error is logged and the command exits with status 1.

| Key | Action     |
|-----|------------|
| A   | move left  |
| D   | move right |
| W   | move up    |
| S   | move down  |

Movement is 3 pixels per frame. When A and D are held together D wins; when W
and S are held together S wins. Close the window to quit; the command then
exits with status 0. The loop waits 16 ms between frames.

## What it does not do

There is no gravity, no jumping, no scoring, no menus and no saved state: the
sprite moves freely in four directions and only solid tiles stop it. The level
is fixed in code (a floor on row 12 and three single blocks) and cannot be
loaded from a file.

## Using the pieces

- `hearbund.tilemap`
  - `TileMap` holds the grid as `grid[x][y]`.
  - `TileMap.load()` builds the default level.
  - `TileMap.draw(surface)` draws each non-empty tile.
  - `TileMap.get_rects(x, y)` returns the top-left corners, as `Vector2D`, of the
    solid tiles in the 2 × 2 block of cells that starts at the cell holding
    `(x, y)`. The cells are scanned row by row, and cells outside the map count
    as empty.
- `hearbund.texture_manager`
  - `TextureManager.instance()` returns the shared texture store. Its methods
    are `load(filename, texture_id)`, `draw(...)`, `draw_frame(...)`,
    `get_texture(texture_id)` and `clean()`.
  - `load` raises `TextureError` if the image cannot be read.
  - Sprite-sheet rows and frames are counted from 1.
  - `FlipMode` selects mirroring when drawing.
- `hearbund.entity`
  - `LoaderParams` is the start position, size and texture id of an entity.
  - `PhysicsEntity` draws one frame of its sprite sheet at its position.
  - `Player.update(keys)` sets the velocity from a pressed-key mapping indexed
    by pygame key codes, then moves the player against its tile map. If `keys`
    is omitted, the live keyboard state is read.
- `hearbund.game`
  - `Game.instance()` returns the shared game. It has `init`, `handle_events`,
    `update`, `render` and `clean`.
  - `update` and `render` raise `GameError` before `init` has succeeded.
  - `main()` runs the game loop; it is what the `hearbund` command calls.

```python
from hearbund.tilemap import TileMap

level = TileMap()
level.load()
print(level.get_rects(96.0, 340.0))
```

## Running the tests

```
pip install .[test]
pytest
```