# foxescape

An early prototype of a side-scrolling platformer about a fox, built on
pygame. It opens a fullscreen, borderless window. The scene is drawn on a
fixed virtual screen of 32 × 16 tiles, each 32 pixels square. That screen is
then scaled to fit the display, centred with black letterboxing.

## Installing

```
pip install .
```

This installs pygame as a dependency.

## Playing

```
foxescape
```

Options:

- `--assets DIR`: the directory to load images from. The default is
  `assets`, relative to the current working directory.

The game tries to load `fox.png` and `back.png` from that directory. If an
image cannot be loaded, a warning is logged and the game runs without it.
The current scene does not draw either image.

Controls:

| Key    | Action     |
|--------|------------|
| A      | move left  |
| D      | move right |
| Space  | jump       |

Close the window to quit.

## What is on screen

- A red outline grid of the 32 × 16 tiles.
- The fox, drawn as a filled pink rectangle that is 4 tiles wide and
  2 tiles tall. It starts at the top left, falls under gravity and lands on
  a floor at 13 tiles down. It can walk left and right and can jump while it
  is on the floor.

## What it does not do yet

- There are no sprites. The player has no animations registered, and
  neither the fox image nor the level image is drawn.
- The level has a tile map, but no tile counts as solid. The fox stands on a
  fixed floor line and does not collide with tiles.
- There is no scrolling, and there are no enemies, goals, scores or menus.

## Using it as a library

- `foxescape.constants` holds the tile size and the size of the virtual
  screen, in tiles and in pixels.
- `foxescape.animation.Animation` is a frozen dataclass that describes one
  row of a sprite sheet. `frame_rect(n)` returns the source rectangle
  `(x, y, width, height)` of frame `n`, and `frame_count()` returns the
  number of frames.
- `foxescape.entity.Rect` holds a position and a size.
- `foxescape.entity.Entity` is the abstract base class for objects on
  screen. `add_animation()` registers a named animation.
  `update_animation_frame(ms)` moves to the next frame once 100 ms have
  built up, wrapping around at the end. `render(surface)` blits the current
  frame from the entity's texture, scaled to the entity's size and flipped if
  asked. Subclasses implement `update(delta_time, level)`.
- `foxescape.player.Player` is the fox.
  `update(delta_time, level, keys=None)` applies input, gravity and the
  floor for the elapsed milliseconds. `keys` is indexed by pygame key
  constants; when it is left out, the current keyboard state is read.
  `render(surface)` draws the filled rectangle.
- `foxescape.level.Level` holds the tile map: two rows of block 1, then one
  row of block 2. `add_rows(rows, block)` appends more rows. `render(surface)`
  draws the grid, and `update(ms)` advances the level's elapsed-time counter.
  `is_solid_at_pixel(x, y)` looks up the tile under a pixel and currently
  always returns `False`.
- `foxescape.resources.ResourceManager` loads images with pygame and caches
  them by path. `load_texture(path)` returns the surface, or `None` if the
  image cannot be loaded. `clear()` empties the cache. It supports `len()`
  and `in`.
- `foxescape.game.letterbox(width, height)` returns
  `(offset_x, offset_y, width, height)`, the area where the virtual screen
  lands in a window of the given size.
- `foxescape.game.Game(title, assets_dir)` opens the window and runs the
  loop with `run()`. It can be used as a context manager, which calls
  `close()` on exit. If the window cannot be created, it raises
  `RuntimeError`.

## Running the tests

```
pip install ".[test]"
pytest
```