# arcomcraft

A small block sandbox built on pygame. The `arcomcraft` command opens an
800×600 window and draws one textured cube with a small software 3D
renderer. The package also has a block registry, an inventory, a game state
with a creative mode, and a text menu, which can be used as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
arcomcraft [--frames N] [--atlas PATH]
```

- `--atlas PATH` is the texture atlas image. The default is
  `assets/textures/texture.png`, relative to the current directory. If the
  image cannot be loaded, an error goes to standard error and the cube is
  drawn in plain white.
- `--frames N` stops after `N` frames. Without it the loop runs until you
  quit.

The camera sits at (0, 1.5, 5) and looks at a cube at the origin. The cube's
faces are coloured from the first tile (0, 0) of the atlas. Press Escape or
close the window to quit.

While it runs, the mouse is hidden and grabbed by the window. Each frame
records the movement keys in an `InputState`: W/S for forward/backward,
A/D for left/right, Space for up and Left Shift for down. The last mouse
motion is recorded as well.

## Using the library

```python
from arcomcraft.blocks import BlockRegistry
from arcomcraft.inventory import Inventory
from arcomcraft.texture import tile_coords

registry = BlockRegistry()        # Air, Stone, Dirt, Grass (ids 0-3)
inventory = Inventory()
inventory.add_block(3, 5)
print("\n".join(inventory.lines(registry)))   # Grass x5

# UV rectangle of tile (1, 0) in a 256px atlas of 16px tiles
print(tile_coords(1, 0, 16, 256))             # (0.0625, 0.0, 0.125, 0.0625)
```

The modules are these:

- `arcomcraft.blocks` has `Block` and `BlockRegistry`. `get(block_id)`
  returns `None` for an unknown id.
- `arcomcraft.inventory` has `Inventory`. It keeps counts for ids
  0–255 and ignores other ids. `show(registry, out)` prints
  `Inventari:` followed by one line per block held.
- `arcomcraft.game` has `Game`, `GameMode` (`NORMAL`, `CREATIVE`) and
  `World`. `Game.set_mode(GameMode.CREATIVE)` announces the creative mode.
  `update()` advances the world's tick count, and `render()` counts the
  frames.
- `arcomcraft.menu.show_menu(game, read_line, out)` shows the text menu.
  Option 1 switches the game to creative mode, and option 2 exits. It also
  returns when input ends.
- `arcomcraft.texture` has `TextureAtlas` (`load`, `coords`), `tile_coords`
  and `TextureError`.
- `arcomcraft.geometry` builds cube faces as `Quad` values:
  `shaded_cube` gives six grey-shaded faces, and `textured_cube` gives the
  front and back faces with UVs.
- `arcomcraft.gfx3d` has `Camera` (`project`) and `Renderer3D` (`clear`,
  `look_at`, `draw_cube`).
- `arcomcraft.input` has `InputState` and `init_input`.
- `arcomcraft.gfx` has `Window`, a context manager with `clear`,
  `present`, `load_texture` and `shutdown`. It raises `GfxError` on
  failure.
- `arcomcraft.app` has `run(max_frames, atlas_path)` and `main(argv)`.

## What it does not do

The package is not a playable game. It has no world generation, and you
cannot place or break blocks. Movement keys and mouse motion are recorded
but do not move the camera. The renderer draws only the front and back faces
of the cube, each in one colour from its tile. The running window does not
use the menu, the inventory or the game state. Nothing is saved to disk.