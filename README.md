# tilecraft

A small engine for a tile-based strategy game, built on pygame.

- `tilecraft.config`: screen size (1200×960), level size (2400×1920), tile size (32×32), the `TileType` and `Layer` enums, and the `ImageType` templates. `image_type_for(tile_type)` returns the template for a tile type and raises `ValueError` for an unknown one.
- `tilecraft.image.Image`: a region of a sprite sheet placed on screen, with layer, flipping, a static flag (unaffected by the camera) and frame animation. `Image.from_type(x, y, image_type)` builds one from a template.
- `tilecraft.tile.Tile`: a grid cell holding an `Image` and `blocking` / `special` flags.
- `tilecraft.world.World`: splits `width × height` pixels into whole 32×32 tiles, each with the default terrain image. `columns()`, `rows()` and `tile_images()` (row by row) describe the grid.
- `tilecraft.texture_manager`: `TextureManager` loads each image's sprite sheet, computes `source_rect(image)` and `dest_rect(image)` (subtracting the camera offset for images that are not static), blits the region (flipped horizontally if asked) and advances animated images with `next_frame(current_frame, total_frames)`, which wraps back to 1 when the next frame would equal `total_frames`. After one animated draw an image's `animated` flag is cleared.
- `tilecraft.game`: `Game` clears the screen, draws its images and shows one frame per `step`; `run()` opens the window and loops.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running the game

```
tilecraft
tilecraft --frames 10 --delay 0.5
```

This opens a 1200×960 window titled "LEVEL 1" and draws the default images once per frame, printing `frame N` for each. `--frames` stops after that many frames (by default it runs until the window is closed); `--delay` sets the seconds between frames (default 1.0). When the loop ends it prints `Game loop initiated`.

## Using it as a library

```python
from tilecraft.world import World
from tilecraft.texture_manager import TextureManager, next_frame

world = World(320, 64)
print(world.columns(), world.rows())  # 10 2
images = world.tile_images()          # one Image per tile, row by row

print(next_frame(1, 2))               # 1: frames wrap back to 1
```

`TextureManager` takes an optional loader, a callable from file name to pygame surface; it defaults to `pygame.image.load`:

```python
import pygame
from tilecraft.texture_manager import TextureManager

manager = TextureManager()
manager.draw(screen, images)
```

A `Game` can be stepped onto any surface without opening a window:

```python
from tilecraft.game import Game

game = Game(images, frame_delay=0, max_frames=1)
game.step(surface)
```

## What it does not do

- No image files are included. The default images and the terrain template refer to `assets/daemon.png`, `assets/micke_door.png` and `assets/terrain.png`, relative to the working directory; they must be supplied for drawing to work.
- The camera never moves, and the only input handled is closing the window.
- The game loop draws only its image list; a `World`'s tiles are not drawn unless you pass `world.tile_images()` yourself. Layers are stored but not used for ordering.