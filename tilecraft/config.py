"""Screen, level and tile constants plus the catalogue of tile image types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

SCREEN_WIDTH = 1200
SCREEN_HEIGHT = 960
LEVEL_WIDTH = 2400
LEVEL_HEIGHT = 1920

TILE_WIDTH = 32
TILE_HEIGHT = 32

ASSETS_DIR = "assets"


class TileType(IntEnum):
    """Kinds of terrain tile."""

    DEFAULT = 0


class Layer(IntEnum):
    """Drawing layers."""

    BACKGROUND = 1


@dataclass(frozen=True)
class ImageType:
    """Template from which tile images are created."""

    width: int
    height: int
    layer: int
    current_frame: int
    total_frames: int
    sprite_x: int
    sprite_y: int
    file_name: str
    flipped: bool = False
    is_static: bool = False
    animated: bool = False


IMAGE_TYPES: dict[TileType, ImageType] = {
    TileType.DEFAULT: ImageType(
        width=TILE_WIDTH,
        height=TILE_HEIGHT,
        layer=Layer.BACKGROUND,
        current_frame=1,
        total_frames=1,
        sprite_x=67,
        sprite_y=199,
        file_name=f"{ASSETS_DIR}/terrain.png",
    ),
}


def image_type_for(tile_type: TileType | int) -> ImageType:
    """Return the image template for a tile type; ValueError if it is unknown."""
    return IMAGE_TYPES[TileType(tile_type)]