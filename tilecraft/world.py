"""The tile grid of a level."""

from __future__ import annotations

from tilecraft.config import TILE_HEIGHT, TILE_WIDTH, TileType, image_type_for
from tilecraft.image import Image
from tilecraft.tile import Tile


class World:
    """A rectangular grid of default tiles covering width x height pixels."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        self.name = "Swamp World"
        template = image_type_for(TileType.DEFAULT)
        self.tiles: list[list[Tile]] = [
            [
                Tile(Image.from_type(x, y, template), TILE_WIDTH, TILE_HEIGHT, x, y)
                for x in range(self.columns())
            ]
            for y in range(self.rows())
        ]

    def columns(self) -> int:
        """Number of whole tiles across."""
        return self.width // TILE_WIDTH

    def rows(self) -> int:
        """Number of whole tiles down."""
        return self.height // TILE_HEIGHT

    def tile_images(self) -> list[Image]:
        """Images of all tiles, row by row."""
        return [tile.image for row in self.tiles for tile in row]