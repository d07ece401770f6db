"""A single cell of the world grid."""

from __future__ import annotations

from dataclasses import dataclass

from tilecraft.image import Image


@dataclass
class Tile:
    """A grid cell with its image and terrain flags."""

    image: Image
    width: int
    height: int
    x: int
    y: int
    blocking: bool = False
    special: bool = False