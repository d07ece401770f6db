"""A drawable piece of a sprite sheet placed on the screen."""

from __future__ import annotations

from dataclasses import dataclass

from tilecraft.config import ImageType


@dataclass
class Image:
    """Screen position, sprite-sheet region and animation state of one image."""

    x: int
    y: int
    width: int
    height: int
    layer: int
    animated: bool
    flipped: bool
    is_static: bool
    current_frame: int
    total_frames: int
    sprite_x: int
    sprite_y: int
    file_name: str

    @classmethod
    def from_type(cls, x: int, y: int, image_type: ImageType) -> "Image":
        """Create an image at (x, y) from a template."""
        return cls(
            x=x,
            y=y,
            width=image_type.width,
            height=image_type.height,
            layer=image_type.layer,
            animated=image_type.animated,
            flipped=image_type.flipped,
            is_static=image_type.is_static,
            current_frame=image_type.current_frame,
            total_frames=image_type.total_frames,
            sprite_x=image_type.sprite_x,
            sprite_y=image_type.sprite_y,
            file_name=image_type.file_name,
        )