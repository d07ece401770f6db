"""Draws images onto a surface, applying camera offset, flipping and animation."""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pygame

from tilecraft.config import LEVEL_HEIGHT, LEVEL_WIDTH, SCREEN_HEIGHT, SCREEN_WIDTH
from tilecraft.image import Image


def next_frame(current_frame: int, total_frames: int) -> int:
    """Frame that follows current_frame; wraps back to 1 at total_frames."""
    following = current_frame + 1
    return 1 if following == total_frames else following


class TextureManager:
    """Loads sprite sheets and blits the right region of each image."""

    def __init__(self, loader: Callable[[str], pygame.Surface] | None = None) -> None:
        self.loader = loader if loader is not None else pygame.image.load
        self.camera_x = 0
        self.camera_y = 0
        self.level_width = LEVEL_WIDTH
        self.level_height = LEVEL_HEIGHT
        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT

    def source_rect(self, image: Image) -> pygame.Rect:
        """Region of the sprite sheet to draw for the image's current frame."""
        x = image.sprite_x
        if image.animated:
            x += image.current_frame * image.width
        return pygame.Rect(x, image.sprite_y, image.width, image.height)

    def dest_rect(self, image: Image) -> pygame.Rect:
        """Screen region the image lands on; static images ignore the camera."""
        if image.is_static:
            x, y = image.x, image.y
        else:
            x, y = image.x - self.camera_x, image.y - self.camera_y
        return pygame.Rect(x, y, image.width, image.height)

    def draw(self, surface: pygame.Surface, images: Iterable[Image]) -> None:
        """Draw every image and advance the frame of animated ones."""
        for image in images:
            texture = self.loader(image.file_name)
            area = self.source_rect(image)
            region = pygame.Surface(area.size, pygame.SRCALPHA)
            region.blit(texture, (0, 0), area)
            if image.flipped:
                region = pygame.transform.flip(region, True, False)
            surface.blit(region, self.dest_rect(image))

            if image.animated:
                image.current_frame = next_frame(image.current_frame, image.total_frames)
                image.animated = False