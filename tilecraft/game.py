"""The game window and its frame loop."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

import pygame

from tilecraft.config import ASSETS_DIR, SCREEN_HEIGHT, SCREEN_WIDTH
from tilecraft.image import Image
from tilecraft.texture_manager import TextureManager

WINDOW_TITLE = "LEVEL 1"
INITIAL_CLEAR_COLOR = (0xFF, 0x00, 0x00, 0xDD)
BACKGROUND_COLOR = (255, 255, 255, 255)


def default_images() -> list[Image]:
    """The images shown on the first level."""
    return [
        Image(0, 0, 32, 32, 1, False, False, False, 1, 1, 200, 8, f"{ASSETS_DIR}/daemon.png"),
        Image(100, 100, 380, 380, 1, False, False, False, 1, 1, 0, 0, f"{ASSETS_DIR}/micke_door.png"),
    ]


class Game:
    """Runs the draw loop over a list of images."""

    def __init__(
        self,
        images: Sequence[Image] | None = None,
        frame_delay: float = 1.0,
        max_frames: int | None = None,
    ) -> None:
        self.images = list(default_images() if images is None else images)
        self.frame_delay = frame_delay
        self.max_frames = max_frames
        self.texture_manager = TextureManager()
        self.current_frame = 0
        self.running = True
        self.clear_color = INITIAL_CLEAR_COLOR

    def step(self, surface: pygame.Surface) -> None:
        """Render one frame onto surface."""
        print(f"frame {self.current_frame}")
        self.current_frame += 1
        surface.fill(self.clear_color)
        self.clear_color = BACKGROUND_COLOR
        self.texture_manager.draw(surface, self.images)

    def _should_continue(self) -> bool:
        if not self.running:
            return False
        return self.max_frames is None or self.current_frame < self.max_frames

    def run(self) -> None:
        """Open the window and draw frames until closed or max_frames is reached."""
        pygame.init()
        try:
            try:
                screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
            except pygame.error as exc:
                raise RuntimeError("Window failed to load") from exc
            pygame.display.set_caption(WINDOW_TITLE)
            while self._should_continue():
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                if not self.running:
                    break
                self.step(screen)
                pygame.display.flip()
                if self.frame_delay > 0:
                    time.sleep(self.frame_delay)
            print("Game loop initiated")
        finally:
            pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    parser = argparse.ArgumentParser(description="Run the tile game.")
    parser.add_argument("--frames", type=int, default=None, help="stop after this many frames")
    parser.add_argument("--delay", type=float, default=1.0, help="seconds between frames")
    args = parser.parse_args(argv)
    Game(default_images(), args.delay, args.frames).run()
    return 0