"""Tile-based strategy game engine on pygame: sprite images, tile worlds and a render loop."""

__version__ = "0.1.0"
__all__ = ["config", "image", "tile", "world", "texture_manager", "game"]