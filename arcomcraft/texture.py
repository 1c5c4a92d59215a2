"""Texture atlas loading and per-tile UV coordinates."""

from __future__ import annotations

import logging
import os

import pygame

ATLAS_SIZE = 256
"""Default width and height of the atlas image, in pixels."""
TILE_SIZE = 16
"""Default width and height of one tile in the atlas, in pixels."""

log = logging.getLogger(__name__)


class TextureError(Exception):
    """Raised when a texture atlas cannot be loaded."""


def tile_coords(
    tile_x: int,
    tile_y: int,
    tile_size: int = TILE_SIZE,
    atlas_size: int = ATLAS_SIZE,
) -> tuple[float, float, float, float]:
    """Return ``(u1, v1, u2, v2)`` for the tile at column ``tile_x``, row ``tile_y``."""
    if atlas_size <= 0:
        raise ValueError("atlas_size must be positive")
    step = tile_size / atlas_size
    u1 = tile_x * step
    v1 = tile_y * step
    return u1, v1, u1 + step, v1 + step


class TextureAtlas:
    """One image holding many block tiles laid out on a grid."""

    def __init__(
        self,
        surface: pygame.Surface,
        atlas_size: int = ATLAS_SIZE,
        tile_size: int = TILE_SIZE,
    ) -> None:
        if atlas_size <= 0 or tile_size <= 0:
            raise ValueError("atlas_size and tile_size must be positive")
        self.surface = surface
        self.atlas_size = atlas_size
        self.tile_size = tile_size

    @classmethod
    def load(
        cls,
        path: str | os.PathLike[str],
        atlas_size: int = ATLAS_SIZE,
        tile_size: int = TILE_SIZE,
    ) -> TextureAtlas:
        """Load the atlas image at ``path``."""
        try:
            surface = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise TextureError(f"Error carregant textura atlas: {exc}") from exc
        log.info("Atlas carregat: %s", path)
        return cls(surface, atlas_size, tile_size)

    def coords(self, tile_x: int, tile_y: int) -> tuple[float, float, float, float]:
        """Return ``(u1, v1, u2, v2)`` for a tile of this atlas."""
        return tile_coords(tile_x, tile_y, self.tile_size, self.atlas_size)