"""A 2D game window: creation, clearing, presenting and loading textures."""

from __future__ import annotations

import os
from types import TracebackType
from typing import Optional

import pygame

DEFAULT_TITLE = "ArCom Creative+"
BACKGROUND = (50, 50, 50)
"""Dark grey background used by :meth:`Window.clear`."""


class GfxError(Exception):
    """Raised when the window or a texture cannot be set up."""


class Window:
    """A display window with a drawing surface."""

    def __init__(self, width: int, height: int, title: str = DEFAULT_TITLE) -> None:
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise GfxError(f"SDL_Init Error: {exc}") from exc
        try:
            self.surface = pygame.display.set_mode((width, height))
        except (pygame.error, ValueError) as exc:
            pygame.display.quit()
            raise GfxError(f"SDL_CreateWindow Error: {exc}") from exc
        if not pygame.image.get_extended():
            pygame.display.quit()
            raise GfxError("IMG_Init Error: PNG images are not supported")
        pygame.display.set_caption(title)
        self.width = width
        self.height = height
        self._open = True

    def clear(self) -> None:
        """Fill the window with the background colour."""
        self.surface.fill(BACKGROUND)

    def present(self) -> None:
        """Show what has been drawn."""
        pygame.display.flip()

    def load_texture(self, path: str | os.PathLike[str]) -> pygame.Surface:
        """Load the image at ``path`` as a surface suited to this window."""
        try:
            image = pygame.image.load(os.fspath(path))
        except (pygame.error, OSError) as exc:
            raise GfxError(f"IMG_Load Error: {exc}") from exc
        try:
            return image.convert_alpha()
        except pygame.error as exc:
            raise GfxError(f"SDL_CreateTextureFromSurface Error: {exc}") from exc

    def shutdown(self) -> None:
        """Close the window."""
        if self._open:
            self._open = False
            pygame.display.quit()

    def __enter__(self) -> Window:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.shutdown()