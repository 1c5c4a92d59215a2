"""Keyboard and mouse state for moving the player."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Optional

import pygame

_MOVEMENT_KEYS = {
    "forward": pygame.K_w,
    "backward": pygame.K_s,
    "left": pygame.K_a,
    "right": pygame.K_d,
    "up": pygame.K_SPACE,
    "down": pygame.K_LSHIFT,
}


def _is_down(pressed: Any, key: int) -> bool:
    try:
        return bool(pressed[key])
    except (KeyError, IndexError):
        return False


@dataclass
class InputState:
    """Which movement keys are held, the last mouse motion and whether to quit."""

    forward: bool = False
    backward: bool = False
    left: bool = False
    right: bool = False
    up: bool = False
    down: bool = False
    mouse_x: int = 0
    mouse_y: int = 0
    quit: bool = False

    def update(self, pressed: Optional[Sequence[bool]] = None) -> None:
        """Refresh the movement flags from ``pressed`` (the keyboard by default)."""
        keys = pygame.key.get_pressed() if pressed is None else pressed
        for name, key in _MOVEMENT_KEYS.items():
            setattr(self, name, _is_down(keys, key))

    def handle_event(self, event: pygame.event.Event) -> None:
        """Record mouse motion and quit requests from one event."""
        if event.type == pygame.MOUSEMOTION:
            self.mouse_x, self.mouse_y = getattr(event, "rel", (0, 0))
        elif event.type == pygame.QUIT:
            self.quit = True
        elif event.type == pygame.KEYDOWN and getattr(event, "key", None) == pygame.K_ESCAPE:
            self.quit = True


def init_input() -> None:
    """Capture the mouse so that motion is reported relative to the window."""
    pygame.mouse.set_visible(False)
    pygame.event.set_grab(True)