"""Game state: running flag, play mode and the world it drives."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO


class GameMode(IntEnum):
    NORMAL = 0
    CREATIVE = 1


@dataclass
class World:
    """The game world; counts the updates it has received."""

    ticks: int = 0

    def init(self) -> None:
        self.ticks = 0

    def update(self) -> None:
        self.ticks += 1


class Game:
    """The game engine: whether it runs, in which mode, and its world."""

    def __init__(self, out: TextIO | None = None) -> None:
        self._out = out
        self.running = True
        self.mode: int = GameMode.NORMAL
        self.world = World()
        self.frames_rendered = 0

    def _say(self, message: str) -> None:
        print(message, file=self._out or sys.stdout)

    def init(self) -> bool:
        self.mode = GameMode.NORMAL
        self.running = True
        self.world.init()
        self.frames_rendered = 0
        self._say("Motor del joc inicialitzat.")
        return True

    def set_mode(self, mode: int) -> None:
        self.mode = GameMode(mode) if mode in GameMode._value2member_map_ else mode
        if self.mode == GameMode.CREATIVE:
            self._say("Mode Creative+ activat!")

    def update(self) -> None:
        self.world.update()

    def render(self) -> None:
        self.frames_rendered += 1

    def shutdown(self) -> None:
        self._say("Motor del joc aturat.")
        self.running = False