"""Text menu that lets the player pick a game mode."""

from __future__ import annotations

import re
import sys
from collections.abc import Callable
from typing import TextIO

from arcomcraft.game import Game, GameMode

MENU_TEXT = (
    "\n=== ArCom Corporation ===\n1. Creative+ Mode\n2. Exit\n"
    "------------------------\nTria una opcio: "
)


def show_menu(
    game: Game,
    read_line: Callable[[], str] | None = None,
    out: TextIO | None = None,
) -> None:
    """Show the menu until the player exits or input ends (empty line read)."""
    reader = read_line or sys.stdin.readline
    stream = out or sys.stdout
    while True:
        stream.write(MENU_TEXT)
        stream.flush()
        line = reader()
        if not line:
            return
        match = re.match(r"\s*([+-]?\d+)", line)
        choice = int(match.group(1)) if match else None
        if choice == 1:
            stream.write("Entrant al mode Creative+...\n")
            game.set_mode(GameMode.CREATIVE)
        elif choice == 2:
            return
        else:
            stream.write("Opcio invalida.\n")
            if choice == 3:
                return