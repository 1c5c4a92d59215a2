"""The game's entry point: opens a window and draws a textured cube."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence

import pygame

from arcomcraft.gfx import Window
from arcomcraft.gfx3d import Renderer3D
from arcomcraft.input import InputState, init_input
from arcomcraft.texture import TextureAtlas, TextureError, tile_coords

WIDTH, HEIGHT = 800, 600
DEFAULT_ATLAS = os.path.join("assets", "textures", "texture.png")


def run(max_frames: Optional[int] = None, atlas_path=DEFAULT_ATLAS) -> int:
    """Run the game loop until quit or ``max_frames`` frames; return frames drawn."""
    frames = 0
    with Window(WIDTH, HEIGHT, "ArComCraft 3D") as window:
        renderer = Renderer3D(window.surface, WIDTH, HEIGHT)
        init_input()
        try:
            atlas: Optional[TextureAtlas] = TextureAtlas.load(atlas_path)
        except TextureError as exc:
            print(exc, file=sys.stderr)
            atlas = None
        coords = atlas.coords(0, 0) if atlas is not None else tile_coords(0, 0)

        state = InputState()
        while max_frames is None or frames < max_frames:
            for event in pygame.event.get():
                state.handle_event(event)
            state.update(pygame.key.get_pressed())
            if state.quit:
                break
            renderer.clear()
            renderer.look_at((0.0, 1.5, 5.0), (0.0, 0.0, 0.0), (0.0, 1.0, 0.0))
            renderer.draw_cube(0, 0, 0, atlas, *coords)
            window.present()
            frames += 1
    return frames


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="arcomcraft")
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--atlas", default=DEFAULT_ATLAS)
    args = parser.parse_args(argv)
    run(max_frames=args.frames, atlas_path=args.atlas)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())