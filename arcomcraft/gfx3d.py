"""A small software 3D renderer: a perspective camera and textured cubes."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import Optional

import pygame
from pygame.math import Vector3

from arcomcraft.geometry import textured_cube
from arcomcraft.texture import TextureAtlas

SKY_COLOR = (0.2, 0.3, 0.5)
UNTEXTURED_COLOR = (255, 255, 255)


@dataclass
class Camera:
    """A perspective camera looking from ``eye`` towards ``target``."""

    width: int = 800
    height: int = 600
    eye: tuple = (0.0, 0.0, 0.0)
    target: tuple = (0.0, 0.0, -1.0)
    up: tuple = (0.0, 1.0, 0.0)
    fov: float = 70.0
    near: float = 0.1
    far: float = 100.0

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport width and height must be positive")
        self._basis()

    def _basis(self):
        forward = Vector3(self.target) - Vector3(self.eye)
        side = forward.cross(Vector3(self.up))
        if forward.length() == 0 or side.length() == 0:
            raise ValueError("camera needs a view direction not parallel to up")
        forward.normalize_ip()
        side.normalize_ip()
        return side, side.cross(forward), forward

    def project(self, point) -> Optional[tuple[float, float, float]]:
        """Return ``(screen_x, screen_y, depth)`` for ``point``, or None if clipped."""
        side, upward, forward = self._basis()
        rel = Vector3(point) - Vector3(self.eye)
        depth = rel.dot(forward)
        if not self.near <= depth <= self.far:
            return None
        focal = 1.0 / math.tan(math.radians(self.fov) / 2)
        ndc_x = focal * self.height / self.width * rel.dot(side) / depth
        ndc_y = focal * rel.dot(upward) / depth
        return ((ndc_x + 1) / 2 * self.width, (1 - ndc_y) / 2 * self.height, depth)


def _sample(atlas: Optional[TextureAtlas], quad) -> tuple[int, int, int]:
    if atlas is None or quad.uvs is None:
        return UNTEXTURED_COLOR
    u = sum(uv[0] for uv in quad.uvs) / len(quad.uvs)
    v = sum(uv[1] for uv in quad.uvs) / len(quad.uvs)
    width, height = atlas.surface.get_size()
    color = atlas.surface.get_at(
        (min(int(u % 1.0 * width), width - 1), min(int(v % 1.0 * height), height - 1))
    )
    return (color.r, color.g, color.b)


class Renderer3D:
    """Draws cubes onto a pygame surface through a perspective camera."""

    def __init__(self, surface: pygame.Surface, width: int, height: int) -> None:
        self.surface = surface
        self.camera = Camera(width=width, height=height)
        self.clear_color = tuple(round(c * 255) for c in SKY_COLOR)

    def clear(self) -> None:
        self.surface.fill(self.clear_color)

    def look_at(self, eye, target, up) -> None:
        self.camera = dataclasses.replace(
            self.camera, eye=tuple(eye), target=tuple(target), up=tuple(up)
        )

    def draw_cube(self, x, y, z, atlas: Optional[TextureAtlas], u1, v1, u2, v2) -> int:
        """Draw a unit cube centred on (x, y, z); return how many faces were drawn."""
        faces = []
        for quad in textured_cube(x, y, z, u1, v1, u2, v2):
            corners = [self.camera.project(vertex) for vertex in quad.vertices]
            if None not in corners:
                depth = sum(c[2] for c in corners) / len(corners)
                faces.append((depth, [c[:2] for c in corners], _sample(atlas, quad)))
        for _, points, color in sorted(faces, key=lambda f: f[0], reverse=True):
            pygame.draw.polygon(self.surface, color, points)
        return len(faces)