"""Cube geometry as lists of quads, ready for a renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Quad:
    """One face: four corners in drawing order, with a grey shade or UVs."""

    face: str
    vertices: tuple
    color: Optional[tuple] = None
    uvs: Optional[tuple] = None


_SHADED_FACES = (
    ("front", 0.6, ((0, 0, 0), (1, 0, 0), (1, 1, 0), (0, 1, 0))),
    ("back", 0.5, ((0, 0, -1), (1, 0, -1), (1, 1, -1), (0, 1, -1))),
    ("left", 0.7, ((0, 0, 0), (0, 0, -1), (0, 1, -1), (0, 1, 0))),
    ("right", 0.4, ((1, 0, 0), (1, 0, -1), (1, 1, -1), (1, 1, 0))),
    ("top", 0.8, ((0, 1, 0), (1, 1, 0), (1, 1, -1), (0, 1, -1))),
    ("bottom", 0.3, ((0, 0, 0), (1, 0, 0), (1, 0, -1), (0, 0, -1))),
)


def shaded_cube(x: float, y: float, z: float, size: float) -> list[Quad]:
    """Return the six grey-shaded faces of a cube with its front corner at (x, y, z)."""
    return [
        Quad(
            name,
            tuple((x + cx * size, y + cy * size, z + cz * size) for cx, cy, cz in corners),
            color=(shade, shade, shade),
        )
        for name, shade, corners in _SHADED_FACES
    ]


def textured_cube(x, y, z, u1, v1, u2, v2) -> list[Quad]:
    """Return the textured front and back faces of a unit cube centred on (x, y, z)."""
    corners = ((-0.5, -0.5), (0.5, -0.5), (0.5, 0.5), (-0.5, 0.5))
    uvs = ((u1, v2), (u2, v2), (u2, v1), (u1, v1))
    return [
        Quad(name, tuple((x + cx, y + cy, z + dz) for cx, cy in corners), uvs=uvs)
        for name, dz in (("front", 0.5), ("back", -0.5))
    ]