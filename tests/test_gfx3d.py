import pygame
import pytest

from arcomcraft.gfx3d import Camera, Renderer3D
from arcomcraft.texture import TextureAtlas


def test_target_projects_to_screen_centre():
    camera = Camera(width=800, height=600, eye=(0, 1.5, 5), target=(0, 0, 0), up=(0, 1, 0))
    sx, sy, depth = camera.project((0, 0, 0))
    assert sx == pytest.approx(400)
    assert sy == pytest.approx(300)
    assert depth > 0


def test_point_behind_camera_is_clipped():
    camera = Camera()
    assert camera.project((0, 0, 5)) is None


def test_right_and_up_map_to_screen_directions():
    camera = Camera(width=100, height=100)
    right = camera.project((1, 0, -5))
    above = camera.project((0, 1, -5))
    assert right[0] > 50
    assert above[1] < 50


def test_degenerate_camera_rejected():
    with pytest.raises(ValueError):
        Camera(eye=(0, 0, 0), target=(0, 0, 0))
    with pytest.raises(ValueError):
        Camera(target=(0, 1, 0), up=(0, 1, 0))
    with pytest.raises(ValueError):
        Camera(width=10, height=0)


def test_clear_fills_with_clear_color():
    surface = pygame.Surface((40, 30))
    renderer = Renderer3D(surface, 40, 30)
    renderer.clear()
    assert tuple(surface.get_at((5, 5)))[:3] == renderer.clear_color


def test_untextured_cube_draws_white_at_centre():
    surface = pygame.Surface((80, 60))
    renderer = Renderer3D(surface, 80, 60)
    renderer.clear()
    renderer.look_at((0, 1.5, 5), (0, 0, 0), (0, 1, 0))
    drawn = renderer.draw_cube(0, 0, 0, None, 0, 0, 1, 1)
    assert drawn == 2
    assert tuple(surface.get_at((40, 30)))[:3] == (255, 255, 255)


def test_textured_cube_uses_atlas_colour():
    texture = pygame.Surface((2, 2))
    texture.fill((200, 10, 20))
    atlas = TextureAtlas(texture, 2, 1)
    surface = pygame.Surface((80, 60))
    renderer = Renderer3D(surface, 80, 60)
    renderer.clear()
    renderer.look_at((0, 1.5, 5), (0, 0, 0), (0, 1, 0))
    renderer.draw_cube(0, 0, 0, atlas, *atlas.coords(0, 0))
    assert tuple(surface.get_at((40, 30)))[:3] == (200, 10, 20)


def test_cube_behind_camera_draws_nothing():
    surface = pygame.Surface((40, 30))
    renderer = Renderer3D(surface, 40, 30)
    renderer.clear()
    renderer.look_at((0, 0, 0), (0, 0, -1), (0, 1, 0))
    assert renderer.draw_cube(0, 0, 10, None, 0, 0, 1, 1) == 0
    assert tuple(surface.get_at((20, 15)))[:3] == renderer.clear_color