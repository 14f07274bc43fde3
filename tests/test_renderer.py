import os

import pygame
import pytest

from eightball.core import Rect, Transform, Vec2
from eightball.renderer import BACKGROUND_COLOR, Renderer, ResourceManager

RED = (255, 0, 0, 255)
BLUE = (0, 0, 255, 255)
GREEN = (0, 255, 0, 255)
WHITE = (255, 255, 255, 255)


def make_surface(size=(40, 40)):
    surface = pygame.Surface(size, 0, 32)
    surface.fill((0, 0, 0))
    return surface


def rgb(surface, point):
    return tuple(surface.get_at(point))[:3]


def default_font_path():
    return os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())


@pytest.fixture
def sheet_path(tmp_path):
    sheet = pygame.Surface((8, 8), 0, 32)
    sheet.fill(BLUE, pygame.Rect(0, 0, 4, 4))
    sheet.fill(RED, pygame.Rect(4, 0, 4, 4))
    sheet.fill(GREEN, pygame.Rect(0, 4, 4, 4))
    sheet.fill(WHITE, pygame.Rect(4, 4, 4, 4))
    path = tmp_path / "sheet.bmp"
    pygame.image.save(sheet, str(path))
    return path


def test_clear_fills_background():
    surface = make_surface()
    Renderer(surface).clear()
    assert rgb(surface, (0, 0)) == BACKGROUND_COLOR[:3]
    assert rgb(surface, (39, 39)) == BACKGROUND_COLOR[:3]


def test_draw_rect_opaque():
    surface = make_surface()
    Renderer(surface).draw_rect(Rect(5, 5, 10, 10), RED)
    assert rgb(surface, (6, 6)) == RED[:3]
    assert rgb(surface, (20, 20)) == (0, 0, 0)


def test_draw_rect_blends_alpha():
    surface = make_surface()
    Renderer(surface).draw_rect(Rect(0, 0, 10, 10), (255, 0, 0, 128))
    red = surface.get_at((2, 2)).r
    assert 0 < red < 255


def test_draw_transform_rect_uses_position_as_corner():
    surface = make_surface()
    transform = Transform(position=Vec2(10, 10), scale=Vec2(5, 5))
    Renderer(surface).draw_transform_rect(transform, GREEN)
    assert rgb(surface, (11, 11)) == GREEN[:3]
    assert rgb(surface, (9, 9)) == (0, 0, 0)


def test_draw_circle_outline():
    surface = make_surface()
    Renderer(surface).draw_circle((20, 20), 10, WHITE)
    assert rgb(surface, (30, 20)) == WHITE[:3]
    assert rgb(surface, (20, 20)) == (0, 0, 0)


def test_draw_circle_ignores_points_off_surface():
    surface = make_surface()
    Renderer(surface).draw_circle((0, 0), 10, WHITE)
    assert rgb(surface, (10, 0)) == WHITE[:3]


def test_load_missing_texture_fails(tmp_path):
    resources = ResourceManager()
    assert resources.load_texture("x", tmp_path / "missing.png") is False
    assert resources.texture("x") is None


def test_load_texture_round_trip(sheet_path):
    renderer = Renderer(make_surface())
    assert renderer.load_texture("sheet", sheet_path) is True
    assert renderer.resources.texture("sheet").get_size() == (8, 8)


def test_cleanup_forgets_resources(sheet_path):
    resources = ResourceManager()
    resources.load_texture("sheet", sheet_path)
    resources.load_font("font", default_font_path(), 12)
    resources.cleanup()
    assert resources.texture("sheet") is None
    assert resources.font("font") is None


def test_load_font_missing_and_present(tmp_path):
    resources = ResourceManager()
    assert resources.load_font("bad", tmp_path / "missing.ttf", 12) is False
    assert resources.font("bad") is None
    assert resources.load_font("good", default_font_path(), 12) is True
    assert resources.font("good") is not None


def test_draw_sprite_selects_frame(sheet_path):
    surface = make_surface()
    renderer = Renderer(surface)
    renderer.load_texture("sheet", sheet_path)
    transform = Transform(position=Vec2(20, 20), scale=Vec2(4, 4))
    renderer.draw_sprite("sheet", transform, 2, 2, 1)
    assert rgb(surface, (19, 19)) == RED[:3]
    renderer.draw_sprite("sheet", transform, 2, 2, 2)
    assert rgb(surface, (19, 19)) == GREEN[:3]


def test_draw_sprite_unknown_texture_draws_nothing():
    surface = make_surface()
    transform = Transform(position=Vec2(20, 20), scale=Vec2(4, 4))
    Renderer(surface).draw_sprite("nothing", transform, 2, 2, 0)
    assert rgb(surface, (20, 20)) == (0, 0, 0)


def test_draw_sprite_shadowed_puts_sprite_over_shadow(sheet_path):
    surface = make_surface()
    renderer = Renderer(surface)
    renderer.load_texture("sheet", sheet_path)
    transform = Transform(position=Vec2(20, 20), scale=Vec2(4, 4))
    renderer.draw_sprite_shadowed("sheet", transform, 0.0, 2, 2, 3)
    assert rgb(surface, (19, 19)) == WHITE[:3]
    shadow = surface.get_at((24, 24))
    assert shadow.r == shadow.g == shadow.b


def test_draw_texture_stretches(tmp_path):
    image = pygame.Surface((2, 2), 0, 32)
    image.fill(BLUE)
    path = tmp_path / "blue.bmp"
    pygame.image.save(image, str(path))
    surface = make_surface()
    renderer = Renderer(surface)
    renderer.load_texture("blue", path)
    renderer.draw_texture("blue", Rect(0, 0, 10, 10))
    assert rgb(surface, (9, 9)) == BLUE[:3]
    assert rgb(surface, (12, 12)) == (0, 0, 0)


def test_draw_texture_rotation_half_turn(tmp_path):
    image = pygame.Surface((10, 10), 0, 32)
    image.fill(RED, pygame.Rect(0, 0, 5, 10))
    image.fill(BLUE, pygame.Rect(5, 0, 5, 10))
    path = tmp_path / "halves.bmp"
    pygame.image.save(image, str(path))
    surface = make_surface()
    renderer = Renderer(surface)
    renderer.load_texture("halves", path)
    renderer.draw_texture("halves", Rect(0, 0, 10, 10), 180.0)
    assert rgb(surface, (1, 5)) == BLUE[:3]
    assert rgb(surface, (8, 5)) == RED[:3]


def test_draw_text_with_loaded_font():
    surface = make_surface((100, 40))
    renderer = Renderer(surface)
    assert renderer.load_font("font", default_font_path(), 20) is True
    renderer.draw_text("Hi", "font", WHITE, 50, 20)
    lit_count = sum(
        1
        for x in range(30, 70)
        for y in range(5, 35)
        if surface.get_at((x, y)).r > 0
    )
    assert lit_count > 0
    assert rgb(surface, (0, 0)) == (0, 0, 0)
    assert rgb(surface, (99, 39)) == (0, 0, 0)


def test_draw_text_unknown_font_draws_nothing():
    surface = make_surface((100, 40))
    Renderer(surface).draw_text("Hi", "missing", WHITE, 50, 20)
    assert all(surface.get_at((x, 20)).r == 0 for x in range(100))