import pygame
import pytest

from cardboard_pirates.resources import ResourceError
from cardboard_pirates.settings import (
    ASSETS_ENV,
    ROTATION_MULTIPLIER,
    THRUST_MULTIPLIER,
    TILE_H,
    TILE_W,
)
from cardboard_pirates.texture import Texture, Tile


def _write_png(path, size, colour):
    surface = pygame.Surface(size)
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def assets(tmp_path, monkeypatch):
    images = tmp_path / "images"
    images.mkdir()
    _write_png(images / "red.png", (8, 8), (255, 0, 0))
    _write_png(images / "blue.png", (12, 6), (0, 0, 255))
    _write_png(images / "tile_01.png", (8, 8), (0, 255, 0))
    monkeypatch.setenv(ASSETS_ENV, str(tmp_path))
    return tmp_path


def test_centre_round_trip():
    t = Texture(100, 50, 20, 10, 0)
    assert t.x == 100
    assert t.y == 50
    assert t.bounds == (90, 45, 20, 10)


def test_set_pos_moves_centre():
    t = Texture(0, 0, 20, 10, 0)
    t.set_pos(300, 200)
    assert (t.x, t.y) == (300, 200)


def test_set_scale_keeps_top_left():
    t = Texture(100, 100, 20, 20, 0)
    t.set_scale(40, 40)
    assert t.bounds[:2] == (90, 90)
    assert (t.w, t.h) == (40, 40)


def test_is_clicked():
    t = Texture(100, 100, 20, 20, 0)
    assert t.is_clicked((100, 100))
    assert t.is_clicked((90, 110))
    assert not t.is_clicked((89, 100))
    assert not t.is_clicked((100, 111))


def test_thrust_forward_at_zero_degrees():
    t = Texture(100, 100, 20, 20, 0)
    t.thrust_forward()
    assert t.x == pytest.approx(100)
    assert t.y == pytest.approx(100 - THRUST_MULTIPLIER)


def test_thrust_forward_at_ninety_degrees():
    t = Texture(100, 100, 20, 20, 90)
    t.thrust_forward()
    assert t.x == pytest.approx(100 + THRUST_MULTIPLIER, rel=1e-4)
    assert t.y == pytest.approx(100, abs=1e-3)


def test_rotation():
    t = Texture(0, 0, 10, 10, 0)
    t.rotate_right()
    assert t.angle == ROTATION_MULTIPLIER
    t.rotate_left()
    t.rotate_left()
    assert t.angle == -ROTATION_MULTIPLIER


def test_loads_image(assets):
    t = Texture(0, 0, 10, 10, 0, "blue.png")
    assert t.image.get_size() == (12, 6)


def test_missing_image_raises(assets):
    with pytest.raises(ResourceError):
        Texture(0, 0, 10, 10, 0, "nothing.png")


def test_from_file_uses_image_size(assets):
    t = Texture.from_file("blue.png")
    assert (t.w, t.h) == (12, 6)


def test_change_texture(assets):
    t = Texture(0, 0, 10, 10, 0, "red.png")
    t.change_texture("blue.png")
    assert t.image.get_size() == (12, 6)


def test_render_draws_at_centre(assets):
    surface = pygame.Surface((100, 100))
    surface.fill((0, 0, 0))
    Texture(50, 50, 20, 20, 0, "red.png").render(surface)
    assert tuple(surface.get_at((50, 50)))[:3] == (255, 0, 0)
    assert tuple(surface.get_at((5, 5)))[:3] == (0, 0, 0)


def test_render_without_image_leaves_surface():
    surface = pygame.Surface((20, 20))
    surface.fill((1, 2, 3))
    Texture(10, 10, 20, 20, 0).render(surface)
    assert tuple(surface.get_at((10, 10)))[:3] == (1, 2, 3)


def test_set_text_renders_font():
    pygame.font.init()
    font = pygame.font.Font(None, 20)
    t = Texture(0, 0, 50, 40, 0)
    t.set_text(font, "HI", (255, 0, 0))
    assert t.image.get_width() == font.size("HI")[0]


def test_tile_geometry(assets):
    tile = Tile(32, 32, "01")
    assert tile.tile_id == "01"
    assert (tile.w, tile.h) == (TILE_W, TILE_H)
    assert tile.image.get_size() == (8, 8)


def test_tile_cannot_move(assets):
    tile = Tile(32, 32, "01")
    with pytest.raises(TypeError):
        tile.rotate_left()
    with pytest.raises(TypeError):
        tile.thrust_forward()