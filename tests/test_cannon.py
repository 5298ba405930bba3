import math

import pygame
import pytest

from cardboard_pirates.cannon import Cannon
from cardboard_pirates.collider import Collider
from cardboard_pirates.settings import ASSETS_ENV, BULLET_SPEED


def _write_png(path, colour):
    surface = pygame.Surface((8, 8))
    surface.fill(colour)
    pygame.image.save(surface, str(path))


@pytest.fixture
def assets(tmp_path, monkeypatch):
    images = tmp_path / "images"
    images.mkdir()
    _write_png(images / "cannon.png", (20, 20, 20))
    _write_png(images / "explosion.png", (250, 120, 0))
    monkeypatch.setenv(ASSETS_ENV, str(tmp_path))
    return tmp_path


@pytest.fixture
def surface():
    return pygame.Surface((1280, 768))


def test_explosion_sized(assets):
    cannon = Cannon(100, 100, 0)
    assert (cannon.explosion.w, cannon.explosion.h) == (40, 40)
    assert (cannon.w, cannon.h) == (10, 10)


def test_render_moves_forward(assets, surface):
    cannon = Cannon(200, 400, 0)
    cannon.render(surface)
    assert cannon.x == pytest.approx(200)
    assert cannon.y == pytest.approx(400 - BULLET_SPEED)


def test_render_moves_sideways(assets, surface):
    cannon = Cannon(200, 400, 90)
    cannon.render(surface)
    assert cannon.x == pytest.approx(200 + BULLET_SPEED, rel=1e-4)
    assert cannon.y == pytest.approx(400, abs=1e-2)


def test_collider_follows_ball(assets, surface):
    cannon = Cannon(200, 400, 0)
    cannon.render(surface)
    assert (cannon.collider.x, cannon.collider.y) == (cannon.x, cannon.y)


def test_hit_explodes(assets):
    cannon = Cannon(300, 300, 0)
    target = Collider(300, 300, 50, 50, 0)
    assert cannon.is_colliding(target, 1000)
    assert cannon.x == -math.inf
    assert (cannon.explosion.x, cannon.explosion.y) == (300, 300)
    assert cannon.is_exploding(1000)
    assert cannon.is_exploding(1249)
    assert not cannon.is_exploding(1250)


def test_miss(assets):
    cannon = Cannon(300, 300, 0)
    target = Collider(800, 300, 50, 50, 0)
    assert not cannon.is_colliding(target, 1000)
    assert not cannon.is_exploding(1000)
    assert cannon.x == 300


def test_exploded_ball_does_not_hit_again(assets):
    cannon = Cannon(300, 300, 0)
    target = Collider(300, 300, 50, 50, 0)
    cannon.is_colliding(target, 1000)
    assert not cannon.is_colliding(target, 1010)


def test_render_after_hit_stays_put(assets, surface):
    cannon = Cannon(300, 300, 0)
    cannon.is_colliding(Collider(300, 300, 50, 50, 0), 1000)
    surface.fill((0, 0, 0))
    cannon.render(surface)
    assert cannon.y == -math.inf
    assert tuple(surface.get_at((300, 300)))[:3] == (250, 120, 0)