"""Cannon balls fired by ships."""

from __future__ import annotations

import functools
import math

import pygame

from .collider import Collider
from .settings import BULLET_SPEED, DEG_TO_RAD
from .sound import SoundEffect
from .texture import Texture

EXPLOSION_MS = 250


@functools.lru_cache(maxsize=None)
def _effect(name: str) -> SoundEffect:
    return SoundEffect(name)


def _play_effect(name: str) -> None:
    if pygame.mixer.get_init():
        _effect(name).play()


class Cannon(Texture):
    """A cannon ball travelling in a straight line until it hits something."""

    def __init__(self, x: float, y: float, angle: float) -> None:
        super().__init__(x, y, 10.0, 10.0, angle, "cannon.png")
        theta = angle * DEG_TO_RAD
        self._dx = math.sin(theta) * BULLET_SPEED
        self._dy = -math.cos(theta) * BULLET_SPEED
        self._collider = Collider(x, y, 10.0, 10.0, angle)
        self.explosion = Texture.from_file("explosion.png")
        self.explosion.set_scale(40.0, 40.0)
        self._exploded_at: int | None = None

    @property
    def collider(self) -> Collider:
        return self._collider

    @property
    def x(self) -> float:
        return Texture.x.fget(self)

    @x.setter
    def x(self, value: float) -> None:
        Texture.x.fset(self, value)
        self._collider.x = value

    @property
    def y(self) -> float:
        return Texture.y.fget(self)

    @y.setter
    def y(self, value: float) -> None:
        Texture.y.fset(self, value)
        self._collider.y = value

    def render(self, surface: pygame.Surface) -> None:
        """Draw the ball and advance it, or draw its explosion once it has hit."""
        if self._exploded_at is not None:
            self.explosion.render(surface)
            return
        super().render(surface)
        self.x = self.x + self._dx
        self.y = self.y + self._dy

    def is_colliding(self, target: Collider, now: int) -> bool:
        """On hitting ``target``, explode at the current spot and leave play."""
        if not self._collider.is_colliding(target):
            return False
        self.explosion.set_pos(self.x, self.y)
        self.x = -math.inf
        self.y = -math.inf
        _play_effect("explosion.wav")
        self._exploded_at = now
        return True

    def is_exploding(self, now: int) -> bool:
        """Return True while the explosion animation is still running."""
        return self._exploded_at is not None and now - self._exploded_at < EXPLOSION_MS