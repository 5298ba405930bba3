"""Player ships: movement, shooting, damage and their on-screen status."""

from __future__ import annotations

import functools
from collections.abc import Sequence
from enum import Enum
from typing import ClassVar

import pygame

from .cannon import Cannon
from .collider import Collider
from .settings import CANNON_DAMAGE, WINDOW_H, WINDOW_W
from .sound import SoundEffect
from .texture import Texture
from .tilemap import TileMap

SHOOT_COOLDOWN_MS = 500
RAM_COOLDOWN_MS = 200


@functools.lru_cache(maxsize=None)
def _effect(name: str) -> SoundEffect:
    return SoundEffect(name)


def _play_effect(name: str) -> None:
    if pygame.mixer.get_init():
        _effect(name).play()


class ShipColor(Enum):
    RED = "RED"
    BLUE = "BLUE"

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (255, 0, 0) if self is ShipColor.RED else (0, 0, 255)

    @property
    def start(self) -> tuple[float, float]:
        return (64.0, 384.0) if self is ShipColor.RED else (1216.0, 384.0)


class Ship(Texture):
    """A player's ship with its health, points and cannon balls in flight."""

    render_ui: ClassVar[bool] = False
    font_ui: ClassVar[pygame.font.Font | None] = None

    def __init__(self, color: ShipColor, x: float, y: float, angle: float) -> None:
        super().__init__(x, y, 66.0, 113.0, angle)
        self.color = ShipColor(color)
        self._collider = Collider(x, y, 52.0, 100.0, angle)
        self._health = 100
        self._points = 0
        self._last_shot: int | None = None
        self._last_ram: int | None = None
        self._cannons: list[Cannon] = []
        self.health_ui = Texture(0.0, 0.0, 50.0, 40.0, 0.0)
        self.points_ui = Texture(0.0, 0.0, 20.0, 40.0, 0.0)
        self.shield_ui = Texture(0.0, 0.0, 32.0, 32.0, 0.0, "shield.png")
        if self.color is ShipColor.RED:
            self.health_ui.set_pos(100.0, 32.0)
            self.points_ui.set_pos(20.0, 32.0)
            self.shield_ui.set_pos(52.0, 32.0)
        else:
            self.health_ui.set_pos(WINDOW_W - 100.0, 32.0)
            self.points_ui.set_pos(WINDOW_W - 20.0, 32.0)
            self.shield_ui.set_pos(WINDOW_W - 52.0, 32.0)
        self._refresh_health_ui()
        self._refresh_points_ui()
        self.change_texture(self._image_name(1))

    def _image_name(self, stage: int) -> str:
        return f"ship{self.color.value}{stage}.png"

    def _refresh_health_ui(self) -> None:
        if self.font_ui is not None:
            self.health_ui.set_text(self.font_ui, f"{self._health:<3}", self.color.rgb)

    def _refresh_points_ui(self) -> None:
        if self.font_ui is not None:
            self.points_ui.set_text(self.font_ui, str(self._points), self.color.rgb)

    @property
    def collider(self) -> Collider:
        return self._collider

    @property
    def cannons(self) -> list[Cannon]:
        return self._cannons

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

    @property
    def health(self) -> int:
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = value
        self._refresh_health_ui()

    @property
    def points(self) -> int:
        return self._points

    @points.setter
    def points(self, value: int) -> None:
        self._points = value
        self._refresh_points_ui()

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    def set_pos(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def _sync_to_collider(self) -> None:
        self.x = self._collider.x
        self.y = self._collider.y

    def thrust_forward(self) -> None:
        super().thrust_forward()
        self._collider.thrust_forward()

    def rotate_left(self) -> None:
        super().rotate_left()
        self._collider.rotate_left()

    def rotate_right(self) -> None:
        super().rotate_right()
        self._collider.rotate_right()

    def render(self, surface: pygame.Surface, now: int) -> None:
        """Drop finished cannon balls, draw the rest, the ship and its status."""
        self._cannons[:] = [
            c
            for c in self._cannons
            if c.is_exploding(now) or (1 <= c.x < WINDOW_W and 1 <= c.y < WINDOW_H)
        ]
        for cannon in self._cannons:
            cannon.render(surface)
        if self._health < 30:
            self.change_texture(self._image_name(3))
        elif self._health < 90:
            self.change_texture(self._image_name(2))
        elif self._health > 90:
            self.change_texture(self._image_name(1))
        if self._health > 0:
            super().render(surface)
        if self.render_ui:
            self.health_ui.render(surface)
            self.points_ui.render(surface)
            self.shield_ui.render(surface)

    def handle_input(
        self, keys: Sequence[bool], thrust: int, left: int, right: int, shoot: int, now: int
    ) -> None:
        """Act on the pressed keys; ``keys`` is indexed by key code."""
        if keys[thrust]:
            self.thrust_forward()
        if keys[right]:
            self.rotate_right()
        if keys[left]:
            self.rotate_left()
        if keys[shoot]:
            self.shoot_forward(now)

    def reset(self) -> None:
        """Return to the starting spot with full health and no balls in flight."""
        self.set_pos(*self.color.start)
        self.health = 100
        self._cannons.clear()

    def shoot_forward(self, now: int) -> bool:
        """Fire a cannon ball unless the last shot was within the cooldown."""
        if self._last_shot is not None and now - self._last_shot <= SHOOT_COOLDOWN_MS:
            return False
        self._cannons.append(Cannon(self.x, self.y, self.angle))
        _play_effect("fire.wav")
        self._last_shot = now
        return True

    def keep_in_bounds(self, tilemap: TileMap, now: int) -> None:
        """Keep the ship inside the window and off solid tiles; let balls hit tiles."""
        for cx, cy in self._collider.corners:
            if cx <= 0:
                self._collider.x = self._collider.x - cx
                self.x = self._collider.x
            elif cx >= WINDOW_W:
                self._collider.x = self._collider.x - (cx - WINDOW_W)
                self.x = self._collider.x
            if cy <= 0:
                self._collider.y = self._collider.y - cy
                self.y = self._collider.y
            elif cy >= WINDOW_H:
                self._collider.y = self._collider.y - (cy - WINDOW_H)
                self.y = self._collider.y
        for tile in tilemap.colliders:
            self._collider.resolve_against(tile)
            self._sync_to_collider()
        for tile in tilemap.colliders:
            for cannon in self._cannons:
                cannon.is_colliding(tile, now)

    @staticmethod
    def collide_ships(ship1: Ship, ship2: Ship, now: int) -> None:
        """Apply cannon hits between two ships and push them apart if they touch."""
        for cannon in ship1._cannons:
            if cannon.is_colliding(ship2._collider, now):
                ship2.health = ship2.health - CANNON_DAMAGE
        for cannon in ship2._cannons:
            if cannon.is_colliding(ship1._collider, now):
                ship1.health = ship1.health - CANNON_DAMAGE
        if not ship1._collider.resolve_mutual(ship2._collider):
            return
        ship1._sync_to_collider()
        ship2._sync_to_collider()
        if ship1._last_ram is None or now - ship1._last_ram > RAM_COOLDOWN_MS:
            _play_effect("ship-collision.wav")
            ship1.health = ship1.health - 1
            ship2.health = ship2.health - 1
            ship1._last_ram = now