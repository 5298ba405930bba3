"""Positioned, rotatable images and map tiles."""

from __future__ import annotations

import math
from collections.abc import Sequence

import pygame

from .resources import resource_manager
from .settings import (
    DEG_TO_RAD,
    ROTATION_MULTIPLIER,
    THRUST_MULTIPLIER,
    TILE_H,
    TILE_W,
    AssetKind,
    asset_path,
)


def _load_image(file: str) -> pygame.Surface:
    return resource_manager().texture(asset_path(AssetKind.IMAGES, file))


class Texture:
    """An image drawn into a rectangle given by its centre, size and angle."""

    def __init__(
        self,
        x: float,
        y: float,
        w: float,
        h: float,
        angle: float = 0.0,
        file: str | None = None,
    ) -> None:
        self._left = float(x) - w / 2
        self._top = float(y) - h / 2
        self._w = float(w)
        self._h = float(h)
        self.angle = float(angle)
        self.image: pygame.Surface | None = None
        self.blend_flags = 0
        if file is not None:
            self.change_texture(file)

    @classmethod
    def from_file(cls, file: str) -> Texture:
        """Create a texture sized to the image it loads."""
        texture = cls(0.0, 0.0, 0.0, 0.0, 0.0, file)
        width, height = texture.image.get_size()
        texture.set_scale(width, height)
        return texture

    @property
    def x(self) -> float:
        """Horizontal centre."""
        return self._left + self._w / 2

    @x.setter
    def x(self, value: float) -> None:
        self._left = float(value) - self._w / 2

    @property
    def y(self) -> float:
        """Vertical centre."""
        return self._top + self._h / 2

    @y.setter
    def y(self, value: float) -> None:
        self._top = float(value) - self._h / 2

    @property
    def w(self) -> float:
        return self._w

    @w.setter
    def w(self, value: float) -> None:
        self._w = float(value)

    @property
    def h(self) -> float:
        return self._h

    @h.setter
    def h(self, value: float) -> None:
        self._h = float(value)

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """The rectangle as (left, top, width, height)."""
        return self._left, self._top, self._w, self._h

    def set_pos(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def set_scale(self, w: float, h: float) -> None:
        """Resize, keeping the top-left corner in place."""
        self.w = w
        self.h = h

    def render(self, surface: pygame.Surface) -> None:
        """Draw the image scaled to the rectangle and rotated about its centre."""
        if self.image is None or not (math.isfinite(self._left) and math.isfinite(self._top)):
            return
        size = (max(0, round(self._w)), max(0, round(self._h)))
        image = pygame.transform.scale(self.image, size)
        if self.angle:
            image = pygame.transform.rotate(image, -self.angle)
        rect = image.get_rect(center=(round(self.x), round(self.y)))
        surface.blit(image, rect, special_flags=self.blend_flags)

    def change_texture(self, file: str) -> None:
        """Show the image ``file`` from the images directory."""
        self.image = _load_image(file)

    def set_text(
        self, font: pygame.font.Font, text: str, color: Sequence[int]
    ) -> None:
        """Show ``text`` rendered without antialiasing in ``color``."""
        self.image = font.render(text, False, color)

    def thrust_forward(self) -> None:
        """Move forward along the current heading."""
        theta = self.angle * DEG_TO_RAD
        self._left += math.sin(theta) * THRUST_MULTIPLIER
        self._top -= math.cos(theta) * THRUST_MULTIPLIER

    def is_clicked(self, pos: tuple[float, float]) -> bool:
        """Return True if ``pos`` lies inside the rectangle, edges included."""
        mx, my = pos
        return (
            self._left <= mx <= self._left + self._w
            and self._top <= my <= self._top + self._h
        )

    def rotate_left(self) -> None:
        self.angle -= ROTATION_MULTIPLIER

    def rotate_right(self) -> None:
        self.angle += ROTATION_MULTIPLIER


class Tile(Texture):
    """A fixed map tile showing ``tile_<id>.png``."""

    def __init__(self, x: float, y: float, tile_id: str) -> None:
        super().__init__(x, y, TILE_W, TILE_H, 0.0, f"tile_{tile_id}.png")
        self.tile_id = tile_id

    def rotate_left(self) -> None:
        raise TypeError("tiles cannot rotate")

    def rotate_right(self) -> None:
        raise TypeError("tiles cannot rotate")

    def thrust_forward(self) -> None:
        raise TypeError("tiles cannot move")