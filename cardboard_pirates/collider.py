"""Oriented rectangle colliders using the separating axis theorem."""

from __future__ import annotations

import math
from collections.abc import Iterator, Sequence

from .settings import DEG_TO_RAD, ROTATION_MULTIPLIER, THRUST_MULTIPLIER

Point = tuple[float, float]


def _axes(corners: Sequence[Point]) -> Iterator[Point]:
    """Yield the unit normals of the polygon's edges."""
    for (ax, ay), (bx, by) in zip(corners, (*corners[1:], corners[0])):
        nx, ny = -(by - ay), bx - ax
        length = math.hypot(nx, ny)
        yield nx / length, ny / length


def _project(corners: Sequence[Point], axis: Point) -> tuple[float, float]:
    dots = [px * axis[0] + py * axis[1] for px, py in corners]
    return min(dots), max(dots)


class Collider:
    """A rotated rectangle defined by its centre, size and angle in degrees."""

    def __init__(self, x: float, y: float, w: float, h: float, angle: float) -> None:
        self._cx = float(x)
        self._cy = float(y)
        self._angle = float(angle)
        hw, hh = w / 2, h / 2
        # Clockwise, starting at the top-left corner.
        self._model: tuple[Point, ...] = ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh))
        self._corners: tuple[Point, ...] = ()
        self.update()

    @property
    def x(self) -> float:
        return self._cx

    @x.setter
    def x(self, value: float) -> None:
        self._cx = float(value)
        self.update()

    @property
    def y(self) -> float:
        return self._cy

    @y.setter
    def y(self, value: float) -> None:
        self._cy = float(value)
        self.update()

    @property
    def angle(self) -> float:
        return self._angle

    @angle.setter
    def angle(self, value: float) -> None:
        self._angle = float(value)
        self.update()

    @property
    def corners(self) -> tuple[Point, ...]:
        """The four world-space corners, clockwise."""
        return self._corners

    def thrust_forward(self) -> None:
        """Move forward along the current heading."""
        theta = self._angle * DEG_TO_RAD
        self._cx += math.sin(theta) * THRUST_MULTIPLIER
        self._cy -= math.cos(theta) * THRUST_MULTIPLIER
        self.update()

    def rotate_left(self) -> None:
        self._angle -= ROTATION_MULTIPLIER
        self.update()

    def rotate_right(self) -> None:
        self._angle += ROTATION_MULTIPLIER
        self.update()

    def update(self) -> None:
        """Recompute the world-space corners from centre and angle."""
        theta = self._angle * DEG_TO_RAD
        c, s = math.cos(theta), math.sin(theta)
        self._corners = tuple(
            (mx * c - my * s + self._cx, mx * s + my * c + self._cy)
            for mx, my in self._model
        )

    def _overlap(self, target: Collider) -> float | None:
        """Smallest projected overlap, or None if a separating axis exists."""
        overlap = math.inf
        for owner in (target, self):
            for axis in _axes(owner.corners):
                min1, max1 = _project(owner.corners, axis)
                other = self if owner is target else target
                min2, max2 = _project(other.corners, axis)
                if not (max2 >= min1 and max1 >= min2):
                    return None
                overlap = min(min(max1, max2) - max(min1, min2), overlap)
        return overlap

    def _direction_to(self, target: Collider) -> Point | None:
        dx, dy = target._cx - self._cx, target._cy - self._cy
        length = math.hypot(dx, dy)
        if length == 0:
            return None
        return dx / length, dy / length

    def is_colliding(self, target: Collider) -> bool:
        """Return True if the two rectangles overlap or touch."""
        return self._overlap(target) is not None

    def resolve_against(self, target: Collider) -> bool:
        """On collision, push only this collider out of ``target``."""
        overlap = self._overlap(target)
        if overlap is None:
            return False
        direction = self._direction_to(target)
        if direction is not None:
            self._cx -= overlap * direction[0]
            self._cy -= overlap * direction[1]
            self.update()
        return True

    def resolve_mutual(self, target: Collider) -> bool:
        """On collision, push both colliders apart by half the overlap each."""
        overlap = self._overlap(target)
        if overlap is None:
            return False
        direction = self._direction_to(target)
        if direction is not None:
            half = overlap / 2
            target._cx += half * direction[0]
            target._cy += half * direction[1]
            self._cx -= half * direction[0]
            self._cy -= half * direction[1]
            self.update()
            target.update()
        return True