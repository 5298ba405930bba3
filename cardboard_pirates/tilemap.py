"""Tile maps read from two-character-per-cell text files."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import pygame

from .collider import Collider
from .resources import ResourceError
from .settings import TILE_H, TILE_W, WINDOW_H, WINDOW_W, AssetKind, asset_path
from .texture import Tile

EMPTY = "00"


@dataclass(frozen=True)
class TileSpec:
    """One tile of a layout: its centre, id, and whether it blocks ships."""

    x: float
    y: float
    tile_id: str
    solid: bool


def parse_layout(lines: Iterable[str]) -> list[TileSpec]:
    """Parse map rows of two-character tile ids; ``00`` is open water.

    A tile is solid when it borders open water above, below, left or right.
    """
    rows = [line.rstrip("\r\n") for line in lines]
    map_w = int(WINDOW_W // TILE_W)
    map_h = int(WINDOW_H // TILE_H)

    def cell(r: int, c: int) -> str | None:
        if 0 <= r < len(rows) and c >= 1:
            return rows[r][c - 1 : c + 1]
        return None

    specs = []
    for r, row in enumerate(rows):
        for c in range(1, len(row), 2):
            tile_id = row[c - 1 : c + 1]
            if tile_id == EMPTY:
                continue
            solid = (
                (r > 0 and cell(r - 1, c) == EMPTY)
                or (r < map_h - 1 and cell(r + 1, c) == EMPTY)
                or (c > 2 and cell(r, c - 2) == EMPTY)
                or (c // 2 < map_w - 2 and cell(r, c + 2) == EMPTY)
            )
            specs.append(
                TileSpec(
                    x=(c // 2) * TILE_W + TILE_W / 2,
                    y=r * TILE_H + TILE_H / 2,
                    tile_id=tile_id,
                    solid=bool(solid),
                )
            )
    return specs


class TileMap:
    """The tiles of a map and the colliders of its solid edge tiles."""

    def __init__(self, file: str) -> None:
        self.tiles: list[Tile] = []
        self.colliders: list[Collider] = []
        self.load(file)

    def load(self, file: str) -> None:
        """Replace the current map with the one in ``file``."""
        path = asset_path(AssetKind.MAPS, file)
        try:
            lines = path.read_text().splitlines()
        except OSError as exc:
            raise ResourceError(f"couldn't locate map: {path}") from exc
        specs = parse_layout(lines)
        self.tiles = [Tile(s.x, s.y, s.tile_id) for s in specs]
        self.colliders = [
            Collider(s.x, s.y, TILE_W, TILE_W, 0.0) for s in specs if s.solid
        ]

    def render(self, surface: pygame.Surface) -> None:
        for tile in self.tiles:
            tile.render(surface)