"""Game-wide constants and asset locations."""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path

WINDOW_W = 1280
WINDOW_H = 768
TILE_W = 64.0
TILE_H = 64.0
PI = 3.14159
DEG_TO_RAD = PI / 180.0
ROTATION_MULTIPLIER = 5.0
THRUST_MULTIPLIER = 6.5
BULLET_SPEED = 30.0
CANNON_DAMAGE = 10
FRAME_DELAY_MS = 16

ASSETS_ENV = "CARDBOARD_PIRATES_ASSETS"
DEFAULT_ASSETS_ROOT = Path("..") / "assets"


class AssetKind(str, Enum):
    """The asset sub-directories the game reads from."""

    IMAGES = "images"
    SOUNDS = "sounds"
    MAPS = "maps"
    FONTS = "fonts"


def asset_path(kind: AssetKind | str, name: str) -> Path:
    """Return the path of asset ``name`` of the given kind.

    The assets root is taken from the ``CARDBOARD_PIRATES_ASSETS`` environment
    variable when set, otherwise ``../assets``. Raises ValueError for an
    unknown kind.
    """
    folder = AssetKind(kind)
    root = Path(os.environ.get(ASSETS_ENV, DEFAULT_ASSETS_ROOT))
    return root / folder.value / name