"""Cached loading of images, fonts and sound effects."""

from __future__ import annotations

import functools
import os

import pygame


class ResourceError(RuntimeError):
    """Raised when an asset cannot be loaded."""


class ResourceManager:
    """Loads each asset once and hands out the cached object afterwards."""

    def __init__(self) -> None:
        self._textures: dict[str, pygame.Surface] = {}
        self._fonts: dict[str, pygame.font.Font] = {}
        self._sounds: dict[str, pygame.mixer.Sound] = {}

    def texture(self, file: str | os.PathLike[str]) -> pygame.Surface:
        """Return the image at ``file``."""
        key = os.fspath(file)
        if key not in self._textures:
            try:
                surface = pygame.image.load(key)
            except (pygame.error, OSError) as exc:
                raise ResourceError(f"cannot load image {key}: {exc}") from exc
            if pygame.display.get_init() and pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
            self._textures[key] = surface
        return self._textures[key]

    def font(self, file: str | os.PathLike[str], size: int) -> pygame.font.Font:
        """Return the font at ``file``; the first size requested is kept."""
        key = os.fspath(file)
        if key not in self._fonts:
            if not pygame.font.get_init():
                pygame.font.init()
            try:
                self._fonts[key] = pygame.font.Font(key, size)
            except (pygame.error, OSError) as exc:
                raise ResourceError(f"cannot load font {key}: {exc}") from exc
        return self._fonts[key]

    def sound(self, file: str | os.PathLike[str]) -> pygame.mixer.Sound:
        """Return the sound effect at ``file``."""
        key = os.fspath(file)
        if key not in self._sounds:
            try:
                self._sounds[key] = pygame.mixer.Sound(key)
            except (pygame.error, OSError) as exc:
                raise ResourceError(f"cannot load sound {key}: {exc}") from exc
        return self._sounds[key]


@functools.lru_cache(maxsize=None)
def resource_manager() -> ResourceManager:
    """Return the shared resource manager."""
    return ResourceManager()