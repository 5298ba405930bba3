"""Sound effects and streamed background music."""

from __future__ import annotations

import os

import pygame

from .resources import ResourceError, resource_manager
from .settings import AssetKind, asset_path


class SoundEffect:
    """A short sound decoded into memory up front."""

    def __init__(self, file: str) -> None:
        self._sound = resource_manager().sound(asset_path(AssetKind.SOUNDS, file))

    @property
    def sound(self) -> pygame.mixer.Sound:
        return self._sound

    def play(self, repeats: int = 0) -> pygame.mixer.Channel | None:
        """Play on a free channel, repeating ``repeats`` extra times."""
        return self._sound.play(loops=repeats)


class Music:
    """A music file streamed from disk when played."""

    def __init__(self, file: str) -> None:
        path = asset_path(AssetKind.SOUNDS, file)
        if not path.is_file():
            raise ResourceError(f"cannot load music {path}")
        self._path = os.fspath(path)

    def _load(self) -> None:
        try:
            pygame.mixer.music.load(self._path)
        except pygame.error as exc:
            raise ResourceError(f"cannot load music {self._path}: {exc}") from exc

    def play(self, repeats: int = -1) -> None:
        """Start playing; -1 repeats forever."""
        self._load()
        pygame.mixer.music.play(loops=repeats)

    def pause(self) -> None:
        pygame.mixer.music.pause()

    def resume(self) -> None:
        pygame.mixer.music.unpause()

    def fade_in(self, ms: int, repeats: int = -1) -> None:
        """Start playing, fading in over ``ms`` milliseconds."""
        self._load()
        pygame.mixer.music.play(loops=repeats, fade_ms=ms)

    def fade_out(self, ms: int) -> None:
        pygame.mixer.music.fadeout(ms)