"""The game window, menu, rounds and end-of-match screen."""

from __future__ import annotations

import argparse
import os
from collections.abc import Sequence

import pygame

from .resources import resource_manager
from .settings import (
    FRAME_DELAY_MS,
    WINDOW_H,
    WINDOW_W,
    AssetKind,
    asset_path,
)
from .ship import Ship, ShipColor
from .sound import Music, SoundEffect
from .texture import Texture
from .tilemap import TileMap

TITLE = "Cardboard Pirates"
FONT_FILE = "AurulentSansMNerdFontMono-Regular.otf"
FONT_SIZE = 40
MAX_VOLUME = 128
START_VOLUME = 40
SFX_ON_VOLUME = 50
QUIT_DELAY_MS = 120
ROUNDS = 3
_SFX_FILES = (
    "ui-click.wav",
    "fire.wav",
    "explosion.wav",
    "ship-collision.wav",
    "point-round.wav",
    "win-sequence.wav",
)


class WaterBackground:
    """Two scrolling water layers: one drifting right, one drifting down."""

    def __init__(self) -> None:
        self.layers: tuple[Texture, ...] = (
            Texture(640.0, 384.0, 1280.0, 768.0, 0.0, "water1.png"),
            Texture(-640.0, 384.0, 1280.0, 768.0, 0.0, "water1.png"),
            Texture(640.0, 384.0, 1280.0, 768.0, 0.0, "water2.png"),
            Texture(640.0, -384.0, 1280.0, 768.0, 0.0, "water2.png"),
        )
        for layer in self.layers[2:]:
            layer.blend_flags = pygame.BLEND_RGB_MULT

    def update(self) -> None:
        """Advance every layer by one pixel, wrapping those that leave the window."""
        for layer in self.layers[:2]:
            layer.x = layer.x + 1
            if layer.x > 1919:
                layer.x = -639
        for layer in self.layers[2:]:
            layer.y = layer.y + 1
            if layer.y > 1151:
                layer.y = -384

    def render(self, surface: pygame.Surface) -> None:
        for layer in self.layers:
            layer.render(surface)


class Match:
    """Best-of-three scoring: ends after three rounds or a two-point lead."""

    def __init__(self) -> None:
        self.round = 1
        self.red_points = 0
        self.blue_points = 0

    @property
    def map_name(self) -> str:
        """The map file for the current round."""
        return f"map{self.round}.txt"

    def record_round(self, red_alive: bool) -> ShipColor:
        """Award the round to red if it survived, otherwise to blue."""
        if red_alive:
            self.red_points += 1
            winner = ShipColor.RED
        else:
            self.blue_points += 1
            winner = ShipColor.BLUE
        self.round += 1
        return winner

    def is_over(self) -> bool:
        return self.round > ROUNDS or abs(self.red_points - self.blue_points) == 2

    def restart(self) -> None:
        self.round = 1
        self.red_points = 0
        self.blue_points = 0


class Game:
    """Owns the window and runs the menu and match loops."""

    def __init__(self, title: str = TITLE) -> None:
        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        try:
            pygame.display.init()
            pygame.font.init()
            pygame.mixer.init(44100, -16, 2, 2048)
        except pygame.error as exc:
            raise SystemExit(f"ERROR: {exc}") from exc
        self.screen = pygame.display.set_mode((WINDOW_W, WINDOW_H))
        pygame.display.set_caption(title)
        self.running = True
        self.sfx_on = True
        self.music_on = True

    def stop(self) -> None:
        """Leave the game immediately."""
        self.running = False
        raise SystemExit(1)

    @staticmethod
    def _set_sfx_volume(level: int) -> None:
        for name in _SFX_FILES:
            sound = resource_manager().sound(asset_path(AssetKind.SOUNDS, name))
            sound.set_volume(level / MAX_VOLUME)

    def _quit_with_click(self, click: SoundEffect) -> None:
        click.play()
        pygame.time.delay(QUIT_DELAY_MS)
        self.stop()

    def _begin_frame(self, water: WaterBackground, tilemap: TileMap) -> None:
        self.screen.fill((0, 0, 0))
        water.update()
        water.render(self.screen)
        tilemap.render(self.screen)

    @staticmethod
    def _end_frame() -> None:
        pygame.display.flip()
        pygame.time.delay(FRAME_DELAY_MS)

    def run(self) -> None:
        """Show the menu, then play matches until the player quits."""
        font = resource_manager().font(asset_path(AssetKind.FONTS, FONT_FILE), FONT_SIZE)
        Ship.font_ui = font
        red = Ship(ShipColor.RED, 64.0, 384.0, 0.0)
        blue = Ship(ShipColor.BLUE, 1216.0, 384.0, 0.0)
        water = WaterBackground()
        tilemap = TileMap("map1.txt")
        quit_button = Texture(640.0, 628.0, 110.0, 56.0, 0.0, "quitButton.png")
        click = SoundEffect("ui-click.wav")
        background = Music("background.mp3")
        self._set_sfx_volume(START_VOLUME)
        pygame.mixer.music.set_volume(START_VOLUME / MAX_VOLUME)

        self._menu(red, blue, water, tilemap, quit_button, click)

        pygame.mixer.music.stop()
        if self.music_on:
            background.fade_in(250)
        pygame.mouse.set_visible(False)

        match = Match()
        point_sound = SoundEffect("point-round.wav")
        win_sound = SoundEffect("win-sequence.wav")
        while self.running:
            red.reset()
            blue.reset()
            Ship.render_ui = True
            self._play_round(red, blue, water, tilemap)

            match.record_round(red.is_alive)
            red.points = match.red_points
            blue.points = match.blue_points
            point_sound.play()

            if match.is_over():
                win_sound.play(7)
                winner = red if red.is_alive else blue
                self._end_game(match, red, blue, winner, font, water, tilemap, quit_button, click)

            tilemap.load(match.map_name)

    def _menu(
        self,
        red: Ship,
        blue: Ship,
        water: WaterBackground,
        tilemap: TileMap,
        quit_button: Texture,
        click: SoundEffect,
    ) -> None:
        logo = Texture(640.0, 254.0, 500.0, 268.0, 0.0, "logo.png")
        play_button = Texture(640.0, 544.5, 150.0, 69.0, 0.0, "playButton.png")
        sfx_button = Texture(138.0, 719.5, 66.0, 89.0, 0.0, "sfxon.png")
        music_button = Texture(42.0, 719.5, 74.0, 89.0, 0.0, "musicon.png")
        Music("menu.mp3").play()

        in_menu = True
        while in_menu:
            for event in pygame.event.get():
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_RETURN:
                        click.play()
                        in_menu = False
                    elif event.key == pygame.K_ESCAPE:
                        self._quit_with_click(click)
                elif event.type == pygame.QUIT:
                    self.stop()
                elif event.type == pygame.MOUSEBUTTONUP:
                    if play_button.is_clicked(event.pos):
                        click.play()
                        in_menu = False
                    elif quit_button.is_clicked(event.pos):
                        self._quit_with_click(click)
                    elif music_button.is_clicked(event.pos):
                        self.music_on = not self.music_on
                        if self.music_on:
                            music_button.change_texture("musicon.png")
                            pygame.mixer.music.unpause()
                        else:
                            music_button.change_texture("musicoff.png")
                            pygame.mixer.music.pause()
                        click.play()
                    elif sfx_button.is_clicked(event.pos):
                        self.sfx_on = not self.sfx_on
                        if self.sfx_on:
                            sfx_button.change_texture("sfxon.png")
                            self._set_sfx_volume(SFX_ON_VOLUME)
                        else:
                            sfx_button.change_texture("sfxoff.png")
                            self._set_sfx_volume(0)
                        click.play()

            now = pygame.time.get_ticks()
            self._begin_frame(water, tilemap)
            red.render(self.screen, now)
            blue.render(self.screen, now)
            for widget in (logo, sfx_button, music_button, quit_button, play_button):
                widget.render(self.screen)
            self._end_frame()

    def _play_round(
        self, red: Ship, blue: Ship, water: WaterBackground, tilemap: TileMap
    ) -> None:
        while red.is_alive and blue.is_alive:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.stop()

            now = pygame.time.get_ticks()
            keys = pygame.key.get_pressed()
            red.handle_input(keys, pygame.K_w, pygame.K_a, pygame.K_d, pygame.K_s, now)
            blue.handle_input(
                keys, pygame.K_UP, pygame.K_LEFT, pygame.K_RIGHT, pygame.K_DOWN, now
            )

            Ship.collide_ships(red, blue, now)
            blue.keep_in_bounds(tilemap, now)
            red.keep_in_bounds(tilemap, now)

            self._begin_frame(water, tilemap)
            red.render(self.screen, now)
            blue.render(self.screen, now)
            self._end_frame()

    def _end_game(
        self,
        match: Match,
        red: Ship,
        blue: Ship,
        winner: Ship,
        font: pygame.font.Font,
        water: WaterBackground,
        tilemap: TileMap,
        quit_button: Texture,
        click: SoundEffect,
    ) -> None:
        restart_button = Texture(639.5, 544.5, 245.0, 69.0, 0.0, "restartButton.png")
        winner_display = Texture(640.0, 384.0, 200.0, 50.0, 0.0)
        winner.set_pos(640.0, 284.0)
        winner_display.set_text(font, f"{winner.color.value} WON!", winner.color.rgb)
        pygame.mouse.set_visible(True)
        Ship.render_ui = False

        def restart() -> None:
            match.restart()
            red.points = 0
            blue.points = 0
            pygame.mouse.set_visible(False)
            Ship.render_ui = True
            click.play()

        in_end_game = True
        while in_end_game:
            for event in pygame.event.get():
                if event.type == pygame.KEYDOWN:
                    if event.key == pygame.K_RETURN:
                        restart()
                        in_end_game = False
                    elif event.key == pygame.K_ESCAPE:
                        self._quit_with_click(click)
                elif event.type == pygame.QUIT:
                    self.stop()
                elif event.type == pygame.MOUSEBUTTONUP:
                    if quit_button.is_clicked(event.pos):
                        self._quit_with_click(click)
                    elif restart_button.is_clicked(event.pos):
                        restart()
                        in_end_game = False

            now = pygame.time.get_ticks()
            self._begin_frame(water, tilemap)
            restart_button.render(self.screen)
            quit_button.render(self.screen)
            winner_display.render(self.screen)
            winner.render(self.screen, now)
            self._end_frame()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(prog="cardboard-pirates", description=TITLE)
    parser.parse_args(argv)
    game = Game(TITLE)
    try:
        game.run()
    finally:
        pygame.quit()
    return 0