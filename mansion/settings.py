"""Settings scene for choosing the window resolution."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

import pygame

from .controls import (
    BLACK,
    CONFIRM_KEYS,
    DARK_GRAY,
    GAME_WIDTH,
    GRAY,
    LIGHT_GRAY,
    RED,
    Key,
    SceneID,
    Window,
    _Fonts,
)

TITLE = "Ajustes"
HINT = "ENTER: Cambiar resolucion  |  F11: Pantalla completa  |  ESC: Volver"
COMING_SOON = "Proximamente: Cambiar controles"


@dataclass(frozen=True)
class Resolution:
    """A selectable window resolution."""

    width: int
    height: int

    @property
    def label(self) -> str:
        return f"{self.width} x {self.height}"


class SettingsScene:
    """Lists 16:9 resolutions and applies the chosen one to the window."""

    resolutions = (
        Resolution(1280, 720),
        Resolution(1600, 900),
        Resolution(1920, 1080),
        Resolution(2560, 1440),
        Resolution(3840, 2160),
    )

    def __init__(self, font: str | None = None) -> None:
        self._fonts = _Fonts(font)
        self.selected = 0

    def reset(self, width: int, height: int) -> None:
        """Select the resolution matching the given window size, else the first."""
        self.selected = next(
            (
                index
                for index, res in enumerate(self.resolutions)
                if res.width == width and res.height == height
            ),
            0,
        )

    def update(self, pressed: Collection[Key], window: Window) -> SceneID | None:
        """Handle the keys pressed this frame; return the scene to switch to, if any."""
        count = len(self.resolutions)
        if Key.UP in pressed:
            self.selected = (self.selected + count - 1) % count
        if Key.DOWN in pressed:
            self.selected = (self.selected + 1) % count

        if CONFIRM_KEYS.intersection(pressed):
            chosen = self.resolutions[self.selected]
            window.resize(chosen.width, chosen.height)

        if Key.F11 in pressed or Key.F in pressed:
            window.toggle_fullscreen()

        if Key.ESCAPE in pressed:
            return SceneID.MENU
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the settings screen onto the logical game surface."""
        surface.fill(LIGHT_GRAY)

        title_w, _ = self._fonts.measure(TITLE, 60, 5)
        self._fonts.draw(surface, TITLE, ((GAME_WIDTH - title_w) / 2, 60), 60, 5, DARK_GRAY)

        base_y = 180
        for index, res in enumerate(self.resolutions):
            res_w, res_h = self._fonts.measure(res.label, 38, 2)
            x = (GAME_WIDTH - res_w) / 2
            y = base_y + index * 54
            chosen = index == self.selected
            color = RED if chosen else BLACK
            self._fonts.draw(surface, res.label, (x, y), 38, 2, color)
            if chosen:
                pygame.draw.rect(
                    surface,
                    color,
                    pygame.Rect(int(x - 10), int(y - 4), int(res_w + 20), int(res_h + 8)),
                    1,
                )

        self._fonts.draw(surface, HINT, (80, 650), 26, 2, DARK_GRAY)
        self._fonts.draw(surface, COMING_SOON, (420, 600), 22, 2, GRAY)