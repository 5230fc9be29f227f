"""Main menu scene."""

from __future__ import annotations

from collections.abc import Collection

import pygame

from .controls import (
    BLACK,
    CONFIRM_KEYS,
    DARK_GRAY,
    GAME_WIDTH,
    RED,
    Key,
    SceneID,
    Window,
    _Fonts,
)

MENU_BG_COLOR = (200, 200, 200)
LOGO_TEXT = "MY MANSION"
LOGO_SPACE = 110
OPTION_SPACE = 64
LOGO_FONT_SIZE = 72
OPTION_FONT_SIZE = 40


class MenuScene:
    """Main menu with a logo and a selectable list of options."""

    options = ("Comenzar", "Ajustes", "Salir")

    def __init__(self, font: str | None = None) -> None:
        self._fonts = _Fonts(font)
        self.selected = 0

    def reset(self) -> None:
        """Select the first option."""
        self.selected = 0

    def update(self, pressed: Collection[Key], window: Window) -> SceneID | None:
        """Handle the keys pressed this frame; return the scene to switch to, if any."""
        count = len(self.options)
        if Key.UP in pressed:
            self.selected = (self.selected + count - 1) % count
        if Key.DOWN in pressed:
            self.selected = (self.selected + 1) % count

        if CONFIRM_KEYS.intersection(pressed):
            if self.selected == 1:
                return SceneID.SETTINGS
            if self.selected == 2:
                window.close()
        return None

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the menu onto the logical game surface."""
        surface.fill(MENU_BG_COLOR)

        logo_w, logo_h = self._fonts.measure(LOGO_TEXT, LOGO_FONT_SIZE, 4)
        self._fonts.draw(
            surface,
            LOGO_TEXT,
            ((GAME_WIDTH - logo_w) / 2, LOGO_SPACE),
            LOGO_FONT_SIZE,
            4,
            DARK_GRAY,
        )

        base_y = LOGO_SPACE + logo_h + 60
        for index, option in enumerate(self.options):
            opt_w, opt_h = self._fonts.measure(option, OPTION_FONT_SIZE, 2)
            x = (GAME_WIDTH - opt_w) / 2
            y = base_y + index * OPTION_SPACE
            chosen = index == self.selected
            color = RED if chosen else BLACK
            self._fonts.draw(surface, option, (x, y), OPTION_FONT_SIZE, 2, color)
            if chosen:
                pygame.draw.rect(
                    surface,
                    color,
                    pygame.Rect(int(x - 12), int(y - 6), int(opt_w + 24), int(opt_h + 12)),
                    1,
                )