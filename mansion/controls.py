"""Scene identifiers, input keys, window state and shared drawing helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

import pygame

GAME_WIDTH = 1280
GAME_HEIGHT = 720

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
RAY_WHITE = (245, 245, 245)
LIGHT_GRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARK_GRAY = (80, 80, 80)
RED = (230, 41, 55)


class SceneID(Enum):
    """The scenes the game can show."""

    TRANSITION = auto()
    MENU = auto()
    SETTINGS = auto()


class Key(Enum):
    """Keys the scenes react to."""

    UP = auto()
    DOWN = auto()
    ENTER = auto()
    KP_ENTER = auto()
    SPACE = auto()
    F11 = auto()
    F = auto()
    ESCAPE = auto()


CONFIRM_KEYS = frozenset({Key.ENTER, Key.KP_ENTER, Key.SPACE})


@dataclass
class Window:
    """Window state that scenes act on; display backends extend it."""

    width: int = GAME_WIDTH
    height: int = GAME_HEIGHT
    fullscreen: bool = False
    closed: bool = False

    def size(self) -> tuple[int, int]:
        """Return the current window size as (width, height)."""
        return self.width, self.height

    def resize(self, width: int, height: int) -> None:
        """Set a new window size."""
        self.width = width
        self.height = height

    def toggle_fullscreen(self) -> None:
        """Switch between windowed and fullscreen mode."""
        self.fullscreen = not self.fullscreen

    def close(self) -> None:
        """Ask for the window to close."""
        self.closed = True


class _Fonts:
    """Lazily loaded fonts of one face, keyed by pixel size, with letter spacing."""

    def __init__(self, path: str | None) -> None:
        self._path = path
        self._cache: dict[int, pygame.font.Font] = {}

    def get(self, size: float) -> pygame.font.Font:
        key = int(size)
        if key not in self._cache:
            if not pygame.font.get_init():
                pygame.font.init()
            self._cache[key] = pygame.font.Font(self._path, key)
        return self._cache[key]

    def measure(self, text: str, size: float, spacing: float) -> tuple[float, float]:
        font = self.get(size)
        width = sum(font.size(ch)[0] for ch in text) + spacing * max(len(text) - 1, 0)
        return width, font.get_height()

    def draw(
        self,
        surface: pygame.Surface,
        text: str,
        position: tuple[float, float],
        size: float,
        spacing: float,
        color: tuple[int, int, int],
    ) -> None:
        font = self.get(size)
        x, y = position
        for ch in text:
            glyph = font.render(ch, True, color)
            surface.blit(glyph, (round(x), round(y)))
            x += font.size(ch)[0] + spacing