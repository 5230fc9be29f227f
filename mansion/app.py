"""Window, main loop and letterboxed scaling of the game surface."""

from __future__ import annotations

import argparse
from collections.abc import Iterable

import pygame

from .controls import BLACK, GAME_HEIGHT, GAME_WIDTH, RAY_WHITE, Key, Window
from .scenes import SceneManager

TARGET_FPS = 60
TITLE = "My Mansion - Menu Inicial"

_KEY_MAP = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_RETURN: Key.ENTER,
    pygame.K_KP_ENTER: Key.KP_ENTER,
    pygame.K_SPACE: Key.SPACE,
    pygame.K_F11: Key.F11,
    pygame.K_f: Key.F,
    pygame.K_ESCAPE: Key.ESCAPE,
}


class PygameWindow(Window):
    """A resizable pygame display window."""

    def __init__(self, width: int = GAME_WIDTH, height: int = GAME_HEIGHT, title: str = TITLE) -> None:
        super().__init__(width=width, height=height)
        pygame.display.init()
        pygame.display.set_mode((width, height), pygame.RESIZABLE)
        pygame.display.set_caption(title)

    def size(self) -> tuple[int, int]:
        """Return the current size of the display surface."""
        surface = pygame.display.get_surface()
        if surface is None:
            return self.width, self.height
        return surface.get_size()

    def resize(self, width: int, height: int) -> None:
        """Resize the display window."""
        super().resize(width, height)
        pygame.display.set_mode((width, height), pygame.RESIZABLE)

    def toggle_fullscreen(self) -> None:
        """Switch the display between windowed and fullscreen."""
        pygame.display.toggle_fullscreen()
        super().toggle_fullscreen()

    def close(self) -> None:
        """Ask the main loop to stop."""
        super().close()


def letterbox(window_width: int, window_height: int) -> pygame.Rect:
    """Largest rectangle of the game's aspect ratio centred in the window."""
    scale = min(window_width / GAME_WIDTH, window_height / GAME_HEIGHT)
    scaled_width = int(GAME_WIDTH * scale)
    scaled_height = int(GAME_HEIGHT * scale)
    offset_x = (window_width - scaled_width) // 2
    offset_y = (window_height - scaled_height) // 2
    return pygame.Rect(offset_x, offset_y, scaled_width, scaled_height)


def translate_keys(events: Iterable[pygame.event.Event]) -> frozenset[Key]:
    """Keys pressed among the given events that the scenes react to."""
    return frozenset(
        _KEY_MAP[event.key]
        for event in events
        if event.type == pygame.KEYDOWN and event.key in _KEY_MAP
    )


def _present(target: pygame.Surface) -> None:
    screen = pygame.display.get_surface()
    screen.fill(BLACK)
    rect = letterbox(*screen.get_size())
    if rect.width > 0 and rect.height > 0:
        screen.blit(pygame.transform.smoothscale(target, rect.size), rect.topleft)
    pygame.display.flip()


def main(argv: list[str] | None = None) -> int:
    """Run the game until the window is closed."""
    parser = argparse.ArgumentParser(prog="mansion", description="My Mansion")
    parser.add_argument(
        "--font",
        default="assets/fonts/LuckiestGuy-Regular.ttf",
        help="path of the TrueType font to use",
    )
    args = parser.parse_args(argv)

    pygame.init()
    try:
        window = PygameWindow(GAME_WIDTH, GAME_HEIGHT, TITLE)
        target = pygame.Surface((GAME_WIDTH, GAME_HEIGHT))
        clock = pygame.time.Clock()
        manager = SceneManager(window, args.font)
        try:
            while not window.closed:
                dt = clock.tick(TARGET_FPS) / 1000.0
                events = pygame.event.get()
                if any(event.type == pygame.QUIT for event in events):
                    break
                manager.update(translate_keys(events), dt)
                if window.closed:
                    break
                target.fill(RAY_WHITE)
                manager.draw(target)
                _present(target)
        finally:
            manager.unload()
    finally:
        pygame.quit()
    return 0