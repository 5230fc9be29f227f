"""Scene manager that routes updates and drawing to the active scene."""

from __future__ import annotations

from collections.abc import Collection

import pygame

from .controls import Key, SceneID, Window
from .menu import MenuScene
from .settings import SettingsScene
from .transition import TransitionCircle


class SceneManager:
    """Owns every scene and switches between them."""

    def __init__(self, window: Window, font: str | None = None) -> None:
        self.window = window
        self.transition = TransitionCircle()
        self.menu = MenuScene(font)
        self.settings = SettingsScene(font)
        self._current = SceneID.TRANSITION
        self.transition.reset()

    def current(self) -> SceneID:
        """The scene that is active now."""
        return self._current

    def change(self, scene: SceneID) -> None:
        """Make the given scene active and start it afresh."""
        self._current = scene
        if scene is SceneID.TRANSITION:
            self.transition.reset()
        elif scene is SceneID.MENU:
            self.menu.reset()
        elif scene is SceneID.SETTINGS:
            self.settings.reset(*self.window.size())

    def update(self, pressed: Collection[Key], dt: float) -> None:
        """Advance the active scene by one frame."""
        if self._current is SceneID.TRANSITION:
            self.transition.update(dt)
            if self.transition.is_done():
                self.change(SceneID.MENU)
            return

        if self._current is SceneID.MENU:
            target = self.menu.update(pressed, self.window)
        else:
            target = self.settings.update(pressed, self.window)
        if target is not None:
            self.change(target)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the active scene onto the surface."""
        if self._current is SceneID.TRANSITION:
            self.transition.draw(surface)
        elif self._current is SceneID.MENU:
            self.menu.draw(surface)
        else:
            self.settings.draw(surface)

    def unload(self) -> None:
        """Release the fonts the scenes have loaded."""
        for scene in (self.menu, self.settings):
            scene._fonts._cache.clear()