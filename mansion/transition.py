"""Circular reveal effect shown when the game starts."""

from __future__ import annotations

import math

import pygame

from .controls import BLACK, WHITE

TRANSITION_DURATION = 1.6


class TransitionCircle:
    """A circle that grows from the centre until it covers the screen."""

    def __init__(self, duration: float = TRANSITION_DURATION) -> None:
        if duration <= 0:
            raise ValueError("duration must be positive")
        self.duration = duration
        self.progress = 0.0
        self.finished = False

    def reset(self) -> None:
        """Start the transition again from the beginning."""
        self.progress = 0.0
        self.finished = False

    def update(self, dt: float) -> None:
        """Advance the animation by dt seconds."""
        if self.finished:
            return
        self.progress += dt / self.duration
        if self.progress >= 1.0:
            self.progress = 1.0
            self.finished = True

    def is_done(self) -> bool:
        """Whether the transition has finished."""
        return self.finished

    def radius(self, width: int, height: int) -> float:
        """Current radius for a screen of the given size."""
        max_radius = math.sqrt(width * width + height * height) / 2.0
        return max_radius * self.progress

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the effect onto the surface."""
        surface.fill(BLACK)
        width, height = surface.get_size()
        radius = self.radius(width, height)
        if radius >= 1:
            pygame.draw.circle(surface, WHITE, (width // 2, height // 2), radius)