"""Render surface: the only drawing capability the simulation core depends on."""

from __future__ import annotations

import math
from contextlib import contextmanager
from typing import Iterator

import pygame


class PygameSurface:
    """
    Primitive draw commands on top of a ``pygame.Surface``.

    Translucent shapes are drawn on a scratch ``SRCALPHA`` surface and blitted,
    so the target surface itself never needs per-pixel alpha.

    Parameters
    ----------
    target : pygame.Surface
        Surface to draw on, usually the display surface.
    """

    def __init__(self, target: pygame.Surface) -> None:
        self.target = target
        self.alpha = 1.0
        self._overlay: pygame.Surface | None = None

    @property
    def width(self) -> int:
        return self.target.get_width()

    @property
    def height(self) -> int:
        return self.target.get_height()

    @property
    def center(self) -> pygame.math.Vector2:
        return pygame.math.Vector2(self.width / 2, self.height / 2)

    def fill_circle(self, center: pygame.math.Vector2, radius: float, color) -> None:
        """Draw a filled circle, honouring the current global alpha."""
        if radius <= 0 or self.alpha <= 0:
            return
        color = pygame.Color(color)
        if self.alpha >= 1:
            pygame.draw.circle(self.target, color, (center.x, center.y), radius)
            return

        size = math.ceil(radius * 2) + 2
        circle_surf = pygame.Surface((size, size), pygame.SRCALPHA)
        color.a = int(255 * self.alpha)
        pygame.draw.circle(circle_surf, color, (size / 2, size / 2), radius)
        self.target.blit(circle_surf, (round(center.x - size / 2), round(center.y - size / 2)))

    def fill_rect(self, rect: pygame.Rect | tuple, color, alpha: float = 1.0) -> None:
        """Fill a rectangle; ``alpha`` below 1 blends it over what is already drawn."""
        rect = pygame.Rect(rect)
        color = pygame.Color(color)
        alpha = max(0.0, min(1.0, alpha * self.alpha))
        if alpha >= 1:
            self.target.fill(color, rect)
            return

        if self._overlay is None or self._overlay.get_size() != rect.size:
            self._overlay = pygame.Surface(rect.size, pygame.SRCALPHA)
        color.a = int(255 * alpha)
        self._overlay.fill(color)
        self.target.blit(self._overlay, rect.topleft)

    @contextmanager
    def global_alpha(self, alpha: float) -> Iterator[None]:
        """Draw calls inside the block use ``alpha``; the previous value is restored after."""
        previous = self.alpha
        self.alpha = max(0.0, min(1.0, alpha))
        try:
            yield
        finally:
            self.alpha = previous
