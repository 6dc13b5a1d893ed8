"""
Drawable, updatable game entities.

Every entity is a filled circle. ``update`` advances one frame (Euler step
with an implicit timestep of one frame) and draws. Entities are flagged with
``alive = False`` when they meet their destruction condition and are removed
from their collection by the collision engine's compaction step.
"""

from __future__ import annotations

import pygame
from pygame.math import Vector2

from .constants import FRICTION, PARTICLE_FADE, SHRINK_TWEEN_MS
from .geometry import circle_outside_rect
from .tween import Tween


class Entity:
    """Base circle entity with a position, radius and color."""

    def __init__(self, pos, radius: float, color) -> None:
        self.pos = Vector2(pos)
        self.radius = radius
        self.color = pygame.Color(color)
        self.alive = True

    def draw(self, surface) -> None:
        surface.fill_circle(self.pos, self.radius, self.color)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(pos=({self.pos.x:.1f}, {self.pos.y:.1f}), radius={self.radius:.1f})"


class Player(Entity):
    """The stationary avatar at the center of the viewport."""


class MovingEntity(Entity):
    def __init__(self, pos, radius: float, color, velocity) -> None:
        super().__init__(pos, radius, color)
        self.velocity = Vector2(velocity)

    def move(self) -> None:
        self.pos += self.velocity

    def update(self, surface) -> None:
        self.move()
        self.draw(surface)


class Projectile(MovingEntity):
    """Shot fired from the player toward a click position."""

    def is_off_screen(self, width: float, height: float) -> bool:
        return circle_outside_rect(self.pos, self.radius, width, height)


class Enemy(MovingEntity):
    """
    Circle drifting toward the player.

    The radius can be animated: ``shrink`` starts a tween that is sampled on
    every ``update``, so the enemy visibly contracts after being hit.
    """

    def __init__(self, pos, radius: float, color, velocity) -> None:
        super().__init__(pos, radius, color, velocity)
        self.radius_tween: Tween | None = None

    def shrink(self, amount: float, now_ms: int, duration_ms: int = SHRINK_TWEEN_MS) -> None:
        """Animate the radius from its current value down by ``amount``."""
        self.radius_tween = Tween(self.radius, self.radius - amount, now_ms, duration_ms)

    def sample_radius(self, now_ms: int) -> None:
        if self.radius_tween is None:
            return
        self.radius = self.radius_tween.value_at(now_ms)
        if self.radius_tween.finished(now_ms):
            self.radius_tween = None

    def update(self, surface, now_ms: int = 0) -> None:
        self.sample_radius(now_ms)
        super().update(surface)


class Particle(MovingEntity):
    """
    Spark emitted when a projectile hits an enemy.

    Lifecycle per update: draw at the current alpha, move, fade by a fixed
    step and slow down by the friction factor. The particle is dead once its
    alpha reaches zero.
    """

    def __init__(self, pos, radius: float, color, velocity) -> None:
        super().__init__(pos, radius, color, velocity)
        self.alpha = 1.0

    def draw(self, surface) -> None:
        with surface.global_alpha(self.alpha):
            super().draw(surface)

    def update(self, surface) -> None:
        self.draw(surface)
        self.move()
        self.alpha -= PARTICLE_FADE
        self.velocity *= FRICTION

    @property
    def faded(self) -> bool:
        return self.alpha <= 0
