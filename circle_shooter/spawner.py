from __future__ import annotations

import random

import pygame

from .constants import (
    ENEMY_MIN_RADIUS, ENEMY_MAX_RADIUS, ENEMY_SPEED, ENEMY_SATURATION, ENEMY_LIGHTNESS
)
from .entities import Enemy
from .geometry import angle_to, velocity_from_angle


class Spawner:
    """
    Responsible for creating enemies just outside a random viewport edge,
    aimed at the viewport center.

    Notes
    - The spawner does not keep time itself. It is called from a repeating
      wall-clock timer owned by the animator, so the cadence is independent
      of frame rate and ends when that timer is cancelled.
    """

    def __init__(self, width: int, height: int, rng: random.Random | None = None,
                 speed: float = ENEMY_SPEED) -> None:
        self.width = width
        self.height = height
        self.center = pygame.math.Vector2(width / 2, height / 2)
        self.rng = rng or random.Random()
        self.speed = speed

    def pick_position(self, radius: float) -> tuple[float, float]:
        """
        Pick a spawn point just off screen so the whole circle starts hidden.

        Half of the time the enemy enters from the left/right edge at a random
        height, otherwise from the top/bottom edge at a random x.
        """
        if self.rng.random() < 0.5:
            x = -radius if self.rng.random() < 0.5 else self.width + radius
            y = self.rng.random() * self.height
        else:
            x = self.rng.random() * self.width
            y = -radius if self.rng.random() < 0.5 else self.height + radius
        return x, y

    def pick_color(self) -> pygame.Color:
        color = pygame.Color(0, 0, 0)
        color.hsla = (self.rng.random() * 360, ENEMY_SATURATION, ENEMY_LIGHTNESS, 100)
        return color

    def make_enemy(self) -> Enemy:
        radius = ENEMY_MIN_RADIUS + self.rng.random() * (ENEMY_MAX_RADIUS - ENEMY_MIN_RADIUS)
        pos = pygame.math.Vector2(self.pick_position(radius))
        velocity = velocity_from_angle(angle_to(pos, self.center), self.speed)
        return Enemy(pos, radius, self.pick_color(), velocity)

    def spawn(self, enemies: list[Enemy]) -> Enemy:
        """
        Create one enemy and append it to ``enemies``.

        Parameters
        ----------
        enemies : list[Enemy]
            The session's live enemy collection.

        Returns
        -------
        Enemy
            The newly spawned enemy.
        """
        enemy = self.make_enemy()
        enemies.append(enemy)
        return enemy
