"""Lightweight data models used across the game."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .entities import Enemy, Particle, Player, Projectile


class GamePhase(enum.Enum):
    """Session lifecycle: IDLE -> RUNNING -> GAME_OVER -> IDLE."""
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """
    Everything a single session mutates.

    Attributes
    ----------
    player : Player
        The avatar at the viewport center.
    projectiles, enemies, particles : list
        Live entities in spawn order.
    score : int
        Points awarded so far; only ever increases while running.
    running : bool
        False once the session has ended; the state is then frozen.
    shots, hits, kills : int
        Session statistics shown on the game over screen.
    """
    player: Player
    projectiles: list[Projectile] = field(default_factory=list)
    enemies: list[Enemy] = field(default_factory=list)
    particles: list[Particle] = field(default_factory=list)
    score: int = 0
    running: bool = True
    shots: int = 0
    hits: int = 0
    kills: int = 0

    @property
    def accuracy(self) -> float:
        """Percentage of fired projectiles that hit an enemy."""
        return (self.hits / self.shots * 100.0) if self.shots > 0 else 0.0
