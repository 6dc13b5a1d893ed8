"""Collision detection, scoring and particle bursts."""

from __future__ import annotations

import random
from typing import Callable

from .constants import (
    TOUCH_DISTANCE, SHRINK_AMOUNT, MIN_ENEMY_RADIUS, SHRINK_SCORE, KILL_SCORE,
    PARTICLE_MAX_RADIUS, PARTICLE_SPREAD, PARTICLES_PER_RADIUS, SFX_EXPLOSION
)
from .entities import Enemy, Particle, Projectile
from .geometry import circles_touch
from .models import GameState


class CollisionEngine:
    """
    Runs the pairwise collision tests of one frame against a ``GameState``.

    Nothing is removed from the state's lists while they are being scanned:
    entities are flagged ``alive = False`` and dropped later by ``compact``.
    Flagged entities are skipped by every later test in the same frame.

    Parameters
    ----------
    state : GameState
        Session the engine mutates.
    width, height : int
        Viewport size used for off-screen culling.
    rng : random.Random | None
        Source of randomness for particle bursts.
    on_score : Callable[[int], None] | None
        Called with the new score after every scoring event.
    sound : object | None
        Sound sink with a ``play(name)`` method.
    """

    def __init__(self, state: GameState, width: int, height: int,
                 rng: random.Random | None = None,
                 on_score: Callable[[int], None] | None = None,
                 sound=None) -> None:
        self.state = state
        self.width = width
        self.height = height
        self.rng = rng or random.Random()
        self.on_score = on_score
        self.sound = sound

    # ------------------------------- Tests -------------------------------------------

    def player_hit(self, enemy: Enemy) -> bool:
        """True when ``enemy`` has reached the player."""
        player = self.state.player
        return circles_touch(enemy.pos, enemy.radius, player.pos, player.radius, TOUCH_DISTANCE)

    def check_projectiles(self, enemy: Enemy, now_ms: int) -> int:
        """
        Test every live projectile against ``enemy`` and resolve the hits.

        Returns
        -------
        int
            Points awarded by this enemy's hits this frame.
        """
        awarded = 0
        for projectile in self.state.projectiles:
            if not enemy.alive:
                break
            if not projectile.alive:
                continue
            if circles_touch(projectile.pos, projectile.radius, enemy.pos, enemy.radius, TOUCH_DISTANCE):
                awarded += self.resolve_hit(enemy, projectile, now_ms)
        return awarded

    def resolve_hit(self, enemy: Enemy, projectile: Projectile, now_ms: int) -> int:
        """Burst particles, shrink or destroy the enemy, award points."""
        self.burst(enemy, projectile)

        if enemy.radius - SHRINK_AMOUNT > MIN_ENEMY_RADIUS:
            points = SHRINK_SCORE
            enemy.shrink(SHRINK_AMOUNT, now_ms)
        else:
            points = KILL_SCORE
            enemy.alive = False
            self.state.kills += 1
        projectile.alive = False

        self.state.hits += 1
        self.state.score += points
        if self.on_score:
            self.on_score(self.state.score)
        if self.sound:
            self.sound.play(SFX_EXPLOSION)
        return points

    def burst(self, enemy: Enemy, projectile: Projectile) -> list[Particle]:
        """Emit sparks in the enemy's color at the impact point."""
        rnd = self.rng.random
        particles = []
        for _ in range(round(enemy.radius * PARTICLES_PER_RADIUS)):
            # 1 - random() keeps the radius in (0, max]
            radius = (1 - rnd()) * PARTICLE_MAX_RADIUS
            velocity = (
                (rnd() - 0.5) * rnd() * PARTICLE_SPREAD,
                (rnd() - 0.5) * rnd() * PARTICLE_SPREAD,
            )
            particles.append(Particle(projectile.pos, radius, enemy.color, velocity))
        self.state.particles.extend(particles)
        return particles

    # ------------------------------- Culling -----------------------------------------

    def cull_projectiles(self) -> int:
        """Flag projectiles that left the viewport; returns how many were flagged."""
        culled = 0
        for projectile in self.state.projectiles:
            if projectile.alive and projectile.is_off_screen(self.width, self.height):
                projectile.alive = False
                culled += 1
        return culled

    def cull_particles(self) -> int:
        culled = 0
        for particle in self.state.particles:
            if particle.alive and particle.faded:
                particle.alive = False
                culled += 1
        return culled

    def compact(self) -> None:
        """Drop every flagged entity, keeping list identity and order."""
        state = self.state
        state.projectiles[:] = [p for p in state.projectiles if p.alive]
        state.enemies[:] = [e for e in state.enemies if e.alive]
        state.particles[:] = [p for p in state.particles if p.alive]
