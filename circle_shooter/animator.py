"""
Simulation loop: owns the session state and the handles of every repeating
activity, and advances the world one frame at a time.
"""

from __future__ import annotations

import random
from typing import Callable

from pygame.math import Vector2

from .collisions import CollisionEngine
from .constants import (
    BG_COLOR, TRAIL_ALPHA, PLAYER_RADIUS, PLAYER_COLOR,
    PROJECTILE_RADIUS, PROJECTILE_COLOR, PROJECTILE_SPEED, SFX_HIT
)
from .entities import Enemy, Player, Projectile
from .geometry import angle_to, velocity_from_angle
from .logger import GameLogger
from .models import GamePhase, GameState
from .spawner import Spawner


class Animator:
    """
    Drives a session through IDLE -> RUNNING -> GAME_OVER -> IDLE.

    The animator never schedules anything on its own. ``frame_clock`` and
    ``spawn_timer`` are handles with ``start()``/``cancel()``: the game loop
    calls ``animate`` while the frame clock is active and ``spawn_enemy``
    whenever the spawn timer fires. ``stop`` cancels both.

    Parameters
    ----------
    surface : PygameSurface
        Render surface; its size is read once per session at ``start``.
    sound : SoundEffect | None
        Sound sink with ``play(name)``.
    frame_clock, spawn_timer
        Handles for the frame callback and the enemy spawn timer.
    logger : GameLogger | None
        Optional markdown event log.
    rng : random.Random | None
        Shared randomness for spawning and particle bursts.
    on_score : Callable[[int], None] | None
        Receives the score after every scoring event and on start.
    on_game_over : Callable[[int], None] | None
        Receives the final score when the session ends.
    """

    def __init__(self, surface, sound, frame_clock, spawn_timer,
                 logger: GameLogger | None = None,
                 rng: random.Random | None = None,
                 on_score: Callable[[int], None] | None = None,
                 on_game_over: Callable[[int], None] | None = None) -> None:
        self.surface = surface
        self.sound = sound
        self.frame_clock = frame_clock
        self.spawn_timer = spawn_timer
        self.logger = logger
        self.rng = rng or random.Random()
        self.on_score = on_score
        self.on_game_over = on_game_over

        self.phase = GamePhase.IDLE
        self.state: GameState | None = None
        self.spawner: Spawner | None = None
        self.engine: CollisionEngine | None = None

    @property
    def running(self) -> bool:
        return self.phase is GamePhase.RUNNING

    @property
    def score(self) -> int:
        return self.state.score if self.state else 0

    # --------------------------------- Lifecycle ------------------------------------

    def start(self) -> bool:
        """
        Begin a fresh session; only valid from IDLE.

        Returns
        -------
        bool
            True if a session was started.
        """
        if self.phase is not GamePhase.IDLE:
            return False

        width, height = self.surface.width, self.surface.height
        center = Vector2(width / 2, height / 2)
        self.state = GameState(player=Player(center, PLAYER_RADIUS, PLAYER_COLOR))
        self.spawner = Spawner(width, height, self.rng)
        self.engine = CollisionEngine(self.state, width, height, self.rng,
                                      on_score=self.on_score, sound=self.sound)
        self.phase = GamePhase.RUNNING

        self.spawn_timer.start()
        self.frame_clock.start()
        if self.on_score:
            self.on_score(0)
        if self.logger:
            self.logger.log_session_start(width, height)
        return True

    def stop(self) -> None:
        """Cancel the frame clock and the spawn timer. Safe to call repeatedly."""
        self.frame_clock.cancel()
        self.spawn_timer.cancel()

    def end_game(self) -> None:
        if self.phase is not GamePhase.RUNNING:
            return
        self.stop()
        self.phase = GamePhase.GAME_OVER
        state = self.state
        state.running = False
        if self.logger:
            self.logger.log_game_over(state.score, state.shots, state.hits, state.kills)
        if self.on_game_over:
            self.on_game_over(state.score)

    def restart(self) -> bool:
        """Return to IDLE after a game over so ``start`` can run again."""
        if self.phase is not GamePhase.GAME_OVER:
            return False
        self.state = None
        self.spawner = None
        self.engine = None
        self.phase = GamePhase.IDLE
        return True

    # --------------------------------- Commands -------------------------------------

    def fire(self, target) -> Projectile | None:
        """Shoot from the player toward ``target`` (viewport coordinates)."""
        if not self.running:
            return None
        state = self.state
        origin = state.player.pos
        angle = angle_to(origin, Vector2(target))
        projectile = Projectile(origin, PROJECTILE_RADIUS, PROJECTILE_COLOR,
                                velocity_from_angle(angle, PROJECTILE_SPEED))
        state.projectiles.append(projectile)
        state.shots += 1

        if self.sound:
            self.sound.play(SFX_HIT)
        if self.logger:
            self.logger.log_shot(tuple(target), angle)
        return projectile

    def spawn_enemy(self) -> Enemy | None:
        """Spawn timer callback; late timer events after a game over are ignored."""
        if not self.running:
            return None
        return self.spawner.spawn(self.state.enemies)

    # --------------------------------- Frame ----------------------------------------

    def animate(self, now_ms: int) -> None:
        """
        Advance and draw one frame.

        Order: fade-clear -> player -> particles -> projectiles -> enemies and
        their collisions -> compaction of everything flagged dead.
        """
        if not self.running or not self.frame_clock.active:
            return
        surface = self.surface
        state = self.state
        engine = self.engine

        surface.fill_rect((0, 0, surface.width, surface.height), BG_COLOR, TRAIL_ALPHA)
        state.player.draw(surface)

        engine.cull_particles()
        for particle in state.particles:
            if particle.alive:
                particle.update(surface)

        for projectile in state.projectiles:
            if projectile.alive:
                projectile.update(surface)
        engine.cull_projectiles()

        for enemy in state.enemies:
            if not enemy.alive:
                continue
            enemy.update(surface, now_ms)
            if engine.player_hit(enemy):
                # Terminal: nothing else is updated, scored or removed.
                self.end_game()
                return
            engine.check_projectiles(enemy, now_ms)

        engine.compact()
