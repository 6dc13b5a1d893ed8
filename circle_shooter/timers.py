"""
Cancellable handles for the two repeating activities of a session: the
per-frame clock and the enemy spawn timer.
"""

from __future__ import annotations

import pygame

from .constants import FPS


class FrameClock:
    """
    Display-rate frame clock.

    The game loop only runs the simulation while the clock is active, so
    ``cancel`` is what actually halts animation.
    """

    def __init__(self, fps: int = FPS) -> None:
        self.fps = fps
        self.clock = pygame.time.Clock()
        self.active = False

    def start(self) -> None:
        self.active = True

    def cancel(self) -> None:
        self.active = False

    def tick(self) -> int:
        """Wait for the next frame; returns milliseconds since the previous tick."""
        return self.clock.tick(self.fps)

    def get_fps(self) -> float:
        return self.clock.get_fps()


class RepeatingTimer:
    """
    Posts ``event_type`` to the pygame event queue every ``interval_ms``.

    Parameters
    ----------
    event_type : int
        A ``pygame.USEREVENT``-based event id.
    interval_ms : int
        Wall-clock period in milliseconds.
    """

    def __init__(self, event_type: int, interval_ms: int) -> None:
        self.event_type = event_type
        self.interval_ms = interval_ms
        self.active = False

    def start(self) -> None:
        pygame.time.set_timer(self.event_type, self.interval_ms)
        self.active = True

    def cancel(self) -> None:
        """Stop the timer and drop any event it already queued."""
        if not self.active:
            return
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)
        self.active = False
