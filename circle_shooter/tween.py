"""Time-based interpolation of a single scalar (used for enemy shrinking)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


@dataclass
class Tween:
    """
    Interpolates from ``start`` to ``target`` over ``duration_ms``.

    Attributes
    ----------
    start : float
        Value at ``start_ms``.
    target : float
        Value once the tween has finished.
    start_ms : int
        Game time in milliseconds the tween began.
    duration_ms : int
        Length of the tween; zero or less jumps straight to ``target``.
    easing : Callable[[float], float]
        Maps normalized time in [0, 1] to progress in [0, 1].
    """
    start: float
    target: float
    start_ms: int
    duration_ms: int
    easing: Callable[[float], float] = ease_out_cubic

    def progress(self, now_ms: int) -> float:
        if self.duration_ms <= 0:
            return 1.0
        t = (now_ms - self.start_ms) / self.duration_ms
        return max(0.0, min(1.0, t))

    def value_at(self, now_ms: int) -> float:
        eased = self.easing(self.progress(now_ms))
        return self.start + (self.target - self.start) * eased

    def finished(self, now_ms: int) -> bool:
        return self.progress(now_ms) >= 1.0
