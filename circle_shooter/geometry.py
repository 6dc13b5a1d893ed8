"""
Angle and distance helpers on top of pygame's Vector2.
"""

from __future__ import annotations

import math

from pygame.math import Vector2


def angle_to(origin: Vector2, target: Vector2) -> float:
    """Angle in radians of the ray from ``origin`` to ``target`` (atan2 convention)."""
    return math.atan2(target.y - origin.y, target.x - origin.x)


def velocity_from_angle(angle: float, speed: float = 1.0) -> Vector2:
    """Velocity vector of magnitude ``speed`` pointing along ``angle``."""
    return Vector2(math.cos(angle) * speed, math.sin(angle) * speed)


def gap_between(a_pos: Vector2, a_radius: float, b_pos: Vector2, b_radius: float) -> float:
    """Distance between two circle edges; negative when they overlap."""
    return a_pos.distance_to(b_pos) - a_radius - b_radius


def circles_touch(a_pos: Vector2, a_radius: float, b_pos: Vector2, b_radius: float,
                  threshold: float = 1.0) -> bool:
    """Check if two circles are touching or overlapping, within ``threshold`` pixels."""
    return gap_between(a_pos, a_radius, b_pos, b_radius) < threshold


def circle_outside_rect(pos: Vector2, radius: float, width: float, height: float) -> bool:
    """True when a circle lies fully outside the ``(0, 0, width, height)`` rectangle."""
    return (
        pos.x + radius < 0
        or pos.y + radius < 0
        or pos.x - radius > width
        or pos.y - radius > height
    )
