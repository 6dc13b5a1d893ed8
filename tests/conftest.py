import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from contextlib import contextmanager

import pygame
import pytest
from pygame.math import Vector2

from circle_shooter.animator import Animator


class RecordingSurface:
    """Render surface that remembers every draw call instead of drawing."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.alpha = 1.0
        self.circles = []
        self.rects = []

    def fill_circle(self, center, radius, color):
        self.circles.append((Vector2(center), radius, pygame.Color(color), self.alpha))

    def fill_rect(self, rect, color, alpha=1.0):
        self.rects.append((tuple(rect), color, alpha))

    @contextmanager
    def global_alpha(self, alpha):
        previous = self.alpha
        self.alpha = alpha
        try:
            yield
        finally:
            self.alpha = previous


class FakeSound:
    def __init__(self):
        self.played = []

    def play(self, name):
        self.played.append(name)


class FakeHandle:
    """Stand-in for FrameClock / RepeatingTimer."""

    def __init__(self):
        self.active = False
        self.starts = 0
        self.cancels = 0

    def start(self):
        self.active = True
        self.starts += 1

    def cancel(self):
        self.active = False
        self.cancels += 1


class ScriptedRandom(random.Random):
    """Returns queued values from ``random()``, then falls back to a seeded stream."""

    def __init__(self, values, seed=0):
        super().__init__(seed)
        self.values = list(values)

    def random(self):
        if self.values:
            return self.values.pop(0)
        return super().random()


@pytest.fixture(scope="session", autouse=True)
def pygame_headless():
    pygame.display.init()
    yield
    pygame.quit()


@pytest.fixture
def surface():
    return RecordingSurface()


@pytest.fixture
def sound():
    return FakeSound()


@pytest.fixture
def frame_clock():
    return FakeHandle()


@pytest.fixture
def spawn_timer():
    return FakeHandle()


@pytest.fixture
def events():
    return {"scores": [], "game_over": []}


@pytest.fixture
def animator(surface, sound, frame_clock, spawn_timer, events):
    return Animator(
        surface, sound, frame_clock, spawn_timer,
        rng=random.Random(1234),
        on_score=events["scores"].append,
        on_game_over=events["game_over"].append,
    )
