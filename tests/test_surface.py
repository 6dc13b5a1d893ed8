import pygame
import pytest
from pygame.math import Vector2

from circle_shooter.surface import PygameSurface


@pytest.fixture
def target():
    surf = pygame.Surface((100, 80))
    surf.fill((0, 0, 0))
    return surf


def test_reports_size(target):
    surface = PygameSurface(target)
    assert (surface.width, surface.height) == (100, 80)
    assert surface.center == Vector2(50, 40)


def test_opaque_circle(target):
    surface = PygameSurface(target)
    surface.fill_circle(Vector2(50, 40), 10, "white")
    assert target.get_at((50, 40))[:3] == (255, 255, 255)
    assert target.get_at((5, 5))[:3] == (0, 0, 0)


def test_zero_radius_draws_nothing(target):
    surface = PygameSurface(target)
    surface.fill_circle(Vector2(50, 40), 0, "white")
    assert target.get_at((50, 40))[:3] == (0, 0, 0)


def test_translucent_circle_blends(target):
    surface = PygameSurface(target)
    with surface.global_alpha(0.5):
        surface.fill_circle(Vector2(50, 40), 10, (255, 0, 0))
    red = target.get_at((50, 40)).r
    assert 120 <= red <= 135


def test_global_alpha_is_scoped(target):
    surface = PygameSurface(target)
    with surface.global_alpha(0.3):
        assert surface.alpha == 0.3
        with surface.global_alpha(0.7):
            assert surface.alpha == 0.7
        assert surface.alpha == 0.3
    assert surface.alpha == 1.0


def test_global_alpha_restored_after_error(target):
    surface = PygameSurface(target)
    with pytest.raises(ValueError):
        with surface.global_alpha(0.2):
            raise ValueError("boom")
    assert surface.alpha == 1.0


def test_fade_rect_darkens(target):
    target.fill((200, 200, 200))
    surface = PygameSurface(target)
    surface.fill_rect((0, 0, 100, 80), (0, 0, 0), alpha=0.5)
    value = target.get_at((10, 10)).r
    assert 95 <= value <= 105


def test_opaque_rect(target):
    surface = PygameSurface(target)
    surface.fill_rect((10, 10, 20, 20), (0, 255, 0))
    assert target.get_at((15, 15))[:3] == (0, 255, 0)
    assert target.get_at((5, 5))[:3] == (0, 0, 0)
