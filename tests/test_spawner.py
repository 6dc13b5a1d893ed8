import math
import random

import pytest
from pygame.math import Vector2

from circle_shooter.spawner import Spawner

from conftest import ScriptedRandom

WIDTH, HEIGHT = 800, 600
CENTER = Vector2(WIDTH / 2, HEIGHT / 2)


def on_an_edge(enemy):
    r = enemy.radius
    x, y = enemy.pos
    on_vertical = x in (-r, WIDTH + r) and 0 <= y < HEIGHT
    on_horizontal = y in (-r, HEIGHT + r) and 0 <= x < WIDTH
    return on_vertical or on_horizontal


def test_spawn_appends_and_returns_enemy():
    spawner = Spawner(WIDTH, HEIGHT, random.Random(7))
    enemies = []
    enemy = spawner.spawn(enemies)
    assert enemies == [enemy]


def test_spawned_enemies_respect_ranges():
    spawner = Spawner(WIDTH, HEIGHT, random.Random(42))
    enemies = []
    for _ in range(300):
        spawner.spawn(enemies)

    for enemy in enemies:
        assert 4 <= enemy.radius < 30
        assert on_an_edge(enemy)
        assert enemy.velocity.length() == pytest.approx(1.0)
        expected = math.atan2(CENTER.y - enemy.pos.y, CENTER.x - enemy.pos.x)
        assert math.atan2(enemy.velocity.y, enemy.velocity.x) == pytest.approx(expected)

    xs = {e.pos.x for e in enemies}
    ys = {e.pos.y for e in enemies}
    assert any(x < 0 for x in xs) and any(x > WIDTH for x in xs)
    assert any(y < 0 for y in ys) and any(y > HEIGHT for y in ys)


def test_spawn_on_far_vertical_edge():
    # radius, vertical edges, far side, y halfway, hue
    rng = ScriptedRandom([0.0, 0.2, 0.7, 0.5, 0.0])
    enemy = Spawner(WIDTH, HEIGHT, rng).make_enemy()

    assert enemy.radius == 4
    assert enemy.pos == Vector2(WIDTH + 4, HEIGHT / 2)
    assert enemy.velocity.x == pytest.approx(-1)
    assert enemy.velocity.y == pytest.approx(0, abs=1e-9)


def test_spawn_on_near_horizontal_edge():
    rng = ScriptedRandom([0.5, 0.9, 0.25, 0.1, 0.5])
    enemy = Spawner(WIDTH, HEIGHT, rng).make_enemy()

    assert enemy.radius == pytest.approx(17)
    assert enemy.pos == Vector2(WIDTH * 0.25, -17)


def test_color_has_fixed_saturation_and_lightness():
    spawner = Spawner(WIDTH, HEIGHT, random.Random(3))
    for _ in range(20):
        h, s, l, a = spawner.pick_color().hsla
        assert s == pytest.approx(50, abs=2)
        assert l == pytest.approx(50, abs=2)


def test_speed_is_tunable():
    spawner = Spawner(WIDTH, HEIGHT, random.Random(3), speed=2.5)
    enemy = spawner.make_enemy()
    assert enemy.velocity.length() == pytest.approx(2.5)
