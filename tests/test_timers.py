import pygame
import pytest

from circle_shooter.timers import FrameClock, RepeatingTimer

TICK_EVENT = pygame.USEREVENT + 5


@pytest.fixture
def pygame_timers():
    pygame.init()
    pygame.event.clear()
    yield
    pygame.time.set_timer(TICK_EVENT, 0)
    pygame.event.clear()


def wait_and_pump(ms):
    pygame.time.wait(ms)
    pygame.event.pump()


def test_repeating_timer_posts_events(pygame_timers):
    timer = RepeatingTimer(TICK_EVENT, 10)
    timer.start()
    assert timer.active

    wait_and_pump(80)
    assert pygame.event.get(TICK_EVENT)

    timer.cancel()


def test_cancel_stops_and_drops_queued_events(pygame_timers):
    timer = RepeatingTimer(TICK_EVENT, 10)
    timer.start()
    wait_and_pump(50)

    timer.cancel()
    assert not timer.active
    assert pygame.event.get(TICK_EVENT) == []

    wait_and_pump(80)
    assert pygame.event.get(TICK_EVENT) == []


def test_cancel_is_idempotent(pygame_timers):
    timer = RepeatingTimer(TICK_EVENT, 10)
    timer.cancel()
    timer.start()
    timer.cancel()
    timer.cancel()
    assert not timer.active


def test_frame_clock_handle():
    clock = FrameClock(60)
    assert not clock.active
    clock.start()
    assert clock.active
    clock.cancel()
    assert not clock.active
