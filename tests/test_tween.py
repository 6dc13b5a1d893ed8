import pytest

from circle_shooter.tween import Tween, ease_out_cubic


def test_ease_out_cubic_endpoints():
    assert ease_out_cubic(0) == 0
    assert ease_out_cubic(1) == 1
    # eases out: ahead of linear halfway through
    assert ease_out_cubic(0.5) > 0.5


def test_tween_interpolates_between_start_and_target():
    tween = Tween(start=20, target=10, start_ms=1000, duration_ms=300)
    assert tween.value_at(1000) == 20
    assert 10 < tween.value_at(1150) < 15
    assert tween.value_at(1300) == 10
    assert tween.value_at(5000) == 10


def test_tween_before_start_holds_start_value():
    tween = Tween(start=20, target=10, start_ms=1000, duration_ms=300)
    assert tween.value_at(900) == 20
    assert not tween.finished(900)


def test_tween_finished():
    tween = Tween(start=0, target=1, start_ms=0, duration_ms=100)
    assert not tween.finished(99)
    assert tween.finished(100)


def test_zero_duration_jumps_to_target():
    tween = Tween(start=5, target=1, start_ms=0, duration_ms=0)
    assert tween.value_at(0) == 1
    assert tween.finished(0)


def test_custom_easing():
    tween = Tween(start=0, target=10, start_ms=0, duration_ms=100, easing=lambda t: t)
    assert tween.value_at(25) == pytest.approx(2.5)
