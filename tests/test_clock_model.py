import datetime
import math

import pytest

from touchtime.clock.clock_model import angles_for_minutes, current_angles, current_minutes


def at(hour, minute, second=0):
    return datetime.datetime(2026, 10, 18, hour, minute, second)


def test_midnight_and_midday_point_both_hands_up():
    assert angles_for_minutes(0) == (0.0, 0.0)
    assert current_angles(at(0, 0)) == (0.0, 0.0)
    assert current_angles(at(12, 0)) == (0.0, 0.0)


def test_six_oclock_hour_hand_points_down():
    hour_angle, minute_angle = angles_for_minutes(360)
    assert hour_angle == pytest.approx(math.pi)
    assert minute_angle == 0.0


def test_half_past_one():
    hour_angle, minute_angle = angles_for_minutes(90)
    assert hour_angle == pytest.approx(math.pi / 4)
    assert minute_angle == pytest.approx(math.pi)


@pytest.mark.parametrize("hour,minute,expected", [
    (0, 0, 0),
    (1, 30, 90),
    (13, 30, 90),
    (18, 0, 360),
    (23, 59, 719),
])
def test_minutes_wrap_at_twelve_hours(hour, minute, expected):
    assert current_minutes(at(hour, minute)) == expected


def test_seconds_are_ignored():
    assert current_angles(at(3, 15, 0)) == current_angles(at(3, 15, 59))
