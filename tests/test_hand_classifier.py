import math

import pytest

from touchtime.clock.clock_model import angles_for_minutes
from touchtime.gestures.hand_classifier import is_pressing, crossed, crosses_angle
from touchtime.utils.geometry import Point, GeometryUtils

CENTER = Point(100, 100)
NORTH_RAY = GeometryUtils.ray_point(CENTER, 0.0)


def on_dial(degrees, radius=50.0):
    """Screen point at a clockwise-from-12 angle around CENTER."""
    angle = math.radians(degrees)
    return Point(CENTER.x + radius * math.sin(angle), CENTER.y - radius * math.cos(angle))


# ---------------------------------------------------------------------------
# press test
# ---------------------------------------------------------------------------

def test_touch_on_hand_presses():
    target = math.radians(30)
    assert is_pressing(on_dial(30), CENTER, target)


def test_touch_east_of_center_is_three_oclock():
    assert GeometryUtils.clock_angle(Point(150, 100), CENTER) == pytest.approx(math.pi / 2)
    assert is_pressing(Point(150, 100), CENTER, math.pi / 2)


@pytest.mark.parametrize("offset", [5.99, -5.99])
def test_just_inside_tolerance_presses(offset):
    assert is_pressing(on_dial(90 + offset), CENTER, math.radians(90))


@pytest.mark.parametrize("offset", [6.01, -6.01, 45.0, -170.0])
def test_outside_tolerance_does_not_press(offset):
    assert not is_pressing(on_dial(90 + offset), CENTER, math.radians(90))


def test_tolerance_is_strict():
    point = on_dial(96)
    target = math.radians(90)
    diff = GeometryUtils.angular_difference(GeometryUtils.clock_angle(point, CENTER), target)
    assert not is_pressing(point, CENTER, target, tolerance_degrees=diff)


def test_wraps_across_twelve():
    # 359 degrees on the dial against a hand at 2 degrees folds to 3 degrees
    assert GeometryUtils.angular_difference(math.radians(359), math.radians(2)) == pytest.approx(3.0)
    assert is_pressing(on_dial(359), CENTER, math.radians(2))
    assert is_pressing(on_dial(1), CENTER, math.radians(358))


def test_wraps_past_a_full_turn():
    # atan2 reports 359 degrees as -1; the hour hand at 11:59 sits at 359.5
    hour_angle, _ = angles_for_minutes(719)
    assert is_pressing(on_dial(359), CENTER, hour_angle)


def test_touch_on_hub_never_presses():
    assert not is_pressing(Point(100, 100), CENTER, 0.0)
    assert GeometryUtils.clock_angle(Point(100, 100), CENTER) is None


def test_nan_touch_never_presses():
    assert not is_pressing(Point(float('nan'), 40), CENTER, 0.0)


def test_equal_points_hash_equal():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert len({Point(1, 2), Point(1.0, 2.0)}) == 1
    assert Point(1, 2) != Point(1, 2.0000001)


# ---------------------------------------------------------------------------
# rotational direction
# ---------------------------------------------------------------------------

def test_direction_of_vector():
    assert GeometryUtils.direction_of_vector(Point(90, 50), Point(110, 50), CENTER) == 1
    assert GeometryUtils.direction_of_vector(Point(110, 50), Point(90, 50), CENTER) == -1
    assert GeometryUtils.direction_of_vector(Point(100, 50), Point(100, 20), CENTER) == 0


# ---------------------------------------------------------------------------
# crossing test
# ---------------------------------------------------------------------------

def test_clockwise_sweep_crosses():
    assert crossed([Point(110, 50)], Point(90, 50), NORTH_RAY, CENTER)


def test_anticlockwise_sweep_crosses():
    assert crossed([Point(90, 50)], Point(110, 50), NORTH_RAY, CENTER)


def test_multi_point_sweep_crosses():
    history = [Point(90, 50), Point(95, 50), Point(105, 50), Point(110, 50)]
    assert crossed(history, Point(80, 50), NORTH_RAY, CENTER)


def test_approach_and_return_does_not_cross():
    history = [Point(95, 50), Point(90, 50)]
    assert not crossed(history, Point(90, 50), NORTH_RAY, CENTER)


def test_sweep_across_opposite_ray_does_not_cross():
    assert not crossed([Point(110, 150)], Point(90, 150), NORTH_RAY, CENTER)


def test_first_segment_needs_a_previous_point():
    assert not crossed([Point(110, 50)], None, NORTH_RAY, CENTER)
    assert crossed([Point(90, 50), Point(110, 50)], None, NORTH_RAY, CENTER)


def test_only_history_points_are_walked():
    assert not crossed([], Point(90, 50), NORTH_RAY, CENTER)


def test_crosses_angle_builds_the_ray():
    assert crosses_angle([Point(150, 110)], Point(150, 90), math.pi / 2, CENTER)
    assert not crosses_angle([Point(150, 110)], Point(150, 90), 0.0, CENTER)
