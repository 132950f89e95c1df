"""
Hand classification for clock-face touches.

Two tests are run against each hand on every sample:

* a press test, which checks whether the touch point lies on the hand's line
  within an angular tolerance, and
* a crossing test, which walks the path recorded since the previous sample and
  checks whether it swept across the hand's ray.
"""

from typing import Optional, Sequence

from ..config.settings import TouchTimeConfig
from ..utils.geometry import Point, GeometryUtils


def is_pressing(point: Point, center: Point, target_angle: float,
                tolerance_degrees: float = TouchTimeConfig.PRESS_TOLERANCE_DEGREES) -> bool:
    """
    Does the touch point lie on the line radiating at target_angle?

    Args:
        point: Current touch position
        center: Clock hub
        target_angle: Hand angle in radians, clockwise from 12 o'clock
        tolerance_degrees: Half-width of the hand's hit zone

    Returns:
        True if the touch angle is strictly within tolerance of the hand.
        A touch on the hub has no angle and never presses a hand.
    """
    if tolerance_degrees < 0:
        raise ValueError("Press tolerance cannot be negative")

    touch_angle = GeometryUtils.clock_angle(point, center)
    if touch_angle is None:
        return False

    return GeometryUtils.angular_difference(touch_angle, target_angle) < tolerance_degrees


def crossed(history: Sequence[Point], last_point: Optional[Point],
            target_ray: Point, center: Point) -> bool:
    """
    Does the recent motion cross the hand's ray?

    This is a rotational-sign test rather than a segment intersection: a
    segment prev -> p crosses when prev -> ray, ray -> p and prev -> p all
    turn the same way about the centre.

    Args:
        history: Intermediate positions since the previous sample, oldest first
        last_point: Position recorded by the previous sample, None after a
            fresh touch down
        target_ray: Point one unit from center along the hand
        center: Clock hub

    Returns:
        True on the first segment that sweeps across the ray.
    """
    prev = last_point

    for point in history:
        if prev is None or prev.is_nan():
            dir1 = 0
        else:
            dir1 = GeometryUtils.direction_of_vector(prev, target_ray, center)
        dir2 = GeometryUtils.direction_of_vector(target_ray, point, center)

        if (dir1 == dir2 and dir1 != 0
                and dir1 == GeometryUtils.direction_of_vector(prev, point, center)):
            return True
        prev = point

    return False


def crosses_angle(history: Sequence[Point], last_point: Optional[Point],
                  angle: float, center: Point) -> bool:
    """Crossing test against the hand at angle."""
    return crossed(history, last_point, GeometryUtils.ray_point(center, angle), center)
