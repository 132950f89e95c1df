"""
Shared geometry for clock-face touch processing.

Angles are measured in radians clockwise from 12 o'clock, in screen
coordinates where y grows downwards.
"""

import math
from typing import Optional


class Point:
    """Represents a 2D touch coordinate."""

    def __init__(self, x: float, y: float):
        self.x = float(x)
        self.y = float(y)

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self):
        return hash((self.x, self.y))

    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


class ViewGeometry:
    """Size of the rendering surface; the clock hub sits at its centre."""

    def __init__(self, width: float, height: float):
        if width <= 0 or height <= 0:
            raise ValueError(f"View size must be positive, got {width}x{height}")
        self.width = float(width)
        self.height = float(height)

    def __repr__(self):
        return f"ViewGeometry({self.width:.0f}x{self.height:.0f})"

    @property
    def center(self) -> Point:
        return Point(0.5 * self.width, 0.5 * self.height)

    @property
    def diagonal(self) -> float:
        return math.sqrt(self.width ** 2 + self.height ** 2)


class GeometryUtils:
    """Utility class for clock-face angle calculations."""

    @staticmethod
    def clock_angle(point: Point, center: Point) -> Optional[float]:
        """Angle of point around center, clockwise from 12 o'clock.

        Returns None where the angle is undefined: at the hub itself or
        for NaN coordinates.
        """
        if point.is_nan() or point == center:
            return None
        angle = math.atan2(point.x - center.x, center.y - point.y)
        if math.isnan(angle):
            return None
        return angle

    @staticmethod
    def ray_point(center: Point, angle: float) -> Point:
        """Point one unit from center along the ray at angle."""
        return Point(center.x + math.sin(angle), center.y - math.cos(angle))

    @staticmethod
    def angular_difference(angle1: float, angle2: float) -> float:
        """Distance between two angles, in degrees folded into [0, 180]."""
        diff = math.degrees(abs(angle1 - angle2))
        if diff > 360.0:
            diff -= 360.0
        if diff > 180.0:
            diff = 360.0 - diff
        return diff

    @staticmethod
    def direction_of_vector(start: Point, end: Point, center: Point) -> int:
        """Rotational direction of start -> end about center.

        Returns 1 if it points clockwise, -1 if anticlockwise, 0 if
        ambiguous.
        """
        cross_z = ((start.x - center.x) * (end.y - center.y)
                   - (end.x - center.x) * (start.y - center.y))
        if cross_z < 0.0:
            return -1
        elif cross_z > 0.0:
            return 1
        return 0
