"""
Clock model: hand angles for a 12-hour analog face with hour and minute hands.
"""

import datetime
import math
from typing import Callable, Tuple

TimeSource = Callable[[], datetime.datetime]

MINUTES_PER_DIAL = 720


def current_minutes(now: datetime.datetime) -> int:
    """Minutes since midnight or midday, in [0, 720)."""
    return (now.hour * 60 + now.minute) % MINUTES_PER_DIAL


def angles_for_minutes(minutes: int) -> Tuple[float, float]:
    """Hour and minute hand angles (radians, clockwise from 12) for a dial time."""
    hour_angle = minutes * 2.0 * math.pi / 720.0
    minute_angle = (minutes % 60) * 2.0 * math.pi / 60.0
    return hour_angle, minute_angle


def current_angles(now: datetime.datetime) -> Tuple[float, float]:
    """Hour and minute hand angles for a wall-clock time."""
    return angles_for_minutes(current_minutes(now))
