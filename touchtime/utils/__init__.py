"""
Utilities package for clock-face geometry and feedback logging.
"""

from .geometry import (
    Point,
    ViewGeometry,
    GeometryUtils
)
from .logger import HapticLogger

__all__ = [
    'Point',
    'ViewGeometry',
    'GeometryUtils',
    'HapticLogger'
]
