"""
Clock model for the watch face.
"""

from .clock_model import (
    TimeSource,
    current_minutes,
    angles_for_minutes,
    current_angles
)

__all__ = [
    'TimeSource',
    'current_minutes',
    'angles_for_minutes',
    'current_angles'
]
