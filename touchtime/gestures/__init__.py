"""
Touch classification against the clock hands.

This module decides whether a touch presses or sweeps across a hand, and
recognizes the long press that dismisses the watch face.
"""

from .hand_classifier import is_pressing, crossed, crosses_angle
from .long_press import LongPressDetector

__all__ = [
    'is_pressing',
    'crossed',
    'crosses_angle',
    'LongPressDetector'
]
