"""
Haptic feedback state machine for the watch face.
"""

from .engine import (
    SampleOutcome,
    TouchTimeEngine,
    evaluate_sample,
    process_sample
)

__all__ = [
    'SampleOutcome',
    'TouchTimeEngine',
    'evaluate_sample',
    'process_sample'
]
