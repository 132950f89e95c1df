"""
Long-press recognition for dismissing the watch face.
"""

import logging
from typing import Callable, Optional

from ..config.settings import TouchTimeConfig
from ..core.types import PointerAction, PointerSample
from ..utils.geometry import Point, ViewGeometry

logger = logging.getLogger(__name__)


class LongPressDetector:
    """
    Sees every pointer sample before the feedback engine.

    A press that stays within the touch slop for the long-press timeout fires
    on_long_press once. From then until the pointer is lifted, down and move
    samples are consumed here. Up samples are never consumed, so the engine
    always sees the release.
    """

    def __init__(self, geometry: ViewGeometry,
                 on_long_press: Optional[Callable[[Point], None]] = None,
                 config: Optional[TouchTimeConfig] = None):
        self.config = config or TouchTimeConfig()
        self.on_long_press = on_long_press
        self.slop = geometry.diagonal * self.config.LONG_PRESS_SLOP_PERCENT / 100

        self.down_position: Optional[Point] = None
        self.down_time_ms = 0.0
        self.armed = False
        self.in_long_press = False

    def on_sample(self, sample: PointerSample, now_ms: float) -> bool:
        """Feed a sample. Returns True if the sample was consumed."""
        if sample.action == PointerAction.DOWN:
            self.down_position = sample.position
            self.down_time_ms = now_ms
            self.armed = True
            self.in_long_press = False
            return False

        if sample.action == PointerAction.MOVE:
            if self.in_long_press:
                return True
            if self.armed and self._moved_beyond_slop(sample):
                self.armed = False
            return self.check(now_ms)

        if sample.action in (PointerAction.UP, PointerAction.CANCEL):
            self.reset()

        return False

    def check(self, now_ms: float) -> bool:
        """Fire the long press if the armed press has been held long enough."""
        if self.in_long_press:
            return True
        if not self.armed:
            return False
        if now_ms - self.down_time_ms < self.config.LONG_PRESS_TIMEOUT_MS:
            return False

        self.armed = False
        self.in_long_press = True
        logger.debug(f"Long press at {self.down_position}")
        if self.on_long_press:
            self.on_long_press(self.down_position)
        return True

    def reset(self):
        self.down_position = None
        self.armed = False
        self.in_long_press = False

    def _moved_beyond_slop(self, sample: PointerSample) -> bool:
        for point in sample.history + (sample.position,):
            if point.distance_to(self.down_position) > self.slop:
                return True
        return False
