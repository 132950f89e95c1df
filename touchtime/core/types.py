"""
Data passed between the pointer source, the engine and the haptic actuator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntFlag
from typing import Optional, Tuple

from ..utils.geometry import Point


# ============================================================
# Pointer source -> Engine
# ============================================================

class PointerAction(str, Enum):
    DOWN = "DOWN"
    MOVE = "MOVE"
    UP = "UP"
    CANCEL = "CANCEL"
    OUTSIDE = "OUTSIDE"


@dataclass(frozen=True)
class PointerSample:
    """
    One pointer event.

    history holds the intermediate positions seen since the previous sample,
    oldest first. It does not include position.
    """
    action: PointerAction
    position: Point
    history: Tuple[Point, ...] = ()


# ============================================================
# Engine state
# ============================================================

class HandPattern(IntFlag):
    NONE = 0
    HOUR = 1
    MINUTE = 2
    BOTH = 3


@dataclass
class EngineState:
    """The only state that survives between samples."""
    last_position: Optional[Point] = None
    active_pattern: HandPattern = HandPattern.NONE

    def reset(self) -> None:
        self.last_position = None
        self.active_pattern = HandPattern.NONE


# ============================================================
# Engine -> Actuator
# ============================================================

class CommandType(str, Enum):
    CANCEL = "CANCEL"
    VIBRATE = "VIBRATE"
    VIBRATE_PATTERN = "VIBRATE_PATTERN"


@dataclass(frozen=True)
class HapticCommand:
    """
    A single actuator call.

    VIBRATE uses duration_ms. VIBRATE_PATTERN uses timings (alternating
    off/on durations in ms, starting with off) and repeat (-1 plays once,
    otherwise the index to loop back to).
    """
    type: CommandType
    duration_ms: int = 0
    timings: Tuple[int, ...] = field(default_factory=tuple)
    repeat: int = -1

    @classmethod
    def cancel(cls) -> "HapticCommand":
        return cls(type=CommandType.CANCEL)

    @classmethod
    def vibrate(cls, duration_ms: int) -> "HapticCommand":
        return cls(type=CommandType.VIBRATE, duration_ms=int(duration_ms))

    @classmethod
    def pattern(cls, timings, repeat: int = -1) -> "HapticCommand":
        return cls(type=CommandType.VIBRATE_PATTERN,
                   timings=tuple(int(t) for t in timings), repeat=repeat)
