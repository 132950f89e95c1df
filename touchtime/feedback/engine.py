"""
Feedback state machine: turns pointer samples into haptic commands.

Continuous patterns are edge-triggered. A pattern is started only when the
set of pressed hands changes, and the previous pattern is always cancelled
first. Crossing a hand while pressing nothing produces a one-shot burst.
"""

import datetime
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..clock.clock_model import TimeSource, current_angles
from ..config.settings import TouchTimeConfig
from ..core.types import (
    PointerAction, PointerSample, EngineState, HandPattern, HapticCommand
)
from ..gestures.hand_classifier import is_pressing, crosses_angle
from ..utils.geometry import ViewGeometry
from ..utils.logger import HapticLogger

logger = logging.getLogger(__name__)


@dataclass
class SampleOutcome:
    """Everything one processed sample decided."""
    commands: List[HapticCommand] = field(default_factory=list)
    previous_pattern: HandPattern = HandPattern.NONE
    pattern: HandPattern = HandPattern.NONE
    hour_crossed: bool = False
    minute_crossed: bool = False

    @property
    def pattern_changed(self) -> bool:
        return self.pattern != self.previous_pattern


def continuous_pattern(pattern: HandPattern, config: TouchTimeConfig) -> Optional[HapticCommand]:
    """Repeating command for a pressed-hands state, None for NONE."""
    if pattern == HandPattern.HOUR:
        timings = config.HOUR_PATTERN
    elif pattern == HandPattern.MINUTE:
        timings = config.MINUTE_PATTERN
    elif pattern == HandPattern.BOTH:
        timings = config.BOTH_PATTERN
    else:
        return None
    return HapticCommand.pattern(timings, config.CONTINUOUS_REPEAT)


def crossing_burst(hour_crossed: bool, minute_crossed: bool,
                   config: TouchTimeConfig) -> List[HapticCommand]:
    """One-shot commands for a sweep across the hands."""
    commands = []
    if hour_crossed and minute_crossed:
        commands.append(HapticCommand.pattern(config.BOTH_CROSSED_BURST, -1))
    elif hour_crossed:
        commands.append(HapticCommand.vibrate(config.HOUR_CROSSED_PULSE_MS))
    elif minute_crossed:
        commands.append(HapticCommand.pattern(config.MINUTE_CROSSED_BURST, -1))
    if hour_crossed or minute_crossed:
        commands.append(HapticCommand.vibrate(config.CROSSING_CONFIRM_PULSE_MS))
    return commands


def evaluate_sample(state: EngineState, sample: PointerSample, now: datetime.datetime,
                    geometry: ViewGeometry,
                    config: Optional[TouchTimeConfig] = None) -> Optional[SampleOutcome]:
    """
    Process one pointer sample against the clock.

    Mutates state and returns the outcome, or None if the sample's action
    is not handled (the sample is then not consumed).
    """
    config = config or TouchTimeConfig()
    outcome = SampleOutcome(previous_pattern=state.active_pattern)

    if sample.action == PointerAction.UP:
        state.last_position = None
        if state.active_pattern != HandPattern.NONE:
            outcome.commands.append(HapticCommand.cancel())
            state.active_pattern = HandPattern.NONE
        outcome.pattern = state.active_pattern
        return outcome

    if sample.action not in (PointerAction.DOWN, PointerAction.MOVE):
        return None

    center = geometry.center
    hour_angle, minute_angle = current_angles(now)
    tolerance = config.PRESS_TOLERANCE_DEGREES

    pattern = HandPattern.NONE
    if is_pressing(sample.position, center, hour_angle, tolerance):
        pattern |= HandPattern.HOUR
    if is_pressing(sample.position, center, minute_angle, tolerance):
        pattern |= HandPattern.MINUTE

    if pattern == HandPattern.NONE and sample.action == PointerAction.MOVE:
        outcome.hour_crossed = crosses_angle(sample.history, state.last_position, hour_angle, center)
        outcome.minute_crossed = crosses_angle(sample.history, state.last_position, minute_angle, center)
        outcome.commands.extend(crossing_burst(outcome.hour_crossed, outcome.minute_crossed, config))

    if pattern != state.active_pattern:
        outcome.commands.append(HapticCommand.cancel())
        start = continuous_pattern(pattern, config)
        if start is not None:
            outcome.commands.append(start)
        state.active_pattern = pattern

    state.last_position = sample.position
    outcome.pattern = pattern
    return outcome


def process_sample(state: EngineState, sample: PointerSample, now: datetime.datetime,
                   geometry: ViewGeometry,
                   config: Optional[TouchTimeConfig] = None) -> Optional[List[HapticCommand]]:
    """Actuator commands for one sample, or None if it was not consumed."""
    outcome = evaluate_sample(state, sample, now, geometry, config)
    if outcome is None:
        return None
    return outcome.commands


class TouchTimeEngine:
    """Drives a haptic actuator from pointer samples and the current time."""

    def __init__(self, actuator, geometry: ViewGeometry,
                 time_source: TimeSource = datetime.datetime.now,
                 config: Optional[TouchTimeConfig] = None,
                 haptic_logger: Optional[HapticLogger] = None,
                 state: Optional[EngineState] = None):
        self.actuator = actuator
        self.geometry = geometry
        self.time_source = time_source
        self.config = config or TouchTimeConfig()
        self.haptic_logger = haptic_logger
        self.state = state if state is not None else EngineState()

    def process(self, sample: PointerSample) -> bool:
        """Process one sample. Returns True if it was consumed."""
        outcome = evaluate_sample(self.state, sample, self.time_source(),
                                  self.geometry, self.config)
        if outcome is None:
            logger.debug(f"Ignoring pointer action {sample.action.value}")
            return False

        for command in outcome.commands:
            self.actuator.apply(command)

        if self.haptic_logger:
            x, y = sample.position.x, sample.position.y
            if outcome.hour_crossed or outcome.minute_crossed:
                self.haptic_logger.log_crossing(outcome.hour_crossed, outcome.minute_crossed, x, y)
            if outcome.pattern_changed:
                self.haptic_logger.log_pattern_change(outcome.previous_pattern, outcome.pattern, x, y)

        return True

    def reset(self):
        """Drop the pointer, stopping any continuous pattern."""
        if self.state.active_pattern != HandPattern.NONE:
            self.actuator.cancel()
        self.state.reset()
