"""
Haptic actuators.

An actuator accepts one-shot vibrations, off/on timing patterns and cancel
requests. Starting anything replaces whatever is currently playing.
"""

import logging
import threading
from collections import deque
from typing import Optional, Sequence

from evdev import InputDevice, ecodes, ff

from ..config.settings import TouchTimeConfig
from ..core.types import CommandType, HapticCommand

logger = logging.getLogger(__name__)


class Actuator:
    """Base class for haptic motors driven by the feedback engine."""

    def vibrate(self, duration_ms: int):
        raise NotImplementedError

    def vibrate_pattern(self, timings: Sequence[int], repeat: int):
        raise NotImplementedError

    def cancel(self):
        raise NotImplementedError

    def apply(self, command: HapticCommand):
        """Dispatch a command to the matching actuator call."""
        if command.type == CommandType.CANCEL:
            self.cancel()
        elif command.type == CommandType.VIBRATE:
            self.vibrate(command.duration_ms)
        elif command.type == CommandType.VIBRATE_PATTERN:
            self.vibrate_pattern(command.timings, command.repeat)

    def close(self):
        """Release the motor."""
        self.cancel()


class LoggingActuator(Actuator):
    """Stands in for a missing motor: calls are logged and dropped."""

    def vibrate(self, duration_ms: int):
        logger.debug(f"no motor: vibrate {duration_ms}ms")

    def vibrate_pattern(self, timings: Sequence[int], repeat: int):
        logger.debug(f"no motor: vibrate pattern {list(timings)} repeat={repeat}")

    def cancel(self):
        logger.debug("no motor: cancel")


class RecordingActuator(Actuator):
    """
    Actuator that records calls instead of driving a motor.

    With maxlen set only the most recent commands are kept.
    """

    def __init__(self, maxlen: Optional[int] = None):
        self.commands = [] if maxlen is None else deque(maxlen=maxlen)

    def vibrate(self, duration_ms: int):
        logger.debug(f"vibrate {duration_ms}ms")
        self.commands.append(HapticCommand.vibrate(duration_ms))

    def vibrate_pattern(self, timings: Sequence[int], repeat: int):
        logger.debug(f"vibrate pattern {list(timings)} repeat={repeat}")
        self.commands.append(HapticCommand.pattern(timings, repeat))

    def cancel(self):
        logger.debug("cancel")
        self.commands.append(HapticCommand.cancel())

    def count(self, command: HapticCommand) -> int:
        return sum(1 for c in self.commands if c == command)

    def clear(self):
        self.commands.clear()


class EvdevRumbleActuator(Actuator):
    """
    Plays patterns on a Linux force-feedback device.

    Each "on" segment of a pattern is uploaded as an FF_RUMBLE effect and
    played from a background thread; "off" segments are waits. A repeating
    pattern loops until cancelled or replaced.
    """

    def __init__(self, device: InputDevice, config: Optional[TouchTimeConfig] = None):
        self.device = device
        self.config = config or TouchTimeConfig()
        self._effects = {}
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    def vibrate(self, duration_ms: int):
        self.vibrate_pattern((0, duration_ms), -1)

    def vibrate_pattern(self, timings: Sequence[int], repeat: int):
        if repeat >= len(timings):
            raise ValueError(f"Repeat index {repeat} outside pattern of {len(timings)} timings")
        if repeat >= 0 and not any(timings[repeat:]):
            raise ValueError("Repeating section of a pattern cannot be empty")
        self._stop_playback()
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._play, args=(tuple(timings), repeat, self._stop)
        )
        self._thread.daemon = True
        self._thread.start()

    def cancel(self):
        self._stop_playback()

    def close(self):
        self._stop_playback()
        with self._lock:
            for effect_id in self._effects.values():
                try:
                    self.device.erase_effect(effect_id)
                except OSError as e:
                    logger.warning(f"Could not erase effect {effect_id}: {e}")
            self._effects.clear()

    def _stop_playback(self):
        self._stop.set()
        if self._thread and self._thread is not threading.current_thread():
            self._thread.join(timeout=1)
        self._thread = None

    def _effect_for(self, duration_ms: int) -> int:
        """Upload (once) a rumble effect of the given length."""
        with self._lock:
            if duration_ms not in self._effects:
                rumble = ff.Rumble(
                    strong_magnitude=self.config.RUMBLE_STRONG_MAGNITUDE,
                    weak_magnitude=self.config.RUMBLE_WEAK_MAGNITUDE
                )
                effect = ff.Effect(
                    ecodes.FF_RUMBLE, -1, 0,
                    ff.Trigger(0, 0),
                    ff.Replay(duration_ms, 0),
                    ff.EffectType(ff_rumble_effect=rumble)
                )
                self._effects[duration_ms] = self.device.upload_effect(effect)
            return self._effects[duration_ms]

    def _play(self, timings, repeat: int, stop: threading.Event):
        index = 0
        try:
            while index < len(timings) and not stop.is_set():
                duration_ms = timings[index]
                if index % 2 == 1 and duration_ms > 0:
                    effect_id = self._effect_for(duration_ms)
                    self.device.write(ecodes.EV_FF, effect_id, 1)
                    if stop.wait(duration_ms / 1000.0):
                        self.device.write(ecodes.EV_FF, effect_id, 0)
                        return
                elif duration_ms > 0 and stop.wait(duration_ms / 1000.0):
                    return

                index += 1
                if index == len(timings) and repeat >= 0:
                    index = repeat
        except OSError as e:
            logger.error(f"Haptic playback failed: {e}")
