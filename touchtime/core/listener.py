"""
Touchscreen listener that feeds the watch-face engine from an evdev device.
"""

import time
import threading
import logging
from typing import List, Optional
from evdev import ecodes

from ..config.settings import TouchTimeConfig
from ..device.actuator import Actuator, EvdevRumbleActuator, LoggingActuator
from ..device.device_manager import DeviceManager
from ..feedback.engine import TouchTimeEngine
from ..gestures.long_press import LongPressDetector
from ..utils.geometry import Point
from ..utils.logger import HapticLogger
from .types import PointerAction, PointerSample

logger = logging.getLogger(__name__)

TRACKED_SLOT = 0


class SampleAssembler:
    """
    Turns batches of multitouch events into pointer samples.

    Only the first slot is tracked. Positions reported between dispatched
    samples are kept and handed over as the next sample's history.
    """

    def __init__(self, config: Optional[TouchTimeConfig] = None):
        self.config = config or TouchTimeConfig()
        self.current_slot = 0
        self.x: Optional[float] = None
        self.y: Optional[float] = None
        self.touching = False
        self.down_pending = False
        self.up_pending = False
        self.moved = False
        self.pending: List[Point] = []
        self.last_dispatch_ms = 0.0

    def feed(self, event_batch, now_ms: float) -> List[PointerSample]:
        """Consume one SYN_REPORT-terminated batch, return any samples due."""
        for ev in event_batch:
            if ev.type == ecodes.EV_ABS:
                self._handle_abs_event(ev)

        samples = []
        if self.up_pending:
            self.up_pending = False
            self.down_pending = False
            if self.moved and self.x is not None and self.y is not None:
                self.pending.append(Point(self.x, self.y))
            self.moved = False
            if self.pending:
                samples.append(self.flush(now_ms))
            if self.x is not None and self.y is not None:
                samples.append(PointerSample(PointerAction.UP, Point(self.x, self.y)))
            self.x = self.y = None
            return samples

        if not self.touching or self.x is None or self.y is None:
            return samples

        if self.down_pending:
            self.down_pending = False
            self.moved = False
            self.pending = []
            self.last_dispatch_ms = now_ms
            samples.append(PointerSample(PointerAction.DOWN, Point(self.x, self.y)))
            return samples

        if self.moved:
            self.moved = False
            self.pending.append(Point(self.x, self.y))

        flushed = self.flush_due(now_ms)
        if flushed:
            samples.append(flushed)
        return samples

    def flush_due(self, now_ms: float) -> Optional[PointerSample]:
        """MOVE sample for pending positions once the batch interval has passed."""
        if self.pending and now_ms - self.last_dispatch_ms >= self.config.SAMPLE_BATCH_MS:
            return self.flush(now_ms)
        return None

    def flush(self, now_ms: float) -> PointerSample:
        """Dispatch pending positions as a MOVE sample."""
        current = self.pending[-1]
        history = tuple(self.pending[:-1])
        self.pending = []
        self.last_dispatch_ms = now_ms
        return PointerSample(PointerAction.MOVE, current, history)

    def _handle_abs_event(self, ev):
        """Handle absolute coordinate events."""
        if ev.code == ecodes.ABS_MT_SLOT:
            self.current_slot = ev.value
            return
        if self.current_slot != TRACKED_SLOT:
            return

        if ev.code == ecodes.ABS_MT_TRACKING_ID:
            if ev.value == -1:
                if self.touching:
                    self.touching = False
                    self.up_pending = True
            else:
                self.touching = True
                self.down_pending = True
        elif ev.code == ecodes.ABS_MT_POSITION_X:
            self.x = float(ev.value)
            self.moved = True
        elif ev.code == ecodes.ABS_MT_POSITION_Y:
            self.y = float(ev.value)
            self.moved = True


class TouchTimeListener:
    """Reads the touchscreen and drives the watch-face engine."""

    def __init__(self, config: Optional[TouchTimeConfig] = None, on_dismiss=None):
        self.config = config or TouchTimeConfig()
        self.device_manager = DeviceManager()
        self.haptic_logger = HapticLogger(self.config.DEBUG_LOG_FILE)
        self.on_dismiss = on_dismiss

        self.actuator: Optional[Actuator] = None
        self.engine: Optional[TouchTimeEngine] = None
        self.long_press: Optional[LongPressDetector] = None
        self.assembler = SampleAssembler(self.config)

        # Thread management
        self.running = False
        self.thread = None
        self.hold_thread = None
        self.state_lock = threading.Lock()

    def start(self) -> bool:
        """Start the touchscreen listener."""
        device = self.device_manager.find_device()
        if not device:
            print("❌ No touchscreen found")
            return False

        haptic_device = self.device_manager.find_haptic_device()
        if haptic_device:
            self.actuator = EvdevRumbleActuator(haptic_device, self.config)
        else:
            self.actuator = LoggingActuator()

        geometry = self.device_manager.get_geometry()
        self.engine = TouchTimeEngine(
            self.actuator, geometry,
            config=self.config,
            haptic_logger=self.haptic_logger
        )
        self.long_press = LongPressDetector(geometry, self._handle_long_press, self.config)

        self.running = True
        self.haptic_logger.log_session_start(device.name, geometry.width, geometry.height)
        self.actuator.vibrate_pattern(self.config.SESSION_START_PATTERN, -1)

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()

        self.hold_thread = threading.Thread(target=self._hold_checker)
        self.hold_thread.daemon = True
        self.hold_thread.start()

        return True

    def stop(self):
        """Stop the touchscreen listener."""
        was_running = self.running
        self.running = False
        for thread in (self.thread, self.hold_thread):
            if thread and thread is not threading.current_thread():
                thread.join(timeout=1)

        if was_running and self.actuator:
            with self.state_lock:
                self.engine.reset()
            self.actuator.vibrate(self.config.SESSION_STOP_PULSE_MS)
            self.haptic_logger.log_session_stop()
        self.haptic_logger.close()

    def _event_loop(self):
        """Main event processing loop."""
        try:
            event_batch = []
            for event in self.device_manager.device.read_loop():
                if not self.running:
                    break

                event_batch.append(event)

                if event.type == ecodes.EV_SYN and event.code == ecodes.SYN_REPORT:
                    with self.state_lock:
                        self._process_event_batch(event_batch)
                    event_batch = []

        except KeyboardInterrupt:
            pass
        except Exception as e:
            logging.error(f"Error in event loop: {e}")

    def _process_event_batch(self, event_batch):
        """Process a batch of events."""
        now_ms = time.monotonic() * 1000
        for sample in self.assembler.feed(event_batch, now_ms):
            self.dispatch(sample, now_ms)

    def dispatch(self, sample: PointerSample, now_ms: float) -> bool:
        """Route a sample through the long-press detector, then the engine."""
        if self.long_press.on_sample(sample, now_ms):
            return True
        return self.engine.process(sample)

    def _hold_checker(self):
        """Periodic checker for long presses and a finger at rest."""
        while self.running:
            time.sleep(self.config.LONG_PRESS_CHECK_INTERVAL_MS / 1000.0)
            with self.state_lock:
                self.poll(time.monotonic() * 1000)

    def poll(self, now_ms: float):
        """Dispatch positions the screen stopped reporting after, then check the hold."""
        sample = self.assembler.flush_due(now_ms)
        if sample:
            self.dispatch(sample, now_ms)
        if self.long_press.armed:
            self.long_press.check(now_ms)

    def _handle_long_press(self, position: Point):
        self.haptic_logger.log_dismiss(position.x, position.y)
        if self.on_dismiss:
            self.on_dismiss()
