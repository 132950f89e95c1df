"""
Logging utilities for haptic feedback and watch-face sessions.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class HapticLogger:
    """Handles console and debug-file logging of haptic feedback."""

    PATTERN_LABELS = {
        1: "🕐 HOUR HAND",
        2: "🕑 MINUTE HAND",
        3: "🕒 BOTH HANDS",
    }

    def __init__(self, debug_file: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _emit(self, line: str, detail: Optional[str] = None):
        timestamp = self._timestamp()
        if self.verbose:
            print(f"[{timestamp}] {line}")
            if detail:
                print(f"   {detail}")

        if self.debug_file:
            try:
                self.debug_file.write(f"[{timestamp}] {line}{' | ' + detail if detail else ''}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not write debug file: {e}")

    def log_pattern_change(self, old_pattern: int, new_pattern: int, x: float, y: float):
        """Log a change of the continuous vibration pattern."""
        if new_pattern:
            label = self.PATTERN_LABELS.get(int(new_pattern), str(new_pattern))
            self._emit(f"{label} PRESSED", f"Touch: ({int(x)}, {int(y)})")
        elif old_pattern:
            label = self.PATTERN_LABELS.get(int(old_pattern), str(old_pattern))
            self._emit(f"✋ RELEASED {label}")

    def log_crossing(self, hour_crossed: bool, minute_crossed: bool, x: float, y: float):
        """Log a sweep across one or both hands."""
        if hour_crossed and minute_crossed:
            self._emit("↔️ CROSSED BOTH HANDS", f"Touch: ({int(x)}, {int(y)})")
        elif hour_crossed:
            self._emit("↔️ CROSSED HOUR HAND", f"Touch: ({int(x)}, {int(y)})")
        elif minute_crossed:
            self._emit("↔️ CROSSED MINUTE HAND", f"Touch: ({int(x)}, {int(y)})")

    def log_session_start(self, device_name: str, width: float, height: float):
        self._emit(f"⌚ WATCH FACE STARTED: {device_name}", f"Surface: {int(width)}x{int(height)}")

    def log_session_stop(self):
        self._emit("⌚ WATCH FACE STOPPED")

    def log_dismiss(self, x: float, y: float):
        self._emit("👋 LONG PRESS DISMISS", f"Touch: ({int(x)}, {int(y)})")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
