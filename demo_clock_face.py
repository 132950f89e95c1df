#!/usr/bin/env python3
"""Watch Face Demo with Visual Haptic Feedback.

Drag the mouse around the clock face to feel for the hands. Without a
vibration motor, the haptic commands the engine issues are shown on
screen and printed to the console. Hold still for a long press to dismiss.
"""

import datetime
import math
import os
import sys
from typing import List, Tuple

import pygame

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from touchtime.clock.clock_model import current_angles
from touchtime.core.types import CommandType, PointerAction, PointerSample
from touchtime.device.actuator import RecordingActuator
from touchtime.feedback.engine import TouchTimeEngine
from touchtime.gestures.long_press import LongPressDetector
from touchtime.utils.geometry import Point, ViewGeometry
from touchtime.utils.logger import HapticLogger


class WatchFaceDemo:
    """Interactive watch face driven by the mouse."""

    def __init__(self, size: int = 800) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((size, size))
        pygame.display.set_caption("TouchTime - feel the hands")

        self.geometry = ViewGeometry(size, size)
        self.actuator = RecordingActuator(maxlen=16)
        self.engine = TouchTimeEngine(
            self.actuator, self.geometry, haptic_logger=HapticLogger()
        )
        self.long_press = LongPressDetector(self.geometry, self.dismiss)

        self.is_touching = False
        self.pending: List[Tuple[int, int]] = []
        self.running = True

        # Colors
        self.BLACK = (0, 0, 0)
        self.WHITE = (255, 255, 255)
        self.GRAY = (128, 128, 128)
        self.RED = (255, 0, 0)
        self.GREEN = (0, 200, 0)

        self.font = pygame.font.Font(None, 36)

    def run(self) -> None:
        """Run the demo loop."""
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    self.is_touching = True
                    self.pending = []
                    self.dispatch(PointerSample(PointerAction.DOWN, Point(*event.pos)))
                elif event.type == pygame.MOUSEMOTION and self.is_touching:
                    self.pending.append(event.pos)
                elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
                    self.flush_motion()
                    self.is_touching = False
                    self.dispatch(PointerSample(PointerAction.UP, Point(*event.pos)))

            # One MOVE sample per frame, earlier positions become its history
            self.flush_motion()
            if self.is_touching:
                self.long_press.check(pygame.time.get_ticks())

            self.draw()
            clock.tick(60)

    def flush_motion(self) -> None:
        if not self.pending:
            return
        points = [Point(x, y) for x, y in self.pending]
        self.pending = []
        self.dispatch(PointerSample(PointerAction.MOVE, points[-1], tuple(points[:-1])))

    def dispatch(self, sample: PointerSample) -> None:
        if self.long_press.on_sample(sample, pygame.time.get_ticks()):
            return
        self.engine.process(sample)

    def dismiss(self, position: Point) -> None:
        self.engine.haptic_logger.log_dismiss(position.x, position.y)
        self.running = False

    def draw(self) -> None:
        """Render the face, the hands and the last haptic command."""
        self.screen.fill(self.WHITE)
        center = self.geometry.center
        cx, cy = int(center.x), int(center.y)
        radius = int(0.45 * self.geometry.width)

        pygame.draw.circle(self.screen, self.GRAY, (cx, cy), radius, 3)
        for hour in range(12):
            angle = hour * math.pi / 6
            outer = (cx + radius * math.sin(angle), cy - radius * math.cos(angle))
            inner = (cx + 0.9 * radius * math.sin(angle), cy - 0.9 * radius * math.cos(angle))
            pygame.draw.line(self.screen, self.GRAY, inner, outer, 3)

        hour_angle, minute_angle = current_angles(datetime.datetime.now())
        for angle, length, width in ((hour_angle, 0.5, 10), (minute_angle, 0.8, 5)):
            tip = (cx + length * radius * math.sin(angle), cy - length * radius * math.cos(angle))
            pygame.draw.line(self.screen, self.BLACK, (cx, cy), tip, width)

        pattern = self.engine.state.active_pattern
        status = f"Pattern: {pattern.name}"
        self.screen.blit(self.font.render(status, True, self.GREEN if pattern else self.GRAY), (10, 10))

        if self.actuator.commands:
            last = self.actuator.commands[-1]
            if last.type == CommandType.VIBRATE:
                text = f"Last: vibrate {last.duration_ms}ms"
            elif last.type == CommandType.VIBRATE_PATTERN:
                text = f"Last: pattern {list(last.timings)} repeat={last.repeat}"
            else:
                text = "Last: cancel"
            self.screen.blit(self.font.render(text, True, self.RED), (10, 40))

        pygame.display.flip()


def main() -> None:
    """Entry point for the demo."""
    demo = WatchFaceDemo()
    try:
        demo.run()
    except KeyboardInterrupt:
        pass
    finally:
        pygame.quit()


if __name__ == "__main__":
    main()
