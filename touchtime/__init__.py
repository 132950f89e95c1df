"""
TouchTime Package
A touch-driven analog watch face that lets you feel the time through haptics.
"""

from .core.listener import TouchTimeListener
from .feedback.engine import TouchTimeEngine, process_sample
from .device.device_manager import DeviceManager

__version__ = "1.0.0"
__all__ = ["TouchTimeListener", "TouchTimeEngine", "process_sample", "DeviceManager"]
