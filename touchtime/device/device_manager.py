"""
Device management for touchscreen and haptic motor discovery.
"""

import evdev
from evdev import ecodes
import logging

from ..utils.geometry import ViewGeometry

logger = logging.getLogger(__name__)

class DeviceManager:
    """Manages touchscreen and force-feedback device discovery."""

    def __init__(self):
        self.device = None
        self.haptic_device = None
        self.screen_width = 1920  # Default
        self.screen_height = 1080   # Default

    def find_device(self):
        """Find and configure the touchscreen device."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            caps = device.capabilities()
            if ecodes.EV_ABS in caps:
                abs_caps = caps.get(ecodes.EV_ABS, [])
                abs_codes = [code for code, _ in abs_caps]

                # Look for multitouch slots
                if ecodes.ABS_MT_SLOT in abs_codes:
                    # Get screen resolution from device capabilities
                    abs_info = {code: info for code, info in abs_caps}

                    if ecodes.ABS_MT_POSITION_X in abs_info:
                        self.screen_width = abs_info[ecodes.ABS_MT_POSITION_X].max + 1
                    if ecodes.ABS_MT_POSITION_Y in abs_info:
                        self.screen_height = abs_info[ecodes.ABS_MT_POSITION_Y].max + 1

                    self.device = device
                    logger.info(f"Found touchscreen: {device.name}")
                    logger.info(f"Screen resolution: {self.screen_width}x{self.screen_height}")
                    return device

        logger.error("No touchscreen device found")
        return None

    def find_haptic_device(self):
        """Find a device that can play rumble effects."""
        for path in evdev.list_devices():
            device = evdev.InputDevice(path)
            ff_codes = device.capabilities().get(ecodes.EV_FF, [])
            if ecodes.FF_RUMBLE in ff_codes:
                self.haptic_device = device
                logger.info(f"Found haptic motor: {device.name}")
                return device

        logger.warning("No force-feedback device found, haptics disabled")
        return None

    def get_geometry(self) -> ViewGeometry:
        return ViewGeometry(self.screen_width, self.screen_height)
