"""
Configuration settings for the touch-time watch face.
"""

class TouchTimeConfig:
    """Configuration constants for hand classification and haptic feedback."""

    # Hand hit zone (degrees either side of the hand)
    PRESS_TOLERANCE_DEGREES = 6.0

    # Timing configurations (in milliseconds)
    SAMPLE_BATCH_MS = 16
    LONG_PRESS_TIMEOUT_MS = 500
    LONG_PRESS_CHECK_INTERVAL_MS = 10

    # Distance configurations (as percentages of screen diagonal)
    LONG_PRESS_SLOP_PERCENT = 3.0

    # Continuous patterns: alternating off/on durations, looped from index 0
    HOUR_PATTERN = (0, 100)
    MINUTE_PATTERN = (40, 40)
    BOTH_PATTERN = (50, 50, 50, 200)
    CONTINUOUS_REPEAT = 0

    # One-shot crossing bursts
    BOTH_CROSSED_BURST = (0, 40, 40, 40, 40, 40)
    MINUTE_CROSSED_BURST = (0, 40, 40, 40)
    HOUR_CROSSED_PULSE_MS = 50
    CROSSING_CONFIRM_PULSE_MS = 50

    # Session cues
    SESSION_START_PATTERN = (0, 50, 50, 50)
    SESSION_STOP_PULSE_MS = 50

    # Force-feedback rumble strength (0..0xffff)
    RUMBLE_STRONG_MAGNITUDE = 0xc000
    RUMBLE_WEAK_MAGNITUDE = 0x0000

    # Feedback debug log (None disables the file)
    DEBUG_LOG_FILE = None
