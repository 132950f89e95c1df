import datetime
from types import SimpleNamespace

from evdev import ecodes

from touchtime.core.listener import SampleAssembler, TouchTimeListener
from touchtime.core.types import HandPattern, HapticCommand, PointerAction
from touchtime.device.actuator import LoggingActuator, RecordingActuator
from touchtime.feedback.engine import TouchTimeEngine
from touchtime.gestures.long_press import LongPressDetector
from touchtime.utils.geometry import Point, ViewGeometry


def abs_event(code, value):
    return SimpleNamespace(type=ecodes.EV_ABS, code=code, value=value)


SYN = SimpleNamespace(type=ecodes.EV_SYN, code=ecodes.SYN_REPORT, value=0)


def touch_down(x, y, tracking_id=5):
    return [
        abs_event(ecodes.ABS_MT_SLOT, 0),
        abs_event(ecodes.ABS_MT_TRACKING_ID, tracking_id),
        abs_event(ecodes.ABS_MT_POSITION_X, x),
        abs_event(ecodes.ABS_MT_POSITION_Y, y),
        SYN,
    ]


def move_x(x):
    return [abs_event(ecodes.ABS_MT_POSITION_X, x), SYN]


def move_y(y):
    return [abs_event(ecodes.ABS_MT_POSITION_Y, y), SYN]


def lift():
    return [abs_event(ecodes.ABS_MT_TRACKING_ID, -1), SYN]


def test_first_report_is_a_down_sample():
    assembler = SampleAssembler()
    samples = assembler.feed(touch_down(100, 200), 0)

    assert len(samples) == 1
    assert samples[0].action == PointerAction.DOWN
    assert samples[0].position == Point(100, 200)
    assert samples[0].history == ()


def test_reports_are_batched_into_move_history():
    assembler = SampleAssembler()
    assembler.feed(touch_down(100, 200), 0)

    assert assembler.feed(move_x(110), 5) == []
    assert assembler.feed(move_x(120), 10) == []
    samples = assembler.feed(move_x(130), 20)

    assert len(samples) == 1
    assert samples[0].action == PointerAction.MOVE
    assert samples[0].position == Point(130, 200)
    assert samples[0].history == (Point(110, 200), Point(120, 200))


def test_lift_flushes_pending_move_before_up():
    assembler = SampleAssembler()
    assembler.feed(touch_down(100, 200), 0)
    assembler.feed(move_x(110), 5)

    samples = assembler.feed(lift(), 10)

    assert [s.action for s in samples] == [PointerAction.MOVE, PointerAction.UP]
    assert samples[0].position == Point(110, 200)
    assert samples[1].position == Point(110, 200)
    assert assembler.pending == []


def test_pending_positions_flush_once_the_batch_interval_passes():
    assembler = SampleAssembler()
    assembler.feed(touch_down(100, 200), 0)
    assert assembler.feed(move_x(110), 5) == []

    assert assembler.flush_due(10) is None
    sample = assembler.flush_due(16)

    assert sample.action == PointerAction.MOVE
    assert sample.position == Point(110, 200)
    assert assembler.pending == []
    assert assembler.flush_due(40) is None


def test_other_slots_are_ignored():
    assembler = SampleAssembler()
    assembler.feed(touch_down(100, 200), 0)

    second_finger = [
        abs_event(ecodes.ABS_MT_SLOT, 1),
        abs_event(ecodes.ABS_MT_TRACKING_ID, 9),
        abs_event(ecodes.ABS_MT_POSITION_X, 700),
        abs_event(ecodes.ABS_MT_TRACKING_ID, -1),
        SYN,
    ]

    assert assembler.feed(second_finger, 50) == []
    assert assembler.x == 100.0


def make_listener():
    listener = TouchTimeListener()
    listener.haptic_logger.verbose = False
    geometry = ViewGeometry(200, 200)
    listener.actuator = RecordingActuator()
    listener.engine = TouchTimeEngine(
        listener.actuator, geometry,
        time_source=lambda: datetime.datetime(2026, 10, 18, 3, 0)
    )
    listener.long_press = LongPressDetector(geometry)
    return listener


def test_dispatch_routes_through_long_press_then_engine():
    listener = make_listener()

    listener.dispatch(listener.assembler.feed(touch_down(150, 100), 0)[0], 0)
    assert listener.engine.state.active_pattern == HandPattern.HOUR

    listener.long_press.check(600)
    listener.dispatch(listener.assembler.feed(move_x(100), 620)[0], 620)
    assert listener.engine.state.active_pattern == HandPattern.HOUR

    listener.dispatch(listener.assembler.feed(lift(), 640)[0], 640)
    assert listener.engine.state.active_pattern == HandPattern.NONE
    assert listener.actuator.commands[-1] == HapticCommand.cancel()


def test_finger_resting_on_hand_after_a_slide_starts_the_pattern():
    listener = make_listener()

    listener.dispatch(listener.assembler.feed(touch_down(150, 160), 0)[0], 0)
    for sample in listener.assembler.feed(move_y(130), 20):
        listener.dispatch(sample, 20)
    # The screen goes quiet once the finger stops on the hour hand
    assert listener.assembler.feed(move_y(100), 25) == []
    assert listener.engine.state.active_pattern == HandPattern.NONE

    listener.poll(45)

    assert listener.engine.state.active_pattern == HandPattern.HOUR
    assert listener.assembler.pending == []


def test_missing_motor_falls_back_to_logging_actuator(monkeypatch):
    listener = TouchTimeListener()
    listener.haptic_logger.verbose = False
    screen = SimpleNamespace(name="fake screen", read_loop=lambda: iter([]))

    def find_device():
        listener.device_manager.device = screen
        return screen

    monkeypatch.setattr(listener.device_manager, "find_device", find_device)
    monkeypatch.setattr(listener.device_manager, "find_haptic_device", lambda: None)

    assert listener.start()
    try:
        assert isinstance(listener.actuator, LoggingActuator)
        assert not hasattr(listener.actuator, "commands")
    finally:
        listener.stop()
