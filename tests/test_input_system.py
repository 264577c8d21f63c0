from tilecascade.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from tilecascade.systems.input import InputSystem
from tilecascade.utils.input_throttle import MouseThrottle
from tests.helpers import build_board


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def _clicks(bus):
    clicks = []
    bus.subscribe(EVENT_TILE_CLICK, lambda sender, **payload: clicks.append((payload["row"], payload["col"])))
    return clicks


def test_press_maps_to_nearest_cell():
    bus = EventBus()
    clicks = _clicks(bus)
    InputSystem(bus, throttle=MouseThrottle(min_interval=0.0))
    bus.emit(EVENT_MOUSE_PRESS, x=1.2, y=-0.9, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=0.0, y=0.3, button=1)
    assert clicks == [(1, 1), (0, 0)]


def test_non_left_buttons_and_incomplete_payloads_are_ignored():
    bus = EventBus()
    clicks = _clicks(bus)
    InputSystem(bus, throttle=MouseThrottle(min_interval=0.0))
    bus.emit(EVENT_MOUSE_PRESS, x=1.0, y=-1.0, button=4)
    bus.emit(EVENT_MOUSE_PRESS, x=None, y=-1.0, button=1)
    assert clicks == []


def test_presses_outside_board_are_dropped():
    bus, world, _ = build_board(3, 3)
    clicks = _clicks(bus)
    InputSystem(bus, world, throttle=MouseThrottle(min_interval=0.0))
    bus.emit(EVENT_MOUSE_PRESS, x=5.0, y=-1.0, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=1.0, y=1.0, button=1)
    bus.emit(EVENT_MOUSE_PRESS, x=2.0, y=-2.0, button=1)
    assert clicks == [(2, 2)]


def test_repeated_press_is_throttled():
    bus = EventBus()
    clicks = _clicks(bus)
    clock = FakeClock()
    InputSystem(bus, throttle=MouseThrottle(min_interval=0.2, min_distance=0.5, clock=clock))
    bus.emit(EVENT_MOUSE_PRESS, x=1.0, y=-1.0, button=1)
    clock.now = 0.05
    bus.emit(EVENT_MOUSE_PRESS, x=1.1, y=-1.0, button=1)
    clock.now = 0.06
    bus.emit(EVENT_MOUSE_PRESS, x=3.0, y=-1.0, button=1)
    clock.now = 0.5
    bus.emit(EVENT_MOUSE_PRESS, x=1.0, y=-1.0, button=1)
    assert clicks == [(1, 1), (1, 3), (1, 1)]
