from tilecascade.events.bus import EventBus, EVENT_MOUSE_PRESS, EVENT_TILE_CLICK
from tilecascade.systems.board_ops import get_board
from tilecascade.utils.input_throttle import MouseThrottle

LEFT_BUTTON = 1


class InputSystem:
    """Turns presses in board world coordinates into tile clicks.

    Tile (row, col) is drawn centred on (col, -row), so a press maps to the
    nearest cell by rounding x and -y.
    """
    def __init__(self, event_bus: EventBus, world=None, throttle: MouseThrottle | None = None):
        self.event_bus = event_bus
        self.world = world  # optional world ref for bounds lookup
        self.throttle = throttle or MouseThrottle()
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button', LEFT_BUTTON)
        if x is None or y is None:
            return
        if button != LEFT_BUTTON:
            return
        if not self.throttle.allow(x, y, button):
            return
        row, col = self.cell_at(x, y)
        if self.world is not None:
            board = get_board(self.world)
            if board is not None and not board.in_bounds(row, col):
                return
        self.event_bus.emit(EVENT_TILE_CLICK, row=row, col=col)

    @staticmethod
    def cell_at(x: float, y: float) -> tuple[int, int]:
        return int(round(-y)), int(round(x))
