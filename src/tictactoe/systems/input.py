import logging

from tictactoe.events.bus import (
    EventBus,
    EVENT_MOUSE_PRESS,
    EVENT_KEY_PRESS,
    EVENT_CELL_CLICK,
    EVENT_HISTORY_CLICK,
    EVENT_RESET_REQUEST,
)
from tictactoe.ui.layout import cell_index_at_point

logger = logging.getLogger(__name__)

# arcade.key values; kept here so input handling does not import arcade.
KEY_R = 114
KEY_ESCAPE = 65307


class InputSystem:
    """Turns raw window input into cell and history clicks."""

    def __init__(self, event_bus: EventBus, window):
        self.event_bus = event_bus
        self.window = window
        self.event_bus.subscribe(EVENT_MOUSE_PRESS, self.on_mouse_press)
        self.event_bus.subscribe(EVENT_KEY_PRESS, self.on_key_press)

    def on_mouse_press(self, sender, **kwargs):
        x = kwargs.get('x')
        y = kwargs.get('y')
        button = kwargs.get('button')
        if x is None or y is None:
            return
        # Only the left button (1) plays.
        if button != 1:
            return
        render_system = getattr(self.window, 'render_system', None)
        if render_system is not None and hasattr(render_system, 'get_history_button_at_point'):
            entry = render_system.get_history_button_at_point(x, y)
            if entry is not None:
                self.event_bus.emit(EVENT_HISTORY_CLICK, step=entry['step'])
                return
        index = cell_index_at_point(x, y, self.window.width, self.window.height)
        if index is None:
            logger.debug("Press at (%.1f, %.1f) hit nothing", x, y)
            return
        self.event_bus.emit(EVENT_CELL_CLICK, index=index)

    def on_key_press(self, sender, **kwargs):
        symbol = kwargs.get('symbol')
        if symbol == KEY_R:
            self.event_bus.emit(EVENT_RESET_REQUEST)
        elif symbol == KEY_ESCAPE:
            close = getattr(self.window, 'close', None)
            if close is not None:
                close()
