from blinker import Signal
from typing import Dict

class EventBus:
    """Simple event bus leveraging blinker Signal objects."""
    def __init__(self):
        self._signals: Dict[str, Signal] = {}

    def subscribe(self, name: str, fn):
        sig = self._signals.setdefault(name, Signal(name))
        # weak=False keeps bound methods of systems that are not stored in a variable alive.
        sig.connect(fn, weak=False)

    def emit(self, name: str, **payload):
        sig = self._signals.get(name)
        if sig:
            sig.send(self, **payload)


# ============================================================================
# INPUT & INTERACTION
# ============================================================================
EVENT_MOUSE_PRESS = "mouse_press"            # payload: x, y, button
EVENT_KEY_PRESS = "key_press"                # payload: symbol, modifiers
EVENT_CELL_CLICK = "cell_click"              # payload: index=int
EVENT_HISTORY_CLICK = "history_click"        # payload: step=int
EVENT_RESET_REQUEST = "reset_request"        # payload: None


# ============================================================================
# GAME STATE
# ============================================================================
EVENT_MARK_PLACED = "mark_placed"            # payload: index=int, symbol=str, row=int, col=int, step=int
EVENT_MOVE_IGNORED = "move_ignored"          # payload: index=int, reason=str
EVENT_STEP_CHANGED = "step_changed"          # payload: step=int, x_is_next=bool
EVENT_GAME_WON = "game_won"                  # payload: winner=str, line=tuple[int, int, int], step=int
EVENT_GAME_RESET = "game_reset"              # payload: None
