"""Status line and the list of time-travel buttons."""
from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional

from tictactoe.constants import (
    BUTTON_FILL_COLOR,
    BUTTON_OUTLINE_COLOR,
    CURRENT_MOVE_COLOR,
    PANEL_TOP_MARGIN,
    STATUS_HEIGHT,
    TEXT_COLOR,
)
from tictactoe.ui.layout import compute_history_layout, hit_test, panel_left

if TYPE_CHECKING:
    from tictactoe.systems.game_controller import GameView


class HistoryPanelRenderer:
    def __init__(self):
        self._layout: List[Dict] = []

    def layout(self) -> List[Dict]:
        return list(self._layout)

    def hit_test(self, x: float, y: float) -> Optional[Dict]:
        return hit_test(self._layout, x, y)

    def render(self, arcade, ctx, view: GameView, *, headless: bool) -> None:
        left = panel_left(ctx.window_width, ctx.window_height)
        status_top = ctx.window_height - PANEL_TOP_MARGIN
        self._layout = compute_history_layout(
            view.moves,
            start_x=left,
            start_top=status_top - STATUS_HEIGHT,
        )
        if headless:
            return

        arcade.draw_text(
            view.status,
            left,
            status_top - STATUS_HEIGHT / 2,
            TEXT_COLOR,
            16,
            anchor_x="left",
            anchor_y="center",
        )
        for entry in self._layout:
            fill = CURRENT_MOVE_COLOR if entry['is_current'] else BUTTON_FILL_COLOR
            arcade.draw_lbwh_rectangle_filled(entry['x'], entry['y'], entry['width'], entry['height'], fill)
            arcade.draw_lbwh_rectangle_outline(
                entry['x'],
                entry['y'],
                entry['width'],
                entry['height'],
                BUTTON_OUTLINE_COLOR,
                border_width=1,
            )
            arcade.draw_text(
                entry['label'],
                entry['x'] + 8,
                entry['y'] + entry['height'] / 2,
                TEXT_COLOR,
                11,
                anchor_x="left",
                anchor_y="center",
            )
