from __future__ import annotations

from typing import Optional

from tictactoe.constants import (
    CELL_FILL_COLOR,
    CELL_PADDING,
    CELL_OUTLINE_COLOR,
    MARK_COLORS,
    TEXT_COLOR,
    WIN_OUTLINE_COLOR,
)


class CellRenderer:
    """Draws a single square and the mark it holds."""

    def __init__(self, padding: int = CELL_PADDING):
        self._padding = padding

    def render(
        self,
        arcade,
        center_x: float,
        center_y: float,
        size: float,
        mark: Optional[str],
        *,
        highlighted: bool = False,
    ) -> None:
        draw_size = max(size - self._padding, 4)
        left = center_x - draw_size / 2
        bottom = center_y - draw_size / 2
        arcade.draw_lbwh_rectangle_filled(left, bottom, draw_size, draw_size, CELL_FILL_COLOR)
        outline = WIN_OUTLINE_COLOR if highlighted else CELL_OUTLINE_COLOR
        arcade.draw_lbwh_rectangle_outline(
            left,
            bottom,
            draw_size,
            draw_size,
            outline,
            border_width=4 if highlighted else 1,
        )
        if mark:
            arcade.draw_text(
                mark,
                center_x,
                center_y,
                MARK_COLORS.get(mark, TEXT_COLOR),
                draw_size * 0.5,
                anchor_x="center",
                anchor_y="center",
                bold=True,
            )
