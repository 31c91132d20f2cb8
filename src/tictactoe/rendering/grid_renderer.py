from __future__ import annotations

from typing import TYPE_CHECKING, Dict

from tictactoe.rendering.cell_renderer import CellRenderer

if TYPE_CHECKING:
    from tictactoe.rendering.context import RenderContext
    from tictactoe.systems.game_controller import GameView


class GridRenderer:
    """Lays out the nine cells and hands each its mark."""

    def __init__(self, cell_renderer: CellRenderer | None = None):
        self._cells = cell_renderer or CellRenderer()
        self._cell_layout: Dict[int, dict] = {}

    def cell_layout(self) -> Dict[int, dict]:
        return dict(self._cell_layout)

    def render(self, arcade, ctx: RenderContext, view: GameView, headless: bool) -> None:
        self._cell_layout = {}
        winning = set(view.line or ())
        for index, (entity, cx, cy) in sorted(ctx.cell_positions.items()):
            mark = view.squares[index]
            self._cell_layout[index] = {
                "entity": entity,
                "center": (cx, cy),
                "size": ctx.cell_size,
                "mark": mark,
            }
            if headless:
                continue
            self._cells.render(arcade, cx, cy, ctx.cell_size, mark, highlighted=index in winning)
