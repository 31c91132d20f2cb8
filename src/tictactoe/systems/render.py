from typing import Any

from esper import World

from tictactoe.rendering.context import build_render_context
from tictactoe.rendering.grid_renderer import GridRenderer
from tictactoe.rendering.history_renderer import HistoryPanelRenderer
from tictactoe.systems.game_controller import GameController, GameView


class RenderSystem:
    def __init__(self, world: World, window, controller: GameController):
        self.world = world
        self.window = window
        self.controller = controller
        self._grid_renderer = GridRenderer()
        self._history_renderer = HistoryPanelRenderer()

    def process(self):
        # Local import keeps tests headless without creating a window.
        import arcade
        # Without an active window (unit tests) still build the layout caches but skip drawing.
        headless = False
        try:
            arcade.get_window()
        except RuntimeError:
            headless = True
        self.draw(arcade, headless=headless)

    def draw(self, arcade, *, headless: bool) -> GameView:
        """Render one frame from the controller's current view."""
        view = self.controller.render()
        ctx = build_render_context(self.world, self.window.width, self.window.height)
        self._grid_renderer.render(arcade, ctx, view, headless=headless)
        self._history_renderer.render(arcade, ctx, view, headless=headless)
        return view

    def get_history_button_at_point(self, x: float, y: float) -> dict[str, Any] | None:
        """Return the history button layout entry under the point, if any."""
        return self._history_renderer.hit_test(x, y)

    def get_cell_layout(self) -> dict[int, dict]:
        return self._grid_renderer.cell_layout()
