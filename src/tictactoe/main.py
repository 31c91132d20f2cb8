"""Entry point for the tic-tac-toe window.

Sets up the ECS world, event bus, systems, and Arcade window.
"""
import logging

from arcade import Window, run, set_background_color

from tictactoe.constants import BACKGROUND_COLOR, WINDOW_HEIGHT, WINDOW_TITLE, WINDOW_WIDTH
from tictactoe.events.bus import EVENT_KEY_PRESS, EVENT_MOUSE_PRESS, EventBus
from tictactoe.systems.game_controller import GameController
from tictactoe.systems.input import InputSystem
from tictactoe.systems.render import RenderSystem
from tictactoe.world import create_world


class TicTacToeWindow(Window):
    def __init__(self):
        super().__init__(WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE)
        self.event_bus = EventBus()
        self.world = create_world()
        self.controller = GameController(self.world, self.event_bus)
        self.render_system = RenderSystem(self.world, self, self.controller)
        self.input_system = InputSystem(self.event_bus, self)
        set_background_color(BACKGROUND_COLOR)

    def on_draw(self):
        self.clear()
        self.render_system.process()

    def on_mouse_press(self, x: float, y: float, button: int, modifiers: int):
        self.event_bus.emit(EVENT_MOUSE_PRESS, x=x, y=y, button=button)

    def on_key_press(self, symbol: int, modifiers: int):
        self.event_bus.emit(EVENT_KEY_PRESS, symbol=symbol, modifiers=modifiers)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    TicTacToeWindow()
    run()

if __name__ == "__main__":
    main()
