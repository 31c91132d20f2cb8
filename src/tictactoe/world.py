from esper import World

from tictactoe.components.cell import Cell
from tictactoe.components.game_state import GameState
from tictactoe.constants import GRID_SIZE


def create_world() -> World:
    """Build a world holding the GameState singleton and one entity per cell."""
    world = World()

    world.create_entity(GameState())

    for row in range(GRID_SIZE):
        for col in range(GRID_SIZE):
            world.create_entity(Cell(index=row * GRID_SIZE + col, row=row, col=col))

    return world


def get_game_state(world: World) -> GameState | None:
    for _, state in world.get_component(GameState):
        return state
    return None
