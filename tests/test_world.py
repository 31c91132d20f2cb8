from tictactoe.components.cell import Cell
from tictactoe.components.game_state import GameState
from tictactoe.world import create_world, get_game_state


def test_world_has_single_game_state():
    world = create_world()
    states = list(world.get_component(GameState))
    assert len(states) == 1
    assert get_game_state(world) is states[0][1]


def test_world_has_nine_cells_in_row_major_order():
    world = create_world()
    cells = sorted((cell for _, cell in world.get_component(Cell)), key=lambda c: c.index)
    assert [c.index for c in cells] == list(range(9))
    for cell in cells:
        assert cell.index == cell.row * 3 + cell.col
