from tictactoe.components.game_state import GameState
from tictactoe.components.history_entry import HistoryEntry


def test_new_state_starts_on_opening_board():
    state = GameState()
    assert len(state.history) == 1
    assert state.step == 0
    assert state.current == HistoryEntry.opening()
    assert state.x_is_next is True
    assert state.next_symbol == "X"


def test_next_player_follows_step_parity():
    state = GameState()
    entry = HistoryEntry.opening()
    for index in range(4):
        entry = entry.with_mark(index, "X" if index % 2 == 0 else "O")
        state.history.append(entry)
    for step in range(len(state.history)):
        state.step = step
        assert state.x_is_next == (step % 2 == 0)
        assert state.next_symbol == ("X" if step % 2 == 0 else "O")


def test_states_do_not_share_history():
    first = GameState()
    second = GameState()
    first.history.append(HistoryEntry.opening().with_mark(0, "X"))
    assert len(second.history) == 1
