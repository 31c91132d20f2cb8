import logging

from tictactoe.components.game_state import GameState
from tictactoe.events.bus import (
    EventBus,
    EVENT_CELL_CLICK,
    EVENT_HISTORY_CLICK,
    EVENT_RESET_REQUEST,
    EVENT_MARK_PLACED,
    EVENT_MOVE_IGNORED,
    EVENT_STEP_CHANGED,
    EVENT_GAME_WON,
    EVENT_GAME_RESET,
)
from tictactoe.systems.game_controller import GameController, describe_move
from tictactoe.world import create_world


def _setup():
    bus = EventBus()
    world = create_world()
    controller = GameController(world, bus)
    return bus, world, controller


def _capture(bus, name):
    captured: list[dict] = []
    bus.subscribe(name, lambda sender, **payload: captured.append(payload))
    return captured


def _snapshot(state: GameState):
    return list(state.history), state.step, state.x_is_next


def test_first_mark_is_x_then_o_is_next():
    _, _, controller = _setup()

    assert controller.place_mark(0) is True

    state = controller.state
    assert state.current.squares[0] == "X"
    assert state.step == 1
    assert state.next_symbol == "O"
    assert controller.render().status == "Next player: O"


def test_occupied_cell_is_ignored():
    bus, _, controller = _setup()
    ignored = _capture(bus, EVENT_MOVE_IGNORED)
    controller.place_mark(0)
    before = _snapshot(controller.state)

    assert controller.place_mark(0) is False

    assert _snapshot(controller.state) == before
    assert ignored == [{"index": 0, "reason": "occupied"}]


def test_moves_after_win_are_ignored():
    bus, _, controller = _setup()
    won = _capture(bus, EVENT_GAME_WON)
    ignored = _capture(bus, EVENT_MOVE_IGNORED)
    for index in (0, 3, 1, 4, 2):
        assert controller.place_mark(index)
    before = _snapshot(controller.state)

    assert controller.place_mark(8) is False

    assert _snapshot(controller.state) == before
    assert ignored[-1]["reason"] == "winner"
    assert won == [{"winner": "X", "line": (0, 1, 2), "step": 5}]
    view = controller.render()
    assert view.winner == "X"
    assert view.status == "Winner: X"
    assert view.line == (0, 1, 2)


def test_out_of_range_index_is_ignored():
    bus, _, controller = _setup()
    ignored = _capture(bus, EVENT_MOVE_IGNORED)

    assert controller.place_mark(9) is False
    assert controller.place_mark(-1) is False

    assert len(controller.state.history) == 1
    assert [p["reason"] for p in ignored] == ["out_of_range", "out_of_range"]


def test_jump_to_sets_step_and_parity():
    _, _, controller = _setup()
    for index in (4, 0, 8, 2):
        controller.place_mark(index)

    for step in (0, 1, 2, 3, 4):
        assert controller.jump_to(step) is True
        assert controller.state.step == step
        assert controller.state.x_is_next == (step % 2 == 0)


def test_jump_keeps_future_until_next_move():
    _, _, controller = _setup()
    for index in (4, 0, 8):
        controller.place_mark(index)

    controller.jump_to(1)
    assert len(controller.state.history) == 4
    assert controller.render().squares == controller.state.history[1].squares

    controller.jump_to(3)
    assert controller.state.current.squares[8] == "X"


def test_move_after_jump_discards_later_entries():
    _, _, controller = _setup()
    for index in (4, 0, 8, 2):
        controller.place_mark(index)
    kept = list(controller.state.history[:2])

    controller.jump_to(1)
    assert controller.place_mark(6) is True

    state = controller.state
    assert state.history[:2] == kept
    assert len(state.history) == 3
    assert state.step == 2
    assert state.current.squares[6] == "O"
    assert state.current.squares[0] is None
    assert state.current.squares[8] is None


def test_jump_to_start_then_move_restarts_history():
    _, _, controller = _setup()
    for index in (0, 1, 2):
        controller.place_mark(index)

    controller.jump_to(0)
    controller.place_mark(8)

    history = controller.state.history
    assert len(history) == 2
    assert history[0].row is None and history[0].col is None
    assert all(square is None for square in history[0].squares)
    assert history[1].squares[8] == "X"


def test_jump_out_of_range_is_ignored():
    _, _, controller = _setup()
    controller.place_mark(0)

    assert controller.jump_to(5) is False
    assert controller.jump_to(-1) is False
    assert controller.state.step == 1


def test_jump_back_from_won_board_reopens_play():
    _, _, controller = _setup()
    for index in (0, 3, 1, 4, 2):
        controller.place_mark(index)

    controller.jump_to(4)
    assert controller.render().winner is None
    assert controller.place_mark(8) is True
    assert controller.state.current.squares[8] == "X"


def test_events_drive_controller():
    bus, _, controller = _setup()
    placed = _capture(bus, EVENT_MARK_PLACED)
    steps = _capture(bus, EVENT_STEP_CHANGED)

    bus.emit(EVENT_CELL_CLICK, index=4)
    bus.emit(EVENT_CELL_CLICK, index=2)
    bus.emit(EVENT_HISTORY_CLICK, step=1)

    assert placed == [
        {"index": 4, "symbol": "X", "row": 1, "col": 1, "step": 1},
        {"index": 2, "symbol": "O", "row": 0, "col": 2, "step": 2},
    ]
    assert steps[-1] == {"step": 1, "x_is_next": False}
    assert controller.state.step == 1


def test_reset_returns_to_opening_board():
    bus, _, controller = _setup()
    resets = _capture(bus, EVENT_GAME_RESET)
    for index in (0, 1, 2):
        controller.place_mark(index)

    bus.emit(EVENT_RESET_REQUEST)

    state = controller.state
    assert len(state.history) == 1
    assert state.step == 0
    assert state.x_is_next
    assert len(resets) == 1


def test_render_lists_one_button_per_entry():
    _, _, controller = _setup()
    controller.place_mark(4)
    controller.place_mark(2)
    controller.jump_to(1)

    view = controller.render()

    assert [m.step for m in view.moves] == [0, 1, 2]
    assert [m.label for m in view.moves] == [
        "Go to game start",
        "Go to move #1 (1, 1)",
        "Go to move #2 (2, 0)",
    ]
    assert [m.is_current for m in view.moves] == [False, True, False]
    assert view.step == 1
    assert view.status == "Next player: O"


def test_describe_move_uses_column_then_row():
    _, _, controller = _setup()
    controller.place_mark(3)
    entry = controller.state.current
    assert describe_move(1, entry) == "Go to move #1 (0, 1)"


def test_controller_creates_state_when_world_lacks_one():
    from esper import World

    world = World()
    controller = GameController(world, EventBus())
    assert len(list(world.get_component(GameState))) == 1
    assert controller.place_mark(0)


def test_placed_marks_are_logged(caplog):
    _, _, controller = _setup()
    with caplog.at_level(logging.INFO, logger="tictactoe.systems.game_controller"):
        controller.place_mark(4)
    assert "X placed at (1, 1)" in caplog.text
