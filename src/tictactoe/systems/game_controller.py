from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from esper import World

from tictactoe.components.game_state import GameState
from tictactoe.components.history_entry import HistoryEntry, Squares
from tictactoe.constants import CELL_COUNT
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
from tictactoe.utils.winner import calculate_winner, winning_line
from tictactoe.world import get_game_state

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MoveButton:
    step: int
    label: str
    is_current: bool


@dataclass(frozen=True, slots=True)
class GameView:
    """Everything the grid and the history panel need to draw one frame."""
    squares: Squares
    winner: Optional[str]
    line: Optional[Tuple[int, int, int]]
    status: str
    step: int
    moves: Tuple[MoveButton, ...]


def describe_move(step: int, entry: HistoryEntry) -> str:
    if not step:
        return "Go to game start"
    return f"Go to move #{step} ({entry.col}, {entry.row})"


class GameController:
    """Owns the move history and applies clicks to it.

    Flow:
      - EVENT_CELL_CLICK(index) places the active player's mark unless the
        cell is taken or the shown board already has a winner.
      - EVENT_HISTORY_CLICK(step) moves the viewed step; the next placed mark
        drops every entry after it.
      - render() derives the status line and history buttons for the renderer.
    """

    def __init__(self, world: World, event_bus: EventBus):
        self.world = world
        self.event_bus = event_bus
        self.event_bus.subscribe(EVENT_CELL_CLICK, self.on_cell_click)
        self.event_bus.subscribe(EVENT_HISTORY_CLICK, self.on_history_click)
        self.event_bus.subscribe(EVENT_RESET_REQUEST, self.on_reset_request)
        self._ensure_state()

    def _ensure_state(self) -> GameState:
        state = get_game_state(self.world)
        if state is not None:
            return state
        state = GameState()
        self.world.create_entity(state)
        return state

    @property
    def state(self) -> GameState:
        return self._ensure_state()

    def on_cell_click(self, sender, **payload):
        index = payload.get('index')
        if index is None:
            return
        self.place_mark(index)

    def on_history_click(self, sender, **payload):
        step = payload.get('step')
        if step is None:
            return
        self.jump_to(step)

    def on_reset_request(self, sender, **payload):
        self.reset()

    def place_mark(self, index: int) -> bool:
        state = self.state
        if not 0 <= index < CELL_COUNT:
            logger.debug("Ignoring click on cell %s: out of range", index)
            self.event_bus.emit(EVENT_MOVE_IGNORED, index=index, reason="out_of_range")
            return False
        current = state.current
        if calculate_winner(current.squares):
            logger.debug("Ignoring click on cell %d: game already won", index)
            self.event_bus.emit(EVENT_MOVE_IGNORED, index=index, reason="winner")
            return False
        if current.squares[index]:
            logger.debug("Ignoring click on cell %d: occupied", index)
            self.event_bus.emit(EVENT_MOVE_IGNORED, index=index, reason="occupied")
            return False

        symbol = state.next_symbol
        entry = current.with_mark(index, symbol)
        # Moving after a jump back discards the abandoned future.
        state.history = state.history[:state.step + 1] + [entry]
        state.step = len(state.history) - 1

        logger.info("%s placed at (%d, %d), step %d", symbol, entry.row, entry.col, state.step)
        self.event_bus.emit(
            EVENT_MARK_PLACED,
            index=index,
            symbol=symbol,
            row=entry.row,
            col=entry.col,
            step=state.step,
        )
        self.event_bus.emit(EVENT_STEP_CHANGED, step=state.step, x_is_next=state.x_is_next)

        line = winning_line(entry.squares)
        if line is not None:
            logger.info("Winner: %s", symbol)
            self.event_bus.emit(EVENT_GAME_WON, winner=symbol, line=line, step=state.step)
        return True

    def jump_to(self, step: int) -> bool:
        state = self.state
        if not 0 <= step < len(state.history):
            logger.debug("Ignoring jump to step %s: history has %d entries", step, len(state.history))
            return False
        state.step = step
        logger.debug("Jumped to step %d", step)
        self.event_bus.emit(EVENT_STEP_CHANGED, step=step, x_is_next=state.x_is_next)
        return True

    def reset(self) -> None:
        state = self.state
        state.history = [HistoryEntry.opening()]
        state.step = 0
        logger.info("Game reset")
        self.event_bus.emit(EVENT_GAME_RESET)
        self.event_bus.emit(EVENT_STEP_CHANGED, step=0, x_is_next=True)

    def render(self) -> GameView:
        state = self.state
        current = state.current
        winner = calculate_winner(current.squares)
        line = winning_line(current.squares) if winner else None
        if winner:
            status = f"Winner: {winner}"
        else:
            status = f"Next player: {state.next_symbol}"
        moves = tuple(
            MoveButton(step=step, label=describe_move(step, entry), is_current=step == state.step)
            for step, entry in enumerate(state.history)
        )
        return GameView(
            squares=current.squares,
            winner=winner,
            line=line,
            status=status,
            step=state.step,
            moves=moves,
        )
