"""Game state resource holding the move history and the viewed step."""
from dataclasses import dataclass, field
from typing import List

from tictactoe.components.history_entry import HistoryEntry
from tictactoe.constants import SYMBOL_O, SYMBOL_X


@dataclass
class GameState:
    """Singleton component storing every recorded board and the step being shown.

    history[0] is always the empty opening board. Entries after ``step`` are
    kept until the next move, so the player can travel back and forth freely.
    """
    history: List[HistoryEntry] = field(default_factory=lambda: [HistoryEntry.opening()])
    step: int = 0

    @property
    def current(self) -> HistoryEntry:
        return self.history[self.step]

    @property
    def x_is_next(self) -> bool:
        return self.step % 2 == 0

    @property
    def next_symbol(self) -> str:
        return SYMBOL_X if self.x_is_next else SYMBOL_O
