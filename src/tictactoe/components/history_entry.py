"""Immutable board snapshots recorded after every move."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from tictactoe.constants import CELL_COUNT, GRID_SIZE

Squares = Tuple[Optional[str], ...]


def empty_squares() -> Squares:
    return (None,) * CELL_COUNT


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """Board snapshot plus the coordinates of the mark that produced it.

    ``row`` and ``col`` are both ``None`` for the opening entry.
    """
    squares: Squares
    row: Optional[int] = None
    col: Optional[int] = None

    @classmethod
    def opening(cls) -> HistoryEntry:
        return cls(squares=empty_squares())

    @property
    def index(self) -> Optional[int]:
        if self.row is None or self.col is None:
            return None
        return self.row * GRID_SIZE + self.col

    @property
    def mark(self) -> Optional[str]:
        index = self.index
        if index is None:
            return None
        return self.squares[index]

    def with_mark(self, index: int, symbol: str) -> HistoryEntry:
        """Return the entry that results from placing ``symbol`` at ``index``."""
        squares = list(self.squares)
        squares[index] = symbol
        return HistoryEntry(squares=tuple(squares), row=index // GRID_SIZE, col=index % GRID_SIZE)
