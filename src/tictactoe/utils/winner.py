from __future__ import annotations

from typing import Optional, Sequence, Tuple

Line = Tuple[int, int, int]

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),             # diagonals
)


def winning_line(squares: Sequence[Optional[str]]) -> Optional[Line]:
    """Return the first line fully held by one symbol, or None."""

    for a, b, c in WINNING_LINES:
        mark = squares[a]
        if mark and mark == squares[b] and mark == squares[c]:
            return (a, b, c)
    return None


def calculate_winner(squares: Sequence[Optional[str]]) -> Optional[str]:
    """Return 'X' or 'O' when that symbol owns a row, column or diagonal."""

    line = winning_line(squares)
    if line is None:
        return None
    return squares[line[0]]
