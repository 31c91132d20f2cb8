from dataclasses import dataclass

@dataclass(slots=True)
class Cell:
    """One grid position. The mark itself lives in the current history entry."""
    index: int
    row: int
    col: int
