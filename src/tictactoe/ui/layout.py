"""Pure layout helpers shared by rendering and input hit-testing.

Nothing here touches Arcade or the ECS world, so the same numbers drive the
drawn grid and the mouse mapping.

Coordinates follow Arcade: origin bottom-left, y grows upward. Grid row 0 is
drawn at the top.

History layout entries are dicts:
    {
      'step': int,
      'label': str,
      'is_current': bool,
      'x': float,  # left
      'y': float,  # bottom
      'width': float,
      'height': float,
    }
"""
from typing import Dict, Iterable, List, Optional, Tuple

from tictactoe.constants import (
    GRID_SIZE,
    GRID_MAX_WIDTH_PCT,
    GRID_MAX_HEIGHT_PCT,
    GRID_LEFT_MARGIN,
    GRID_BOTTOM_MARGIN,
    MIN_CELL_SIZE,
    PANEL_GAP,
    HISTORY_BUTTON_WIDTH,
    HISTORY_BUTTON_HEIGHT,
    HISTORY_BUTTON_SPACING,
)


def compute_grid_geometry(window_width: int, window_height: int) -> Tuple[int, float, float]:
    """Return (cell_size, start_x, start_y) for the grid's bottom-left corner."""
    max_grid_w = window_width * GRID_MAX_WIDTH_PCT
    max_grid_h = (window_height - GRID_BOTTOM_MARGIN) * GRID_MAX_HEIGHT_PCT
    cell_size = int(min(max_grid_w, max_grid_h) / GRID_SIZE)
    if cell_size < MIN_CELL_SIZE:
        cell_size = MIN_CELL_SIZE
    total_height = GRID_SIZE * cell_size
    start_x = float(GRID_LEFT_MARGIN)
    start_y = max(float(GRID_BOTTOM_MARGIN), (window_height - total_height) / 2)
    return cell_size, start_x, start_y


def cell_center(row: int, col: int, cell_size: int, start_x: float, start_y: float) -> Tuple[float, float]:
    cx = start_x + col * cell_size + cell_size / 2
    cy = start_y + (GRID_SIZE - 1 - row) * cell_size + cell_size / 2
    return cx, cy


def cell_index_at_point(x: float, y: float, window_width: int, window_height: int) -> Optional[int]:
    """Map a window point to a cell index (0-8), or None outside the grid."""
    cell_size, start_x, start_y = compute_grid_geometry(window_width, window_height)
    total = GRID_SIZE * cell_size
    if x < start_x or x >= start_x + total:
        return None
    if y < start_y or y >= start_y + total:
        return None
    col = int((x - start_x) // cell_size)
    row = GRID_SIZE - 1 - int((y - start_y) // cell_size)
    if 0 <= row < GRID_SIZE and 0 <= col < GRID_SIZE:
        return row * GRID_SIZE + col
    return None


def panel_left(window_width: int, window_height: int) -> float:
    cell_size, start_x, _ = compute_grid_geometry(window_width, window_height)
    return start_x + GRID_SIZE * cell_size + PANEL_GAP


def compute_history_layout(
    moves: Iterable,
    *,
    start_x: float,
    start_top: float,
    rect_w: float = HISTORY_BUTTON_WIDTH,
    rect_h: float = HISTORY_BUTTON_HEIGHT,
    spacing: float = HISTORY_BUTTON_SPACING,
) -> List[Dict]:
    """Stack one button per move top-down starting at ``start_top``.

    ``moves`` yields objects with ``step``, ``label`` and ``is_current``.
    """
    layout: List[Dict] = []
    for idx, move in enumerate(moves):
        y = start_top - (idx + 1) * rect_h - idx * spacing
        layout.append({
            'step': move.step,
            'label': move.label,
            'is_current': move.is_current,
            'x': start_x,
            'y': y,
            'width': rect_w,
            'height': rect_h,
        })
    return layout


def hit_test(layout: Iterable[Dict], x: float, y: float) -> Optional[Dict]:
    for entry in layout:
        if entry['x'] <= x <= entry['x'] + entry['width'] and entry['y'] <= y <= entry['y'] + entry['height']:
            return entry
    return None
