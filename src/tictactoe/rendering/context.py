from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple

from esper import World

from tictactoe.components.cell import Cell
from tictactoe.ui.layout import cell_center, compute_grid_geometry


@dataclass(slots=True)
class RenderContext:
    """Frame-scoped rendering data shared across renderer subcomponents."""

    world: World
    window_width: int
    window_height: int
    cell_size: int
    grid_left: float
    grid_bottom: float
    cell_positions: Dict[int, Tuple[int, float, float]] = field(default_factory=dict)


def build_render_context(world: World, window_width: int, window_height: int) -> RenderContext:
    """Populate a RenderContext for the current frame."""

    cell_size, grid_left, grid_bottom = compute_grid_geometry(window_width, window_height)

    positions: Dict[int, Tuple[int, float, float]] = {}
    for entity, cell in world.get_component(Cell):
        cx, cy = cell_center(cell.row, cell.col, cell_size, grid_left, grid_bottom)
        positions[cell.index] = (entity, cx, cy)

    return RenderContext(
        world=world,
        window_width=window_width,
        window_height=window_height,
        cell_size=cell_size,
        grid_left=grid_left,
        grid_bottom=grid_bottom,
        cell_positions=positions,
    )
