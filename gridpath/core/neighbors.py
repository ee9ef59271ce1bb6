# gridpath/core/neighbors.py
#!/usr/bin/env python3
from typing import List

from gridpath.core.grid import Grid
from gridpath.core.types import Cell

# Up, down, left, right. The order is the tie-break for both searches.
DIRECTIONS = ((0, -1), (0, 1), (-1, 0), (1, 0))


def neighbors(cell: Cell, grid: Grid) -> List[Cell]:
    """Valid 4-connected neighbors: in bounds and not a wall."""
    out: List[Cell] = []
    for dx, dy in DIRECTIONS:
        nx, ny = cell.x + dx, cell.y + dy
        if grid.in_bounds(nx, ny) and not grid.is_wall(nx, ny):
            out.append(grid.cells[ny][nx])
    return out


def heuristic(a: Cell, b: Cell) -> int:
    """Manhattan distance; admissible and consistent for unit-cost 4-connected moves."""
    return abs(a.x - b.x) + abs(a.y - b.y)
