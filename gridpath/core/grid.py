# gridpath/core/grid.py
#!/usr/bin/env python3
"""
Grid model: a fixed-size matrix of Cells plus the start/end references.

User edits (walls, start, end) mutate a Grid in place.
reset_metadata() / clear_all() return a fresh Grid so a search can work on
its own copy without touching the one on screen.
"""

import copy
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from gridpath.core.types import Cell, Coord


@dataclass
class Grid:
    width: int
    height: int
    cells: List[List[Cell]] = field(repr=False)   # [row][col]
    start: Optional[Coord] = None
    end: Optional[Coord] = None

    # -------------------- lookups --------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, c: Coord) -> Cell:
        x, y = c
        return self.cells[y][x]

    def is_wall(self, x: int, y: int) -> bool:
        return self.cells[y][x].is_wall

    def start_cell(self) -> Optional[Cell]:
        return self.at(self.start) if self.start is not None else None

    def end_cell(self) -> Optional[Cell]:
        return self.at(self.end) if self.end is not None else None

    def iter_cells(self) -> Iterator[Cell]:
        """Row-major order."""
        for row in self.cells:
            yield from row

    def wall_count(self) -> int:
        return sum(1 for c in self.iter_cells() if c.is_wall)

    # -------------------- edits (in place) --------------------

    def set_wall(self, x: int, y: int, value: bool) -> bool:
        """Set the wall flag. Returns False (no-op) on start/end or outside the grid."""
        if not self.in_bounds(x, y):
            return False
        cell = self.cells[y][x]
        if cell.is_start or cell.is_end:
            return False
        cell.is_wall = bool(value)
        return True

    def toggle_wall(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y):
            return False
        return self.set_wall(x, y, not self.cells[y][x].is_wall)

    def move_start(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y) or (x, y) == self.end:
            return False
        if self.start is not None:
            self.at(self.start).is_start = False
        cell = self.cells[y][x]
        cell.is_start = True
        cell.is_wall = False
        self.start = (x, y)
        return True

    def move_end(self, x: int, y: int) -> bool:
        if not self.in_bounds(x, y) or (x, y) == self.start:
            return False
        if self.end is not None:
            self.at(self.end).is_end = False
        cell = self.cells[y][x]
        cell.is_end = True
        cell.is_wall = False
        self.end = (x, y)
        return True

    # -------------------- copies --------------------

    def copy(self) -> "Grid":
        return copy.deepcopy(self)

    def reset_metadata(self) -> "Grid":
        """Same walls/start/end, no search metadata, no visited/path flags."""
        fresh = self.copy()
        for cell in fresh.iter_cells():
            cell.clear_metadata()
        return fresh

    def clear_all(self) -> "Grid":
        """Empty grid of the same size: no walls, no start, no end."""
        return create_grid(self.width, self.height, None, None)


def create_grid(width: int, height: int,
                start: Optional[Coord] = None, end: Optional[Coord] = None) -> Grid:
    if width <= 0 or height <= 0:
        raise ValueError(f"grid size must be positive, got {width}x{height}")
    for label, c in (("start", start), ("end", end)):
        if c is not None and not (0 <= c[0] < width and 0 <= c[1] < height):
            raise ValueError(f"{label} out of bounds: {c}")
    if start is not None and start == end:
        raise ValueError(f"start and end must differ: {start}")

    cells = [[Cell(x, y) for x in range(width)] for y in range(height)]
    grid = Grid(width, height, cells)
    if start is not None:
        grid.move_start(*start)
    if end is not None:
        grid.move_end(*end)
    return grid
