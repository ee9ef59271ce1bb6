# gridpath/core/path.py
#!/usr/bin/env python3
from typing import List, Tuple

from gridpath.core.errors import MissingEndpoints
from gridpath.core.grid import Grid
from gridpath.core.types import Cell


def prepare_working_copy(grid: Grid) -> Tuple[Grid, Cell, Cell]:
    """Check endpoints, then return (copy with fresh metadata, start, end) from the copy.

    Raises MissingEndpoints before anything is copied.
    """
    if grid.start is None or grid.end is None:
        raise MissingEndpoints()
    work = grid.reset_metadata()
    return work, work.at(work.start), work.at(work.end)


def reconstruct_path(grid: Grid, end: Cell) -> List[Cell]:
    """Follow parent links back from `end`; returns start -> end inclusive."""
    path: List[Cell] = []
    cur = end
    while True:
        path.append(cur)
        if cur.parent is None:
            break
        cur = grid.at(cur.parent)
    path.reverse()
    return path
