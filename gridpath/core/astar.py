# gridpath/core/astar.py
#!/usr/bin/env python3
"""
A*: runs to completion, returns an AlgorithmResult.

Heuristic:
- Manhattan for 4-connected grids (unit cost, so it is consistent).

Open list is stably sorted by f on every iteration; closed cells are never
reopened.
"""

from dataclasses import dataclass
from typing import List, Set

from loguru import logger

from gridpath.core.errors import NoPathFound
from gridpath.core.grid import Grid
from gridpath.core.neighbors import heuristic, neighbors
from gridpath.core.path import prepare_working_copy, reconstruct_path
from gridpath.core.types import AlgorithmResult, Cell, Coord


@dataclass
class AStarAlgo:
    name: str = "A*"

    def run(self, grid: Grid) -> AlgorithmResult:
        work, start, end = prepare_working_copy(grid)
        logger.debug(f"[{self.name}] start={start.coord} end={end.coord} walls={work.wall_count()}")

        start.g_score = 0
        start.h_score = heuristic(start, end)
        start.f_score = start.h_score

        open_list: List[Cell] = [start]
        open_set: Set[Coord] = {start.coord}     # membership for open_list
        closed_set: Set[Coord] = set()
        visited: List[Cell] = []

        while open_list:
            open_list.sort(key=lambda c: c.f_score)
            u = open_list.pop(0)
            open_set.discard(u.coord)

            if u is end:
                path = reconstruct_path(work, u)
                logger.debug(f"[{self.name}] done: visited={len(visited)} path={len(path)}")
                return AlgorithmResult(self.name, visited, path)

            closed_set.add(u.coord)
            visited.append(u)

            for v in neighbors(u, work):
                if v.coord in closed_set:
                    continue

                alt = u.g_score + 1
                if v.coord not in open_set:
                    open_list.append(v)
                    open_set.add(v.coord)
                elif alt >= v.g_score:
                    continue

                v.parent = u.coord
                v.g_score = alt
                v.h_score = heuristic(v, end)
                v.f_score = v.g_score + v.h_score

        logger.debug(f"[{self.name}] open set exhausted after {len(visited)} cells")
        raise NoPathFound()
