# gridpath/core/dijkstra.py
#!/usr/bin/env python3
"""
Dijkstra over the whole grid. Runs to completion, returns an AlgorithmResult.

Selection is "unvisited cell with the smallest g", in the order a stable
sort of the full unvisited list would give. With unit costs a cell's g is
lowered only once (from inf), so among equal-g cells the one relaxed in an
earlier iteration comes first, and cells relaxed in the same iteration keep
row-major order. The heap key (g, relax iteration, row-major index) gives
that order without re-sorting.
"""

from dataclasses import dataclass
import heapq
from typing import List, Set, Tuple

from loguru import logger

from gridpath.core.errors import NoPathFound
from gridpath.core.grid import Grid
from gridpath.core.neighbors import neighbors
from gridpath.core.path import prepare_working_copy, reconstruct_path
from gridpath.core.types import AlgorithmResult, Cell, Coord


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    def run(self, grid: Grid) -> AlgorithmResult:
        work, start, end = prepare_working_copy(grid)
        logger.debug(f"[{self.name}] start={start.coord} end={end.coord} walls={work.wall_count()}")

        start.g_score = 0
        start.f_score = 0

        def key(c: Cell, it: int) -> Tuple[float, int, int, Coord]:
            return (c.g_score, it, c.y * work.width + c.x, c.coord)

        open_pq: List[Tuple[float, int, int, Coord]] = [key(start, -1)]
        finalized: Set[Coord] = set()
        visited: List[Cell] = []

        while open_pq:
            g_u, _, _, coord = heapq.heappop(open_pq)
            u = work.at(coord)
            # stale entry
            if coord in finalized or g_u != u.g_score:
                continue
            finalized.add(coord)

            if u is end:
                path = reconstruct_path(work, u)
                logger.debug(f"[{self.name}] done: visited={len(visited)} path={len(path)}")
                return AlgorithmResult(self.name, visited, path)

            visited.append(u)

            for v in neighbors(u, work):
                alt = u.g_score + 1
                if alt < v.g_score:
                    v.g_score = alt
                    v.f_score = alt
                    v.parent = u.coord
                    heapq.heappush(open_pq, key(v, len(finalized)))

        # the rest of the grid is unreachable
        logger.debug(f"[{self.name}] frontier exhausted after {len(visited)} cells")
        raise NoPathFound()
