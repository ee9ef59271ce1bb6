# gridpath/core/session.py
#!/usr/bin/env python3
"""
Session: the one object the UI talks to.

Owns the live grid, the busy flag, the current tool and the last run's
stats. A run searches a copy, then hands the result to an
AnimationSequencer that the main loop advances with update(elapsed_ms).
While a run is in flight, edits, resets and new runs are ignored.
"""

from typing import Optional, Protocol

from loguru import logger

from gridpath.config import (ANIMATION_SPEED_MS, CELL_SIZE, DEFAULT_END,
                             DEFAULT_START, GRID_COLS, GRID_ROWS)
from gridpath.core.astar import AStarAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.errors import SearchError
from gridpath.core.grid import Grid, create_grid
from gridpath.core.sequencer import AnimationSequencer
from gridpath.core.types import Coord, Stats

TOOLS = ("start", "end", "wall")


class Notifier(Protocol):
    def report_error(self, message: str) -> None: ...
    def report_success(self, message: str) -> None: ...


class LogNotifier:
    """Fallback notifier when no UI is attached."""

    def report_error(self, message: str) -> None:
        logger.error(message)

    def report_success(self, message: str) -> None:
        logger.success(message)


def make_algo(label: str):
    if label == "Dijkstra":
        return DijkstraAlgo(name="Dijkstra")
    elif label == "A*":
        return AStarAlgo(name="A*")
    raise ValueError(f"unknown algorithm: {label!r}")


class Session:
    def __init__(self, grid: Optional[Grid] = None, notifier: Optional[Notifier] = None,
                 cell_size: int = CELL_SIZE, visit_delay_ms: int = ANIMATION_SPEED_MS,
                 path_delay_ms: Optional[int] = None):
        self.grid = grid if grid is not None else create_grid(GRID_COLS, GRID_ROWS,
                                                              DEFAULT_START, DEFAULT_END)
        self.notifier: Notifier = notifier if notifier is not None else LogNotifier()
        self.cell_size = cell_size
        self.visit_delay_ms = visit_delay_ms
        self.path_delay_ms = path_delay_ms if path_delay_ms is not None else visit_delay_ms * 2

        self.tool = "start"
        self.stats = Stats()
        self.sequencer: Optional[AnimationSequencer] = None
        self._busy = False
        self._dragging = False
        self._last_drag_cell: Optional[Coord] = None

    @property
    def busy(self) -> bool:
        return self._busy

    # -------------------- runs --------------------

    def run_dijkstra(self) -> bool:
        return self._run(make_algo("Dijkstra"))

    def run_astar(self) -> bool:
        return self._run(make_algo("A*"))

    def _run(self, algo) -> bool:
        if self._busy:
            logger.debug(f"Ignoring {algo.name} request: a run is in flight")
            return False
        self._busy = True
        try:
            result = algo.run(self.grid)
        except SearchError as ex:
            self._busy = False
            logger.warning(f"{algo.name} failed: {ex}")
            self.notifier.report_error(str(ex))
            return False

        self._end_drag()
        self.grid = self.grid.reset_metadata()
        self.sequencer = AnimationSequencer(result, self.grid,
                                            visit_delay_ms=self.visit_delay_ms,
                                            path_delay_ms=self.path_delay_ms)
        logger.info(f"{algo.name}: animating {result.nodes_explored} visited, "
                    f"{result.path_length} path cells")
        return True

    def update(self, elapsed_ms: float) -> None:
        """Scheduler tick from the main loop."""
        if self.sequencer is None:
            return
        self.sequencer.tick(elapsed_ms)
        if self.sequencer.done:
            self._complete()

    def finish(self) -> None:
        """Play the rest of the current animation at once."""
        if self.sequencer is None:
            return
        self.sequencer.finish()
        self._complete()

    def _complete(self) -> None:
        self.stats = self.sequencer.stats
        self.sequencer = None
        self._busy = False
        self.notifier.report_success(f"{self.stats.algorithm} completed!")

    # -------------------- grid actions --------------------

    def reset_grid(self) -> bool:
        if self._busy:
            return False
        self.grid = self.grid.reset_metadata()
        self.stats = Stats()
        logger.info("Grid reset (walls kept)")
        return True

    def clear_all(self) -> bool:
        if self._busy:
            return False
        self.grid = self.grid.clear_all()
        self.stats = Stats()
        logger.info("Grid cleared")
        return True

    # -------------------- input --------------------

    def select_tool(self, tool: str) -> None:
        if tool not in TOOLS:
            raise ValueError(f"unknown tool: {tool!r}")
        self.tool = tool
        self._end_drag()

    def pixel_to_cell(self, px: float, py: float) -> Optional[Coord]:
        x = int(px // self.cell_size)
        y = int(py // self.cell_size)
        if not self.grid.in_bounds(x, y):
            return None
        return (x, y)

    def pointer_down(self, px: float, py: float) -> bool:
        if self._busy:
            return False
        c = self.pixel_to_cell(px, py)
        if c is None:
            return False
        if self.tool == "start":
            return self.grid.move_start(*c)
        if self.tool == "end":
            return self.grid.move_end(*c)
        self._dragging = True
        self._last_drag_cell = c
        return self.grid.toggle_wall(*c)

    def pointer_move(self, px: float, py: float) -> bool:
        if self._busy or not self._dragging or self.tool != "wall":
            return False
        c = self.pixel_to_cell(px, py)
        if c is None or c == self._last_drag_cell:
            return False
        self._last_drag_cell = c
        return self.grid.toggle_wall(*c)

    def pointer_up(self) -> None:
        self._end_drag()

    def _end_drag(self) -> None:
        self._dragging = False
        self._last_drag_cell = None
