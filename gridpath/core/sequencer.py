# gridpath/core/sequencer.py
#!/usr/bin/env python3
"""
Animation sequencer: replays a finished search onto the live grid.

Frames:
- one "visited" frame per explored cell, in exploration order
- then one "path" frame per path cell, start -> end
Start and end cells are never flagged, they keep their own colour.

Time only moves when tick(elapsed_ms) is called, so the main loop decides
the pace and tests can drive it without sleeping.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gridpath.core.grid import Grid
from gridpath.core.types import AlgorithmResult, Cell, Coord, Frame, Stats

VISITED = "visited"
PATH = "path"


@dataclass
class AnimationSequencer:
    result: AlgorithmResult
    grid: Grid                      # the live grid; the only one mutated here
    visit_delay_ms: int = 10
    path_delay_ms: int = 20

    frames: List[Frame] = field(default_factory=list, init=False)
    applied: int = field(default=0, init=False)
    _owed_ms: float = field(default=0.0, init=False, repr=False)
    _source: Dict[Coord, Cell] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        for cell in self.result.visited:
            self.frames.append(Frame(VISITED, cell.coord, self.visit_delay_ms))
            self._source[cell.coord] = cell
        for cell in self.result.path:
            self.frames.append(Frame(PATH, cell.coord, self.path_delay_ms))
            self._source[cell.coord] = cell

    # -------------------- state --------------------

    @property
    def done(self) -> bool:
        return self.applied >= len(self.frames)

    @property
    def progress(self) -> float:
        if not self.frames:
            return 1.0
        return self.applied / len(self.frames)

    @property
    def stats(self) -> Optional[Stats]:
        """Final numbers; None until the last path frame has been applied."""
        if not self.done:
            return None
        return Stats(self.result.algorithm, self.result.nodes_explored, self.result.path_length)

    # -------------------- stepping --------------------

    def step(self) -> Optional[Frame]:
        """Apply the next frame regardless of timing."""
        if self.done:
            return None
        frame = self.frames[self.applied]
        self._apply(frame)
        self.applied += 1
        return frame

    def tick(self, elapsed_ms: float) -> List[Frame]:
        """Advance the clock; apply every frame whose delay has been paid."""
        out: List[Frame] = []
        if self.done:
            return out
        self._owed_ms += max(0.0, elapsed_ms)
        while not self.done:
            delay = self.frames[self.applied].delay_ms
            if self._owed_ms < delay:
                break
            self._owed_ms -= delay
            out.append(self.step())
        if self.done:
            self._owed_ms = 0.0
        return out

    def finish(self) -> List[Frame]:
        out: List[Frame] = []
        while not self.done:
            out.append(self.step())
        return out

    def _apply(self, frame: Frame) -> None:
        cell = self.grid.at(frame.coord)
        if cell.is_start or cell.is_end:
            return
        src = self._source[frame.coord]
        cell.g_score, cell.h_score, cell.f_score = src.g_score, src.h_score, src.f_score
        cell.parent = src.parent
        if frame.phase == VISITED:
            cell.is_visited = True
        else:
            cell.is_path = True
