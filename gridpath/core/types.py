# gridpath/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional

Coord = Tuple[int, int]  # (col, row)

@dataclass
class Cell:
    x: int
    y: int
    is_wall: bool = False
    is_start: bool = False
    is_end: bool = False
    is_visited: bool = False
    is_path: bool = False
    g_score: float = inf
    h_score: float = 0
    f_score: float = inf
    parent: Optional[Coord] = None     # index into the grid, never an owning reference

    @property
    def coord(self) -> Coord:
        return (self.x, self.y)

    def clear_metadata(self) -> None:
        self.is_visited = False
        self.is_path = False
        self.g_score = inf
        self.h_score = 0
        self.f_score = inf
        self.parent = None

@dataclass
class AlgorithmResult:
    algorithm: str
    visited: List[Cell] = field(default_factory=list)   # exploration order, end excluded
    path: List[Cell] = field(default_factory=list)      # start -> end inclusive

    @property
    def nodes_explored(self) -> int:
        return len(self.visited)

    @property
    def path_length(self) -> int:
        return len(self.path)

@dataclass(frozen=True)
class Stats:
    algorithm: str = "---"
    nodes_explored: int = 0
    path_length: int = 0

@dataclass(frozen=True)
class Frame:
    phase: str                    # "visited" | "path"
    coord: Coord
    delay_ms: int
