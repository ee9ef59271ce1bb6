from collections import deque
import random


class RecordingNotifier:
    def __init__(self):
        self.errors = []
        self.successes = []

    def report_error(self, message):
        self.errors.append(message)

    def report_success(self, message):
        self.successes.append(message)


def bfs_length(grid):
    """Cells on a shortest 4-connected path from start to end, or None."""
    seen = {grid.start: 1}
    queue = deque([grid.start])
    while queue:
        x, y = queue.popleft()
        if (x, y) == grid.end:
            return seen[(x, y)]
        for dx, dy in ((0, -1), (0, 1), (-1, 0), (1, 0)):
            n = (x + dx, y + dy)
            if grid.in_bounds(*n) and not grid.is_wall(*n) and n not in seen:
                seen[n] = seen[(x, y)] + 1
                queue.append(n)
    return None


def random_walls(grid, seed, density=0.25):
    rng = random.Random(seed)
    for cell in grid.iter_cells():
        if rng.random() < density:
            grid.set_wall(cell.x, cell.y, True)
    return grid


def flags(grid):
    return [(c.is_wall, c.is_start, c.is_end, c.is_visited, c.is_path)
            for c in grid.iter_cells()]
