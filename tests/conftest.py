import pytest

from gridpath.config import DEFAULT_END, DEFAULT_START, GRID_COLS, GRID_ROWS
from gridpath.core.grid import create_grid

from helpers import RecordingNotifier


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def default_grid():
    return create_grid(GRID_COLS, GRID_ROWS, DEFAULT_START, DEFAULT_END)


@pytest.fixture
def walled_grid(default_grid):
    """Full-height wall on column 20: start and end are cut apart."""
    for y in range(default_grid.height):
        default_grid.set_wall(20, y, True)
    return default_grid
