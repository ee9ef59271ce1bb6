import pygame
import pytest

from gridpath.app import theme_skin as THEME
from gridpath.core.grid import create_grid
from gridpath.core.types import Cell

CS = 10


def center(x, y, origin=(0, 0)):
    return (origin[0] + x * CS + CS // 2, origin[1] + y * CS + CS // 2)


@pytest.fixture
def grid():
    return create_grid(6, 4, (0, 0), (5, 3))


@pytest.fixture
def surface():
    return pygame.Surface((6 * CS + 20, 4 * CS + 20), depth=32)


@pytest.mark.parametrize("flags_, expected", [
    (dict(is_start=True, is_path=True, is_visited=True), THEME.START_CYAN),
    (dict(is_end=True, is_path=True), THEME.END_MAGENTA),
    (dict(is_path=True, is_visited=True, is_wall=True), THEME.PATH_YELLOW),
    (dict(is_visited=True, is_wall=True), THEME.VISITED_CORAL),
    (dict(is_wall=True), THEME.WALL_SLATE),
    (dict(), THEME.EMPTY_WHITE),
])
def test_cell_color_precedence(flags_, expected):
    assert THEME.cell_color(Cell(0, 0, **flags_)) == expected


def test_paint_colors(grid, surface):
    grid.set_wall(2, 1, True)
    grid.at((3, 2)).is_visited = True
    grid.at((4, 2)).is_path = True
    THEME.paint(surface, grid, CS)
    assert surface.get_at(center(0, 0)) == THEME.START_CYAN
    assert surface.get_at(center(5, 3)) == THEME.END_MAGENTA
    assert surface.get_at(center(2, 1)) == THEME.WALL_SLATE
    assert surface.get_at(center(3, 2)) == THEME.VISITED_CORAL
    assert surface.get_at(center(4, 2)) == THEME.PATH_YELLOW
    assert surface.get_at(center(1, 1)) == THEME.EMPTY_WHITE
    assert surface.get_at((1 * CS, 1 * CS)) == THEME.GRIDLINE


def test_paint_respects_origin(grid, surface):
    THEME.paint(surface, grid, CS, origin=(10, 10))
    assert surface.get_at(center(0, 0, (10, 10))) == THEME.START_CYAN
    assert surface.get_at((5, 5)) == pygame.Color(0, 0, 0)


def test_repaint_shows_only_latest_state(grid, surface):
    grid.set_wall(2, 1, True)
    THEME.paint(surface, grid, CS)
    grid.set_wall(2, 1, False)
    THEME.paint(surface, grid, CS)
    assert surface.get_at(center(2, 1)) == THEME.EMPTY_WHITE
