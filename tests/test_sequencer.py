import pytest

from gridpath.core.astar import AStarAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.grid import create_grid
from gridpath.core.sequencer import PATH, VISITED, AnimationSequencer
from gridpath.core.types import Stats


@pytest.fixture
def corridor():
    g = create_grid(5, 1, (0, 0), (4, 0))
    return g, DijkstraAlgo().run(g)


def test_frames_are_visited_then_path(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g, visit_delay_ms=10, path_delay_ms=20)
    phases = [f.phase for f in seq.frames]
    assert phases == [VISITED] * result.nodes_explored + [PATH] * result.path_length
    assert [f.coord for f in seq.frames[:4]] == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert {f.delay_ms for f in seq.frames if f.phase == VISITED} == {10}
    assert {f.delay_ms for f in seq.frames if f.phase == PATH} == {20}


def test_tick_waits_for_delay(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g, visit_delay_ms=10, path_delay_ms=20)
    assert seq.tick(5) == []
    assert not g.at((1, 0)).is_visited
    applied = seq.tick(5)
    assert [f.coord for f in applied] == [(0, 0)]
    applied = seq.tick(10)
    assert [f.coord for f in applied] == [(1, 0)]
    assert g.at((1, 0)).is_visited


def test_tick_catches_up_on_long_frames(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g, visit_delay_ms=10, path_delay_ms=20)
    applied = seq.tick(35)
    assert len(applied) == 3
    assert seq.applied == 3


def test_visited_before_path(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g)
    for _ in range(result.nodes_explored):
        seq.step()
    assert not any(c.is_path for c in g.iter_cells())
    assert g.at((3, 0)).is_visited
    seq.step()
    seq.step()
    assert g.at((1, 0)).is_path


def test_endpoints_are_never_flagged(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g)
    seq.finish()
    for c in (g.at(g.start), g.at(g.end)):
        assert not c.is_visited and not c.is_path
    assert all(g.at((x, 0)).is_path for x in (1, 2, 3))


def test_stats_only_when_done(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g)
    assert seq.stats is None
    while seq.step() is not None:
        if not seq.done:
            assert seq.stats is None
    assert seq.done
    assert seq.stats == Stats("Dijkstra", 4, 5)
    assert seq.progress == 1.0
    assert seq.step() is None
    assert seq.tick(1000) == []


def test_scores_copied_to_live_grid():
    g = create_grid(4, 1, (0, 0), (3, 0))
    result = AStarAlgo().run(g)
    seq = AnimationSequencer(result, g)
    seq.finish()
    mid = g.at((2, 0))
    assert mid.g_score == 2 and mid.h_score == 1 and mid.f_score == 3
    assert mid.parent == (1, 0)


def test_zero_delay_plays_everything_on_first_tick(corridor):
    g, result = corridor
    seq = AnimationSequencer(result, g, visit_delay_ms=0, path_delay_ms=0)
    seq.tick(0)
    assert seq.done
