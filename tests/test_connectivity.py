"""Tests for mars_rover.connectivity."""

from __future__ import annotations

from mars_rover.config import TERRAIN_TYPES
from mars_rover.connectivity import AdjacencyIndex, neighbors_4
from mars_rover.grid import TerrainMap


def test_neighbors_4_clips_to_grid() -> None:
    assert sorted(neighbors_4((0, 0), 5, 5)) == [(0, 1), (1, 0)]
    assert len(list(neighbors_4((2, 2), 5, 5))) == 4


def test_only_traversable_cells_have_entries(terrain: TerrainMap, adjacency: AdjacencyIndex) -> None:
    assert len(adjacency) == len(terrain.traversable_cells())
    assert (1, 1) not in adjacency
    assert adjacency.neighbors((1, 1)) == ()
    assert adjacency.neighbors((-1, 0)) == ()


def test_obstacles_never_neighbours(terrain: TerrainMap, adjacency: AdjacencyIndex) -> None:
    for u in adjacency.cells():
        for v in adjacency.neighbors(u):
            assert terrain.is_traversable(v)


def test_adjacency_is_symmetric(adjacency: AdjacencyIndex) -> None:
    for u in adjacency.cells():
        for v in adjacency.neighbors(u):
            assert u in adjacency.neighbors(v)


def test_matches_known_lists(adjacency: AdjacencyIndex) -> None:
    assert sorted(adjacency.neighbors((0, 0))) == [(0, 1), (1, 0)]
    assert sorted(adjacency.neighbors((0, 4))) == [(1, 4)]
    assert sorted(adjacency.neighbors((3, 3))) == [(3, 2), (3, 4), (4, 3)]


def test_isolated_cell_has_no_neighbours() -> None:
    tm = TerrainMap([["M", "M", "M"], ["M", "P", "M"], ["M", "M", "M"]], TERRAIN_TYPES)
    adj = AdjacencyIndex(tm)
    assert len(adj) == 1
    assert adj.neighbors((1, 1)) == ()
