import matplotlib

matplotlib.use("Agg")

import pytest

from mars_rover.config import TERRAIN_TYPES, WORLD
from mars_rover.connectivity import AdjacencyIndex
from mars_rover.grid import TerrainMap


@pytest.fixture
def terrain() -> TerrainMap:
    return TerrainMap(WORLD, TERRAIN_TYPES)


@pytest.fixture
def adjacency(terrain: TerrainMap) -> AdjacencyIndex:
    return AdjacencyIndex(terrain)
