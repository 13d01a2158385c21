# region Imports
from typing import Dict, Iterator, List, Tuple
from .grid import TerrainMap
from .models import Cell
# endregion

# region Neighbor Generation
def neighbors_4(u: Cell, H: int, W: int) -> Iterator[Cell]:
    r, c = u
    for dr, dc in ((-1, 0), (1, 0), (0, -1), (0, 1)):
        rr, cc = r + dr, c + dc
        if 0 <= rr < H and 0 <= cc < W:
            yield (rr, cc)
# endregion

# region Adjacency Index
class AdjacencyIndex:
    """
    Traversable 4-neighbours of every traversable cell. Blocked and off-grid
    cells have no entry and never appear as anyone's neighbour.
    """

    def __init__(self, terrain: TerrainMap):
        self.terrain = terrain
        H, W = terrain.shape
        blocked = terrain.blocked
        self._adj: Dict[Cell, Tuple[Cell, ...]] = {}
        for u in terrain.traversable_cells():
            self._adj[u] = tuple(v for v in neighbors_4(u, H, W) if not blocked[v[0], v[1]])

    def neighbors(self, u: Cell) -> Tuple[Cell, ...]:
        return self._adj.get(tuple(u), ())

    def cells(self) -> List[Cell]:
        return list(self._adj)

    def __contains__(self, u) -> bool:
        return tuple(u) in self._adj

    def __len__(self) -> int:
        return len(self._adj)
# endregion
