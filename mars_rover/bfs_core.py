# region Imports
from collections import deque
from typing import Dict, Optional
import logging

from .config import UNREACHABLE
from .connectivity import AdjacencyIndex
from .grid import TerrainMap
from .models import Cell, PathResult, as_cell
# endregion

logger = logging.getLogger(__name__)


# region Path Reconstruction
def reconstruct(parent: Dict[Cell, Optional[Cell]], goal: Cell):
    path = []
    v = goal
    while v is not None:
        path.append(v)
        v = parent.get(v)
    path.reverse()
    return path
# endregion


# region BFS
def shortest_path(
    terrain: TerrainMap,
    adjacency: AdjacencyIndex,
    source: Cell,
    destination: Cell,
) -> PathResult:
    """
    Unweighted shortest path from source to destination over `adjacency`.

    Returns PathResult(distance, path) with path[0] == source and
    path[-1] == destination, or the unreachable sentinel (inf, None) when the
    destination is blocked, off-grid, or not connected to source. Among equal
    length paths, the one returned depends on neighbour enumeration order.
    """
    source = as_cell(source)
    destination = as_cell(destination)

    if not terrain.is_traversable(destination):
        return PathResult()

    if source == destination:
        return PathResult(0, [source])

    dist: Dict[Cell, float] = {u: UNREACHABLE for u in adjacency.cells()}
    dist[source] = 0
    parent: Dict[Cell, Optional[Cell]] = {source: None}
    frontier = deque([source])

    while frontier:
        u = frontier.popleft()
        du = dist[u]
        for v in adjacency.neighbors(u):
            if du + 1 < dist[v]:
                dist[v] = du + 1
                parent[v] = u
                if v == destination:
                    return PathResult(int(dist[v]), reconstruct(parent, v))
                frontier.append(v)

    logger.debug("No path from %s to %s", source, destination)
    return PathResult()
# endregion
