from .bfs_core import shortest_path
from .connectivity import AdjacencyIndex
from .grid import TerrainMap
from .models import Command, Heading, PathResult, RoverState, Status, TerrainType
from .rover import Rover

__all__ = [
    "AdjacencyIndex",
    "Command",
    "Heading",
    "PathResult",
    "Rover",
    "RoverState",
    "Status",
    "TerrainMap",
    "TerrainType",
    "shortest_path",
]
