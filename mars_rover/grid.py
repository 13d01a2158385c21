# region Imports
from typing import Dict, List, Mapping, Optional, Sequence, Tuple
import numpy as np

from .config import load_world
from .models import Cell, TerrainType
# endregion


# region Terrain Map
class TerrainMap:
    """
    Immutable grid of terrain labels with a boolean `blocked` mask (True = impassable).
    Cells are (r, c); row 0 is the north edge.
    """

    def __init__(self, rows: Sequence[Sequence[str]], terrain_types: Mapping[str, Mapping]):
        if not rows or not rows[0]:
            raise ValueError("World must have at least one row and one column.")
        W = len(rows[0])
        if any(len(row) != W for row in rows):
            raise ValueError("All world rows must have the same length.")

        self.terrain_types: Dict[str, TerrainType] = {
            label: TerrainType(
                label=label,
                obstacle=bool(entry.get("obstacle", False)),
                description=str(entry.get("description", "")),
            )
            for label, entry in terrain_types.items()
        }

        unknown = {lbl for row in rows for lbl in row} - set(self.terrain_types)
        if unknown:
            raise ValueError(f"Unknown terrain label(s): {sorted(unknown)}")

        self.labels = np.array([list(row) for row in rows], dtype=object)
        blocked = np.array(
            [[self.terrain_types[lbl].obstacle for lbl in row] for row in rows],
            dtype=bool,
        )
        blocked.setflags(write=False)
        self.labels.setflags(write=False)
        self._blocked = blocked
        self.H, self.W = blocked.shape

    @classmethod
    def from_config(cls, path: Optional[str] = None) -> "TerrainMap":
        rows, terrain = load_world(path)
        return cls(rows, terrain)

    @property
    def shape(self) -> Tuple[int, int]:
        return self.H, self.W

    @property
    def blocked(self) -> np.ndarray:
        return self._blocked

    # region Predicates
    def is_in_bounds(self, cell: Cell) -> bool:
        r, c = cell
        return 0 <= r < self.H and 0 <= c < self.W

    def is_obstacle(self, cell: Cell) -> bool:
        # numpy would wrap negative indices, so bounds are checked explicitly
        if not self.is_in_bounds(cell):
            raise IndexError(f"Cell {tuple(cell)} is outside the {self.H}x{self.W} world")
        r, c = cell
        return bool(self._blocked[r, c])

    def is_traversable(self, cell: Cell) -> bool:
        return self.is_in_bounds(cell) and not self.is_obstacle(cell)
    # endregion

    # region Lookups
    def label_at(self, cell: Cell) -> str:
        if not self.is_in_bounds(cell):
            raise IndexError(f"Cell {tuple(cell)} is outside the {self.H}x{self.W} world")
        r, c = cell
        return self.labels[r, c]

    def terrain_at(self, cell: Cell) -> TerrainType:
        return self.terrain_types[self.label_at(cell)]

    def traversable_cells(self) -> List[Cell]:
        return [(int(r), int(c)) for r, c in np.argwhere(~self._blocked)]

    def rows(self) -> List[List[str]]:
        return [list(row) for row in self.labels]
    # endregion
# endregion
