# region Imports
from __future__ import annotations
from dataclasses import replace
from typing import Any, List, Optional, Sequence
import logging

from .bfs_core import shortest_path
from .config import DEFAULT_HEADING
from .connectivity import AdjacencyIndex
from .geometry import rotate, step
from .grid import TerrainMap
from .models import Cell, Command, Heading, PathResult, RoverState, Status, as_cell
# endregion

logger = logging.getLogger(__name__)

_default_terrain: Optional[TerrainMap] = None
_default_adjacency: Optional[AdjacencyIndex] = None


# region Shared World
def default_world():
    """Map and adjacency built from config, shared read-only by every rover."""
    global _default_terrain, _default_adjacency
    if _default_terrain is None:
        _default_terrain = TerrainMap.from_config()
        _default_adjacency = AdjacencyIndex(_default_terrain)
    return _default_terrain, _default_adjacency
# endregion


# region Helpers
def parse_heading(direction: Any) -> Heading:
    """Heading for a token; unknown tokens get the configured default."""
    if isinstance(direction, Heading):
        return direction
    if isinstance(direction, str):
        try:
            return Heading(direction)
        except ValueError:
            pass
    logger.warning("Unknown heading %r, falling back to %s", direction, DEFAULT_HEADING)
    return Heading(DEFAULT_HEADING)


def normalize_commands(commands: Any) -> List[Any]:
    # Only real sequences count; strings, mappings, scalars and None become []
    if isinstance(commands, (list, tuple)):
        return list(commands)
    return []
# endregion


# region Rover
class Rover:
    def __init__(
        self,
        location: Sequence[int],
        direction: Any,
        terrain: Optional[TerrainMap] = None,
        adjacency: Optional[AdjacencyIndex] = None,
    ):
        if terrain is None:
            terrain, default_adj = default_world()
            adjacency = adjacency or default_adj
        self.terrain = terrain
        self.adjacency = adjacency or AdjacencyIndex(terrain)
        self.commands: List[Any] = []

        position = as_cell(location)
        status = Status.OK if terrain.is_traversable(position) else Status.OBSTACLE
        if status is Status.OBSTACLE:
            logger.warning("Rover placed on blocked or off-world cell %s", position)
        self._state = RoverState(position=position, heading=parse_heading(direction), status=status)

    # region State Access
    @property
    def state(self) -> RoverState:
        return replace(self._state)

    @property
    def location(self) -> Cell:
        return self._state.position

    @property
    def direction(self) -> Heading:
        return self._state.heading

    @property
    def status(self) -> Status:
        return self._state.status
    # endregion

    # region Command Execution
    def command(self, commands: Any) -> RoverState:
        """Store the (normalised) batch and run it."""
        self.commands = normalize_commands(commands)
        return self.execute(self.commands)

    def execute(self, commands: Any) -> RoverState:
        """
        Run commands in order, halting on the first one that is not recognised
        (INVALID_COMMAND) or would leave the map / enter an obstacle (OBSTACLE).
        Position and heading always hold the last successful values.
        """
        state = self._state
        for i, token in enumerate(normalize_commands(commands)):
            cmd = Command.parse(token)
            if cmd is None:
                state.status = Status.INVALID_COMMAND
                logger.info("Invalid command %r at index %d; halting at %s", token, i, state.position)
                break

            heading, position = state.heading, state.position
            if cmd in (Command.LEFT, Command.RIGHT):
                heading = rotate(heading, cmd)
            else:
                position = step(position, heading, forward=(cmd is Command.FORWARD))

            # A turn keeps the cell, so it only fails for a rover stranded on a blocked one
            if not self.terrain.is_traversable(position):
                state.status = Status.OBSTACLE
                logger.info("Obstacle at %s (index %d); halting at %s", position, i, state.position)
                break

            state.position, state.heading = position, heading
            state.status = Status.OK
            logger.debug("Applied %s: now at %s facing %s", cmd.value, position, heading.value)

        return self.state
    # endregion

    # region Path Planning
    def move_to(self, destination: Sequence[int]) -> PathResult:
        """Plan a shortest route from the current position; the rover does not move."""
        return shortest_path(self.terrain, self.adjacency, self._state.position, destination)
    # endregion
# endregion
