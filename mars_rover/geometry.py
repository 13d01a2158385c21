# region Imports
from typing import Dict, Tuple
from .models import Cell, Command, Heading
# endregion

# region Rotation Table
# Turns are taken from the rover's own frame of reference
_ROTATION: Dict[Heading, Dict[Command, Heading]] = {
    Heading.N: {Command.LEFT: Heading.W, Command.RIGHT: Heading.E},
    Heading.S: {Command.LEFT: Heading.E, Command.RIGHT: Heading.W},
    Heading.E: {Command.LEFT: Heading.N, Command.RIGHT: Heading.S},
    Heading.W: {Command.LEFT: Heading.S, Command.RIGHT: Heading.N},
}


def rotate(heading: Heading, turn: Command) -> Heading:
    return _ROTATION[heading][turn]
# endregion

# region Offset Table
# (dr, dc) for one step forward; north is towards row 0
_FORWARD: Dict[Heading, Tuple[int, int]] = {
    Heading.N: (-1, 0),
    Heading.S: (1, 0),
    Heading.E: (0, 1),
    Heading.W: (0, -1),
}


def offset(heading: Heading, forward: bool = True) -> Tuple[int, int]:
    dr, dc = _FORWARD[heading]
    return (dr, dc) if forward else (-dr, -dc)


def step(cell: Cell, heading: Heading, forward: bool = True) -> Cell:
    dr, dc = offset(heading, forward)
    return (cell[0] + dr, cell[1] + dc)
# endregion
