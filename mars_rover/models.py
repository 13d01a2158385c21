# models.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from numbers import Integral
from typing import Any, List, Optional, Tuple, Union

from .config import UNREACHABLE

Cell = Tuple[int, int]


def as_cell(value: Any) -> Cell:
    """(r, c) from a 2-element sequence of integers; anything else is a ValueError."""
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValueError(f"Cell must be a pair of integers, got {value!r}")
    if not all(isinstance(v, Integral) and not isinstance(v, bool) for v in value):
        raise ValueError(f"Cell coordinates must be integers, got {value!r}")
    return int(value[0]), int(value[1])


class Heading(str, Enum):
    N = "N"
    S = "S"
    E = "E"
    W = "W"


class Command(str, Enum):
    FORWARD = "F"
    BACKWARD = "B"
    LEFT = "L"
    RIGHT = "R"

    @classmethod
    def parse(cls, token) -> Optional["Command"]:
        """Map a raw token to a Command, or None if it is not one."""
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return None
        try:
            return cls(token)
        except ValueError:
            return None


class Status(str, Enum):
    OK = "OK"
    OBSTACLE = "OBSTACLE"
    INVALID_COMMAND = "INVALID_COMMAND"


@dataclass(frozen=True)
class TerrainType:
    label: str
    obstacle: bool
    description: str = ""


@dataclass
class RoverState:
    position: Cell
    heading: Heading
    status: Status

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "loc": [int(self.position[0]), int(self.position[1])],
            "dir": self.heading.value,
        }


@dataclass
class PathResult:
    distance: Union[int, float] = UNREACHABLE
    path: Optional[List[Cell]] = field(default=None)

    @property
    def reachable(self) -> bool:
        return self.path is not None

    def to_dict(self) -> dict:
        # JSON has no Infinity; unreachable goes out as null for both fields
        if not self.reachable:
            return {"tilesToReachDestination": None, "roverMovementToDestination": None}
        return {
            "tilesToReachDestination": int(self.distance),
            "roverMovementToDestination": [[int(r), int(c)] for r, c in self.path],
        }
