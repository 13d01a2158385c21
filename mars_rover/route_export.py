# region Imports
from __future__ import annotations
import json
import logging
from typing import Sequence, Tuple, Union

from .models import PathResult
# endregion

logger = logging.getLogger(__name__)


# region Route Export
def route_positions(path: Sequence[Tuple[int, int]]):
    return [{"r": int(r), "c": int(c)} for r, c in path]


def write_route(
    path: Union[PathResult, Sequence[Tuple[int, int]]],
    out_path: str = "route.json",
) -> str:
    """Export a planned path of (r, c) cells as {"positions": [...]} JSON."""
    if isinstance(path, PathResult):
        if not path.reachable:
            raise ValueError("Cannot export an unreachable route.")
        path = path.path

    positions = route_positions(path)
    with open(out_path, "w") as f:
        json.dump({"positions": positions}, f, indent=2)
    logger.info("Wrote %d points to %s", len(positions), out_path)
    return out_path
# endregion
