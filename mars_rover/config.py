# config.py
import json
import logging
import os
from typing import Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

# Top-left corner is (0, 0), bottom-right is (H-1, W-1). Row 0 is the north edge.
WORLD: List[List[str]] = [
    ["P", "P", "P", "C", "P"],
    ["P", "M", "P", "C", "P"],
    ["P", "M", "P", "C", "P"],
    ["P", "M", "P", "P", "P"],
    ["P", "M", "P", "P", "P"],
]

TERRAIN_TYPES: Dict[str, Dict[str, object]] = {
    "P": {"obstacle": False, "description": "plains"},
    "M": {"obstacle": True, "description": "mountains"},
    "C": {"obstacle": True, "description": "crevasse"},
}

# Used when a rover is built with an unrecognised heading token
DEFAULT_HEADING = "N"

# Distance reported for a destination that cannot be reached
UNREACHABLE = float("inf")


# region World Loading
def load_world(path: Optional[str] = None) -> Tuple[List[List[str]], Dict[str, Dict[str, object]]]:
    """
    Return (rows, terrain_types). Reads a JSON world file when a path is given
    or MARS_ROVER_WORLD is set, else the built-in 5x5 world.
    """
    path = path or os.getenv("MARS_ROVER_WORLD")
    if not path:
        return WORLD, TERRAIN_TYPES

    try:
        with open(path) as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read world file {path}: {e}") from e

    if not isinstance(data, dict) or "world" not in data:
        raise ValueError(f"World file {path} must be an object with a 'world' key")

    rows = data["world"]
    if not isinstance(rows, list) or not rows:
        raise ValueError(f"World file {path}: 'world' must be a non-empty list of rows")
    if not all(isinstance(row, (list, str)) and row for row in rows):
        raise ValueError(f"World file {path}: every row must be a non-empty list or string of labels")
    rows = [list(row) for row in rows]
    if not all(isinstance(lbl, str) for row in rows for lbl in row):
        raise ValueError(f"World file {path}: terrain labels must be strings")

    terrain = data.get("terrain", TERRAIN_TYPES)
    if not isinstance(terrain, dict) or not all(isinstance(v, dict) for v in terrain.values()):
        raise ValueError(f"World file {path}: 'terrain' must map labels to objects")

    logger.info("Loaded %dx%d world from %s", len(rows), len(rows[0]), path)
    return rows, terrain
# endregion
