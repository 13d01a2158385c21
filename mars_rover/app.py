# app.py — Flask API over the rover command loop and BFS route planner

from __future__ import annotations
from typing import Any, Optional, Tuple
from flask import Flask, request, jsonify

from .models import as_cell
from .rover import Rover, default_world

app = Flask(__name__)


# ======= CORS =======
@app.after_request
def _cors(resp):
    resp.headers["Access-Control-Allow-Origin"] = "*"
    resp.headers["Access-Control-Allow-Headers"] = "*"
    resp.headers["Access-Control-Allow-Methods"] = "GET,POST,OPTIONS"
    return resp


# ======= helpers =======
def _cell(value: Any) -> Optional[Tuple[int, int]]:
    """[r, c] from a JSON body, or None when it is not a pair of integers."""
    try:
        return as_cell(value)
    except ValueError:
        return None


def _json_object():
    data = request.get_json(force=True, silent=True)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        return None, (jsonify({"error": "JSON object body required"}), 400)
    return data, None


def _rover_from(data: dict):
    loc = _cell(data.get("location"))
    if loc is None:
        return None, (jsonify({"error": "location=[r, c] required"}), 400)
    return Rover(loc, data.get("direction")), None


# ======= endpoints =======
@app.route("/", methods=["GET"])
def root():
    terrain, _ = default_world()
    H, W = terrain.shape
    return {
        "ok": True,
        "world": {"height": H, "width": W, "rows": terrain.rows()},
        "endpoints": ["/rover/commands (POST JSON)", "/rover/move_to (POST JSON)"],
    }


@app.route("/rover/commands", methods=["POST"])
def rover_commands():
    """
    JSON body:
    {
      "location": [r, c],
      "direction": "N" | "S" | "E" | "W",
      "commands": ["F", "B", "L", "R", ...]
    }
    """
    data, err = _json_object()
    if err:
        return err
    rover, err = _rover_from(data)
    if err:
        return err

    state = rover.command(data.get("commands"))
    resp = state.to_dict()
    resp["commands"] = rover.commands
    return jsonify(resp)


@app.route("/rover/move_to", methods=["POST"])
def rover_move_to():
    """
    JSON body:
    {
      "location": [r, c],
      "direction": "N",            // optional
      "destination": [r, c]
    }
    """
    data, err = _json_object()
    if err:
        return err
    rover, err = _rover_from(data)
    if err:
        return err

    dest = _cell(data.get("destination"))
    if dest is None:
        return jsonify({"error": "destination=[r, c] required"}), 400

    # Unreachable is a normal answer, not an error
    return jsonify(rover.move_to(dest).to_dict())


if __name__ == "__main__":
    from .logging_config import configure_logging
    configure_logging()
    app.run(host="0.0.0.0", port=8081, threaded=True)
