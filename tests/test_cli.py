"""Tests for the mars_rover command line."""

from __future__ import annotations

import json

from mars_rover.__main__ import main


def test_execute_prints_state(capsys) -> None:
    assert main(["execute", "--location", "2", "2", "--direction", "N", "L", "F"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == {"status": "OBSTACLE", "loc": [2, 2], "dir": "W"}


def test_route_writes_file(capsys, tmp_path) -> None:
    route_file = tmp_path / "route.json"
    rc = main(["route", "--location", "2", "2", "--destination", "0", "2", "--out", str(route_file)])
    assert rc == 0
    assert json.loads(capsys.readouterr().out)["tilesToReachDestination"] == 2
    assert len(json.loads(route_file.read_text())["positions"]) == 3


def test_route_unreachable_exit_code(capsys) -> None:
    assert main(["route", "--location", "2", "2", "--destination", "1", "1"]) == 1
    assert json.loads(capsys.readouterr().out)["tilesToReachDestination"] is None


def test_route_plot(tmp_path, capsys) -> None:
    png = tmp_path / "route.png"
    main(["route", "--location", "2", "2", "--destination", "4", "4", "--plot", str(png)])
    assert png.exists()
