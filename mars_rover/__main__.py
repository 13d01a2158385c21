"""Command-line entry point: python -m mars_rover {execute,route,serve}."""

from __future__ import annotations
import argparse
import json
import sys
from typing import List, Optional

from .logging_config import configure_logging
from .route_export import write_route
from .rover import Rover


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mars_rover", description="Mars rover command runner and route planner")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    sub = parser.add_subparsers(dest="cmd", required=True)

    ex = sub.add_parser("execute", help="Run a batch of F/B/L/R commands")
    ex.add_argument("--location", nargs=2, type=int, required=True, metavar=("R", "C"))
    ex.add_argument("--direction", default="N")
    ex.add_argument("commands", nargs="*")

    rt = sub.add_parser("route", help="Shortest obstacle-free route to a destination")
    rt.add_argument("--location", nargs=2, type=int, required=True, metavar=("R", "C"))
    rt.add_argument("--destination", nargs=2, type=int, required=True, metavar=("R", "C"))
    rt.add_argument("--out", default=None, help="Write route JSON to this file")
    rt.add_argument("--plot", default=None, help="Save a PNG of the route to this file")

    sv = sub.add_parser("serve", help="Run the HTTP API")
    sv.add_argument("--host", default="0.0.0.0")
    sv.add_argument("--port", type=int, default=8081)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.cmd == "execute":
        rover = Rover(args.location, args.direction)
        print(json.dumps(rover.command(args.commands).to_dict()))
        return 0

    if args.cmd == "route":
        rover = Rover(args.location, "N")
        result = rover.move_to(args.destination)
        print(json.dumps(result.to_dict()))
        if result.reachable and args.out:
            write_route(result, args.out)
        if args.plot:
            from .viz import save_route_png
            save_route_png(rover.terrain, args.plot, path=result.path,
                           start=rover.location, goal=tuple(args.destination))
        return 0 if result.reachable else 1

    from .app import app
    app.run(host=args.host, port=args.port, threaded=True)
    return 0


if __name__ == "__main__":
    sys.exit(main())
