# main.py
import argparse
import json
import sys

from route_planner.app.build import build


def run(config_path: str) -> int:
    with open(config_path, encoding="utf-8") as f:
        cfg = json.load(f)

    app = build(cfg)
    result = app.run()

    if not result.found:
        print("No path found between the requested points.", file=sys.stderr)
        return 1
    print(f"Path: {len(result.path)} nodes, {result.distance_m:.1f} m")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="A* route between two points on a map")
    parser.add_argument("config", help="JSON route request (map, start, end, search, log)")
    args = parser.parse_args()
    sys.exit(run(args.config))
