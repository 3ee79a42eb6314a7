"""
Metro Pathfinder - console version
Run with: metro-pathfinder [--network FILE]
"""
import argparse
import logging
import sys

from metro_pathfinder.network import NetworkConfigError, create_metro_graph
from metro_pathfinder.shortest_path import ShortestPath


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="metro-pathfinder",
        description="Shortest travel time between two metro stations",
    )
    parser.add_argument("--network", help="network JSON file (default: $METRO_NETWORK_FILE or Delhi Metro)")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    return parser.parse_args(argv)


def _read_line(input_fn):
    try:
        return input_fn().strip()
    except EOFError:
        # closed stdin counts as an empty (invalid) station name
        return ""


def main(argv=None, input_fn=input):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        graph, _ = create_metro_graph(args.network)
    except NetworkConfigError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for number, (_, name) in enumerate(graph.stations(), start=1):
        print(f"{number}. {name}")

    print("Enter your starting station:")
    start = _read_line(input_fn)
    print("Enter your destination station:")
    end = _read_line(input_fn)

    result = ShortestPath(graph).journey(start, end)
    print(result["message"])

    if result.get("error") == "invalid_station":
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
