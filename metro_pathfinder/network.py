"""
Metro network configuration

A network is a JSON document listing stations and the travel time of each
connection between them. The Delhi Metro network ships with the package;
another file can be selected with the METRO_NETWORK_FILE environment variable.
"""
import json
import logging
import os

from metro_pathfinder.graph import MetroGraph

logger = logging.getLogger(__name__)

NETWORK_FILE_ENV = "METRO_NETWORK_FILE"


class NetworkConfigError(ValueError):
    pass


def default_network_path():
    return os.path.join(os.path.dirname(os.path.abspath(__file__)), "data", "delhi_metro.json")


def resolve_network_path(path=None):
    """Explicit path, then $METRO_NETWORK_FILE, then the bundled network"""
    if path:
        return path
    return os.environ.get(NETWORK_FILE_ENV) or default_network_path()


def load_network(data):
    """Build a MetroGraph from a parsed network document"""
    try:
        stations = data["stations"]
        connections = data.get("connections", [])
        num_stations = data.get("num_stations", len(stations))

        graph = MetroGraph(num_stations)
        for station in stations:
            graph.add_station(station["name"], station["id"])
        for conn in connections:
            graph.add_edge(conn["from"], conn["to"], conn["time"])
    except KeyError as e:
        raise NetworkConfigError(f"missing key {e} in network definition") from e
    except (TypeError, AttributeError) as e:
        raise NetworkConfigError(f"malformed network definition: {e}") from e
    except (IndexError, ValueError) as e:
        raise NetworkConfigError(str(e)) from e

    logger.debug("loaded %d stations, %d connections", len(graph), len(connections))
    return graph


def create_metro_graph(path=None):
    """Read a network file and return (graph, network name)"""
    path = resolve_network_path(path)
    logger.info("loading metro network from %s", path)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise NetworkConfigError(f"cannot read network file {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise NetworkConfigError(f"invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise NetworkConfigError(f"network file {path} must contain a JSON object")

    name = data.get("name", os.path.splitext(os.path.basename(path))[0])
    return load_network(data), name
