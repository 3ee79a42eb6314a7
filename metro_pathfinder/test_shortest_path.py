"""
Tests for Dijkstra travel times
"""
import pytest

from metro_pathfinder.graph import MetroGraph
from metro_pathfinder.network import create_metro_graph, default_network_path
from metro_pathfinder.shortest_path import INFINITY, INVALID_STATION_MESSAGE, ShortestPath


def build_graph(num_stations, edges, names=None):
    graph = MetroGraph(num_stations)
    for i, name in enumerate(names or []):
        graph.add_station(name, i)
    for a, b, w in edges:
        graph.add_edge(a, b, w)
    return graph


@pytest.fixture
def delhi():
    graph, _ = create_metro_graph(default_network_path())
    return graph


def test_single_edge():
    sp = ShortestPath(build_graph(2, [(0, 1, 5)]))
    assert sp.find_shortest_paths(0) == [0, 5]


def test_disconnected_pair():
    sp = ShortestPath(build_graph(2, []))
    assert sp.find_shortest_paths(0) == [0, INFINITY]


def test_shorter_path_beats_direct_edge():
    sp = ShortestPath(build_graph(3, [(0, 1, 2), (1, 2, 3), (0, 2, 10)]))
    assert sp.travel_time(0, 2) == 5


def test_stale_heap_entries_are_skipped():
    # station 3 is first reached at 10, then improved to 4 via 1 -> 2
    graph = build_graph(4, [(0, 3, 10), (0, 1, 1), (1, 2, 1), (2, 3, 2), (3, 0, 12)])
    assert ShortestPath(graph).find_shortest_paths(0) == [0, 1, 2, 4]


def test_zero_weight_edges():
    sp = ShortestPath(build_graph(3, [(0, 1, 0), (1, 2, 0)]))
    assert sp.find_shortest_paths(0) == [0, 0, 0]


def test_out_of_range_source():
    sp = ShortestPath(build_graph(2, [(0, 1, 1)]))
    with pytest.raises(IndexError):
        sp.find_shortest_paths(2)
    with pytest.raises(IndexError):
        sp.travel_time(0, -1)


def test_delhi_travel_times(delhi):
    """Known routes on the Delhi network"""
    sp = ShortestPath(delhi)
    cs = delhi.station_id("Central Secretariat")

    assert sp.travel_time(cs, delhi.station_id("Janpath")) == 1
    assert sp.travel_time(cs, delhi.station_id("Mandi House")) == 4  # via Janpath
    assert sp.travel_time(cs, delhi.station_id("Jangpura")) == 9  # via Khan Market
    assert sp.travel_time(cs, delhi.station_id("Mayur Vihar")) == 17
    assert sp.travel_time(cs, delhi.station_id("Nizamuddin")) == 21  # via Lajpat Nagar


def test_source_distance_is_zero(delhi):
    sp = ShortestPath(delhi)
    for s in range(len(delhi)):
        assert sp.find_shortest_paths(s)[s] == 0


def test_symmetry(delhi):
    sp = ShortestPath(delhi)
    tables = [sp.find_shortest_paths(s) for s in range(len(delhi))]
    for u in range(len(delhi)):
        for v in range(len(delhi)):
            assert tables[u][v] == tables[v][u], f"asymmetric {u} <-> {v}"


def test_edges_bound_distances(delhi):
    """Direct edge is an upper bound and the triangle inequality holds"""
    sp = ShortestPath(delhi)
    for s in range(len(delhi)):
        dist = sp.find_shortest_paths(s)
        for u, v, w in delhi.connections():
            if s == u:
                assert dist[v] <= w
            assert dist[v] <= dist[u] + w
            assert dist[u] <= dist[v] + w


def test_repeated_queries_are_identical(delhi):
    sp = ShortestPath(delhi)
    first = sp.find_shortest_paths(5)
    assert sp.find_shortest_paths(5) == first
    assert sp.find_shortest_paths(5) is not first


def test_journey_found(delhi):
    result = ShortestPath(delhi).journey("Central Secretariat", "Jangpura")
    assert result["success"] is True
    assert result["time"] == 9
    assert result["message"] == (
        "Shortest time required to travel between Central Secretariat and Jangpura is 9 mins."
    )


def test_journey_same_station(delhi):
    result = ShortestPath(delhi).journey("Ashram", "Ashram")
    assert result["success"] is True
    assert result["time"] == 0


def test_journey_invalid_station(delhi):
    sp = ShortestPath(delhi)
    for start, end in [("Nowhere", "Ashram"), ("Ashram", "Nowhere"), ("", "")]:
        result = sp.journey(start, end)
        assert result["success"] is False
        assert result["error"] == "invalid_station"
        assert result["message"] == INVALID_STATION_MESSAGE


def test_journey_no_path():
    graph = build_graph(3, [(0, 1, 4)], names=["A", "B", "C"])
    result = ShortestPath(graph).journey("A", "C")
    assert result["success"] is False
    assert result["error"] == "no_path"
    assert result["message"] == "No path exists between A and C."
