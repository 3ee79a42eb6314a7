import heapq
import logging

logger = logging.getLogger(__name__)

INFINITY = float('inf')

INVALID_STATION_MESSAGE = "Invalid station name. Please check the station names and try again."


class ShortestPath:
    def __init__(self, graph):
        self.graph = graph

    def find_shortest_paths(self, source):
        """Dijkstra from source; returns travel times indexed by station id.

        Stations that cannot be reached keep INFINITY.
        """
        if source not in self.graph:
            raise IndexError(f"station id {source!r} out of range [0, {len(self.graph)})")

        distances = [INFINITY] * len(self.graph)
        distances[source] = 0
        pq = [(0, source)]

        while pq:
            current_dist, current = heapq.heappop(pq)

            # Skip outdated entries
            if current_dist > distances[current]:
                continue

            for neighbor, travel_time in self.graph.get_neighbors(current):
                new_dist = current_dist + travel_time

                if new_dist < distances[neighbor]:
                    distances[neighbor] = new_dist
                    heapq.heappush(pq, (new_dist, neighbor))

        return distances

    def travel_time(self, start, end):
        if end not in self.graph:
            raise IndexError(f"station id {end!r} out of range [0, {len(self.graph)})")
        return self.find_shortest_paths(start)[end]

    def journey(self, start_name, end_name):
        """Shortest travel time between two named stations, as a result dict"""
        if not self.graph.is_station_valid(start_name) or not self.graph.is_station_valid(end_name):
            logger.debug("rejected journey %r -> %r", start_name, end_name)
            return {
                "success": False,
                "error": "invalid_station",
                "message": INVALID_STATION_MESSAGE,
            }

        start = self.graph.station_id(start_name)
        end = self.graph.station_id(end_name)
        time = self.travel_time(start, end)
        logger.debug("journey %s -> %s: %s", start_name, end_name, time)

        if time == INFINITY:
            return {
                "success": False,
                "error": "no_path",
                "start": start_name,
                "end": end_name,
                "message": f"No path exists between {start_name} and {end_name}.",
            }

        return {
            "success": True,
            "start": start_name,
            "end": end_name,
            "time": time,
            "message": f"Shortest time required to travel between {start_name} and {end_name} is {time} mins.",
        }
