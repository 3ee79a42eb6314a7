import math


class InvalidStationError(KeyError):
    """Raised when a station name is not part of the network"""


class MetroGraph:
    def __init__(self, num_stations):
        if isinstance(num_stations, bool) or not isinstance(num_stations, int) or num_stations < 0:
            raise ValueError(f"num_stations must be a non-negative integer, got {num_stations!r}")
        self.num_stations = num_stations
        self.adjacency = [[] for _ in range(num_stations)]
        self.station_map = {}
        self.station_names = [None] * num_stations

    def __len__(self):
        return self.num_stations

    def __contains__(self, station_id):
        if isinstance(station_id, bool) or not isinstance(station_id, int):
            return False
        return 0 <= station_id < self.num_stations

    def _check_id(self, station_id):
        if station_id not in self:
            raise IndexError(f"station id {station_id!r} out of range [0, {self.num_stations})")

    def add_station(self, name, station_id):
        self._check_id(station_id)
        if not isinstance(name, str) or not name:
            raise ValueError(f"station name must be a non-empty string, got {name!r}")

        existing_id = self.station_map.get(name)
        if existing_id is not None and existing_id != station_id:
            raise ValueError(f"station {name!r} already registered with id {existing_id}")
        existing_name = self.station_names[station_id]
        if existing_name is not None and existing_name != name:
            raise ValueError(f"station id {station_id} already named {existing_name!r}")

        self.station_map[name] = station_id
        self.station_names[station_id] = name

    def add_edge(self, station_a, station_b, travel_time):
        self._check_id(station_a)
        self._check_id(station_b)
        # NaN never compares less than a distance, so it would cut the edge silently
        if (isinstance(travel_time, bool) or not isinstance(travel_time, (int, float))
                or not math.isfinite(travel_time) or travel_time < 0):
            raise ValueError(f"travel time must be a finite non-negative number, got {travel_time!r}")

        # Bidirectional
        self.adjacency[station_a].append((station_b, travel_time))
        self.adjacency[station_b].append((station_a, travel_time))

    def is_station_valid(self, name):
        return name in self.station_map

    def station_id(self, name):
        try:
            return self.station_map[name]
        except KeyError:
            raise InvalidStationError(name) from None

    def station_name(self, station_id):
        self._check_id(station_id)
        return self.station_names[station_id]

    def stations(self):
        """Named stations as (id, name) pairs, ordered by id"""
        return [(i, name) for i, name in enumerate(self.station_names) if name is not None]

    def get_neighbors(self, station_id):
        return self.adjacency[station_id]

    def connections(self):
        """Every undirected connection once, as (a, b, travel_time)"""
        result = []
        for a, neighbors in enumerate(self.adjacency):
            loops = 0
            for b, travel_time in neighbors:
                if a < b:
                    result.append((a, b, travel_time))
                elif a == b:
                    # a self loop lands twice in the same list
                    loops += 1
                    if loops % 2:
                        result.append((a, b, travel_time))
        return result
