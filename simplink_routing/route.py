class Route:
    """
    A one-directional bus line: an ordered sequence of stops.

    The reverse trip is a separate Route. A stop may appear more than once
    (loop routes), index lookups always resolve to the first occurrence.
    """

    def __init__(self, route_id, name, stops, color="#808080"):
        self.route_id = route_id
        self.name = name
        self.stops = tuple(stops)
        self.color = color

    def index_of(self, stop):
        """Index of the first occurrence of stop, or None if the route does not serve it."""
        stop_id = stop.stop_id if hasattr(stop, "stop_id") else stop
        for idx, candidate in enumerate(self.stops):
            if candidate.stop_id == stop_id:
                return idx
        return None

    def contains(self, stop):
        return self.index_of(stop) is not None

    def stops_between(self, start, end):
        """
        Stops from start to end inclusive, in the order they are travelled.

        When start comes after end the slice is reversed so it still runs
        start-to-end. Returns an empty list if either stop is absent.
        """
        start_idx = self.index_of(start)
        end_idx = self.index_of(end)
        if start_idx is None or end_idx is None:
            return []
        if start_idx <= end_idx:
            return list(self.stops[start_idx:end_idx + 1])
        return list(reversed(self.stops[end_idx:start_idx + 1]))

    def polyline_between(self, start, end):
        """Straight stop-to-stop polyline for the same slice as stops_between."""
        stops = self.stops_between(start, end)
        if not stops:
            return None
        return [stop.location for stop in stops]

    def __repr__(self):
        return f"Route({self.route_id}, {self.name}, {len(self.stops)} stops)"
