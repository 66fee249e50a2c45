class SuggestedRoute:
    """
    A candidate trip: board `start_stop` and alight at `end_stop` on `route`,
    with walking at both ends. All times are in seconds.
    """

    def __init__(self, route, start_stop, end_stop, walking_time_to_start,
                 bus_travel_time, walking_time_to_destination, schedules):
        self.route = route
        self.start_stop = start_stop
        self.end_stop = end_stop
        self.walking_time_to_start = walking_time_to_start
        self.bus_travel_time = bus_travel_time
        self.walking_time_to_destination = walking_time_to_destination
        self.total_time = walking_time_to_start + bus_travel_time + walking_time_to_destination
        self.schedules = schedules

    @property
    def stop_count(self):
        return self.route.index_of(self.end_stop) - self.route.index_of(self.start_stop)

    @property
    def formatted_total_time(self):
        """Total trip time in whole minutes."""
        return str(int(self.total_time / 60))

    def to_dict(self):
        return {
            "route_id": self.route.route_id,
            "route_name": self.route.name,
            "color": self.route.color,
            "start_stop": self.start_stop.stop_id,
            "end_stop": self.end_stop.stop_id,
            "walking_time_to_start": self.walking_time_to_start,
            "bus_travel_time": self.bus_travel_time,
            "walking_time_to_destination": self.walking_time_to_destination,
            "total_time": self.total_time,
            "schedules": list(self.schedules),
        }

    def __repr__(self):
        return (f"SuggestedRoute({self.route.route_id}, {self.start_stop.name} -> "
                f"{self.end_stop.name}, {self.formatted_total_time} min)")
