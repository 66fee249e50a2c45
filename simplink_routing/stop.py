class Stop:
    """A fixed bus boarding location. Immutable once constructed."""

    __slots__ = ("stop_id", "name", "lat", "lon")

    def __init__(self, stop_id, name, lat, lon):
        object.__setattr__(self, "stop_id", stop_id)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "lat", float(lat))
        object.__setattr__(self, "lon", float(lon))

    def __setattr__(self, key, value):
        raise AttributeError(f"Stop is immutable, cannot set '{key}'")

    @property
    def location(self):
        return (self.lat, self.lon)

    def __eq__(self, other):
        if not isinstance(other, Stop):
            return NotImplemented
        return (self.stop_id, self.name, self.lat, self.lon) == (other.stop_id, other.name, other.lat, other.lon)

    def __hash__(self):
        return hash((self.stop_id, self.lat, self.lon))

    def __repr__(self):
        return f"Stop({self.stop_id}, {self.name}, {self.lat}, {self.lon})"
