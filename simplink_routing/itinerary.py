import logging
import threading

WALK = "walk"
BUS = "bus"
DESTINATION = "destination"

TIME_FORMAT = "%H:%M"


class RouteStep:
    """One entry of an itinerary. Immutable once created."""

    __slots__ = ("timestamp", "location", "address", "duration", "transport_type", "coordinate")

    def __init__(self, timestamp, location, transport_type, address=None, duration=None, coordinate=None):
        if transport_type not in (WALK, BUS, DESTINATION):
            raise ValueError(f"Unknown transport type: {transport_type}")
        object.__setattr__(self, "timestamp", timestamp)
        object.__setattr__(self, "location", location)
        object.__setattr__(self, "transport_type", transport_type)
        object.__setattr__(self, "address", address)
        object.__setattr__(self, "duration", duration)
        object.__setattr__(self, "coordinate", tuple(coordinate) if coordinate is not None else None)

    def __setattr__(self, key, value):
        raise AttributeError(f"RouteStep is immutable, cannot set '{key}'")

    @property
    def time(self):
        return self.timestamp.strftime(TIME_FORMAT)

    def to_dict(self):
        """Convert the step to a dictionary for the display layer"""
        step = {
            "time": self.time,
            "location": self.location,
            "transport_type": self.transport_type,
        }
        if self.address:
            step["address"] = self.address
        if self.duration:
            step["duration"] = self.duration
        if self.coordinate:
            step["coordinate"] = {"lat": self.coordinate[0], "lon": self.coordinate[1]}
        return step

    def __repr__(self):
        return f"RouteStep({self.time}, {self.location}, {self.transport_type})"


class LegPolyline:
    """Geometry of one itinerary leg, in travel order."""

    def __init__(self, transport_type, coordinates):
        self.transport_type = transport_type
        self.coordinates = list(coordinates)

    def __repr__(self):
        return f"LegPolyline({self.transport_type}, {len(self.coordinates)} points)"


class Itinerary:
    """
    Time-stamped steps for a chosen SuggestedRoute.

    Steps are available as soon as the itinerary is built. Leg polylines are
    fetched in the background and published all at once, in travel order,
    when every leg has finished.
    """

    def __init__(self, suggested_route, steps, visible_stops, stop_line=None):
        self.suggested_route = suggested_route
        self.steps = tuple(steps)
        self.visible_stops = tuple(visible_stops)
        # Straight stop-to-stop outline, drawn until the leg polylines arrive
        self.stop_line = list(stop_line or [])
        self._polylines = ()
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._callbacks = []

    @property
    def polylines(self):
        """Leg polylines, empty until decoration has finished."""
        return list(self._polylines)

    @property
    def is_decorated(self):
        return self._done.is_set()

    def decorate(self, executor, legs):
        """
        Fetch leg polylines concurrently.

        Args:
            executor: a concurrent.futures executor
            legs: list of (transport_type, fetch) where fetch() returns a list
                  of coordinates or None when the leg should be omitted
        """
        if not legs:
            self._publish([])
            return

        futures = [(transport_type, executor.submit(fetch)) for transport_type, fetch in legs]
        remaining = [len(futures)]

        def on_leg_done(_future):
            with self._lock:
                remaining[0] -= 1
                finished = remaining[0] == 0
            if finished:
                self._collect(futures)

        for _, future in futures:
            future.add_done_callback(on_leg_done)

    def _collect(self, futures):
        buffer = []
        for transport_type, future in futures:
            try:
                coordinates = future.result()
            except Exception:
                logging.error(f"Polyline fetch failed for {transport_type} leg", exc_info=True)
                continue
            if coordinates:
                buffer.append(LegPolyline(transport_type, coordinates))
        self._publish(buffer)

    def _publish(self, buffer):
        with self._lock:
            self._polylines = tuple(buffer)
            self._done.set()
            callbacks, self._callbacks = self._callbacks, []
        logging.debug(f"Itinerary decorated with {len(buffer)} polylines")
        for callback in callbacks:
            callback(self)

    def add_done_callback(self, callback):
        """Call callback(itinerary) once polylines are published (immediately if already done)."""
        with self._lock:
            if not self._done.is_set():
                self._callbacks.append(callback)
                return
        callback(self)

    def wait_for_polylines(self, timeout=None):
        if not self._done.wait(timeout):
            raise TimeoutError("Itinerary polylines not ready")
        return self.polylines

    def to_dict(self):
        return {
            "route": self.suggested_route.to_dict(),
            "steps": [step.to_dict() for step in self.steps],
            "stop_line": [{"lat": lat, "lon": lon} for lat, lon in self.stop_line],
        }
