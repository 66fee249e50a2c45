import logging
import threading


class PlanningSession:
    """
    Current suggestions and itinerary for one user, with single-writer updates.

    Every suggest/select/clear call starts a new generation. Work that
    completes for an older generation is discarded, so a slow polyline fetch
    for a previous selection never overwrites the newer itinerary.
    """

    def __init__(self, planner):
        self.planner = planner
        self._lock = threading.Lock()
        self._generation = 0
        self.suggested_routes = []
        self.itinerary = None
        self.polylines = []
        self.overview = None
        self._listeners = []

    @property
    def generation(self):
        return self._generation

    def subscribe(self, listener):
        """listener(session) is called after each accepted state change, on the writing thread."""
        self._listeners.append(listener)

    def _next_generation(self):
        with self._lock:
            self._generation += 1
            return self._generation

    def _commit(self, generation, **changes):
        with self._lock:
            if generation != self._generation:
                logging.debug(f"Discarding stale update from generation {generation} (current {self._generation})")
                return False
            for key, value in changes.items():
                setattr(self, key, value)
        for listener in list(self._listeners):
            listener(self)
        return True

    def suggest(self, origin, destination, with_overview=False):
        generation = self._next_generation()
        suggestions = self.planner.suggest_routes(origin, destination)
        overview = self.planner.route_overview(origin, destination) if with_overview else None
        self._commit(generation, suggested_routes=suggestions, itinerary=None, polylines=[], overview=overview)
        return suggestions

    def select(self, suggested_route, origin, destination,
               origin_name="Start Point", destination_name="Destination", now=None):
        generation = self._next_generation()
        itinerary = self.planner.plan_itinerary(
            suggested_route, origin, destination,
            origin_name=origin_name, destination_name=destination_name, now=now,
        )
        self._commit(generation, itinerary=itinerary, polylines=[])
        itinerary.add_done_callback(
            lambda done: self._commit(generation, polylines=done.polylines)
        )
        return itinerary

    def clear(self):
        generation = self._next_generation()
        self._commit(generation, itinerary=None, polylines=[], overview=None)
