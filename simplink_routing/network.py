import logging

from .config import Config
from .geo import distance_meters


class NetworkDefinitionError(ValueError):
    """Raised when the static stop/route table is internally inconsistent."""


class TransitNetwork:
    """
    Read-only catalog of stops and routes.

    The catalog is validated once at construction. Queries never mutate it,
    so it can be shared freely between threads.
    """

    def __init__(self, stops, routes):
        self._stops = tuple(stops)
        self._routes = tuple(routes)
        self._stops_by_id = {}
        self._routes_by_id = {}
        self._validate()
        logging.debug(f"Loaded network with {len(self._stops)} stops and {len(self._routes)} routes")

    def _validate(self):
        for stop in self._stops:
            if stop.stop_id in self._stops_by_id:
                raise NetworkDefinitionError(f"Duplicate stop id: {stop.stop_id}")
            self._stops_by_id[stop.stop_id] = stop

        for route in self._routes:
            if route.route_id in self._routes_by_id:
                raise NetworkDefinitionError(f"Duplicate route id: {route.route_id}")
            if not route.stops:
                raise NetworkDefinitionError(f"Route {route.route_id} has no stops")
            for stop in route.stops:
                known = self._stops_by_id.get(stop.stop_id)
                if known is None:
                    raise NetworkDefinitionError(
                        f"Route {route.route_id} references unknown stop {stop.stop_id}"
                    )
                if known != stop:
                    raise NetworkDefinitionError(
                        f"Route {route.route_id} has a stale copy of stop {stop.stop_id}"
                    )
            self._routes_by_id[route.route_id] = route

    @property
    def stops(self):
        return self._stops

    @property
    def routes(self):
        return self._routes

    def get_stop(self, stop_id):
        return self._stops_by_id.get(stop_id)

    def get_route(self, route_id):
        return self._routes_by_id.get(route_id)

    def routes_containing(self, stop):
        return [route for route in self._routes if route.contains(stop)]

    def find_nearby_stops(self, coordinate, max_distance=None):
        """
        Returns all stops within max_distance meters (great-circle) of coordinate,
        in catalog order.
        """
        if max_distance is None:
            max_distance = Config.SEARCH_RADIUS_METERS
        return [
            stop for stop in self._stops
            if distance_meters(coordinate, stop.location) <= max_distance
        ]

    def search_stops(self, query):
        """Catalog stops whose name contains query, case-insensitively."""
        if not query or not query.strip():
            return []
        needle = query.strip().casefold()
        return [stop for stop in self._stops if needle in stop.name.casefold()]
