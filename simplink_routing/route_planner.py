import datetime
import logging
from concurrent.futures import ThreadPoolExecutor

import pytz

from .api_client import APIClient
from .bsd_link import build_bsd_link_network
from .config import Config
from .geo import format_duration, walking_time
from .itinerary import BUS, DESTINATION, WALK, Itinerary, RouteStep
from .schedule import generate_schedule
from .suggested_route import SuggestedRoute


def rank_candidates(candidates, limit=None):
    """
    Keeps the fastest candidate per route and returns the top `limit` by total time.

    `limit` never exceeds MAX_SUGGESTIONS. Ties keep the first-seen candidate,
    and the sort is stable, so output order follows catalog order when total
    times are equal.
    """
    if limit is None or limit > Config.MAX_SUGGESTIONS:
        limit = Config.MAX_SUGGESTIONS

    best_per_route = {}
    for candidate in candidates:
        route_id = candidate.route.route_id
        existing = best_per_route.get(route_id)
        if existing is None or candidate.total_time < existing.total_time:
            best_per_route[route_id] = candidate

    ranked = sorted(best_per_route.values(), key=lambda c: c.total_time)
    return ranked[:limit]


class RoutePlanner:
    def __init__(self, network=None, api_client=None, executor=None):
        """
        Initialize the RoutePlanner over a fixed network (BSD Link by default).
        """
        self.network = network or build_bsd_link_network()
        self.api_client = api_client or APIClient()
        self._executor = executor
        self._owns_executor = executor is None

    @property
    def executor(self):
        if self._executor is None:
            self._executor = ThreadPoolExecutor(max_workers=Config.MAX_WORKERS, thread_name_prefix="directions")
        return self._executor

    def close(self):
        if self._owns_executor and self._executor is not None:
            self._executor.shutdown(wait=True)
            self._executor = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()

    def nearby_stops(self, coordinate, radius_meters=None):
        return self.network.find_nearby_stops(coordinate, radius_meters)

    def search_stops(self, query):
        return self.network.search_stops(query)

    def find_route_candidates(self, origin, destination):
        """
        Enumerates every (route, boarding stop, alighting stop) option between
        origin and destination that runs in the route's direction of travel.

        Returns an unranked list of SuggestedRoute, empty if nothing matches.
        """
        start_stops = self.network.find_nearby_stops(origin)
        end_stops = self.network.find_nearby_stops(destination)
        logging.debug(f"{len(start_stops)} stops near origin, {len(end_stops)} stops near destination")

        candidates = []
        for start_stop in start_stops:
            for end_stop in end_stops:
                for route in self.network.routes:
                    start_index = route.index_of(start_stop)
                    end_index = route.index_of(end_stop)
                    if start_index is None or end_index is None:
                        continue
                    # One-way: the boarding stop must come before the alighting stop
                    if start_index > end_index:
                        continue

                    stop_count = end_index - start_index
                    candidate = SuggestedRoute(
                        route=route,
                        start_stop=start_stop,
                        end_stop=end_stop,
                        walking_time_to_start=walking_time(origin, start_stop.location),
                        bus_travel_time=float(stop_count * Config.MINUTES_PER_STOP * 60),
                        walking_time_to_destination=walking_time(end_stop.location, destination),
                        schedules=generate_schedule(),
                    )
                    logging.debug(f"Candidate: {candidate}")
                    candidates.append(candidate)

        return candidates

    def suggest_routes(self, origin, destination):
        """
        Returns at most MAX_SUGGESTIONS SuggestedRoutes, fastest first.
        An empty list means no bus route serves this trip.
        """
        logging.info(f"Finding route options from {origin} to {destination}")
        suggestions = rank_candidates(self.find_route_candidates(origin, destination))
        if not suggestions:
            logging.info("No valid routes found. Try different start/end points.")
        else:
            logging.info("Suggested routes: %s", suggestions)
        return suggestions

    def route_overview(self, origin, destination):
        """Driving polyline from origin to destination, shown before a route is chosen."""
        return self.api_client.driving_polyline(origin, destination)

    def plan_itinerary(self, suggested_route, origin, destination,
                       origin_name="Start Point", destination_name="Destination", now=None):
        """
        Builds the step-by-step itinerary for a chosen SuggestedRoute.

        Steps are returned immediately. Leg polylines are fetched in the
        background, see Itinerary.add_done_callback.
        """
        if now is None:
            now = datetime.datetime.now(pytz.timezone(Config.TIMEZONE))

        route = suggested_route.route
        relevant_stops = route.stops_between(suggested_route.start_stop, suggested_route.end_stop)

        def at(offset):
            return now + datetime.timedelta(seconds=int(offset))

        steps = [
            RouteStep(now, origin_name, WALK, coordinate=origin),
            RouteStep(
                at(0),
                f"Walk to {suggested_route.start_stop.name}",
                WALK,
                duration=format_duration(suggested_route.walking_time_to_start),
                coordinate=suggested_route.start_stop.location,
            ),
        ]
        accumulated_time = suggested_route.walking_time_to_start

        # Bus time is spread evenly over the stops for display
        time_per_stop = suggested_route.bus_travel_time / len(relevant_stops) if relevant_stops else 0
        current_bus_time = accumulated_time
        for stop in relevant_stops:
            steps.append(RouteStep(at(current_bus_time), stop.name, BUS,
                                   address=route.name, coordinate=stop.location))
            current_bus_time += time_per_stop

        # The arrival clock uses the ranked bus time, not the per-stop clock above
        accumulated_time += suggested_route.bus_travel_time

        steps.append(RouteStep(
            at(accumulated_time),
            "Walk to Destination",
            WALK,
            duration=format_duration(suggested_route.walking_time_to_destination),
            coordinate=destination,
        ))
        accumulated_time += suggested_route.walking_time_to_destination

        steps.append(RouteStep(at(accumulated_time), destination_name, DESTINATION, coordinate=destination))

        stop_line = route.polyline_between(suggested_route.start_stop, suggested_route.end_stop) or []
        itinerary = Itinerary(suggested_route, steps, relevant_stops, stop_line=stop_line)
        logging.info(
            f"Planned itinerary on {route.route_id} from {suggested_route.start_stop.name} "
            f"to {suggested_route.end_stop.name}: {len(steps)} steps"
        )

        itinerary.decorate(self.executor, self._itinerary_legs(suggested_route, relevant_stops, origin, destination))
        return itinerary

    def _itinerary_legs(self, suggested_route, relevant_stops, origin, destination):
        client = self.api_client
        start_location = suggested_route.start_stop.location
        end_location = suggested_route.end_stop.location

        legs = [(WALK, lambda: client.walking_polyline(origin, start_location))]
        for current, following in zip(relevant_stops, relevant_stops[1:]):
            legs.append((BUS, lambda a=current.location, b=following.location: client.driving_polyline(a, b)))
        legs.append((WALK, lambda: client.walking_polyline(end_location, destination)))
        return legs
