"""
SimpLink Routing

This module provides trip planning over the fixed BSD Link bus network
(BSD City, Tangerang): nearby-stop search, one-way route candidates,
ranking, and time-stamped itineraries.

Example:
    from simplink_routing import RoutePlanner

    origin = (-6.3199, 106.6437)        # near Intermoda
    destination = (-6.3014, 106.6416)   # near Edutown 2

    with RoutePlanner() as planner:
        suggestions = planner.suggest_routes(origin, destination)
        if suggestions:
            itinerary = planner.plan_itinerary(suggestions[0], origin, destination,
                                               origin_name="Home", destination_name="School")
            for step in itinerary.steps:
                print(step.time, step.location)
"""

from .route_planner import RoutePlanner, rank_candidates
from .network import TransitNetwork, NetworkDefinitionError
from .bsd_link import build_bsd_link_network
from .stop import Stop
from .route import Route
from .suggested_route import SuggestedRoute
from .itinerary import Itinerary, RouteStep
from .session import PlanningSession

__all__ = [
    'RoutePlanner', 'rank_candidates', 'TransitNetwork', 'NetworkDefinitionError',
    'build_bsd_link_network', 'Stop', 'Route', 'SuggestedRoute', 'Itinerary',
    'RouteStep', 'PlanningSession',
]
