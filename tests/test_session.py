from concurrent.futures import Future
from unittest.mock import MagicMock

from simplink_routing.network import TransitNetwork
from simplink_routing.route import Route
from simplink_routing.route_planner import RoutePlanner
from simplink_routing.session import PlanningSession
from simplink_routing.stop import Stop

A = Stop("A", "Alpha", -6.3000, 106.6400)
B = Stop("B", "Bravo", -6.3000, 106.6500)
C = Stop("C", "Charlie", -6.3000, 106.6600)


class ManualExecutor:
    """Executor that only runs submitted work when told to."""

    def __init__(self):
        self.pending = []

    def submit(self, fn):
        future = Future()
        self.pending.append((fn, future))
        return future

    def run(self, jobs):
        for fn, future in jobs:
            future.set_result(fn())


def make_session():
    client = MagicMock()
    client.walking_polyline.return_value = None
    client.driving_polyline.side_effect = lambda a, b: [a, b]
    network = TransitNetwork([A, B, C], [
        Route("R01", "Alpha - Charlie", [A, B, C]),
        Route("R02", "Alpha - Charlie express", [A, C]),
    ])
    executor = ManualExecutor()
    planner = RoutePlanner(network=network, api_client=client, executor=executor)
    return PlanningSession(planner), executor


def test_suggest_updates_state_and_notifies():
    session, _ = make_session()
    seen = []
    session.subscribe(lambda s: seen.append(list(s.suggested_routes)))

    suggestions = session.suggest(A.location, C.location)

    assert [s.route.route_id for s in suggestions] == ["R02", "R01"]
    assert session.suggested_routes == suggestions
    assert seen == [suggestions]


def test_stale_polylines_are_discarded():
    session, executor = make_session()
    suggestions = session.suggest(A.location, C.location)
    express, local = suggestions

    first = session.select(local, A.location, C.location)
    first_jobs = list(executor.pending)
    executor.pending.clear()

    second = session.select(express, A.location, C.location)
    second_jobs = list(executor.pending)

    executor.run(second_jobs)
    assert session.itinerary is second
    assert session.polylines == second.polylines
    assert len(second.polylines) == 1

    # the older selection finishes late and must not overwrite the newer state
    executor.run(first_jobs)
    assert first.is_decorated
    assert len(first.polylines) == 2
    assert session.itinerary is second
    assert session.polylines == second.polylines


def test_clear_invalidates_in_flight_itinerary():
    session, executor = make_session()
    suggestion = session.suggest(A.location, C.location)[0]
    session.select(suggestion, A.location, C.location)

    session.clear()
    executor.run(executor.pending)

    assert session.itinerary is None
    assert session.polylines == []
    assert session.suggested_routes
