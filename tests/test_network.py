import itertools

import pytest

from simplink_routing.bsd_link import build_bsd_link_network
from simplink_routing.geo import distance_meters
from simplink_routing.network import NetworkDefinitionError, TransitNetwork
from simplink_routing.route import Route
from simplink_routing.stop import Stop


def test_bsd_link_catalog_loads():
    network = build_bsd_link_network()
    assert len(network.stops) == 82
    assert [r.route_id for r in network.routes] == ["R01", "R02", "R03", "R04", "R05", "R06", "R07", "R08"]
    r01 = network.get_route("R01")
    assert r01.stops[0].name == "Intermoda"
    assert r01.stops[-1].name == "Sektor 1.3"
    assert r01.color == "#A8DADC"


def test_stop_is_immutable():
    stop = Stop("X1", "Somewhere", -6.3, 106.6)
    with pytest.raises(AttributeError):
        stop.name = "Elsewhere"
    assert stop.location == (-6.3, 106.6)


def test_stops_between_is_contiguous_and_swap_reverses():
    network = build_bsd_link_network()
    for route in network.routes:
        for a, b in itinerary_pairs(route):
            ia, ib = route.index_of(a), route.index_of(b)
            forward = route.stops_between(a, b)
            assert len(forward) == abs(ib - ia) + 1
            assert forward[0] == a
            assert forward[-1] == b
            assert route.stops_between(b, a) == list(reversed(forward))
            if ia <= ib:
                assert forward == list(route.stops[ia:ib + 1])


def itinerary_pairs(route):
    unique = list({stop.stop_id: stop for stop in route.stops}.values())
    return itertools.combinations(unique, 2)


def test_loop_route_uses_first_occurrence():
    network = build_bsd_link_network()
    r07 = network.get_route("R07")
    breeze = network.get_stop("BS15")
    # The Breeze is both the first and the last stop of R07
    assert r07.stops[0] == breeze and r07.stops[-1] == breeze
    assert r07.index_of(breeze) == 0


def test_stops_between_absent_stop_is_empty():
    network = build_bsd_link_network()
    r01 = network.get_route("R01")
    vanya_park = network.get_stop("BS68")
    assert r01.index_of(vanya_park) is None
    assert r01.stops_between(r01.stops[0], vanya_park) == []
    assert r01.polyline_between(r01.stops[0], vanya_park) is None


def test_polyline_between_follows_stops():
    network = build_bsd_link_network()
    r01 = network.get_route("R01")
    polyline = r01.polyline_between(r01.stops[0], r01.stops[2])
    assert polyline == [s.location for s in r01.stops[0:3]]


@pytest.mark.parametrize("coordinate,radius", [
    ((-6.319902912486388, 106.64371452384238), 500),
    ((-6.3014, 106.6416), 300),
    ((-6.2993, 106.66), 1500),
    ((-6.2, 106.5), 500),
])
def test_find_nearby_stops_respects_radius(coordinate, radius):
    network = build_bsd_link_network()
    found = network.find_nearby_stops(coordinate, radius)
    found_ids = {s.stop_id for s in found}
    for stop in network.stops:
        inside = distance_meters(coordinate, stop.location) <= radius
        assert (stop.stop_id in found_ids) == inside
    # catalog order is preserved
    assert found == [s for s in network.stops if s.stop_id in found_ids]


def test_find_nearby_stops_far_away_is_empty():
    network = build_bsd_link_network()
    assert network.find_nearby_stops((0.0, 0.0)) == []


def test_search_stops_is_case_insensitive():
    network = build_bsd_link_network()
    names = [s.name for s in network.search_stops("aeon")]
    assert names == ["AEON Mall 1", "Lobby AEON Mall", "AEON Mall 2"]
    assert network.search_stops("   ") == []


def test_validation_rejects_unknown_stop():
    a = Stop("A", "A", 0, 0)
    ghost = Stop("G", "Ghost", 1, 1)
    with pytest.raises(NetworkDefinitionError):
        TransitNetwork([a], [Route("R", "R", [a, ghost])])


def test_validation_rejects_duplicate_ids():
    a = Stop("A", "A", 0, 0)
    with pytest.raises(NetworkDefinitionError):
        TransitNetwork([a, Stop("A", "Other", 1, 1)], [])
    with pytest.raises(NetworkDefinitionError):
        TransitNetwork([a], [Route("R", "R", [a]), Route("R", "R again", [a])])


def test_routes_containing():
    network = build_bsd_link_network()
    intermoda = network.get_stop("BS01")
    assert [r.route_id for r in network.routes_containing(intermoda)] == ["R01", "R02", "R05", "R06", "R08"]
