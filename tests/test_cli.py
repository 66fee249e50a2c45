from unittest.mock import MagicMock

from main_cli import parse_board_time, parse_coordinate, resolve_location
from simplink_routing.api_client import Place
from simplink_routing.route_planner import RoutePlanner


def make_planner():
    return RoutePlanner(api_client=MagicMock())


def test_parse_coordinate():
    assert parse_coordinate("-6.3199,106.6437") == (-6.3199, 106.6437)
    assert parse_coordinate("Intermoda") is None
    assert parse_coordinate("a,b") is None


def test_parse_board_time():
    assert parse_board_time("14:30") == (14, 30)
    assert parse_board_time("25:00") is None


def test_resolve_location_prefers_bus_stops():
    planner = make_planner()
    coordinate, name = resolve_location(planner, "Intermoda")
    assert coordinate == planner.network.get_stop("BS01").location
    assert name == "Intermoda (Bus Stop)"
    planner.api_client.search_places.assert_not_called()


def test_resolve_location_falls_back_to_place_search():
    planner = make_planner()
    planner.api_client.search_places.return_value = [Place("Sinar Mas Land Plaza", -6.3018, 106.6510)]
    coordinate, name = resolve_location(planner, "Sinar Mas Land")
    assert coordinate == (-6.3018, 106.6510)
    assert name == "Sinar Mas Land Plaza"


def test_resolve_location_unknown():
    planner = make_planner()
    planner.api_client.search_places.return_value = []
    assert resolve_location(planner, "Nowhere") == (None, None)
