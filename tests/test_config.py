import pytest

from simplink_routing.config import Config, _parse_viewbox


def test_default_planning_parameters():
    assert Config.SEARCH_RADIUS_METERS == 500
    assert Config.WALKING_SPEED_M_PER_MIN == 80
    assert Config.MINUTES_PER_STOP == 3
    assert Config.MAX_SUGGESTIONS == 3
    assert Config.TIMEZONE == "Asia/Jakarta"


def test_parse_viewbox():
    assert _parse_viewbox("1,2,3,4") == (1.0, 2.0, 3.0, 4.0)
    with pytest.raises(ValueError):
        _parse_viewbox("1,2,3")