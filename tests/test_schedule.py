import datetime

from simplink_routing.schedule import calculate_eta, generate_schedule, is_within_operating_hours, next_departure


def test_generate_schedule_fixed_table():
    schedule = generate_schedule()
    assert schedule == [
        "14:17", "14:37", "14:57",
        "15:17", "15:37", "15:57",
        "16:04", "16:24", "16:54", "16:59",
        "17:04", "17:24", "17:54", "17:59",
        "18:04", "18:24", "18:54", "18:59",
        "19:10", "19:30",
    ]


def test_generate_schedule_returns_fresh_list():
    first = generate_schedule()
    first.clear()
    assert len(generate_schedule()) == 20


def test_operating_hours_boundaries():
    assert is_within_operating_hours(5, 0)
    assert is_within_operating_hours(21, 30)
    assert not is_within_operating_hours(4, 59)
    assert not is_within_operating_hours(21, 31)


def test_next_departure():
    schedule = generate_schedule()
    assert next_departure(schedule, datetime.time(9, 0)) == "14:17"
    assert next_departure(schedule, datetime.time(16, 24)) == "16:24"
    assert next_departure(schedule, datetime.datetime(2025, 1, 1, 16, 55)) == "16:59"
    assert next_departure(schedule, datetime.time(19, 31)) is None


def test_calculate_eta_uses_next_occurrence():
    now = datetime.datetime(2025, 1, 1, 10, 0)
    assert calculate_eta(14, 30, 25 * 60, now=now) == "14:55"
    # board time already passed today rolls to tomorrow, clock is unchanged
    assert calculate_eta(9, 50, 20 * 60, now=now) == "10:10"
    assert calculate_eta(23, 50, 20 * 60, now=now) == "00:10"
