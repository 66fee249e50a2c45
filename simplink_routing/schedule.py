"""
Departure timetable and operating-hours helpers.

The timetable is the same fixed table for every route and every query.
It is not derived from the candidate's timing.
"""

import datetime

# (first hour, last hour exclusive, minute offsets)
DEPARTURE_PATTERN = [
    (14, 16, (17, 37, 57)),
    (16, 19, (4, 24, 54, 59)),
    (19, 20, (10, 30)),
]

OPERATING_START = datetime.time(5, 0)
OPERATING_END = datetime.time(21, 30)


def generate_schedule():
    """Returns the daily departure table as a fresh list of 'HH:MM' strings."""
    times = []
    for first_hour, last_hour, minutes in DEPARTURE_PATTERN:
        for hour in range(first_hour, last_hour):
            for minute in minutes:
                times.append(f"{hour:02d}:{minute:02d}")
    return times


def is_within_operating_hours(hour, minute):
    """True if a boarding time falls inside BSD Link operating hours (05:00 - 21:30)."""
    board_time = datetime.time(hour, minute)
    return OPERATING_START <= board_time <= OPERATING_END


def next_departure(schedules, after):
    """
    First timetable entry at or after the given clock time.

    Args:
        schedules: list of 'HH:MM' strings in ascending order
        after: a datetime.time or datetime.datetime

    Returns:
        str or None if every departure has already left
    """
    if isinstance(after, datetime.datetime):
        after = after.time()
    threshold = (after.hour, after.minute)
    for entry in schedules:
        hour, minute = (int(part) for part in entry.split(":"))
        if (hour, minute) >= threshold:
            return entry
    return None


def calculate_eta(board_hour, board_minute, total_time, now=None):
    """
    Estimated arrival as 'HH:MM': the next occurrence of the boarding time
    after now, plus the trip's total time in seconds.
    """
    if now is None:
        now = datetime.datetime.now()
    board = now.replace(hour=board_hour, minute=board_minute, second=0, microsecond=0)
    if board <= now:
        board += datetime.timedelta(days=1)
    eta = board + datetime.timedelta(seconds=total_time)
    return eta.strftime("%H:%M")
