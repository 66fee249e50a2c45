import math

from .config import Config


def haversine_distance(lat1, lon1, lat2, lon2):
    """
    Calculate the great-circle distance between two points on Earth.
    """
    R = 6371  # Earth radius in kilometers
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_phi = math.radians(lat2 - lat1)
    delta_lambda = math.radians(lon2 - lon1)
    a = math.sin(delta_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return R * c


def distance_meters(a, b):
    """Great-circle distance in meters between two (lat, lon) tuples."""
    return haversine_distance(a[0], a[1], b[0], b[1]) * 1000


def walking_time(a, b, speed_m_per_min=None):
    """
    Estimated walking time in seconds between two coordinates,
    at a constant pace (80 m/min unless configured otherwise).
    """
    speed = speed_m_per_min or Config.WALKING_SPEED_M_PER_MIN
    return (distance_meters(a, b) / speed) * 60


def format_duration(seconds):
    """Abbreviated hours/minutes, e.g. '7m' or '1h 5m'."""
    total_minutes = int(max(seconds, 0) // 60)
    hours, minutes = divmod(total_minutes, 60)
    if hours and minutes:
        return f"{hours}h {minutes}m"
    if hours:
        return f"{hours}h"
    return f"{minutes}m"


def format_distance(meters):
    if meters < 1000:
        return f"{meters:.0f} m"
    return f"{meters / 1000:.1f} km"
