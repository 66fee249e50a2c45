import os
from dotenv import load_dotenv

# Load environment variables from .env file if it exists
load_dotenv()


def _parse_viewbox(value):
    """Parse a 'west,north,east,south' string into a tuple of floats."""
    parts = [float(p) for p in value.split(",")]
    if len(parts) != 4:
        raise ValueError(f"SEARCH_VIEWBOX needs 4 comma-separated values, got {value!r}")
    return tuple(parts)


class Config:
    """
    Configuration class for SimpLink Routing.
    This class loads configuration values from environment variables or uses default values.
    """
    # General configuration
    DEBUG = os.environ.get('DEBUG', 'False') == 'True'

    # Timezone configuration (BSD City, Tangerang)
    TIMEZONE = os.environ.get('TIMEZONE', 'Asia/Jakarta')

    # External services
    DIRECTIONS_URL = os.environ.get('DIRECTIONS_URL', 'https://router.project-osrm.org')
    DRIVING_PROFILE = os.environ.get('DRIVING_PROFILE', 'driving')
    WALKING_PROFILE = os.environ.get('WALKING_PROFILE', 'foot')
    GEOCODER_URL = os.environ.get('GEOCODER_URL', 'https://nominatim.openstreetmap.org/search')
    USER_AGENT = os.environ.get('USER_AGENT', 'SimpLink/3.0 (simplink-routing)')
    REQUEST_TIMEOUT = float(os.environ.get('REQUEST_TIMEOUT', 10))
    MAX_WORKERS = int(os.environ.get('MAX_WORKERS', 4))

    # Free-text search is bounded to the Tangerang area
    SEARCH_VIEWBOX = _parse_viewbox(os.environ.get('SEARCH_VIEWBOX', '106.55,-6.15,106.75,-6.40'))

    # Planning parameters
    SEARCH_RADIUS_METERS = float(os.environ.get('SEARCH_RADIUS_METERS', 500))
    WALKING_SPEED_M_PER_MIN = float(os.environ.get('WALKING_SPEED_M_PER_MIN', 80))
    MINUTES_PER_STOP = int(os.environ.get('MINUTES_PER_STOP', 3))
    # Upper bound on suggestions, not configurable
    MAX_SUGGESTIONS = 3
