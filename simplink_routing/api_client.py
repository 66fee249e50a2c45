import requests
import logging

from .config import Config


class DirectionsUnavailable(Exception):
    """The directions provider failed or returned no route."""


class Place:
    """A named place returned by free-text search."""

    def __init__(self, name, lat, lon, address=None):
        self.name = name
        self.lat = float(lat)
        self.lon = float(lon)
        self.address = address

    @property
    def location(self):
        return (self.lat, self.lon)

    def __repr__(self):
        return f"Place({self.name}, {self.lat}, {self.lon})"


# Localities inside greater Tangerang that Nominatim does not always tag as such
TANGERANG_LOCALITIES = ["Serpong", "Ciputat", "Pamulang", "Pondok Aren", "Karawaci", "Ciledug", "BSD", "Bintaro Sektor"]


class APIClient:
    """
    Client for the external directions (OSRM) and geocoding (Nominatim) services.

    Only used to decorate itineraries with real polylines and to look up
    free-text places. Never used to decide which bus route is usable.
    """

    def __init__(self):
        self.headers = {"User-Agent": Config.USER_AGENT}
        self.search_cache = {}  # key: normalized query, value: list of Place

    def _request_route(self, profile, start, end):
        """
        Fetches a route between two (lat, lon) coordinates from OSRM.

        Returns the route geometry as a list of (lat, lon) tuples.
        Raises DirectionsUnavailable on any failure.
        """
        base_url = Config.DIRECTIONS_URL.rstrip("/")
        # OSRM expects lon,lat pairs
        url = f"{base_url}/route/v1/{profile}/{start[1]},{start[0]};{end[1]},{end[0]}"
        params = {"overview": "full", "geometries": "geojson"}

        try:
            response = requests.get(url, params=params, headers=self.headers, timeout=Config.REQUEST_TIMEOUT)
        except requests.exceptions.RequestException as e:
            raise DirectionsUnavailable(f"Request error for {profile} route: {e}") from e

        if response.status_code != 200:
            raise DirectionsUnavailable(
                f"Directions request returned {response.status_code}: {response.text[:200]}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise DirectionsUnavailable(f"Invalid JSON from directions service: {e}") from e

        if not isinstance(data, dict):
            raise DirectionsUnavailable(f"Unexpected directions response: {type(data).__name__}")

        if data.get("code") != "Ok":
            raise DirectionsUnavailable(f"Directions service responded with code {data.get('code')}")

        routes = data.get("routes") or []
        if not isinstance(routes, list) or not routes or not isinstance(routes[0], dict):
            raise DirectionsUnavailable("Directions service returned no routes")

        geometry = routes[0].get("geometry")
        if not isinstance(geometry, dict):
            raise DirectionsUnavailable("Route has no geometry")

        coordinates = geometry.get("coordinates") or []
        if not coordinates:
            raise DirectionsUnavailable("Route geometry is empty")

        try:
            return [(float(lat), float(lon)) for lon, lat in coordinates]
        except (TypeError, ValueError) as e:
            raise DirectionsUnavailable(f"Malformed route geometry: {e}") from e

    def driving_polyline(self, start, end):
        """
        Driving polyline between two coordinates.
        Falls back to a straight two-point line if directions are unavailable.
        """
        try:
            polyline = self._request_route(Config.DRIVING_PROFILE, start, end)
            logging.debug(f"Driving polyline {start} -> {end}: {len(polyline)} points")
            return polyline
        except DirectionsUnavailable as e:
            logging.warning(f"Driving directions unavailable, using straight line: {e}")
            return [start, end]

    def walking_polyline(self, start, end):
        """
        Walking polyline between two coordinates, best effort.
        Returns None if directions are unavailable.
        """
        try:
            polyline = self._request_route(Config.WALKING_PROFILE, start, end)
            logging.debug(f"Walking polyline {start} -> {end}: {len(polyline)} points")
            return polyline
        except DirectionsUnavailable as e:
            logging.warning(f"Walking directions unavailable, omitting leg: {e}")
            return None

    @staticmethod
    def _is_within_tangerang(result):
        address = result.get("address")
        if not isinstance(address, dict):
            address = {}
        for key in ("county", "city", "city_district", "municipality", "state_district"):
            if "tangerang" in str(address.get(key, "")).lower():
                return True
        for key in ("suburb", "village", "town", "city_district", "city", "neighbourhood"):
            value = str(address.get(key, "")).lower()
            if any(locality.lower() in value for locality in TANGERANG_LOCALITIES):
                return True
        name = str(result.get("display_name", "")).lower()
        return "tangerang" in name and "banten" in str(address.get("state", "")).lower()

    def search_places(self, query, limit=10):
        """
        Free-text place search with Nominatim, bounded to the Tangerang area.
        Uses a cache to avoid repeat API calls. Returns an empty list on failure.
        """
        if not query or not query.strip():
            return []

        normalized = query.strip().lower()
        if normalized in self.search_cache:
            logging.info("Cache hit for place search '%s'", normalized)
            return self.search_cache[normalized]

        west, north, east, south = Config.SEARCH_VIEWBOX
        params = {
            "q": query.strip(),
            "format": "json",
            "addressdetails": 1,
            "limit": limit,
            "viewbox": f"{west},{north},{east},{south}",
            "bounded": 1,
        }

        try:
            response = requests.get(Config.GEOCODER_URL, params=params, headers=self.headers,
                                    timeout=Config.REQUEST_TIMEOUT)
            if response.status_code != 200:
                logging.error("Place search failed: %s", response.text)
                return []
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logging.error("Exception during place search: %s", e)
            return []

        if not isinstance(data, list):
            logging.error("Unexpected place search response: %s", type(data).__name__)
            return []

        places = []
        for result in data:
            if not isinstance(result, dict) or not self._is_within_tangerang(result):
                continue
            try:
                name = result.get("name") or result.get("display_name", "").split(",")[0]
                places.append(Place(name, result["lat"], result["lon"], address=result.get("display_name")))
            except (KeyError, TypeError, ValueError) as e:
                logging.error(f"Error parsing place result: {e}")

        logging.info("Place search '%s' returned %d results", normalized, len(places))
        self.search_cache[normalized] = places
        return places
