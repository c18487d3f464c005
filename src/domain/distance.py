"""
Distance calculation on the WGS-84 ellipsoid.

Uses ``geopy.distance.geodesic`` (Karney's algorithm via geographiclib),
which stays accurate at any latitude and over both short and long spans,
unlike a spherical Haversine approximation.  Altitude is not tracked, so
both points sit at sea level.

Complexity: O(1) per call.
"""

import math

from geopy.distance import geodesic

from .entities import Location
from .errors import InvalidCoordinate


def _checked(point: Location) -> tuple[float, float]:
    lat, lng = point.latitude, point.longitude
    if not (math.isfinite(lat) and math.isfinite(lng)):
        raise InvalidCoordinate(f"Non-finite coordinate: {point}")
    if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
        raise InvalidCoordinate(f"Coordinate out of range: {point}")
    return lat, lng


def distance_km(a: Location, b: Location) -> float:
    """Return the geodesic distance in **km** between two points."""
    return geodesic(_checked(a), _checked(b), ellipsoid="WGS-84").meters / 1000.0
