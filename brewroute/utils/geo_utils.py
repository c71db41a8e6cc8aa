"""Geographic helpers shared by search and route optimization"""
import math
from dataclasses import dataclass
from typing import Any, Mapping

from ..config import EARTH_RADIUS_MILES


class InvalidCoordinateError(ValueError):
    """Latitude/longitude is non-numeric, non-finite or out of range"""


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees"""
    latitude: float
    longitude: float


def validate_coordinate(lat: Any, lon: Any) -> Coordinate:
    """
    Check a latitude/longitude pair and build a Coordinate from it.

    Args:
        lat: Latitude, must be within [-90, 90]
        lon: Longitude, must be within [-180, 180]

    Returns:
        Validated Coordinate

    Raises:
        InvalidCoordinateError: If either value is not a finite number in range
    """
    if isinstance(lat, bool) or isinstance(lon, bool):
        raise InvalidCoordinateError(f"Invalid coordinate: ({lat!r}, {lon!r})")
    try:
        lat = float(lat)
        lon = float(lon)
    except (TypeError, ValueError):
        raise InvalidCoordinateError(f"Invalid coordinate: ({lat!r}, {lon!r})") from None

    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise InvalidCoordinateError(f"Non-finite coordinate: ({lat}, {lon})")
    if not -90 <= lat <= 90:
        raise InvalidCoordinateError(f"Latitude out of range: {lat}")
    if not -180 <= lon <= 180:
        raise InvalidCoordinateError(f"Longitude out of range: {lon}")

    return Coordinate(lat, lon)


def coordinate_of(item: Any) -> Coordinate:
    """
    Read the coordinate of a candidate point.

    Accepts a Coordinate, a mapping with ``latitude``/``longitude`` keys or
    any object exposing those attributes.
    """
    if isinstance(item, Coordinate):
        return validate_coordinate(item.latitude, item.longitude)
    if isinstance(item, Mapping):
        return validate_coordinate(item.get("latitude"), item.get("longitude"))
    return validate_coordinate(
        getattr(item, "latitude", None), getattr(item, "longitude", None)
    )


def haversine_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    radius: float = EARTH_RADIUS_MILES
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point
        radius: Sphere radius, defaults to the Earth radius in miles

    Returns:
        Distance in the unit of ``radius`` (statute miles by default)

    Raises:
        InvalidCoordinateError: If either point is invalid
    """
    a_point = validate_coordinate(lat1, lon1)
    b_point = validate_coordinate(lat2, lon2)

    phi1 = math.radians(a_point.latitude)
    phi2 = math.radians(b_point.latitude)
    dphi = math.radians(b_point.latitude - a_point.latitude)
    dlambda = math.radians(b_point.longitude - a_point.longitude)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    # Rounding can push a a hair past 1 for antipodal points
    a = min(1.0, a)
    return 2 * radius * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_between(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in miles between two Coordinates"""
    return haversine_distance(a.latitude, a.longitude, b.latitude, b.longitude)
