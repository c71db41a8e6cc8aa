"""Google geocoding service for turning addresses into start coordinates"""
import logging
from typing import Any, Dict

import requests

from .. import config
from ..utils.geo_utils import InvalidCoordinateError, validate_coordinate
from .http_client import ProviderError, get_http_session

logger = logging.getLogger(__name__)


class GeocodingNotFound(LookupError):
    """The geocoder answered but had no usable result for the address"""

    def __init__(self, status: str):
        super().__init__(f"Geocoding failed: {status}")
        self.status = status


class GeocodingService:
    """Service for geocoding addresses through the Google Geocoding API"""

    @staticmethod
    def is_configured() -> bool:
        """True when a Google Maps API key is set"""
        return bool(config.GOOGLE_MAPS_API_KEY)

    @staticmethod
    def geocode(address: str) -> Dict[str, Any]:
        """
        Resolve an address to coordinates.

        Args:
            address: Free-form address

        Returns:
            Dictionary with lat, lng, formatted_address and place_id

        Raises:
            GeocodingNotFound: If the geocoder status is not OK or has no results
            ProviderError: If the request fails or the payload is unusable
        """
        params = {"address": address, "key": config.GOOGLE_MAPS_API_KEY}
        try:
            response = get_http_session().get(
                config.GOOGLE_GEOCODE_URL, params=params, timeout=config.HTTP_TIMEOUT_SECONDS
            )
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"Failed to geocode address: {e}") from e

        if not isinstance(data, dict):
            raise ProviderError("Unexpected geocoder payload: not an object")

        status = data.get("status", "UNKNOWN")
        results = data.get("results") or []
        if status != "OK" or not results:
            logger.warning("Geocoder status %s for %r", status, address)
            raise GeocodingNotFound(status)

        try:
            result = results[0]
            location = result["geometry"]["location"]
            position = validate_coordinate(location["lat"], location["lng"])
            return {
                "lat": position.latitude,
                "lng": position.longitude,
                "formatted_address": result.get("formatted_address"),
                "place_id": result.get("place_id"),
            }
        except (KeyError, TypeError, AttributeError, InvalidCoordinateError) as e:
            raise ProviderError(f"Unexpected geocoder payload: {e}") from e
