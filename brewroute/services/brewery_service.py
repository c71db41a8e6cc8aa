"""Open Brewery DB service for distance-based brewery discovery"""
import logging
from typing import Any, Dict, List, Mapping

import requests

from ..config import HTTP_TIMEOUT_SECONDS, OPENBREWERYDB_URL, SEARCH_PAGE_SIZE
from ..utils.geo_utils import Coordinate, InvalidCoordinateError, coordinate_of, distance_between
from .http_client import ProviderError, get_http_session

logger = logging.getLogger(__name__)


class BreweryService:
    """Service for finding breweries around a point"""

    @staticmethod
    def fetch_breweries(origin: Coordinate) -> List[Dict[str, Any]]:
        """
        Download breweries ordered by distance from Open Brewery DB.

        Args:
            origin: Point to search around

        Returns:
            Raw brewery dictionaries as returned by the API

        Raises:
            ProviderError: If the request fails or the payload is not a list
        """
        params = {
            "per_page": SEARCH_PAGE_SIZE,
            "by_dist": f"{origin.latitude},{origin.longitude}",
        }
        try:
            response = get_http_session().get(
                f"{OPENBREWERYDB_URL}/breweries", params=params, timeout=HTTP_TIMEOUT_SECONDS
            )
            response.raise_for_status()
            payload = response.json()
        except (requests.RequestException, ValueError) as e:
            raise ProviderError(f"Failed to fetch breweries: {e}") from e

        if not isinstance(payload, list):
            raise ProviderError("Failed to fetch breweries: unexpected payload")
        return payload

    @staticmethod
    def filter_nearby(
        origin: Coordinate,
        breweries: List[Dict[str, Any]],
        radius_miles: float,
        limit: int
    ) -> List[Dict[str, Any]]:
        """
        Keep breweries within a radius, nearest first.

        Non-object entries and entries without usable coordinates are skipped.
        Each kept entry is a copy of the original with a ``distance`` field (miles) added.

        Args:
            origin: Search center
            breweries: Brewery dictionaries with latitude/longitude
            radius_miles: Maximum straight-line distance
            limit: Maximum number of results

        Returns:
            Nearby breweries sorted by distance
        """
        nearby = []
        skipped = 0
        for brewery in breweries:
            if not isinstance(brewery, Mapping):
                skipped += 1
                continue
            if brewery.get("latitude") is None or brewery.get("longitude") is None:
                skipped += 1
                continue
            try:
                position = coordinate_of(brewery)
            except InvalidCoordinateError:
                skipped += 1
                continue

            distance = distance_between(origin, position)
            if distance <= radius_miles:
                # Open Brewery DB returns coordinates as strings
                nearby.append({
                    **brewery,
                    "latitude": position.latitude,
                    "longitude": position.longitude,
                    "distance": distance,
                })

        if skipped:
            logger.debug("Skipped %d breweries without usable coordinates", skipped)

        nearby.sort(key=lambda b: b["distance"])
        return nearby[:max(limit, 0)]

    @staticmethod
    def search(origin: Coordinate, radius_miles: float, limit: int) -> List[Dict[str, Any]]:
        """Fetch and filter breweries around ``origin``"""
        breweries = BreweryService.fetch_breweries(origin)
        return BreweryService.filter_nearby(origin, breweries, radius_miles, limit)
