"""Brewery search and route optimization endpoints"""
import logging

from fastapi import APIRouter, HTTPException, Query

from ...config import DEFAULT_MAX_STOPS, DEFAULT_SEARCH_LIMIT, DEFAULT_SEARCH_RADIUS_MILES
from ...models.schemas import (
    BrewerySearchResponse,
    RouteOptimizationRequest,
    RouteOptimizationResponse,
)
from ...services.brewery_service import BreweryService
from ...services.http_client import ProviderError
from ...services.route_service import RouteService
from ...utils.geo_utils import InvalidCoordinateError, validate_coordinate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/breweries")


@router.post("/optimize-route", response_model=RouteOptimizationResponse, tags=["Routing"])
def optimize_route(request: RouteOptimizationRequest):
    """
    Order breweries into a short driving crawl.

    Uses a greedy nearest-neighbor heuristic on straight-line distance;
    real road routing is left to the directions provider on the client.

    This endpoint:
    1. Validates the start and brewery coordinates
    2. Picks the nearest unvisited brewery until maxStops is reached
    3. Returns the ordered route with distance and time estimates

    Args:
        request: Start coordinate, candidate breweries and optional maxStops

    Returns:
        Ordered route, total distance (miles) and estimated time (minutes)
    """
    # Explicit 0 is a real request for no stops; only a missing value gets the default
    max_stops = DEFAULT_MAX_STOPS if request.max_stops is None else request.max_stops

    try:
        logger.info("[1/3] Validating start (%s, %s)...", request.start_lat, request.start_lng)
        start = validate_coordinate(request.start_lat, request.start_lng)

        logger.info("[2/3] Sequencing %d breweries, max %d stops...", len(request.breweries), max_stops)
        result = RouteService.plan_route(start, request.breweries, max_stops)

        logger.info("[3/3] Route ready: %d stops, %.2f mi", len(result.ordered_stops), result.total_distance)
        total_distance, estimated_time = result.rounded()

        return RouteOptimizationResponse(
            route=result.ordered_stops,
            total_distance=total_distance,
            estimated_time=estimated_time
        )

    except InvalidCoordinateError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Error optimizing route")
        raise HTTPException(
            status_code=500,
            detail=f"Failed to optimize route: {str(e)}"
        )


@router.get("/search", response_model=BrewerySearchResponse, tags=["Search"])
def search_breweries(
    lat: float = Query(..., description="Search center latitude"),
    lng: float = Query(..., description="Search center longitude"),
    radius: float = Query(DEFAULT_SEARCH_RADIUS_MILES, description="Search radius in miles", gt=0),
    limit: int = Query(DEFAULT_SEARCH_LIMIT, description="Maximum number of results", gt=0, le=100)
):
    """
    Find breweries near a point, nearest first.

    Each result carries a ``distance`` field in miles.
    """
    try:
        origin = validate_coordinate(lat, lng)
    except InvalidCoordinateError as e:
        raise HTTPException(status_code=400, detail=str(e))

    try:
        breweries = BreweryService.search(origin, radius, limit)
    except ProviderError as e:
        logger.error("Brewery search failed: %s", e)
        raise HTTPException(status_code=502, detail="Failed to fetch breweries")

    logger.info("Found %d breweries within %.1f mi of (%s, %s)", len(breweries), radius, lat, lng)
    return BrewerySearchResponse(breweries=breweries, total=len(breweries))
