"""Address geocoding endpoint"""
import logging

from fastapi import APIRouter, HTTPException, Query

from ...models.schemas import GeocodeResponse
from ...services.geocoding_service import GeocodingNotFound, GeocodingService
from ...services.http_client import ProviderError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/geocode", response_model=GeocodeResponse, tags=["Geocoding"])
def geocode(address: str = Query(..., min_length=1, description="Address to geocode")):
    """
    Resolve an address to a start coordinate.

    Returns:
        Latitude, longitude, formatted address and place id
    """
    if not GeocodingService.is_configured():
        raise HTTPException(status_code=500, detail="Google Maps API key not configured")

    logger.info("Geocoding address: %s", address)
    try:
        return GeocodeResponse(**GeocodingService.geocode(address))
    except GeocodingNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ProviderError as e:
        logger.error("Geocoding error: %s", e)
        raise HTTPException(status_code=502, detail="Failed to geocode address")
