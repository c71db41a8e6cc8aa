"""Health check endpoint"""
from fastapi import APIRouter

from ...services.geocoding_service import GeocodingService

router = APIRouter()


@router.get("/health", tags=["Health"])
def health_check():
    """
    Health check endpoint for monitoring.

    Returns:
        Status plus whether address geocoding is available
    """
    return {"status": "ok", "geocoding": GeocodingService.is_configured()}
