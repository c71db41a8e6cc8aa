"""Pydantic models for request/response validation"""
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional


class Brewery(BaseModel):
    """
    Brewery (point of interest) model.

    Display fields such as address, city or the search ``distance`` are not
    declared; they are kept as extra fields and echoed back unchanged.
    """
    model_config = ConfigDict(extra="allow")

    id: str = Field(..., description="Brewery identifier")
    name: str = Field(..., description="Brewery name")
    latitude: float = Field(..., description="Latitude of the brewery")
    longitude: float = Field(..., description="Longitude of the brewery")


class RouteOptimizationRequest(BaseModel):
    """Request model for brewery route optimization"""
    model_config = ConfigDict(populate_by_name=True)

    start_lat: float = Field(..., alias="startLat", description="Starting latitude", examples=[40.0])
    start_lng: float = Field(..., alias="startLng", description="Starting longitude", examples=[-75.0])
    breweries: List[Brewery] = Field(..., description="Candidate breweries")
    max_stops: Optional[int] = Field(
        default=None,
        alias="maxStops",
        description="Maximum number of stops; omitted means the server default, 0 means none"
    )


class RouteOptimizationResponse(BaseModel):
    """Response model for brewery route optimization"""
    model_config = ConfigDict(populate_by_name=True)

    route: List[Brewery]
    total_distance: float = Field(..., alias="totalDistance", description="Total distance in miles")
    estimated_time: float = Field(..., alias="estimatedTime", description="Estimated driving time in minutes")


class BrewerySearchResponse(BaseModel):
    """Response model for nearby brewery search"""
    breweries: List[Brewery]
    total: int


class GeocodeResponse(BaseModel):
    """Response model for address geocoding"""
    lat: float
    lng: float
    formatted_address: Optional[str] = None
    place_id: Optional[str] = None
