"""
Pydantic schemas for the safe walking route API.
"""

from typing import List, Optional, Dict, Any
from pydantic import BaseModel, Field, model_validator


class LocationRequest(BaseModel):
    """Request model for a single location."""
    latitude: float = Field(..., ge=-90, le=90, description="Latitude coordinate")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude coordinate")


class CompareRoutesRequest(BaseModel):
    """Request model for comparing walking routes between two points."""
    origin: LocationRequest = Field(..., description="Starting location")
    destination: LocationRequest = Field(..., description="Destination location")


class RawRouteRequest(BaseModel):
    """A candidate route supplied by the client."""
    encoded_polyline: Optional[str] = Field(default=None, description="Google encoded polyline of the route")
    path: Optional[List[LocationRequest]] = Field(default=None, description="Route vertices, used when no polyline is given")
    distance_meters: int = Field(..., ge=0, description="Route distance in meters")
    duration_text: str = Field(default="", description="Display duration, e.g. '12 mins'")
    distance_text: str = Field(default="", description="Display distance, e.g. '1.0 km'")
    summary: str = Field(default="", description="Route summary")

    @model_validator(mode='after')
    def validate_geometry(self):
        """Ensure the route has a polyline or a path."""
        if not self.encoded_polyline and not self.path:
            raise ValueError('Either encoded_polyline or path must be provided')
        return self


class EvaluateRoutesRequest(BaseModel):
    """Request model for scoring client-supplied routes."""
    routes: List[RawRouteRequest] = Field(..., min_length=1, max_length=10, description="Candidate routes in display order")


class EntityCountsResponse(BaseModel):
    """Distinct entity counts near a route."""
    police: int = Field(..., ge=0)
    hospital: int = Field(..., ge=0)
    store: int = Field(..., ge=0)
    building: int = Field(..., ge=0)


class SafetyPoint(BaseModel):
    """A point of interest near a route."""
    identity: str = Field(..., description="Stable place identity")
    name: str = Field(..., description="Display name")
    type: str = Field(..., description="Category: police, hospital, store, building or other")
    latitude: float
    longitude: float


class LabeledRouteResponse(BaseModel):
    """One labeled route of a comparison."""
    label: str = Field(..., description="Safest, Shortest or Neutral")
    route_index: int = Field(..., ge=0, description="Index of the route in the original candidate list")
    safety_score: float = Field(..., ge=0.0, le=100.0, description="Safety score (50-100, higher is safer)")
    score_tier: str = Field(..., description="Display tier: high, medium or base")
    distance_meters: int = Field(..., description="Route distance in meters")
    distance_text: str = Field(default="", description="Display distance")
    duration_text: str = Field(default="", description="Display duration")
    summary: str = Field(default="", description="Route summary")
    counts: EntityCountsResponse
    entity_total: int = Field(..., ge=0, description="Distinct entities found before truncation")
    midpoint: Optional[LocationRequest] = Field(default=None, description="Midpoint sample of the route")
    safety_points: List[SafetyPoint] = Field(default_factory=list)


class RouteComparisonResponse(BaseModel):
    """Response model for route comparison and evaluation."""
    success: bool = Field(..., description="Whether routes were obtained and evaluated")
    message: str = Field(..., description="Status message")
    error: Optional[str] = Field(default=None, description="Error code when success is false")
    routes: List[LabeledRouteResponse] = Field(default_factory=list, description="Labeled routes, Safest first")
    route_geojson: Optional[Dict[str, Any]] = Field(default=None, description="Displayed routes as GeoJSON FeatureCollection")


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    api_key_configured: bool = Field(..., description="Whether a Google Maps API key is configured")
    directory_enabled: bool = Field(..., description="Whether nearby entity lookups are enabled")


class ErrorResponse(BaseModel):
    """Error response model."""
    success: bool = Field(False, description="Always false for error responses")
    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Detailed error message")
    details: Optional[Any] = Field(None, description="Additional error details")
