"""
FastAPI routes for safe walking route endpoints.
"""

from fastapi import APIRouter, HTTPException, status
import logging

from api.schemas.routing import (
    CompareRoutesRequest,
    EvaluateRoutesRequest,
    HealthResponse,
    RouteComparisonResponse
)
from api.services.routing_service import API_VERSION, routing_service

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routing", tags=["routing"])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
async def health_check():
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Service health information
    """
    try:
        return routing_service.get_health_status()
    except Exception as e:
        logger.error(f"Health check failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Health check failed"
        )


@router.post("/compare", response_model=RouteComparisonResponse, summary="Compare Walking Routes")
def compare_routes(request: CompareRoutesRequest):
    """
    Fetch walking routes between two locations and label them by safety.

    Up to three routes are returned, labeled Safest, Shortest and Neutral.
    Each carries its safety score, nearby safety points and the index of the
    route in the provider's candidate list.

    Args:
        request: CompareRoutesRequest with origin and destination

    Returns:
        RouteComparisonResponse: Labeled routes and GeoJSON for rendering

    Example:
        ```json
        {
            "origin": {"latitude": 43.6426, "longitude": -79.3871},
            "destination": {"latitude": 43.6452, "longitude": -79.3806}
        }
        ```
    """
    logger.info(f"Route comparison request from "
                f"({request.origin.latitude}, {request.origin.longitude}) to "
                f"({request.destination.latitude}, {request.destination.longitude})")

    try:
        # Provider failures come back as success=false with a readable message
        return routing_service.compare_routes(request)
    except ValueError as e:
        logger.warning(f"Route comparison validation error: {e}")
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e)
        )
    except Exception as e:
        logger.error(f"Route comparison failed with unexpected error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during route comparison"
        )


@router.post("/evaluate", response_model=RouteComparisonResponse, summary="Evaluate Supplied Routes")
def evaluate_routes(request: EvaluateRoutesRequest):
    """
    Score and label routes supplied by the client.

    Use this when candidate routes were already fetched elsewhere. Routes
    are identified in the response by their position in the request.

    Args:
        request: EvaluateRoutesRequest with candidate routes

    Returns:
        RouteComparisonResponse: Labeled routes and GeoJSON for rendering
    """
    logger.info(f"Route evaluation request with {len(request.routes)} routes")

    try:
        return routing_service.evaluate_routes(request)
    except Exception as e:
        logger.error(f"Route evaluation failed with unexpected error: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal server error during route evaluation"
        )


@router.get("/", summary="API Information")
async def get_api_info():
    """
    Get information about the Safe Walk Routing API.

    Returns:
        dict: API information and available endpoints
    """
    return {
        "api": "Safe Walk Routing API",
        "version": API_VERSION,
        "description": "Compare walking routes by nearby safety points and distance",
        "endpoints": {
            "POST /api/routing/compare": "Fetch and label walking routes between two locations",
            "POST /api/routing/evaluate": "Label client-supplied routes",
            "GET /api/routing/health": "Check service health status",
            "GET /api/routing/": "This information endpoint"
        },
        "labels": ["Safest", "Shortest", "Neutral"],
        "score_range": {"min": 50, "max": 100}
    }
