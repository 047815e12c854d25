"""
Service layer for the safe walking route API.
"""

import logging
from typing import Callable, List, Optional

from safe_walk_routing.algorithms.optimization.safety_pipeline import RouteSafetyPipeline
from safe_walk_routing.algorithms.scoring.safety_scorer import score_tier
from safe_walk_routing.config.routing_config import RoutingConfig
from safe_walk_routing.data.models import (
    BatchResult,
    Coordinate,
    RawRoute,
    RouteGeometry
)
from safe_walk_routing.providers.base import NearbyEntityDirectory, RouteProvider
from safe_walk_routing.providers.errors import ProviderUnavailable, RouteProviderError
from safe_walk_routing.providers.google_client import create_maps_client
from safe_walk_routing.providers.google_directions import GoogleDirectionsProvider
from safe_walk_routing.providers.google_places import GooglePlacesDirectory
from safe_walk_routing.visualization.geojson_export import batch_to_geojson
from api.schemas.routing import (
    CompareRoutesRequest,
    EntityCountsResponse,
    EvaluateRoutesRequest,
    HealthResponse,
    LabeledRouteResponse,
    LocationRequest,
    RawRouteRequest,
    RouteComparisonResponse,
    SafetyPoint
)

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"

RouteProviderFactory = Callable[[RoutingConfig], RouteProvider]
DirectoryFactory = Callable[[RoutingConfig], NearbyEntityDirectory]


def google_route_provider(config: RoutingConfig) -> RouteProvider:
    """Create a Google Directions provider with a fresh client."""
    return GoogleDirectionsProvider(create_maps_client(config), config.max_alternatives)


def google_places_directory(config: RoutingConfig) -> NearbyEntityDirectory:
    """Create a Google Places directory with a fresh client."""
    return GooglePlacesDirectory(create_maps_client(config), open_now=config.open_now)


class SafeRoutingService:
    """
    Service class that provides route comparison for the API.

    Route Provider and Directory clients are created per request and handed
    to a new pipeline, so no client is shared between requests.
    """

    def __init__(self, config: Optional[RoutingConfig] = None,
                 route_provider_factory: RouteProviderFactory = google_route_provider,
                 directory_factory: DirectoryFactory = google_places_directory):
        """
        Initialize the routing service.

        Args:
            config: Routing configuration, read from the environment if omitted
            route_provider_factory: Builds a Route Provider for one request
            directory_factory: Builds a Nearby Entity Directory for one request
        """
        self.config = config or RoutingConfig.from_env()
        self.route_provider_factory = route_provider_factory
        self.directory_factory = directory_factory
        self.is_initialized = bool(self.config.google_maps_api_key)

        if self.is_initialized:
            logger.info("Routing service initialized with Google Maps API key")
        else:
            logger.warning("GOOGLE_MAPS_API_KEY not set - route comparison unavailable, "
                           "evaluated routes will get neutral scores")

    def get_health_status(self) -> HealthResponse:
        """Get the health status of the routing service."""
        return HealthResponse(
            status="healthy" if self.is_initialized else "degraded",
            version=API_VERSION,
            api_key_configured=self.is_initialized,
            directory_enabled=self.is_initialized
        )

    def compare_routes(self, request: CompareRoutesRequest) -> RouteComparisonResponse:
        """
        Fetch walking routes between two points and label them.

        Args:
            request: Origin and destination

        Returns:
            RouteComparisonResponse; success is false with a readable message
            when no candidate route could be obtained
        """
        origin = Coordinate(request.origin.latitude, request.origin.longitude)
        destination = Coordinate(request.destination.latitude, request.destination.longitude)

        try:
            pipeline = RouteSafetyPipeline(
                directory=self._create_directory(),
                config=self.config,
                route_provider=self.route_provider_factory(self.config)
            )
            result = pipeline.find_safe_routes(origin, destination)
        except RouteProviderError as e:
            logger.warning(f"Route comparison failed ({e.code}): {e.message}")
            return RouteComparisonResponse(success=False, message=e.message, error=e.code)

        return self._convert_to_response(result)

    def evaluate_routes(self, request: EvaluateRoutesRequest) -> RouteComparisonResponse:
        """
        Score and label routes supplied by the client.

        Args:
            request: Candidate routes

        Returns:
            RouteComparisonResponse with labeled routes
        """
        raw_routes = [self._to_raw_route(route) for route in request.routes]

        pipeline = RouteSafetyPipeline(directory=self._create_directory(), config=self.config)
        result = pipeline.evaluate_batch(raw_routes)

        return self._convert_to_response(result)

    def _create_directory(self) -> Optional[NearbyEntityDirectory]:
        """Directory for one request, or None when it cannot be created."""
        try:
            return self.directory_factory(self.config)
        except ProviderUnavailable as e:
            logger.warning(f"Nearby entity directory unavailable: {e.message}")
            return None

    @staticmethod
    def _to_raw_route(route: RawRouteRequest) -> RawRoute:
        if route.encoded_polyline:
            geometry = RouteGeometry.from_encoded(route.encoded_polyline)
        else:
            geometry = RouteGeometry.from_path(
                [Coordinate(point.latitude, point.longitude) for point in route.path]
            )

        return RawRoute(
            geometry=geometry,
            distance_meters=route.distance_meters,
            duration_text=route.duration_text,
            summary=route.summary,
            distance_text=route.distance_text
        )

    def _convert_to_response(self, result: BatchResult) -> RouteComparisonResponse:
        """
        Convert pipeline output to API response format.

        Args:
            result: Batch result with aligned labeled and raw routes

        Returns:
            Formatted RouteComparisonResponse
        """
        routes: List[LabeledRouteResponse] = []

        for labeled, raw in zip(result.labeled_routes, result.routes):
            scored = labeled.route
            midpoint = None
            if scored.midpoint is not None:
                midpoint = LocationRequest(
                    latitude=scored.midpoint.latitude,
                    longitude=scored.midpoint.longitude
                )

            routes.append(LabeledRouteResponse(
                label=labeled.label.value,
                route_index=scored.route_index,
                safety_score=round(scored.safety_score, 1),
                score_tier=score_tier(scored.safety_score),
                distance_meters=scored.distance_meters,
                distance_text=raw.distance_text,
                duration_text=scored.duration_text,
                summary=raw.summary,
                counts=EntityCountsResponse(
                    police=scored.counts.police,
                    hospital=scored.counts.hospital,
                    store=scored.counts.store,
                    building=scored.counts.building
                ),
                entity_total=scored.entity_total,
                midpoint=midpoint,
                safety_points=[
                    SafetyPoint(
                        identity=entity.identity,
                        name=entity.display_name,
                        type=entity.category.value,
                        latitude=entity.location.latitude,
                        longitude=entity.location.longitude
                    )
                    for entity in scored.entities
                ]
            ))

        return RouteComparisonResponse(
            success=True,
            message=f"Evaluated {len(routes)} routes",
            routes=routes,
            route_geojson=batch_to_geojson(result)
        )


# Global service instance
routing_service = SafeRoutingService()
