"""
Route Provider backed by the Google Directions API.
"""

import logging
from typing import Any, Dict, List

import googlemaps

from ..data.models import Coordinate, RawRoute, RouteGeometry
from .base import RouteProvider
from .errors import NoRoutesFound, ProviderNetworkError, ProviderUnavailable

logger = logging.getLogger(__name__)

ACCESS_DENIED_MESSAGE = (
    "Access denied by the Directions API. Make sure the Directions API is enabled "
    "for this key and allowed by its restrictions, and that billing is active."
)

# Statuses that mean the key or project cannot use the service
DENIED_STATUSES = {"REQUEST_DENIED", "OVER_DAILY_LIMIT", "OVER_QUERY_LIMIT"}


class GoogleDirectionsProvider(RouteProvider):
    """
    Fetches alternative walking routes from Google Directions.

    Each returned RawRoute carries the overview polyline, first-leg distance
    and duration, and the route summary.
    """

    def __init__(self, client: googlemaps.Client, max_alternatives: int = 3):
        self.client = client
        self.max_alternatives = max_alternatives

    def find_routes(self, origin: Coordinate, destination: Coordinate) -> List[RawRoute]:
        logger.info(f"Fetching walking routes from {origin.as_tuple()} to {destination.as_tuple()}")

        try:
            directions = self.client.directions(
                origin=origin.as_tuple(),
                destination=destination.as_tuple(),
                mode="walking",
                alternatives=True
            )
        except googlemaps.exceptions.ApiError as e:
            logger.error(f"Directions API error: {e.status} {e.message or ''}")
            if e.status in ("ZERO_RESULTS", "NOT_FOUND"):
                raise NoRoutesFound() from e
            if e.status in DENIED_STATUSES:
                raise ProviderUnavailable(ACCESS_DENIED_MESSAGE) from e
            raise ProviderUnavailable(f"Directions API error: {e.status}") from e
        except googlemaps.exceptions.Timeout as e:
            logger.error("Directions API request timed out")
            raise ProviderNetworkError("The directions service did not respond in time.") from e
        except googlemaps.exceptions.TransportError as e:
            logger.error(f"Directions API transport error: {e}")
            raise ProviderNetworkError("Could not reach the directions service.") from e

        if not directions:
            raise NoRoutesFound()

        routes = [self._to_raw_route(route) for route in directions[:self.max_alternatives]]
        logger.info(f"Directions API returned {len(directions)} routes, using {len(routes)}")
        return routes

    def _to_raw_route(self, route: Dict[str, Any]) -> RawRoute:
        """Normalize one Directions API route."""
        legs = route.get('legs') or [{}]
        leg = legs[0]
        distance = leg.get('distance') or {}
        duration = leg.get('duration') or {}
        encoded = (route.get('overview_polyline') or {}).get('points', '')

        return RawRoute(
            geometry=RouteGeometry.from_encoded(encoded),
            distance_meters=int(distance.get('value', 0)),
            duration_text=duration.get('text', ''),
            summary=route.get('summary', ''),
            distance_text=distance.get('text', ''),
            duration_seconds=int(duration.get('value', 0))
        )
