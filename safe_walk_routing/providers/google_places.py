"""
Nearby Entity Directory backed by the Google Places nearby search.
"""

import logging
from typing import Any, Dict, List, Sequence

import googlemaps

from ..data.models import Coordinate, PlaceRecord
from .base import NearbyEntityDirectory
from .errors import DirectoryLookupFailed

logger = logging.getLogger(__name__)


class GooglePlacesDirectory(NearbyEntityDirectory):
    """Nearby search against Google Places, one request per call."""

    DEFAULT_NAME = "Safe Point"

    def __init__(self, client: googlemaps.Client, open_now: bool = True):
        self.client = client
        self.open_now = open_now

    def search(self, center: Coordinate, radius_meters: float,
               category_keywords: Sequence[str]) -> List[PlaceRecord]:
        try:
            response = self.client.places_nearby(
                location=center.as_tuple(),
                radius=int(radius_meters),
                keyword='|'.join(category_keywords),
                open_now=self.open_now
            )
        except (googlemaps.exceptions.ApiError,
                googlemaps.exceptions.TransportError,
                googlemaps.exceptions.Timeout) as e:
            raise DirectoryLookupFailed(f"Nearby search at {center.as_tuple()} failed: {e}") from e

        results = response.get('results', [])
        logger.debug(f"Nearby search at {center.as_tuple()} returned {len(results)} places")
        return [self._to_place_record(result, center) for result in results]

    def _to_place_record(self, result: Dict[str, Any], center: Coordinate) -> PlaceRecord:
        location = (result.get('geometry') or {}).get('location')
        if location:
            coordinate = Coordinate(location['lat'], location['lng'])
        else:
            coordinate = center

        return PlaceRecord(
            name=result.get('name') or self.DEFAULT_NAME,
            location=coordinate,
            category_tags=tuple(result.get('types') or ()),
            place_id=result.get('place_id')
        )
