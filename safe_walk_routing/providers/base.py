"""
Abstract interfaces for the external services the pipeline consumes.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from ..data.models import Coordinate, PlaceRecord, RawRoute


class RouteProvider(ABC):
    """
    Source of candidate walking routes for an origin/destination pair.
    """

    @abstractmethod
    def find_routes(self, origin: Coordinate, destination: Coordinate) -> List[RawRoute]:
        """
        Find candidate walking routes.

        Args:
            origin: Start coordinate
            destination: End coordinate

        Returns:
            Up to the configured number of alternative routes, never empty

        Raises:
            NoRoutesFound: If the provider found no walking route
            ProviderUnavailable: If the provider denied the request, is
                misconfigured or cannot be reached
        """
        pass


class NearbyEntityDirectory(ABC):
    """
    Directory of points of interest searchable by location.
    """

    @abstractmethod
    def search(self, center: Coordinate, radius_meters: float,
               category_keywords: Sequence[str]) -> List[PlaceRecord]:
        """
        Search for places near a coordinate.

        Args:
            center: Search center
            radius_meters: Search radius
            category_keywords: Keywords used to filter place categories

        Returns:
            Raw place records, possibly empty

        Raises:
            DirectoryLookupFailed: If the lookup failed or timed out
        """
        pass
