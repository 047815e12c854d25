import math
import threading
from typing import Callable, Dict, List, Optional, Sequence

import pytest

from safe_walk_routing.config.routing_config import RoutingConfig
from safe_walk_routing.data.distance_utils import EARTH_RADIUS_M
from safe_walk_routing.data.models import Coordinate, PlaceRecord, RawRoute, RouteGeometry
from safe_walk_routing.providers.base import NearbyEntityDirectory, RouteProvider
from safe_walk_routing.providers.errors import DirectoryLookupFailed

START_LAT = 43.6426
START_LON = -79.3871


def meters_to_lat_degrees(meters: float) -> float:
    return math.degrees(meters / EARTH_RADIUS_M)


def straight_path(distances_m: Sequence[float], lon: float = START_LON) -> List[Coordinate]:
    """Vertices due north of the start point, at the given distances along the meridian."""
    return [Coordinate(START_LAT + meters_to_lat_degrees(d), lon) for d in distances_m]


def straight_route(length_m: float = 1000.0, lon: float = START_LON,
                   distance_meters: Optional[int] = None, duration_text: str = "12 mins") -> RawRoute:
    geometry = RouteGeometry(encoded_polyline="", path=tuple(straight_path([0.0, length_m], lon)))
    return RawRoute(
        geometry=geometry,
        distance_meters=int(length_m) if distance_meters is None else distance_meters,
        duration_text=duration_text
    )


def place(place_id: Optional[str], name: str = "Place", tags: Sequence[str] = ("establishment",),
          lat: float = START_LAT, lon: float = START_LON) -> PlaceRecord:
    return PlaceRecord(name=name, location=Coordinate(lat, lon), category_tags=tuple(tags), place_id=place_id)


class FakeDirectory(NearbyEntityDirectory):
    """
    In-process directory. `responder` maps a search center to its places and
    may raise DirectoryLookupFailed.
    """

    def __init__(self, responder: Callable[[Coordinate], List[PlaceRecord]]):
        self.responder = responder
        self.calls: List[Dict] = []
        self._lock = threading.Lock()

    def search(self, center, radius_meters, category_keywords):
        with self._lock:
            self.calls.append({
                'center': center,
                'radius': radius_meters,
                'keywords': list(category_keywords)
            })
        return self.responder(center)


class FailingDirectory(NearbyEntityDirectory):
    def search(self, center, radius_meters, category_keywords):
        raise DirectoryLookupFailed("service unavailable")


class FakeRouteProvider(RouteProvider):
    def __init__(self, routes: Optional[List[RawRoute]] = None, error: Optional[Exception] = None):
        self.routes = routes or []
        self.error = error

    def find_routes(self, origin, destination):
        if self.error is not None:
            raise self.error
        return list(self.routes)


@pytest.fixture
def config():
    return RoutingConfig(aggregation_timeout_s=5.0)


@pytest.fixture
def fast_timeout_config():
    return RoutingConfig(aggregation_timeout_s=0.3)
