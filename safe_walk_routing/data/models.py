"""
Core data types shared by the route safety scoring pipeline.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from googlemaps import convert

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A geographic coordinate in decimal degrees."""
    latitude: float
    longitude: float

    def as_tuple(self) -> Tuple[float, float]:
        """Return (lat, lon)."""
        return (self.latitude, self.longitude)


@dataclass(frozen=True)
class RouteGeometry:
    """
    Encoded route path together with its decoded vertices.

    The encoded form uses the Google encoded polyline algorithm.
    """
    encoded_polyline: str
    path: Tuple[Coordinate, ...] = ()

    @classmethod
    def from_encoded(cls, encoded_polyline: str) -> 'RouteGeometry':
        """
        Decode an encoded polyline.

        A polyline that cannot be decoded produces a geometry with an empty
        path rather than an error.
        """
        try:
            decoded = convert.decode_polyline(encoded_polyline) if encoded_polyline else []
        except (IndexError, TypeError, ValueError) as e:
            logger.warning(f"Could not decode route polyline: {e}")
            decoded = []

        path = tuple(Coordinate(point['lat'], point['lng']) for point in decoded)
        return cls(encoded_polyline=encoded_polyline or '', path=path)

    @classmethod
    def from_path(cls, path: Sequence[Coordinate]) -> 'RouteGeometry':
        """Build a geometry from explicit vertices, encoding them."""
        vertices = tuple(path)
        encoded = convert.encode_polyline([c.as_tuple() for c in vertices]) if vertices else ''
        return cls(encoded_polyline=encoded, path=vertices)

    @property
    def is_empty(self) -> bool:
        return len(self.path) == 0


@dataclass(frozen=True)
class SamplePoint:
    """A coordinate interpolated along a route, with its fractional position (0..1)."""
    coordinate: Coordinate
    position: float


class EntityCategory(Enum):
    """Category of a point of interest, in categorization priority order."""
    POLICE = "police"
    HOSPITAL = "hospital"
    STORE = "store"
    BUILDING = "building"
    OTHER = "other"


@dataclass(frozen=True)
class PlaceRecord:
    """Raw place returned by the Nearby Entity Directory."""
    name: str
    location: Coordinate
    category_tags: Tuple[str, ...] = ()
    place_id: Optional[str] = None


@dataclass(frozen=True)
class NearbyEntity:
    """A deduplicated, categorized point of interest near a route."""
    identity: str
    display_name: str
    location: Coordinate
    category: EntityCategory


@dataclass(frozen=True)
class EntityCounts:
    """Number of distinct entities per scored category."""
    police: int = 0
    hospital: int = 0
    store: int = 0
    building: int = 0

    def __post_init__(self):
        for name in ('police', 'hospital', 'store', 'building'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} count must not be negative")

    @property
    def total(self) -> int:
        return self.police + self.hospital + self.store + self.building

    @classmethod
    def from_entities(cls, entities: Sequence[NearbyEntity]) -> 'EntityCounts':
        """Count entities by category. OTHER entities are not counted."""
        categories = [entity.category for entity in entities]
        return cls(
            police=categories.count(EntityCategory.POLICE),
            hospital=categories.count(EntityCategory.HOSPITAL),
            store=categories.count(EntityCategory.STORE),
            building=categories.count(EntityCategory.BUILDING),
        )


@dataclass(frozen=True)
class RawRoute:
    """One candidate route as returned by the Route Provider."""
    geometry: RouteGeometry
    distance_meters: int
    duration_text: str
    summary: str = ''
    distance_text: str = ''
    duration_seconds: int = 0


@dataclass(frozen=True)
class ScoredRoute:
    """Safety evaluation of one candidate route."""
    route_index: int
    distance_meters: int
    duration_text: str
    safety_score: float
    counts: EntityCounts
    entities: Tuple[NearbyEntity, ...]
    midpoint: Optional[Coordinate]
    entity_total: int = 0


class Label(Enum):
    """Semantic role of a route within one evaluated batch."""
    SAFEST = "Safest"
    SHORTEST = "Shortest"
    NEUTRAL = "Neutral"


@dataclass(frozen=True)
class LabeledRoute:
    """A scored route with the label assigned by the classifier."""
    route: ScoredRoute
    label: Label

    @property
    def route_index(self) -> int:
        return self.route.route_index


@dataclass
class BatchResult:
    """
    Output of one batch evaluation.

    `routes[i]` is the raw route described by `labeled_routes[i]`.
    """
    labeled_routes: List[LabeledRoute] = field(default_factory=list)
    routes: List[RawRoute] = field(default_factory=list)
