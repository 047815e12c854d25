"""
Data types and geographic utilities for route safety scoring.

This module contains:
- Route, entity and score data types
- Distance calculations
- Geographic data utilities
"""

from .models import (
    Coordinate,
    RouteGeometry,
    SamplePoint,
    EntityCategory,
    PlaceRecord,
    NearbyEntity,
    EntityCounts,
    RawRoute,
    ScoredRoute,
    Label,
    LabeledRoute,
    BatchResult
)
from .distance_utils import (
    haversine_distance,
    segment_lengths,
    interpolate_coordinate
)

__all__ = [
    'Coordinate',
    'RouteGeometry',
    'SamplePoint',
    'EntityCategory',
    'PlaceRecord',
    'NearbyEntity',
    'EntityCounts',
    'RawRoute',
    'ScoredRoute',
    'Label',
    'LabeledRoute',
    'BatchResult',
    'haversine_distance',
    'segment_lengths',
    'interpolate_coordinate'
]
