"""
Distance calculation utilities optimized for performance.
"""

import math
from typing import Sequence

import numpy as np

from .models import Coordinate

# Earth's radius in meters
EARTH_RADIUS_M = 6371000


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """
    Calculate the great circle distance between two points on Earth.

    Args:
        lat1, lon1: First point coordinates
        lat2, lon2: Second point coordinates

    Returns:
        Distance in meters
    """
    # Convert to radians
    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    delta_lat = math.radians(lat2 - lat1)
    delta_lon = math.radians(lon2 - lon1)

    # Haversine formula
    a = (math.sin(delta_lat / 2) ** 2 +
         math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(delta_lon / 2) ** 2)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def segment_lengths(path: Sequence[Coordinate]) -> np.ndarray:
    """
    Great circle length of every consecutive segment of a path.

    Args:
        path: Ordered route vertices

    Returns:
        Array of len(path) - 1 segment lengths in meters
    """
    if len(path) < 2:
        return np.zeros(0)

    coords = np.radians(np.array([c.as_tuple() for c in path], dtype=np.float64))
    lat1, lon1 = coords[:-1, 0], coords[:-1, 1]
    lat2, lon2 = coords[1:, 0], coords[1:, 1]

    a = (np.sin((lat2 - lat1) / 2) ** 2 +
         np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2)
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return EARTH_RADIUS_M * c


def interpolate_coordinate(start: Coordinate, end: Coordinate, fraction: float) -> Coordinate:
    """Linearly interpolate between two coordinates (fraction in 0..1)."""
    return Coordinate(
        latitude=start.latitude + (end.latitude - start.latitude) * fraction,
        longitude=start.longitude + (end.longitude - start.longitude) * fraction
    )
