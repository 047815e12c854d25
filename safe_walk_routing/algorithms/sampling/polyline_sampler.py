"""
Uniform arc-length sampling along route geometries.
"""

import logging
from typing import List

import numpy as np

from ...data.distance_utils import interpolate_coordinate, segment_lengths
from ...data.models import RouteGeometry, SamplePoint

logger = logging.getLogger(__name__)


class PolylineSampler:
    """
    Places sample points at equal distances along a route.

    Points are spaced by arc length rather than by vertex, so vertex-dense
    stretches of a path are not oversampled.
    """

    def sample(self, geometry: RouteGeometry, count: int) -> List[SamplePoint]:
        """
        Sample `count` points along a route.

        The j-th point (j = 1..count) lies at total_length * j / (count + 1)
        from the start, so neither endpoint is sampled.

        Args:
            geometry: Route geometry with decoded path
            count: Number of points to sample

        Returns:
            Exactly `count` sample points, a single midpoint when the geometry
            has zero length or a single vertex, or an empty list when the
            geometry has no vertices
        """
        path = geometry.path
        if geometry.is_empty:
            logger.warning("Cannot sample a route without vertices")
            return []
        if count < 1:
            return []

        lengths = segment_lengths(path)
        total_length = float(lengths.sum())

        if len(path) == 1 or total_length <= 0:
            logger.debug("Degenerate route geometry, sampling its midpoint only")
            return [self._midpoint_vertex(geometry)]

        # cumulative[i] is the distance from the start to vertex i
        cumulative = np.concatenate(([0.0], np.cumsum(lengths)))

        points = []
        for j in range(1, count + 1):
            position = j / (count + 1)
            target_distance = total_length * position

            # First segment whose end reaches the target distance
            segment_index = int(np.searchsorted(cumulative[1:], target_distance, side='left'))
            if segment_index >= len(lengths):
                points.append(self._midpoint_vertex(geometry))
                continue

            segment_length = lengths[segment_index]
            distance_so_far = cumulative[segment_index]
            fraction = (target_distance - distance_so_far) / segment_length if segment_length > 0 else 0.0

            coordinate = interpolate_coordinate(
                path[segment_index], path[segment_index + 1], float(fraction)
            )
            points.append(SamplePoint(coordinate=coordinate, position=position))

        return points

    @staticmethod
    def _midpoint_vertex(geometry: RouteGeometry) -> SamplePoint:
        path = geometry.path
        return SamplePoint(coordinate=path[len(path) // 2], position=0.5)
