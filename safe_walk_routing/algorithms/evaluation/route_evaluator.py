"""
Per-route safety evaluation: sample, aggregate nearby entities, score.
"""

import logging
from typing import Optional

from ...config.routing_config import RoutingConfig
from ...data.models import Coordinate, EntityCounts, RouteGeometry, ScoredRoute
from ...providers.base import NearbyEntityDirectory
from ..aggregation.nearby_entity_aggregator import NearbyEntityAggregator
from ..sampling.polyline_sampler import PolylineSampler
from ..scoring.safety_scorer import SafetyScorer

logger = logging.getLogger(__name__)


class RouteEvaluator:
    """
    Produces a ScoredRoute for one candidate route.

    Evaluations keep no state between calls, so one evaluator can be shared by
    concurrent evaluations of different routes.
    """

    def __init__(self, directory: Optional[NearbyEntityDirectory],
                 config: Optional[RoutingConfig] = None,
                 sampler: Optional[PolylineSampler] = None,
                 scorer: Optional[SafetyScorer] = None):
        """
        Initialize the route evaluator.

        Args:
            directory: Nearby Entity Directory, or None when it is unavailable
            config: Routing configuration parameters
            sampler: Polyline sampler (default instance if omitted)
            scorer: Safety scorer (built from config if omitted)
        """
        self.config = config or RoutingConfig()
        self.sampler = sampler or PolylineSampler()
        self.scorer = scorer or SafetyScorer(self.config)
        self.aggregator = NearbyEntityAggregator(directory, self.config) if directory is not None else None

    def evaluate(self, route: RouteGeometry, route_index: int,
                 distance_meters: int, duration_text: str) -> ScoredRoute:
        """
        Evaluate the safety of one route.

        Args:
            route: Route geometry
            route_index: Index of the route in the batch's raw route list
            distance_meters: Route distance reported by the provider
            duration_text: Display duration reported by the provider

        Returns:
            ScoredRoute; a neutral one (score floor, no entities) when the
            directory is unavailable
        """
        samples = self.sampler.sample(route, self.config.sample_count)
        midpoint = samples[len(samples) // 2].coordinate if samples else None

        if self.aggregator is None:
            logger.warning(f"Nearby entity directory unavailable, route {route_index} gets a neutral score")
            return self.neutral_route(route_index, distance_meters, duration_text, midpoint)

        entities, counts = self.aggregator.aggregate(samples, self.config.search_radius_m)
        safety_score = self.scorer.score(counts)

        logger.info(f"Route {route_index}: score {safety_score:.1f} from {counts.total} entities "
                    f"({len(samples)} sample points)")

        return ScoredRoute(
            route_index=route_index,
            distance_meters=distance_meters,
            duration_text=duration_text,
            safety_score=safety_score,
            counts=counts,
            entities=tuple(entities),
            midpoint=midpoint,
            entity_total=counts.total
        )

    def neutral_route(self, route_index: int, distance_meters: int, duration_text: str,
                      midpoint: Optional[Coordinate] = None) -> ScoredRoute:
        """ScoredRoute with zero counts and the neutral score."""
        return ScoredRoute(
            route_index=route_index,
            distance_meters=distance_meters,
            duration_text=duration_text,
            safety_score=self.scorer.neutral_score,
            counts=EntityCounts(),
            entities=(),
            midpoint=midpoint,
            entity_total=0
        )
