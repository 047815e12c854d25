"""
Batch pipeline: fetch candidate routes, evaluate each one, label the batch.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from ...config.routing_config import RoutingConfig
from ...data.models import BatchResult, Coordinate, RawRoute, ScoredRoute
from ...providers.base import NearbyEntityDirectory, RouteProvider
from ...providers.errors import ProviderUnavailable
from ..classification.route_classifier import RouteClassifier
from ..evaluation.route_evaluator import RouteEvaluator

logger = logging.getLogger(__name__)


class RouteSafetyPipeline:
    """
    Scores and labels the candidate routes of one origin/destination query.

    A pipeline instance owns the collaborators for one batch. All results
    are local to the returned BatchResult, so a batch abandoned by its
    caller leaves nothing shared behind.
    """

    def __init__(self, directory: Optional[NearbyEntityDirectory],
                 config: Optional[RoutingConfig] = None,
                 route_provider: Optional[RouteProvider] = None):
        """
        Initialize the pipeline.

        Args:
            directory: Nearby Entity Directory, or None to score every route neutral
            config: Routing configuration parameters
            route_provider: Route Provider used by find_safe_routes
        """
        self.config = config or RoutingConfig()
        self.config.validate()

        self.route_provider = route_provider
        self.evaluator = RouteEvaluator(directory, self.config)
        self.classifier = RouteClassifier()

    def find_safe_routes(self, origin: Coordinate, destination: Coordinate) -> BatchResult:
        """
        Fetch candidate walking routes and evaluate them.

        Args:
            origin: Start coordinate
            destination: End coordinate

        Returns:
            BatchResult with labeled routes and the matching raw routes

        Raises:
            RouteProviderError: If no candidate route could be obtained
        """
        if self.route_provider is None:
            raise ProviderUnavailable("No route provider is configured.")

        logger.info(f"Finding safe routes from {origin.as_tuple()} to {destination.as_tuple()}")
        raw_routes = self.route_provider.find_routes(origin, destination)
        return self.evaluate_batch(raw_routes)

    def evaluate_batch(self, raw_routes: Sequence[RawRoute]) -> BatchResult:
        """
        Evaluate and label a batch of raw routes.

        Args:
            raw_routes: Candidate routes in provider order

        Returns:
            BatchResult where routes[i] is the raw route of labeled_routes[i]
        """
        if not raw_routes:
            return BatchResult()

        # Step 1: Score every route
        scored = self._evaluate_routes(raw_routes)

        # Step 2: Label and prune
        labeled = self.classifier.classify(scored)

        # Step 3: Align raw routes with the labeled selection
        routes = [raw_routes[item.route_index] for item in labeled]

        logger.info(f"Batch of {len(raw_routes)} routes reduced to {len(labeled)} labeled routes")
        return BatchResult(labeled_routes=labeled, routes=routes)

    def _evaluate_routes(self, raw_routes: Sequence[RawRoute]) -> List[ScoredRoute]:
        """Evaluate routes in parallel, returning results in input order."""
        workers = min(self.config.max_route_workers, len(raw_routes))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="route-eval") as pool:
            futures = [
                pool.submit(self._evaluate_route, index, route)
                for index, route in enumerate(raw_routes)
            ]
            return [future.result() for future in futures]

    def _evaluate_route(self, index: int, route: RawRoute) -> ScoredRoute:
        """Evaluate one route; a failure only neutralizes this route."""
        try:
            return self.evaluator.evaluate(
                route.geometry, index, route.distance_meters, route.duration_text
            )
        except Exception as e:
            logger.error(f"Evaluation of route {index} failed, using neutral score: {e}")
            return self.evaluator.neutral_route(
                index, route.distance_meters, route.duration_text, self._midpoint(route)
            )

    def _midpoint(self, route: RawRoute) -> Optional[Coordinate]:
        """Middle sample of a route, or None if sampling itself fails."""
        try:
            samples = self.evaluator.sampler.sample(route.geometry, self.config.sample_count)
        except Exception as e:
            logger.warning(f"Could not sample midpoint of failed route: {e}")
            return None
        return samples[len(samples) // 2].coordinate if samples else None
