"""
Labeling and pruning of scored routes into the presented selection.
"""

import logging
from typing import List, Sequence

from ...data.models import Label, LabeledRoute, ScoredRoute

logger = logging.getLogger(__name__)


class RouteClassifier:
    """
    Assigns Safest / Shortest / Neutral labels across one batch.

    At most one route carries each label and no route carries two. Output
    order is always [Safest, Shortest, Neutral] with absent labels omitted.
    Every LabeledRoute keeps the route_index of its ScoredRoute, so callers
    must pair results with raw routes by route_index rather than by position.
    """

    def classify(self, scored: Sequence[ScoredRoute]) -> List[LabeledRoute]:
        """
        Label and prune a batch of scored routes.

        Args:
            scored: Scored routes in original input order

        Returns:
            Up to three labeled routes; empty if `scored` is empty
        """
        if not scored:
            return []

        # Highest score wins, shorter distance breaks ties
        safest = min(scored, key=lambda r: (-r.safety_score, r.distance_meters, r.route_index))
        shortest = min(scored, key=lambda r: (r.distance_meters, r.route_index))

        labeled = [LabeledRoute(route=safest, label=Label.SAFEST)]
        if shortest.route_index != safest.route_index:
            labeled.append(LabeledRoute(route=shortest, label=Label.SHORTEST))

        taken = {safest.route_index, shortest.route_index}
        neutral = next((r for r in scored if r.route_index not in taken), None)
        if neutral is not None:
            labeled.append(LabeledRoute(route=neutral, label=Label.NEUTRAL))

        logger.debug("Classified routes: " + ", ".join(
            f"{item.label.value}={item.route_index}" for item in labeled))
        return labeled
