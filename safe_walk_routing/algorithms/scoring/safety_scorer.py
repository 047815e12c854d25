"""
Composite safety score from categorized entity counts.
"""

from typing import Optional

from ...config.routing_config import RoutingConfig
from ...data.models import EntityCounts


class SafetyScorer:
    """
    Turns entity counts into a bounded safety score.

    score = clamp(40 + min(30, 1.5 * stores + 0.5 * buildings)
                     + 20 * police + 10 * hospitals, 50, 100)

    The floor keeps sparse data from ranking a route below neutral. The
    density cap stops one commercial cluster from dominating the score.
    """

    def __init__(self, config: Optional[RoutingConfig] = None):
        self.config = config or RoutingConfig()

    def score(self, counts: EntityCounts) -> float:
        """
        Calculate the safety score for a route.

        Args:
            counts: Distinct entity counts per category

        Returns:
            Score in [score_floor, score_ceiling]
        """
        cfg = self.config

        density = min(cfg.density_cap,
                      counts.store * cfg.store_weight + counts.building * cfg.building_weight)
        police_bonus = counts.police * cfg.police_bonus
        hospital_bonus = counts.hospital * cfg.hospital_bonus

        raw_score = cfg.score_base + density + police_bonus + hospital_bonus
        return float(min(cfg.score_ceiling, max(cfg.score_floor, raw_score)))

    @property
    def neutral_score(self) -> float:
        """Score assigned when no entity data is available."""
        return float(self.config.score_floor)


def score_tier(score: float) -> str:
    """Display tier for a safety score: 'high' (>= 90), 'medium' (>= 70) or 'base'."""
    if score >= 90:
        return "high"
    if score >= 70:
        return "medium"
    return "base"
