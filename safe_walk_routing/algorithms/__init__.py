"""
Route safety scoring algorithms.

This module contains:
- Polyline sampling
- Nearby entity aggregation and categorization
- Safety scoring, per-route evaluation and batch labeling
"""

from .sampling.polyline_sampler import PolylineSampler
from .aggregation.nearby_entity_aggregator import NearbyEntityAggregator, categorize_place
from .scoring.safety_scorer import SafetyScorer, score_tier
from .evaluation.route_evaluator import RouteEvaluator
from .classification.route_classifier import RouteClassifier
from .optimization.safety_pipeline import RouteSafetyPipeline

__all__ = [
    'PolylineSampler',
    'NearbyEntityAggregator',
    'categorize_place',
    'SafetyScorer',
    'score_tier',
    'RouteEvaluator',
    'RouteClassifier',
    'RouteSafetyPipeline'
]
