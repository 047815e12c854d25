"""
Per-route safety evaluation.
"""

from .route_evaluator import RouteEvaluator

__all__ = ['RouteEvaluator']
