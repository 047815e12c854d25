"""
Route labeling and pruning.
"""

from .route_classifier import RouteClassifier

__all__ = ['RouteClassifier']
