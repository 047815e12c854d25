"""
Nearby entity aggregation.
"""

from .nearby_entity_aggregator import NearbyEntityAggregator, categorize_place, place_identity

__all__ = ['NearbyEntityAggregator', 'categorize_place', 'place_identity']
