"""
Rendering output for labeled routes.
"""

from .geojson_export import batch_to_geojson, route_to_features, route_bounds

__all__ = ['batch_to_geojson', 'route_to_features', 'route_bounds']
