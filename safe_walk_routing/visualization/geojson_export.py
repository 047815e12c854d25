"""
GeoJSON export of labeled routes for map rendering.
"""

import logging
from typing import Any, Dict, List, Optional

import geojson
from shapely.geometry import LineString

from ..algorithms.scoring.safety_scorer import score_tier
from ..data.models import BatchResult, LabeledRoute, RawRoute

logger = logging.getLogger(__name__)


def route_bounds(route: RawRoute) -> Optional[Dict[str, float]]:
    """Bounding box of a route path, or None when the path has fewer than two vertices."""
    if len(route.geometry.path) < 2:
        return None

    line = LineString([(c.longitude, c.latitude) for c in route.geometry.path])
    lon_min, lat_min, lon_max, lat_max = line.bounds
    return {
        'lat_min': lat_min,
        'lat_max': lat_max,
        'lon_min': lon_min,
        'lon_max': lon_max
    }


def route_to_features(labeled: LabeledRoute, route: RawRoute) -> List[geojson.Feature]:
    """
    Convert one labeled route into GeoJSON features.

    Args:
        labeled: Classifier output for the route
        route: Raw route with the same route_index

    Returns:
        The route line followed by one point per safety entity
    """
    scored = labeled.route
    geojson_coords = [[c.longitude, c.latitude] for c in route.geometry.path]

    if len(geojson_coords) >= 2:
        geometry = geojson.LineString(geojson_coords)
    elif geojson_coords:
        geometry = geojson.Point(geojson_coords[0])
    else:
        geometry = None

    line_feature = geojson.Feature(
        geometry=geometry,
        properties={
            "type": "route",
            "label": labeled.label.value,
            "route_index": scored.route_index,
            "safety_score": scored.safety_score,
            "score_tier": score_tier(scored.safety_score),
            "distance_m": scored.distance_meters,
            "duration": scored.duration_text,
            "summary": route.summary,
            "bounds": route_bounds(route)
        }
    )

    features = [line_feature]
    for entity in scored.entities:
        features.append(geojson.Feature(
            geometry=geojson.Point([entity.location.longitude, entity.location.latitude]),
            properties={
                "type": entity.category.value,
                "name": entity.display_name,
                "route_index": scored.route_index,
                "label": labeled.label.value
            }
        ))
    return features


def batch_to_geojson(result: BatchResult) -> Dict[str, Any]:
    """
    Convert a batch result to a GeoJSON FeatureCollection.

    Args:
        result: Pipeline output with aligned labeled and raw routes

    Returns:
        GeoJSON FeatureCollection
    """
    features: List[geojson.Feature] = []
    for labeled, route in zip(result.labeled_routes, result.routes):
        features.extend(route_to_features(labeled, route))

    logger.debug(f"Exported {len(result.labeled_routes)} routes as {len(features)} GeoJSON features")
    return geojson.FeatureCollection(features)
