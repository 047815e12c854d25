"""
Safe Walk Routing

Compares candidate walking routes between two points and labels them by
their safety versus distance trade-off.

## Quick Start

```python
from safe_walk_routing import RouteSafetyPipeline, RoutingConfig
from safe_walk_routing.data import Coordinate
from safe_walk_routing.providers import (
    GoogleDirectionsProvider, GooglePlacesDirectory, create_maps_client
)

config = RoutingConfig.from_env()
client = create_maps_client(config)

pipeline = RouteSafetyPipeline(
    directory=GooglePlacesDirectory(client, open_now=config.open_now),
    config=config,
    route_provider=GoogleDirectionsProvider(client, config.max_alternatives)
)

result = pipeline.find_safe_routes(
    Coordinate(43.6426, -79.3871),
    Coordinate(43.6452, -79.3806)
)
for labeled, raw in zip(result.labeled_routes, result.routes):
    print(labeled.label.value, labeled.route.safety_score, raw.distance_text)
```

## Main Components

- **PolylineSampler**: uniform arc-length sampling along a route
- **NearbyEntityAggregator**: concurrent nearby lookups, dedup, categorization
- **SafetyScorer**: bounded composite score from entity counts
- **RouteEvaluator**: sample, aggregate and score one route
- **RouteClassifier**: Safest / Shortest / Neutral labeling
- **RouteSafetyPipeline**: batch orchestration

## Architecture

- `algorithms/`: sampling, aggregation, scoring, evaluation, classification
- `providers/`: Route Provider and Nearby Entity Directory adapters
- `data/`: data types and distance utilities
- `visualization/`: GeoJSON output for map rendering
- `config/`: configuration management
"""

from .algorithms import (
    PolylineSampler,
    NearbyEntityAggregator,
    SafetyScorer,
    RouteEvaluator,
    RouteClassifier,
    RouteSafetyPipeline
)
from .config import RoutingConfig

# Version information
__version__ = "1.0.0"

# Public API
__all__ = [
    'PolylineSampler',
    'NearbyEntityAggregator',
    'SafetyScorer',
    'RouteEvaluator',
    'RouteClassifier',
    'RouteSafetyPipeline',
    'RoutingConfig'
]
