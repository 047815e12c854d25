"""
Configuration management for route safety scoring parameters.
"""

import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv


@dataclass
class RoutingConfig:
    """Configuration parameters for the route safety scoring pipeline."""

    # Sampling
    sample_count: int = 6  # points sampled along each route
    search_radius_m: float = 800.0  # meters - nearby search radius per sample point

    # Nearby Entity Directory
    search_keywords: List[str] = field(default_factory=lambda: [
        'police',
        'hospital',
        'supermarket',
        'pharmacy',
        'cafe',
        'convenience_store',
        'active',
        'establishment',
        'point_of_interest',
        'building',
    ])
    store_types: List[str] = field(default_factory=lambda: [
        'store',
        'shopping_mall',
        'clothing_store',
        'grocery_or_supermarket',
        'pharmacy',
        'cafe',
        'restaurant',
        'convenience_store',
    ])
    open_now: bool = True  # only count places that are currently open
    max_entities: int = 25  # cap on entities returned per route

    # Safety Score
    score_floor: float = 50.0
    score_ceiling: float = 100.0
    score_base: float = 40.0
    density_cap: float = 30.0
    store_weight: float = 1.5
    building_weight: float = 0.5
    police_bonus: float = 20.0
    hospital_bonus: float = 10.0

    # Concurrency and timeouts
    request_timeout_s: float = 10.0  # per directory/provider HTTP request
    aggregation_timeout_s: float = 20.0  # join barrier for one route's lookups
    max_lookup_workers: int = 6
    max_route_workers: int = 3

    # Route Provider
    max_alternatives: int = 3
    google_maps_api_key: Optional[str] = None

    def validate(self) -> None:
        """Validate configuration parameters."""
        if self.sample_count < 1:
            raise ValueError("sample_count must be at least 1")
        if self.search_radius_m <= 0:
            raise ValueError("search_radius_m must be positive")
        if self.max_entities < 0:
            raise ValueError("max_entities must not be negative")
        if not 0 <= self.score_floor <= self.score_ceiling <= 100:
            raise ValueError("score bounds must satisfy 0 <= floor <= ceiling <= 100")
        if self.density_cap < 0:
            raise ValueError("density_cap must not be negative")
        if min(self.store_weight, self.building_weight, self.police_bonus, self.hospital_bonus) < 0:
            raise ValueError("score weights and bonuses must not be negative")
        if self.request_timeout_s <= 0 or self.aggregation_timeout_s <= 0:
            raise ValueError("timeouts must be positive")
        if self.max_lookup_workers < 1 or self.max_route_workers < 1:
            raise ValueError("worker counts must be at least 1")
        if self.max_alternatives < 1:
            raise ValueError("max_alternatives must be at least 1")

    @classmethod
    def from_env(cls) -> 'RoutingConfig':
        """
        Create configuration from environment variables.

        Reads GOOGLE_MAPS_API_KEY, ROUTING_REQUEST_TIMEOUT_S and
        ROUTING_AGGREGATION_TIMEOUT_S, loading a .env file first if present.
        """
        load_dotenv()
        config = cls(google_maps_api_key=os.getenv("GOOGLE_MAPS_API_KEY") or None)

        request_timeout = os.getenv("ROUTING_REQUEST_TIMEOUT_S")
        if request_timeout:
            config.request_timeout_s = float(request_timeout)

        aggregation_timeout = os.getenv("ROUTING_AGGREGATION_TIMEOUT_S")
        if aggregation_timeout:
            config.aggregation_timeout_s = float(aggregation_timeout)

        config.validate()
        return config

    @classmethod
    def create_default_config(cls) -> 'RoutingConfig':
        """Create the standard configuration (6 samples, 800m radius)."""
        return cls()

    @classmethod
    def create_fast_config(cls) -> 'RoutingConfig':
        """Create configuration that trades coverage for fewer directory calls."""
        return cls(
            sample_count=3,
            search_radius_m=600.0,
            aggregation_timeout_s=10.0,
            max_lookup_workers=3
        )

    @classmethod
    def create_thorough_config(cls) -> 'RoutingConfig':
        """
        Create configuration for long routes.

        Samples more densely so that stretches between sample points stay
        covered by the search radius.
        """
        return cls(
            sample_count=10,
            max_lookup_workers=10,
            aggregation_timeout_s=30.0
        )
