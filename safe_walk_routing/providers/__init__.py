"""
External service adapters for route safety scoring.

This module contains:
- Route Provider and Nearby Entity Directory interfaces
- Google Directions and Google Places implementations
- Provider error types
"""

from .base import RouteProvider, NearbyEntityDirectory
from .errors import (
    RouteProviderError,
    NoRoutesFound,
    ProviderUnavailable,
    ProviderNetworkError,
    DirectoryLookupFailed
)
from .google_client import create_maps_client
from .google_directions import GoogleDirectionsProvider
from .google_places import GooglePlacesDirectory

__all__ = [
    'RouteProvider',
    'NearbyEntityDirectory',
    'RouteProviderError',
    'NoRoutesFound',
    'ProviderUnavailable',
    'ProviderNetworkError',
    'DirectoryLookupFailed',
    'create_maps_client',
    'GoogleDirectionsProvider',
    'GooglePlacesDirectory'
]
