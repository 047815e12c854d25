"""
Construction of Google Maps Platform clients.
"""

import logging

import googlemaps

from ..config.routing_config import RoutingConfig
from .errors import ProviderUnavailable

logger = logging.getLogger(__name__)


def create_maps_client(config: RoutingConfig) -> googlemaps.Client:
    """
    Create a Google Maps client bounded by the configured request timeout.

    Args:
        config: Routing configuration holding the API key and timeouts

    Returns:
        A new googlemaps.Client

    Raises:
        ProviderUnavailable: If no API key is configured or the key is rejected
    """
    if not config.google_maps_api_key:
        raise ProviderUnavailable(
            "Google Maps API key is not configured. Set GOOGLE_MAPS_API_KEY."
        )

    try:
        return googlemaps.Client(
            key=config.google_maps_api_key,
            timeout=config.request_timeout_s,
            retry_timeout=config.request_timeout_s,
            retry_over_query_limit=False
        )
    except ValueError as e:
        logger.error(f"Google Maps client rejected configuration: {e}")
        raise ProviderUnavailable(f"Google Maps client is misconfigured: {e}") from e
