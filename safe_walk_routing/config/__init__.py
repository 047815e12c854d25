"""
Configuration management for route safety scoring.
"""

from .routing_config import RoutingConfig

__all__ = ['RoutingConfig']
