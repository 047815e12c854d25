"""
Batch route safety pipeline.
"""

from .safety_pipeline import RouteSafetyPipeline

__all__ = ['RouteSafetyPipeline']
