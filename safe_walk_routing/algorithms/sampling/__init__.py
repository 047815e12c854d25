"""
Route geometry sampling.
"""

from .polyline_sampler import PolylineSampler

__all__ = ['PolylineSampler']
