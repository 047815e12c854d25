"""
Safety scoring.
"""

from .safety_scorer import SafetyScorer, score_tier

__all__ = ['SafetyScorer', 'score_tier']
