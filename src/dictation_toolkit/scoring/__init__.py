"""
Module: scoring

Purpose:
    Grading-time scoring of gap responses. Supports exact and
    similarity (normalized Levenshtein) policies, several accepted
    answers per gap, and uniform or length-weighted aggregation.

Key Functions:
    - score_gap(): Best score over a gap's alternatives
    - score_all(): Weighted aggregate over all gaps
    - build_feedback(): Per-gap feedback rows

Key Classes:
    - ScoringConfig: Policy, weighting and correctness threshold
"""

from .config import ScoringConfig, ScoringPolicy, Weighting
from .distance import levenshtein_distance, normalize, similarity
from .feedback import GapFeedback, build_feedback
from .scorer import gap_weight, score_all, score_gap

__all__ = [
    # Config
    "ScoringConfig",
    "ScoringPolicy",
    "Weighting",
    # Distance
    "levenshtein_distance",
    "normalize",
    "similarity",
    # Scoring
    "gap_weight",
    "score_all",
    "score_gap",
    # Feedback
    "GapFeedback",
    "build_feedback",
]
