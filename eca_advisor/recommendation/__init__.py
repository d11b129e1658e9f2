"""Recommendation module for algorithm selection."""

from .scoring import (
    CompressionScorer,
    EncryptionScorer,
    Selection,
    UsageSignals,
    select_winner,
)
from .engine import Recommendation, RecommendationEngine, recommend_zstd_level

__all__ = [
    "CompressionScorer",
    "EncryptionScorer",
    "Selection",
    "UsageSignals",
    "select_winner",
    "Recommendation",
    "RecommendationEngine",
    "recommend_zstd_level",
]
