"""
Candidate Scoring
=================

Weighted scoring of encryption and compression candidates from usage
signals, content category and preferences. Weights are fixed class
constants; every candidate starts from the same base score.
"""

import math
from dataclasses import dataclass
from typing import Dict, Generic, Optional, Sequence, Tuple, TypeVar

from eca_advisor.config.categories import (
    CompressionAlgorithm,
    ContentCategory,
    EncryptionAlgorithm,
    Tradeoff,
)

BASE_SCORE = 0.1

HOURS_PER_WEEK = 24.0 * 7.0
MAX_RECENCY_WEIGHT = 3.0
BYTES_PER_MB = 1024.0 * 1024.0

T = TypeVar("T")


@dataclass(frozen=True)
class UsageSignals:
    """Caller-supplied usage signals, clamped on construction.

    Attributes:
        size_bytes: File size; negative values become 0.
        last_used_hours: Hours since last use; negative values become 0.
        attention: Predicted access likelihood, clamped into [0, 1].

    NaN in any signal is treated as 0.
    """
    size_bytes: int = 0
    last_used_hours: float = 0.0
    attention: float = 0.0

    def __post_init__(self):
        for name in ("size_bytes", "last_used_hours", "attention"):
            if math.isnan(getattr(self, name)):
                object.__setattr__(self, name, 0)
        if self.size_bytes < 0:
            object.__setattr__(self, "size_bytes", 0)
        if self.last_used_hours < 0:
            object.__setattr__(self, "last_used_hours", 0)
        if self.attention < 0:
            object.__setattr__(self, "attention", 0.0)
        elif self.attention > 1:
            object.__setattr__(self, "attention", 1.0)

    @property
    def size_mb(self) -> float:
        return self.size_bytes / BYTES_PER_MB

    @property
    def recency_weight(self) -> float:
        """Weeks since last use, capped at MAX_RECENCY_WEIGHT."""
        return min(self.last_used_hours / HOURS_PER_WEEK, MAX_RECENCY_WEIGHT)


@dataclass(frozen=True)
class Selection(Generic[T]):
    """Winning candidate and its score."""
    candidate: T
    score: float


def select_winner(
    scores: Dict[T, float],
    priority: Sequence[T],
    fallback: T,
) -> Selection[T]:
    """Pick the highest-scoring candidate.

    Candidates are visited in ``priority`` order and only a strictly higher
    score replaces the current best, so exact ties go to the earlier entry.

    Args:
        scores: Score per candidate.
        priority: Tie-break order, highest priority first.
        fallback: Returned when no candidate beats negative infinity.

    Returns:
        Selection of the winner.
    """
    best: Optional[T] = None
    best_score = float("-inf")

    for candidate in priority:
        score = scores.get(candidate, float("-inf"))
        if score > best_score:
            best = candidate
            best_score = score

    if best is None:
        return Selection(fallback, best_score)
    return Selection(best, best_score)


class EncryptionScorer:
    """Scores authenticated encryption candidates.

    AES-GCM-SIV gains with attention and recency (nonce misuse resistance
    for heavily reused files), AES-GCM with assumed hardware acceleration,
    and XChaCha20-Poly1305 with large files and a speed preference.
    """

    SIV_ATTENTION_WEIGHT = 2.5
    SIV_RECENCY_WEIGHT = 1.2

    GCM_ATTENTION_WEIGHT = 0.6
    GCM_HARDWARE_BONUS = 2.0
    GCM_SOFTWARE_BONUS = 0.6
    GCM_RECENCY_WEIGHT = 0.6

    XCHACHA_LARGE_FILE_MB = 100
    XCHACHA_LARGE_FILE_BONUS = 3.0
    XCHACHA_SPEED_BONUS = 1.2
    XCHACHA_ATTENTION_WEIGHT = 0.8

    PRIORITY: Tuple[EncryptionAlgorithm, ...] = (
        EncryptionAlgorithm.AES256GCM,
        EncryptionAlgorithm.AES256GCMSIV,
        EncryptionAlgorithm.XCHACHA20POLY1305,
    )
    FALLBACK = EncryptionAlgorithm.AES256GCM

    def score(
        self,
        signals: UsageSignals,
        tradeoff: Tradeoff,
        assume_hardware_aes: bool,
    ) -> Dict[EncryptionAlgorithm, float]:
        """Score every encryption candidate.

        Args:
            signals: Clamped usage signals.
            tradeoff: Normalized tradeoff preference.
            assume_hardware_aes: Whether AES acceleration is assumed.

        Returns:
            Score per candidate, in priority order.
        """
        attention = signals.attention
        recency = signals.recency_weight

        siv = BASE_SCORE
        siv += attention * self.SIV_ATTENTION_WEIGHT + recency * self.SIV_RECENCY_WEIGHT

        gcm = BASE_SCORE
        if assume_hardware_aes:
            gcm += attention * self.GCM_ATTENTION_WEIGHT + self.GCM_HARDWARE_BONUS
        else:
            gcm += attention * self.GCM_ATTENTION_WEIGHT + self.GCM_SOFTWARE_BONUS
        gcm += recency * self.GCM_RECENCY_WEIGHT

        xchacha = BASE_SCORE
        if signals.size_mb > self.XCHACHA_LARGE_FILE_MB:
            xchacha += self.XCHACHA_LARGE_FILE_BONUS
        if tradeoff is Tradeoff.SPEED:
            xchacha += self.XCHACHA_SPEED_BONUS
        xchacha += attention * self.XCHACHA_ATTENTION_WEIGHT

        return {
            EncryptionAlgorithm.AES256GCM: gcm,
            EncryptionAlgorithm.AES256GCMSIV: siv,
            EncryptionAlgorithm.XCHACHA20POLY1305: xchacha,
        }

    def select(self, scores: Dict[EncryptionAlgorithm, float]) -> Selection[EncryptionAlgorithm]:
        return select_winner(scores, self.PRIORITY, self.FALLBACK)


class CompressionScorer:
    """Scores compression candidates.

    Already-compressed content only favours lz4. Compressible content is
    scored per tradeoff with size thresholds; very large files favour the
    streaming codecs regardless of category.
    """

    COMPRESSED_LZ4_BONUS = 2.0
    COMPRESSED_PENALTY = -1.2

    TRADEOFF_BONUS = {
        CompressionAlgorithm.LZMA2: {
            Tradeoff.SPEED: 0.6, Tradeoff.BALANCED: 1.6, Tradeoff.RATIO: 3.0,
        },
        CompressionAlgorithm.ZSTD: {
            Tradeoff.SPEED: 1.2, Tradeoff.BALANCED: 2.0, Tradeoff.RATIO: 2.5,
        },
        CompressionAlgorithm.LZ4: {
            Tradeoff.SPEED: 2.2, Tradeoff.BALANCED: 1.0, Tradeoff.RATIO: 0.3,
        },
    }
    ZIP_SPEED_BONUS = 0.6

    LZMA2_LARGE_FILE_MB = 100
    LZMA2_LARGE_FILE_BONUS = 1.2
    ZSTD_LARGE_FILE_MB = 50
    ZSTD_LARGE_FILE_BONUS = 1.0
    SMALL_FILE_MB = 10
    LZ4_SMALL_FILE_BONUS = 0.6
    ZIP_SMALL_FILE_BONUS = 1.2

    HUGE_FILE_MB = 500
    HUGE_FILE_BONUS = 1.2
    HUGE_FILE_CODECS = frozenset({CompressionAlgorithm.ZSTD, CompressionAlgorithm.LZ4})

    PRIORITY: Tuple[CompressionAlgorithm, ...] = (
        CompressionAlgorithm.LZMA2,
        CompressionAlgorithm.ZSTD,
        CompressionAlgorithm.LZ4,
        CompressionAlgorithm.ZIP,
    )
    FALLBACK = CompressionAlgorithm.LZ4

    def score(
        self,
        signals: UsageSignals,
        tradeoff: Tradeoff,
        category: ContentCategory,
    ) -> Dict[CompressionAlgorithm, float]:
        """Score every compression candidate.

        Args:
            signals: Clamped usage signals.
            tradeoff: Normalized tradeoff preference.
            category: Content category of the file.

        Returns:
            Score per candidate, in priority order.
        """
        size_mb = signals.size_mb
        scores = {}

        for candidate in self.PRIORITY:
            score = BASE_SCORE
            if category.is_already_compressed:
                if candidate is CompressionAlgorithm.LZ4:
                    score += self.COMPRESSED_LZ4_BONUS
                else:
                    score += self.COMPRESSED_PENALTY
            else:
                score = self._score_compressible(candidate, score, size_mb, tradeoff)

            if size_mb > self.HUGE_FILE_MB and candidate in self.HUGE_FILE_CODECS:
                score += self.HUGE_FILE_BONUS
            scores[candidate] = score

        return scores

    def _score_compressible(
        self,
        candidate: CompressionAlgorithm,
        score: float,
        size_mb: float,
        tradeoff: Tradeoff,
    ) -> float:
        if candidate is CompressionAlgorithm.ZIP:
            if size_mb < self.SMALL_FILE_MB:
                score += self.ZIP_SMALL_FILE_BONUS
            if tradeoff is Tradeoff.SPEED:
                score += self.ZIP_SPEED_BONUS
            return score

        score += self.TRADEOFF_BONUS[candidate][tradeoff]

        if candidate is CompressionAlgorithm.LZMA2:
            if size_mb > self.LZMA2_LARGE_FILE_MB:
                score += self.LZMA2_LARGE_FILE_BONUS
        elif candidate is CompressionAlgorithm.ZSTD:
            if size_mb > self.ZSTD_LARGE_FILE_MB:
                score += self.ZSTD_LARGE_FILE_BONUS
        elif candidate is CompressionAlgorithm.LZ4:
            if size_mb < self.SMALL_FILE_MB:
                score += self.LZ4_SMALL_FILE_BONUS

        return score

    def select(self, scores: Dict[CompressionAlgorithm, float]) -> Selection[CompressionAlgorithm]:
        return select_winner(scores, self.PRIORITY, self.FALLBACK)
