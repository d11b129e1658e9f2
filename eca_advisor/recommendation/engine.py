"""
Recommendation Engine
=====================

Turns a content classification plus usage signals and preferences into an
encryption choice, a compression choice and, for zstd, a compression level.
The engine is a pure function of its inputs.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from eca_advisor.classification.content_classifier import ClassificationResult
from eca_advisor.config.categories import (
    CompressionAlgorithm,
    ContentCategory,
    EncryptionAlgorithm,
    Tradeoff,
)
from eca_advisor.config.settings import Preferences
from eca_advisor.recommendation.scoring import (
    CompressionScorer,
    EncryptionScorer,
    UsageSignals,
)
from eca_advisor.utils.logging_config import get_logger

logger = get_logger(__name__)

SKIP_SCORE_THRESHOLD = 0.5

ZSTD_MIN_LEVEL = 1
ZSTD_MAX_LEVEL = 22
ZSTD_DEFAULT_LEVEL = 3


@dataclass(frozen=True)
class Recommendation:
    """Recommended algorithms for one file.

    Attributes:
        encryption: Winning encryption algorithm.
        compression: Winning compression algorithm, NONE when skipped.
        zstd_level: zstd level when compression is zstd, otherwise None.
        skip_compression: Whether compression was skipped for the category.
        score_breakdown: Score per candidate keyed "enc_<name>"/"comp_<name>".
        reason: Human-readable explanation.
        detected_mime: MIME type from classification.
        detected_category: Content category from classification.
    """
    encryption: EncryptionAlgorithm
    compression: CompressionAlgorithm
    zstd_level: Optional[int]
    skip_compression: bool
    score_breakdown: Mapping[str, float] = field(default_factory=dict)
    reason: str = ""
    detected_mime: str = ""
    detected_category: ContentCategory = ContentCategory.BINARY

    def __post_init__(self):
        object.__setattr__(
            self, "score_breakdown", MappingProxyType(dict(self.score_breakdown))
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "encryption": self.encryption.value,
            "compression": self.compression.value,
            "zstd_level": self.zstd_level,
            "skip_compression": self.skip_compression,
            "score_breakdown": dict(self.score_breakdown),
            "reason": self.reason,
            "detected_mime": self.detected_mime,
            "detected_category": self.detected_category.value,
        }


def recommend_zstd_level(tradeoff: Tradeoff, size_mb: float) -> int:
    """Pick a zstd level for a tradeoff and file size.

    Balanced files above 200MB drop back to the small-file level.

    Args:
        tradeoff: Normalized tradeoff preference.
        size_mb: File size in megabytes.

    Returns:
        Level clamped into [1, 22].
    """
    if tradeoff is Tradeoff.SPEED:
        level = 1
    elif tradeoff is Tradeoff.BALANCED:
        if size_mb > 200:
            level = 3
        elif size_mb > 50:
            level = 5
        else:
            level = 3
    elif tradeoff is Tradeoff.RATIO:
        if size_mb > 500:
            level = 12
        elif size_mb > 200:
            level = 9
        else:
            level = 7
    else:
        level = ZSTD_DEFAULT_LEVEL

    return max(ZSTD_MIN_LEVEL, min(level, ZSTD_MAX_LEVEL))


class RecommendationEngine:
    """Scores candidates and applies the skip and level policies."""

    def __init__(
        self,
        encryption_scorer: Optional[EncryptionScorer] = None,
        compression_scorer: Optional[CompressionScorer] = None,
    ):
        """Initialize the engine.

        Args:
            encryption_scorer: Encryption scorer, default weights if None.
            compression_scorer: Compression scorer, default weights if None.
        """
        self.encryption_scorer = encryption_scorer or EncryptionScorer()
        self.compression_scorer = compression_scorer or CompressionScorer()

    def recommend(
        self,
        size_bytes: int,
        last_used_hours: float,
        attention: float,
        prefs: Optional[Preferences],
        classification: ClassificationResult,
    ) -> Recommendation:
        """Recommend algorithms for a classified file.

        Args:
            size_bytes: File size in bytes; negative values count as 0.
            last_used_hours: Hours since last use; negative values count as 0.
            attention: Predicted access likelihood, clamped into [0, 1].
            prefs: Caller preferences, defaults if None.
            classification: Result of content classification.

        Returns:
            Recommendation for the file.
        """
        prefs = prefs or Preferences()
        tradeoff = Tradeoff.parse(prefs.tradeoff)
        signals = UsageSignals(
            size_bytes=size_bytes,
            last_used_hours=last_used_hours,
            attention=attention,
        )
        category = classification.category

        enc_scores = self.encryption_scorer.score(
            signals, tradeoff, prefs.assume_hardware_aes
        )
        enc = self.encryption_scorer.select(enc_scores)

        comp_scores = self.compression_scorer.score(signals, tradeoff, category)
        comp = self.compression_scorer.select(comp_scores)

        breakdown = {f"enc_{alg.value}": score for alg, score in enc_scores.items()}
        breakdown.update(
            {f"comp_{alg.value}": score for alg, score in comp_scores.items()}
        )

        if self._should_skip(category, comp.candidate, comp.score, tradeoff):
            compression = CompressionAlgorithm.NONE
            skip = True
            reason = (
                f"File category '{category.value}' is likely already compressed; "
                f"skipping compression."
            )
        else:
            compression = comp.candidate
            skip = False
            reason = (
                f"Selected encryption: {enc.candidate.value} (score {enc.score:.2f}), "
                f"compression: {compression.value} (score {comp.score:.2f})"
            )

        zstd_level = None
        if compression is CompressionAlgorithm.ZSTD:
            zstd_level = recommend_zstd_level(tradeoff, signals.size_mb)

        logger.debug(
            f"Recommendation: {enc.candidate.value}/{compression.value} "
            f"for {category.value} ({signals.size_mb:.2f} MB, {tradeoff.value})",
            extra={"category": category.value},
        )

        return Recommendation(
            encryption=enc.candidate,
            compression=compression,
            zstd_level=zstd_level,
            skip_compression=skip,
            score_breakdown=breakdown,
            reason=reason,
            detected_mime=classification.mime_type,
            detected_category=category,
        )

    @staticmethod
    def _should_skip(
        category: ContentCategory,
        winner: CompressionAlgorithm,
        winner_score: float,
        tradeoff: Tradeoff,
    ) -> bool:
        """Decide whether compression is pointless for the content."""
        if not category.is_already_compressed:
            return False
        if winner_score < SKIP_SCORE_THRESHOLD:
            return True
        return winner is CompressionAlgorithm.LZ4 and tradeoff is not Tradeoff.RATIO
