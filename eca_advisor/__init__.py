"""
ECA Advisor
===========

Recommends an encryption algorithm, a compression algorithm and a zstd level
for a file from its content type and usage signals.

Features:
- Content classification from a short byte prefix and the file extension
- Weighted scoring of AES-GCM, AES-GCM-SIV and XChaCha20-Poly1305
- Weighted scoring of zip, lzma2, lz4 and zstd with a skip policy for
  already-compressed content

No data is encrypted or compressed; only the choice is made.
"""

__version__ = "0.1.0"

from eca_advisor.advisor import EcaAdvisor, recommend_algorithms
from eca_advisor.classification import ClassificationResult, ContentClassifier
from eca_advisor.config import (
    CompressionAlgorithm,
    ContentCategory,
    EncryptionAlgorithm,
    Preferences,
    Tradeoff,
)
from eca_advisor.recommendation import Recommendation, RecommendationEngine
from eca_advisor.utils.exceptions import InvalidInputError

__all__ = [
    "EcaAdvisor",
    "recommend_algorithms",
    "ClassificationResult",
    "ContentClassifier",
    "CompressionAlgorithm",
    "ContentCategory",
    "EncryptionAlgorithm",
    "Preferences",
    "Tradeoff",
    "Recommendation",
    "RecommendationEngine",
    "InvalidInputError",
]
