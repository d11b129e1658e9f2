"""Classification module for content categorization."""

from .content_classifier import (
    ContentClassifier,
    ClassificationResult,
    read_prefix,
)
from .content_sniffer import MimeSniffer

__all__ = [
    "ContentClassifier",
    "ClassificationResult",
    "MimeSniffer",
    "read_prefix",
]
