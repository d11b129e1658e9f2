"""Configuration module for ECA Advisor."""

from .categories import (
    ContentCategory,
    Tradeoff,
    EncryptionAlgorithm,
    CompressionAlgorithm,
    category_from_mime,
    category_from_extension,
)
from .settings import Config, Preferences

__all__ = [
    "Config",
    "Preferences",
    "ContentCategory",
    "Tradeoff",
    "EncryptionAlgorithm",
    "CompressionAlgorithm",
    "category_from_mime",
    "category_from_extension",
]
