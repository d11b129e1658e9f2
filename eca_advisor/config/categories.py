"""
Category Definitions
====================

Defines content categories, tradeoff preferences and the algorithm names the
recommendation engine chooses between, plus the extension tables used when
classifying files.
"""

from enum import Enum
from typing import FrozenSet, Optional, Union


class ContentCategory(Enum):
    """Coarse content categories used to bias compression scoring."""
    TEXT = "text"
    IMAGE = "image"
    AUDIO = "audio"
    VIDEO = "video"
    ARCHIVE = "archive"
    BINARY = "binary"

    @property
    def is_already_compressed(self) -> bool:
        """Whether content of this category is usually stored compressed."""
        return self in ALREADY_COMPRESSED_CATEGORIES


class Tradeoff(Enum):
    """User preference between speed and compression ratio."""
    SPEED = "speed"
    RATIO = "ratio"
    BALANCED = "balanced"

    @classmethod
    def parse(cls, value: Optional[Union[str, "Tradeoff"]]) -> "Tradeoff":
        """Normalize a tradeoff value.

        Args:
            value: Tradeoff instance or name, case and whitespace insensitive.

        Returns:
            Matching Tradeoff, BALANCED for anything unrecognized.
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return cls.BALANCED
        try:
            return cls(value.strip().lower())
        except ValueError:
            return cls.BALANCED


class EncryptionAlgorithm(Enum):
    """Authenticated encryption candidates."""
    AES256GCM = "aes256gcm"
    AES256GCMSIV = "aes256gcmsiv"
    XCHACHA20POLY1305 = "xchacha20poly1305"


class CompressionAlgorithm(Enum):
    """Compression candidates. NONE is only produced by the skip policy."""
    ZIP = "zip"
    LZMA2 = "lzma2"
    LZ4 = "lz4"
    ZSTD = "zstd"
    NONE = "none"


ALREADY_COMPRESSED_CATEGORIES: FrozenSet[ContentCategory] = frozenset({
    ContentCategory.IMAGE,
    ContentCategory.VIDEO,
    ContentCategory.AUDIO,
    ContentCategory.ARCHIVE,
})

# Extensions that force the text category regardless of MIME type
TEXT_EXTENSIONS: FrozenSet[str] = frozenset({
    ".txt", ".md", ".csv", ".log", ".json", ".xml", ".yaml", ".yml",
})

SOURCE_CODE_EXTENSIONS: FrozenSet[str] = frozenset({
    ".go", ".py", ".c", ".cpp", ".h", ".hpp", ".java", ".js", ".ts",
    ".jsx", ".tsx", ".cs", ".rs", ".rb", ".php", ".swift", ".kt",
    ".scala", ".sh", ".sql",
})

# Extensions that force the archive category regardless of MIME type
ARCHIVE_FALLBACK_EXTENSIONS: FrozenSet[str] = frozenset({".pdf"})

# MIME substrings that mark archive formats
ARCHIVE_MIME_MARKERS = ("zip", "compressed", "x-rar", "7z", "tar")


def category_from_mime(mime_type: str) -> ContentCategory:
    """Derive a coarse category from a MIME type string.

    Args:
        mime_type: MIME type, parameters such as charset are allowed.

    Returns:
        ContentCategory for the MIME type, BINARY if nothing matches.
    """
    low = mime_type.lower()

    if low.startswith("text/"):
        return ContentCategory.TEXT
    if low.startswith("image/"):
        return ContentCategory.IMAGE
    if low.startswith("audio/"):
        return ContentCategory.AUDIO
    if low.startswith("video/"):
        return ContentCategory.VIDEO
    if any(marker in low for marker in ARCHIVE_MIME_MARKERS):
        return ContentCategory.ARCHIVE

    return ContentCategory.BINARY


def category_from_extension(extension: str) -> Optional[ContentCategory]:
    """Get the forced category for an extension, if it has one."""
    ext_lower = extension.lower()

    if ext_lower in TEXT_EXTENSIONS or ext_lower in SOURCE_CODE_EXTENSIONS:
        return ContentCategory.TEXT
    if ext_lower in ARCHIVE_FALLBACK_EXTENSIONS:
        return ContentCategory.ARCHIVE

    return None
