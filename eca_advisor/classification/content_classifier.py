"""
Content Classification
======================

Classifies a file into a MIME type and coarse content category from a short
content prefix and the file's extension. The extension mapping wins over
sniffed content when both are available.
"""

import mimetypes
import os
from dataclasses import dataclass
from typing import Any, BinaryIO, Dict, Optional

from eca_advisor.config.categories import (
    ContentCategory,
    category_from_extension,
    category_from_mime,
)
from eca_advisor.classification.content_sniffer import OCTET_STREAM, MimeSniffer
from eca_advisor.utils.logging_config import get_logger

logger = get_logger(__name__)

SNIFF_LENGTH = 512

# Types missing from the interpreter's built-in table on some versions
EXTRA_EXTENSION_TYPES = {
    ".md": "text/markdown",
    ".markdown": "text/markdown",
    ".log": "text/plain",
    ".yaml": "application/yaml",
    ".yml": "application/yaml",
    ".gz": "application/gzip",
    ".tgz": "application/x-compressed-tar",
    ".bz2": "application/x-bzip2",
    ".7z": "application/x-7z-compressed",
    ".rar": "application/x-rar-compressed",
    ".webp": "image/webp",
    ".heic": "image/heic",
    ".flac": "audio/flac",
    ".ogg": "audio/ogg",
    ".opus": "audio/ogg",
    ".m4a": "audio/mp4",
    ".mkv": "video/x-matroska",
    ".webm": "video/webm",
}


@dataclass(frozen=True)
class ClassificationResult:
    """Result of content classification.

    Attributes:
        mime_type: Final MIME type (extension mapping over sniffed content).
        category: Coarse content category.
    """
    mime_type: str
    category: ContentCategory

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "mime_type": self.mime_type,
            "category": self.category.value,
        }


FALLBACK_RESULT = ClassificationResult(OCTET_STREAM, ContentCategory.BINARY)


def _build_mime_table() -> mimetypes.MimeTypes:
    # A fresh MimeTypes only holds the built-in defaults, not /etc/mime.types
    table = mimetypes.MimeTypes()
    for extension, mime_type in EXTRA_EXTENSION_TYPES.items():
        table.add_type(mime_type, extension)
    return table


def read_prefix(source: BinaryIO, length: int = SNIFF_LENGTH) -> bytes:
    """Read up to ``length`` bytes from offset 0 of ``source``.

    The handle's position is restored afterwards. A short read is not an
    error.

    Raises:
        OSError: If the handle cannot be read.
        ValueError: If the handle is closed.
    """
    position = source.tell()
    try:
        source.seek(0)
        data = source.read(length)
    finally:
        source.seek(position)

    if data is None:
        return b""
    if isinstance(data, str):
        data = data.encode("utf-8", errors="replace")
    return bytes(data[:length])


def source_name(source: Any) -> str:
    """Best-effort file name of a handle, empty when unknown."""
    name = getattr(source, "name", "")
    if isinstance(name, (str, bytes, os.PathLike)):
        return os.fsdecode(name)
    return ""


class ContentClassifier:
    """Extension and content-sniffing based classifier.

    Reads a bounded prefix of the file, sniffs a baseline MIME type, lets a
    known extension override it, then maps the result onto a coarse
    category.
    """

    def __init__(self, sniff_length: int = SNIFF_LENGTH, sniffer: Optional[MimeSniffer] = None):
        """Initialize classifier.

        Args:
            sniff_length: Number of leading bytes used for sniffing.
            sniffer: Content MIME detector. Uses python-magic if None.
        """
        self.sniff_length = sniff_length
        self.sniffer = sniffer or MimeSniffer()
        self._mime_table = _build_mime_table()

    def classify(self, source: BinaryIO, name: Optional[str] = None) -> ClassificationResult:
        """Classify an open file.

        Args:
            source: Readable, seekable binary handle.
            name: File name used for the extension. Defaults to the handle's
                ``name`` attribute.

        Returns:
            ClassificationResult. Read failures degrade to
            application/octet-stream / binary instead of raising.
        """
        if name is None:
            name = source_name(source)

        try:
            prefix = read_prefix(source, self.sniff_length)
        except (OSError, ValueError) as e:
            logger.warning(
                f"Could not read content prefix of {name or '<unnamed>'}: {e}",
                extra={"file_path": name},
            )
            return FALLBACK_RESULT

        mime_type = self.sniffer.sniff(prefix)

        extension = os.path.splitext(name)[1].lower()
        if extension:
            mapped = self.mime_type_for_extension(extension)
            if mapped:
                mime_type = mapped

        category = category_from_mime(mime_type)
        forced = category_from_extension(extension)
        if forced is not None:
            category = forced

        logger.debug(
            f"Classified {name or '<unnamed>'} -> {mime_type} ({category.value})",
            extra={"file_path": name, "category": category.value},
        )

        return ClassificationResult(mime_type=mime_type, category=category)

    def mime_type_for_extension(self, extension: str) -> Optional[str]:
        """Look up the MIME type registered for an extension.

        Args:
            extension: Extension including the dot (e.g., ".json").

        Returns:
            MIME type string or None.
        """
        ext_lower = extension.lower()
        return (
            self._mime_table.types_map[True].get(ext_lower)
            or self._mime_table.types_map[False].get(ext_lower)
        )
