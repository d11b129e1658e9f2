"""
Content Sniffing
================

Detects a MIME type from a file's leading bytes with python-magic (libmagic).
Content that cannot be identified is reported as application/octet-stream.
"""

from typing import Optional

from eca_advisor.utils.logging_config import get_logger

logger = get_logger(__name__)

OCTET_STREAM = "application/octet-stream"

# Lazy import for python-magic
magic = None


def _import_magic():
    """Lazy import python-magic."""
    global magic
    if magic is None:
        import magic as _magic
        magic = _magic
    return magic


class MimeSniffer:
    """MIME detection over an in-memory content prefix."""

    def __init__(self):
        self._magic = None

    def _get_magic(self):
        """Get magic instance for MIME detection."""
        if self._magic is None:
            try:
                self._magic = _import_magic().Magic(mime=True)
            except Exception as e:
                logger.warning(f"python-magic not available: {e}")
                self._magic = False
        return self._magic if self._magic is not False else None

    def sniff(self, data: bytes) -> str:
        """Detect the MIME type of ``data``.

        Args:
            data: Leading bytes of the file.

        Returns:
            MIME type string. Empty input, an unavailable libmagic and
            detection errors all give application/octet-stream.
        """
        if not data:
            return OCTET_STREAM

        magic_instance = self._get_magic()
        if magic_instance is None:
            return OCTET_STREAM

        try:
            mime_type: Optional[str] = magic_instance.from_buffer(data)
        except Exception as e:
            logger.debug(f"MIME detection failed: {e}")
            return OCTET_STREAM

        return mime_type or OCTET_STREAM
