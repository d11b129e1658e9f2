"""
Shared fixtures for ECA Advisor tests.
"""

import io
import logging

import pytest

from eca_advisor.classification import ClassificationResult
from eca_advisor.config.categories import ContentCategory
from eca_advisor.utils.logging_config import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo handler changes made by setup_logging between tests."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root_logger.handlers):
        handler.close()
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture
def classified():
    """Factory for classification results of a given category."""
    def _make(category: ContentCategory, mime_type: str = "application/octet-stream"):
        return ClassificationResult(mime_type=mime_type, category=category)
    return _make


@pytest.fixture
def png_bytes():
    """Minimal PNG header."""
    return b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class FailingSource:
    """File-like object whose reads always fail."""

    name = "broken.dat"

    def tell(self):
        return 0

    def seek(self, offset, whence=0):
        return 0

    def read(self, size=-1):
        raise OSError("device not ready")


@pytest.fixture
def failing_source():
    return FailingSource()


@pytest.fixture
def text_source():
    """In-memory text file."""
    return io.BytesIO(b"The quick brown fox jumps over the lazy dog.\n" * 4)
