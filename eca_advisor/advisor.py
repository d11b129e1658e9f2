"""
ECA Advisor
===========

Entry point that wires an open file through content classification and the
recommendation engine.
"""

import os
from typing import BinaryIO, Optional

from eca_advisor.classification import ContentClassifier
from eca_advisor.config.settings import Preferences
from eca_advisor.recommendation import Recommendation, RecommendationEngine
from eca_advisor.utils.exceptions import InvalidInputError
from eca_advisor.utils.logging_config import get_logger

logger = get_logger(__name__)


def file_size(source: BinaryIO) -> int:
    """Determine the size of an open file.

    Uses the descriptor's stat when there is one, otherwise seeks to the end
    and restores the position.

    Returns:
        Size in bytes, 0 when it cannot be determined.
    """
    try:
        return max(os.fstat(source.fileno()).st_size, 0)
    except (AttributeError, OSError, ValueError) as e:
        logger.debug(f"fstat unavailable for size lookup: {e}")

    try:
        position = source.tell()
        try:
            end = source.seek(0, os.SEEK_END)
        finally:
            source.seek(position)
        return max(int(end), 0)
    except (AttributeError, OSError, ValueError, TypeError) as e:
        logger.debug(f"Could not determine file size: {e}")
        return 0


class EcaAdvisor:
    """Recommends encryption and compression algorithms for files.

    Coordinates content classification and candidate scoring. Holds no
    per-file state, so one instance can serve any number of calls.
    """

    def __init__(
        self,
        classifier: Optional[ContentClassifier] = None,
        engine: Optional[RecommendationEngine] = None,
    ):
        self.classifier = classifier or ContentClassifier()
        self.engine = engine or RecommendationEngine()

    def recommend(
        self,
        source: Optional[BinaryIO],
        size_bytes: Optional[int] = None,
        last_used_hours: float = 0,
        attention: float = 0.0,
        prefs: Optional[Preferences] = None,
        name: Optional[str] = None,
    ) -> Recommendation:
        """Recommend algorithms for an open file.

        Args:
            source: Readable, seekable binary handle.
            size_bytes: Externally known size. Derived from the handle when
                missing or not positive.
            last_used_hours: Hours since the file was last used.
            attention: Predicted access likelihood in [0, 1].
            prefs: Caller preferences, defaults if None.
            name: File name for extension lookup, defaults to ``source.name``.

        Returns:
            Recommendation for the file.

        Raises:
            InvalidInputError: If no file handle is given.
        """
        if source is None:
            raise InvalidInputError("file handle is required", argument="source")

        if size_bytes is None or size_bytes <= 0:
            size_bytes = file_size(source)

        classification = self.classifier.classify(source, name)

        return self.engine.recommend(
            size_bytes=size_bytes,
            last_used_hours=last_used_hours,
            attention=attention,
            prefs=prefs,
            classification=classification,
        )


def recommend_algorithms(
    source: Optional[BinaryIO],
    size_bytes: Optional[int] = None,
    last_used_hours: float = 0,
    attention: float = 0.0,
    prefs: Optional[Preferences] = None,
    name: Optional[str] = None,
) -> Recommendation:
    """Recommend algorithms for an open file with default components.

    See ``EcaAdvisor.recommend`` for arguments.
    """
    return EcaAdvisor().recommend(
        source,
        size_bytes=size_bytes,
        last_used_hours=last_used_hours,
        attention=attention,
        prefs=prefs,
        name=name,
    )
