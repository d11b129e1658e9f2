"""Utilities module for ECA Advisor."""

from .logging_config import setup_logging, get_logger, LoggingConfig, Timer
from .exceptions import (
    ErrorCode,
    AdvisorError,
    ConfigurationError,
    InvalidInputError,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "LoggingConfig",
    "Timer",
    "ErrorCode",
    "AdvisorError",
    "ConfigurationError",
    "InvalidInputError",
]
