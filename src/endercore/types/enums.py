"""Shared enumerations for EnderCore."""

import logging
from enum import Enum


class LogLevel(str, Enum):
    """Log severity accepted by EnderLogger.log()."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"

    def to_logging(self) -> int:
        """Return the matching stdlib logging level."""
        return _STDLIB_LEVELS[self]


_STDLIB_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}


class LoggerState(str, Enum):
    """Lifecycle state of an EnderLogger."""

    UNINITIALIZED = "uninitialized"
    CONFIGURED = "configured"
    ACTIVE = "active"
