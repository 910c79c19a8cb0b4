"""EnderCore error types."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Error source categories."""

    COLOR = "COLOR"
    CONFIG = "CONFIG"
    PLUGIN = "PLUGIN"
    SYSTEM = "SYSTEM"


@dataclass
class EnderError(Exception):
    """Structured error with context. Base exception for all EnderCore errors."""

    # Identity
    code: str  # e.g., "INVALID_COLOR_FORMAT"
    category: ErrorCategory

    # Messages
    message: str  # Human-readable summary
    detail: str | None = None  # Extended explanation
    suggestion: str | None = None  # Actionable fix

    # Context
    value: Any = None  # Offending input, if any

    # Metadata
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_dict(self) -> dict[str, Any]:
        """Serialize for diagnostics.

        Returns:
            Dictionary representation of the error
        """
        return {
            "code": self.code,
            "category": self.category.value,
            "message": self.message,
            "detail": self.detail,
            "suggestion": self.suggestion,
            "value": repr(self.value) if self.value is not None else None,
            "timestamp": self.timestamp.isoformat(),
        }


class ColorError(EnderError, ValueError):
    """Raised when a color value cannot be accepted."""


class MissingColorError(ColorError):
    """A hex string or RGB sequence was required but None/empty was given."""


class InvalidColorFormatError(ColorError):
    """A hex string does not match the 3- or 6-digit grammar."""


class InvalidColorChannelError(ColorError):
    """An RGB channel is out of range or the sequence is not 3 long."""


class ConfigError(EnderError):
    """Raised when configuration cannot be loaded or validated."""


class PluginError(EnderError):
    """Raised by the plugin glue layer."""


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    code: str
    category: ErrorCategory
    message_template: str  # "Invalid HEX color format: '{value}'"
    detail_template: str | None = None
    suggestion_template: str | None = None
    error_class: type[EnderError] = EnderError
