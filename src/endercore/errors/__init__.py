"""EnderCore error handling - Structured errors with context."""

from .errors import (
    ColorError,
    ConfigError,
    EnderError,
    ErrorCategory,
    ErrorTemplate,
    InvalidColorChannelError,
    InvalidColorFormatError,
    MissingColorError,
    PluginError,
)
from .factory import ErrorFactory, create_error, get_error_factory
from .registry import ErrorRegistry

__all__ = [
    # Core error types
    "EnderError",
    "ErrorCategory",
    "ErrorTemplate",
    "ColorError",
    "MissingColorError",
    "InvalidColorFormatError",
    "InvalidColorChannelError",
    "ConfigError",
    "PluginError",
    # Registry and factory
    "ErrorRegistry",
    "ErrorFactory",
    # Convenience functions
    "get_error_factory",
    "create_error",
]
