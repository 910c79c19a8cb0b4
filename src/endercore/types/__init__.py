"""Shared types for EnderCore.

Import from here rather than submodules:
    from endercore.types import LogLevel, ValidationResult
"""

from .enums import LoggerState, LogLevel
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "LogLevel",
    "LoggerState",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
