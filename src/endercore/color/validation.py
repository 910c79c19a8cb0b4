"""HEX/RGB validation and conversion.

Every function here is pure. The ``is_*`` predicates never raise; the
``require_*`` variants raise a ColorError subclass and are what all the
converting paths use, so malformed input fails at the boundary instead of
turning into a default color.

Usage:
    from endercore.color.validation import hex_to_rgb, rgb_to_hex

    hex_to_rgb("#FAB")        # (255, 170, 187)
    rgb_to_hex(100, 0, 212)   # "#6400D4"
"""

import re
from collections.abc import Sequence
from typing import Any

from endercore.errors import create_error

HEX_PATTERN = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

CHANNEL_MIN = 0
CHANNEL_MAX = 255

RGB = tuple[int, int, int]

# Control characters and space (U+0000-U+0020); other Unicode whitespace is kept
TRIM_CHARS = "".join(chr(code) for code in range(0x21))

# Text and byte strings are sequences but never RGB triples
NON_RGB_SEQUENCES = (str, bytes, bytearray)


def trim(value: str) -> str:
    """Strip leading and trailing control characters and spaces."""
    return value.strip(TRIM_CHARS)


# =============================================================================
# HEX
# =============================================================================


def is_hex(value: Any) -> bool:
    """Check whether value is a 3- or 6-digit HEX color like '#FAB'.

    Surrounding spaces and control characters are ignored; see trim().

    Args:
        value: Candidate HEX string

    Returns:
        True if valid, False otherwise (including None and non-strings)
    """
    if not isinstance(value, str):
        return False
    return HEX_PATTERN.fullmatch(trim(value)) is not None


def require_hex(value: Any) -> str:
    """Validate a HEX color string.

    Args:
        value: Candidate HEX string

    Returns:
        The whitespace-trimmed HEX string

    Raises:
        MissingColorError: If value is None
        InvalidColorFormatError: If value is not a valid HEX color
    """
    if value is None:
        raise create_error("MISSING_COLOR", kind="HEX")
    if not is_hex(value):
        raise create_error("INVALID_COLOR_FORMAT", value=value)
    return trim(value)


def normalize_hex(value: str) -> str:
    """Expand 3-digit shorthand to 6 digits ('#FAB' -> '#FFAABB').

    A 6-digit value is returned unchanged, including its letter case.

    Args:
        value: Valid HEX string

    Returns:
        6-digit HEX string
    """
    value = require_hex(value)
    if len(value) == 4:
        return "#" + "".join(digit * 2 for digit in value[1:])
    return value


# =============================================================================
# RGB
# =============================================================================


def _is_channel(value: Any) -> bool:
    # bool is an int subclass but never a channel
    if isinstance(value, bool) or not isinstance(value, int):
        return False
    return CHANNEL_MIN <= value <= CHANNEL_MAX


def is_rgb(r: Any, g: Any, b: Any) -> bool:
    """Check whether all three channels are integers in [0, 255]."""
    return _is_channel(r) and _is_channel(g) and _is_channel(b)


def require_rgb(r: Any, g: Any, b: Any) -> RGB:
    """Validate three RGB channels.

    Returns:
        The channels as a tuple

    Raises:
        InvalidColorChannelError: If any channel is out of range or not an int
    """
    if not is_rgb(r, g, b):
        raise create_error("INVALID_COLOR_CHANNEL", value=(r, g, b))
    return (r, g, b)


def is_rgb_triple(rgb: Any) -> bool:
    """Check whether rgb is a sequence of exactly three valid channels."""
    if not rgb or isinstance(rgb, NON_RGB_SEQUENCES) or not isinstance(rgb, Sequence):
        return False
    if len(rgb) != 3:
        return False
    return is_rgb(*rgb)


def require_rgb_triple(rgb: Any) -> RGB:
    """Validate an RGB sequence.

    Args:
        rgb: Sequence of red, green and blue channels

    Returns:
        The channels as a tuple

    Raises:
        MissingColorError: If rgb is None or empty
        InvalidColorChannelError: If rgb is not exactly 3 valid channels
    """
    if rgb is None:
        raise create_error("MISSING_COLOR", kind="RGB")
    if isinstance(rgb, NON_RGB_SEQUENCES) or not isinstance(rgb, Sequence):
        raise create_error(
            "INVALID_COLOR_CHANNEL",
            value=rgb,
            detail="An RGB color must be a sequence of 3 integers",
        )
    if len(rgb) == 0:
        raise create_error("MISSING_COLOR", kind="RGB")
    if len(rgb) != 3:
        raise create_error(
            "INVALID_COLOR_CHANNEL",
            value=rgb,
            detail="An RGB color must have exactly 3 elements",
        )
    return require_rgb(*rgb)


# =============================================================================
# Conversion
# =============================================================================


def hex_to_rgb(value: str) -> RGB:
    """Convert a HEX color to an (r, g, b) tuple.

    Args:
        value: HEX string, 3 or 6 digits

    Returns:
        Tuple of red, green and blue channels

    Raises:
        MissingColorError: If value is None
        InvalidColorFormatError: If value is not a valid HEX color
    """
    digits = normalize_hex(value)[1:]
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Convert RGB channels to an uppercase '#RRGGBB' string.

    Raises:
        InvalidColorChannelError: If any channel is out of range
    """
    require_rgb(r, g, b)
    return f"#{r:02X}{g:02X}{b:02X}"


def rgb_triple_to_hex(rgb: Sequence[int]) -> str:
    """Convert an RGB sequence to an uppercase '#RRGGBB' string."""
    return rgb_to_hex(*require_rgb_triple(rgb))
