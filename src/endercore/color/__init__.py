"""EnderCore colors - HEX/RGB color values and ANSI formatting."""

from .ansi import (
    BLINK,
    BOLD,
    DIM,
    HIDDEN,
    ITALIC,
    RAPID_BLINK,
    RESET,
    REVERSE,
    UNDERLINE,
    background_color,
    colorize,
    text_color,
)
from .color import EnderColor, to_color
from .validation import (
    hex_to_rgb,
    is_hex,
    is_rgb,
    is_rgb_triple,
    normalize_hex,
    require_hex,
    require_rgb,
    require_rgb_triple,
    rgb_to_hex,
    rgb_triple_to_hex,
)

__all__ = [
    # Color value
    "EnderColor",
    "to_color",
    # Validation & conversion
    "is_hex",
    "require_hex",
    "normalize_hex",
    "is_rgb",
    "require_rgb",
    "is_rgb_triple",
    "require_rgb_triple",
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_triple_to_hex",
    # ANSI
    "RESET",
    "BOLD",
    "DIM",
    "ITALIC",
    "UNDERLINE",
    "BLINK",
    "RAPID_BLINK",
    "REVERSE",
    "HIDDEN",
    "text_color",
    "background_color",
    "colorize",
]
