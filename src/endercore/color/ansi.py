"""ANSI escape sequences for terminal output.

Style constants are plain module-level strings. Colors are emitted as
24-bit truecolor sequences; every color argument goes through the same
validation as EnderColor, so a bad color raises instead of printing garbage.

Usage:
    from endercore.color.ansi import BOLD, RESET, text_color

    print(f"{text_color('#6400D4')}{BOLD}Hello{RESET}")
    print(f"{background_color(255, 0, 0)}Alert{RESET}")
"""

from typing import Any

from endercore.errors import create_error

from .color import EnderColor, to_color
from .validation import RGB, require_rgb

ESC = "\033"

# Styles
RESET = f"{ESC}[0m"
BOLD = f"{ESC}[1m"
DIM = f"{ESC}[2m"
ITALIC = f"{ESC}[3m"
UNDERLINE = f"{ESC}[4m"
BLINK = f"{ESC}[5m"
RAPID_BLINK = f"{ESC}[6m"
REVERSE = f"{ESC}[7m"
HIDDEN = f"{ESC}[8m"

STYLES = {
    "reset": RESET,
    "bold": BOLD,
    "dim": DIM,
    "italic": ITALIC,
    "underline": UNDERLINE,
    "blink": BLINK,
    "rapid_blink": RAPID_BLINK,
    "reverse": REVERSE,
    "hidden": HIDDEN,
}

FOREGROUND = 38
BACKGROUND = 48


def _resolve_rgb(args: tuple[Any, ...]) -> RGB:
    if len(args) == 3:
        return require_rgb(*args)
    if len(args) == 1:
        return to_color(args[0]).rgb
    raise create_error(
        "INVALID_COLOR_CHANNEL",
        value=args,
        detail="Expected a single color value or 3 RGB channels",
    )


def _truecolor(layer: int, args: tuple[Any, ...]) -> str:
    r, g, b = _resolve_rgb(args)
    return f"{ESC}[{layer};2;{r};{g};{b}m"


def text_color(*args: Any) -> str:
    """Foreground color sequence, ESC[38;2;R;G;Bm.

    Accepts ``(r, g, b)`` or one of: HEX string, RGB sequence, EnderColor.
    """
    return _truecolor(FOREGROUND, args)


def background_color(*args: Any) -> str:
    """Background color sequence, ESC[48;2;R;G;Bm. Same arguments as text_color."""
    return _truecolor(BACKGROUND, args)


def colorize(
    text: str,
    color: str | EnderColor | tuple[int, int, int],
    background: str | EnderColor | tuple[int, int, int] | None = None,
) -> str:
    """Wrap text in color codes followed by RESET."""
    codes = text_color(color)
    if background is not None:
        codes += background_color(background)
    return f"{codes}{text}{RESET}"


def cursor_back(columns: int) -> str:
    """Sequence moving the cursor left by the given number of columns."""
    return f"{ESC}[{columns}D"


__all__ = [
    "ESC",
    "RESET",
    "BOLD",
    "DIM",
    "ITALIC",
    "UNDERLINE",
    "BLINK",
    "RAPID_BLINK",
    "REVERSE",
    "HIDDEN",
    "STYLES",
    "text_color",
    "background_color",
    "colorize",
    "cursor_back",
]
