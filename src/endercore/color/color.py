"""EnderColor - an RGB color stored in canonical '#RRGGBB' form."""

from collections.abc import Sequence
from typing import Any

from endercore.errors import create_error

from .validation import (
    NON_RGB_SEQUENCES,
    RGB,
    hex_to_rgb,
    normalize_hex,
    require_hex,
    require_rgb_triple,
    rgb_to_hex,
)


def _canonical(value: Any) -> str:
    return normalize_hex(require_hex(value)).upper()


class EnderColor:
    """An RGB color.

    Constructed from a HEX string or from RGB channels, and always stored as
    an uppercase 6-digit HEX string. The RGB view is derived from the stored
    HEX on every access, so the two can never disagree.

    Examples:
        EnderColor("#fab")            # EnderColor('#FFAABB')
        EnderColor(100, 0, 212)       # EnderColor('#6400D4')
        EnderColor([255, 170, 187])   # EnderColor('#FFAABB')

    Raises:
        MissingColorError: If the value is None or an empty sequence
        InvalidColorFormatError: If a HEX string is malformed
        InvalidColorChannelError: If channels are out of range or not three
    """

    __slots__ = ("_hex",)

    def __init__(self, *args: Any):
        if len(args) == 3:
            self._hex = rgb_to_hex(*args)
        elif len(args) == 1:
            value = args[0]
            if value is None or isinstance(value, str):
                self._hex = _canonical(value)
            else:
                self._hex = rgb_to_hex(*require_rgb_triple(value))
        else:
            raise create_error(
                "INVALID_COLOR_CHANNEL",
                value=args,
                detail="EnderColor takes a HEX string, an RGB sequence or 3 channels",
            )

    @property
    def hex(self) -> str:
        """Canonical '#RRGGBB' string."""
        return self._hex

    @property
    def rgb(self) -> RGB:
        """(r, g, b) tuple parsed from the stored HEX."""
        return hex_to_rgb(self._hex)

    def get_hex(self) -> str:
        return self.hex

    def get_rgb(self) -> RGB:
        return self.rgb

    def set(self, value: str) -> None:
        """Replace the stored color with a new HEX value.

        Validation is the same as for construction; on failure the stored
        color is left untouched.
        """
        self._hex = _canonical(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnderColor):
            return NotImplemented
        return self._hex == other._hex

    def __hash__(self) -> int:
        return hash(self._hex)

    def __repr__(self) -> str:
        return f"EnderColor({self._hex!r})"

    def __str__(self) -> str:
        r, g, b = self.rgb
        return f"EnderColor{{HEX: {self._hex}, RGB: {{r: {r}, g: {g}, b: {b}}}}}"


def to_color(value: Any) -> EnderColor:
    """Convert any accepted color shape to an EnderColor.

    This is the single validating entry point shared by every function that
    accepts "a color": an EnderColor is returned as is, a string is parsed as
    HEX and a sequence as RGB.

    Args:
        value: EnderColor, HEX string or (r, g, b) sequence

    Returns:
        EnderColor instance

    Raises:
        MissingColorError: If value is None
        InvalidColorFormatError: If value is a malformed string or an
            unsupported type
        InvalidColorChannelError: If an RGB sequence is invalid
    """
    if isinstance(value, EnderColor):
        return value
    if value is None or isinstance(value, str):
        return EnderColor(value)
    if isinstance(value, Sequence) and not isinstance(value, NON_RGB_SEQUENCES):
        return EnderColor(value)
    raise create_error("INVALID_COLOR_FORMAT", value=value)
