"""Rich-text components for chat/console messages.

A TextComponent is a small immutable tree: a text node with an optional
color and ordered children. It renders to ANSI for consoles or to plain text
for sinks that cannot show color.

Usage:
    from endercore.logging.components import TextComponent, build_prefix, gen_message

    prefix = build_prefix("MyPlugin", "#6400D4", use_arrow=True)
    message = gen_message(prefix, TextComponent("Hello", "#FFFFFF"))
    print(message.to_ansi())
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from endercore.color import RESET, EnderColor, text_color, to_color

WHITE = EnderColor(255, 255, 255)
ARROW_GRAY = EnderColor(119, 119, 119)
ARROW = " »"


@dataclass(frozen=True)
class TextComponent:
    """Text node with an optional color and child components.

    Children without their own color inherit the nearest colored ancestor.
    The color may be given in any shape to_color() accepts.
    """

    text: str = ""
    color: Any = None
    children: tuple["TextComponent", ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.color is not None:
            object.__setattr__(self, "color", to_color(self.color))
        object.__setattr__(self, "children", tuple(self.children))

    def append(self, *others: "TextComponent") -> "TextComponent":
        """Return a copy with others added as children."""
        return TextComponent(self.text, self.color, self.children + others)

    def iter_segments(
        self, inherited: EnderColor | None = None
    ) -> Iterator[tuple[str, EnderColor | None]]:
        """Yield (text, effective color) pairs in render order."""
        color = self.color or inherited
        if self.text:
            yield self.text, color
        for child in self.children:
            yield from child.iter_segments(color)

    def to_plain(self) -> str:
        return "".join(text for text, _ in self.iter_segments())

    def to_ansi(self) -> str:
        """Render with truecolor codes, ending in RESET."""
        parts: list[str] = []
        current: EnderColor | None = None
        for text, color in self.iter_segments():
            if color != current:
                parts.append(text_color(color) if color is not None else RESET)
                current = color
            parts.append(text)
        parts.append(RESET)
        return "".join(parts)


def build_prefix(label: str, color: Any, use_arrow: bool = True) -> TextComponent:
    """Build the chat prefix: colored label, optional gray arrow, then a space.

    Raises:
        ColorError: If color is not a valid color
    """
    prefix = TextComponent("", WHITE).append(TextComponent(label, to_color(color)))
    if use_arrow:
        prefix = prefix.append(TextComponent(ARROW, ARROW_GRAY))
    return prefix.append(TextComponent(" ", WHITE))


def gen_message(prefix: TextComponent, *components: TextComponent) -> TextComponent:
    """Append message components to a prefix."""
    return prefix.append(*components)
