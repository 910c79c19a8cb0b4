"""EnderCore logging - Prefixed colored logger and rich-text prefixes."""

from .components import TextComponent, build_prefix, gen_message
from .logger import EnderLogger, PrefixFormatter, render_prefix

__all__ = [
    # Logger
    "EnderLogger",
    "PrefixFormatter",
    "render_prefix",
    # Rich text
    "TextComponent",
    "build_prefix",
    "gen_message",
]
