"""EnderLogger - stdlib logging channel with a colored plugin prefix.

Every line logged through an EnderLogger starts with the plugin label in its
configured color, optionally followed by a gray " »". The prefix lives in the
channel name, so it is rendered once per (re)configuration and reused for
every call.

The host console decorates records as ``[<channel>] <message>``. The channel
name therefore starts with a one-column cursor-back (over the ``[``) and each
message starts with a two-column cursor-back plus a space (over the ``] ``),
leaving ``<prefix> <message>`` on screen.

Usage:
    from endercore.logging import EnderLogger

    logger = EnderLogger("MyPlugin", "#6400D4")
    logger.info("Loaded ", str(count), " homes")
"""

import logging
import sys
from typing import Any

from endercore.color import RESET, text_color, to_color
from endercore.color.ansi import cursor_back
from endercore.config.models import DEFAULT_PREFIX_COLOR, PrefixConfig
from endercore.types import LoggerState, LogLevel

ARROW = " »"
ARROW_COLOR = "#777"

CHANNEL_CORRECTION = cursor_back(1)
MESSAGE_CORRECTION = cursor_back(2) + " "


class PrefixFormatter(logging.Formatter):
    """Formatter reproducing the host console layout ``[<channel>] <message>``."""

    DEFAULT_FORMAT = "[%(name)s] %(message)s"

    def __init__(self, fmt: str | None = None):
        super().__init__(fmt or self.DEFAULT_FORMAT)


def render_prefix(label: str, color: Any, use_arrow: bool = True) -> str:
    """Render the ANSI prefix: colored label, then the optional gray arrow.

    Raises:
        ColorError: If color is not a valid color
    """
    prefix = f"{text_color(color)}{label}"
    if use_arrow:
        prefix += f"{text_color(ARROW_COLOR)}{ARROW}"
    return prefix


def _resolve_level(level: int | str | LogLevel) -> int:
    if isinstance(level, LogLevel):
        return level.to_logging()
    if isinstance(level, str):
        name = level.upper()
        if name in LogLevel.__members__:
            return LogLevel[name].to_logging()
        resolved = logging.getLevelNamesMapping().get(name)
        if resolved is None:
            msg = f"Unknown log level: {level}"
            raise ValueError(msg)
        return resolved
    return level


class EnderLogger:
    """Prefixed logger facade.

    Moves UNINITIALIZED -> CONFIGURED -> ACTIVE inside configure(). An
    invalid color raises there, so a misconfigured logger is never created
    and log calls themselves never fail on color.

    debug() is forwarded at INFO, same as info(). Use log(LogLevel.DEBUG, ...)
    for a DEBUG record.
    """

    def __init__(
        self,
        label: str,
        color: Any = DEFAULT_PREFIX_COLOR,
        use_arrow: bool = True,
        level: int = logging.INFO,
    ):
        """Initialize logger.

        Args:
            label: Display name shown in the prefix
            color: Prefix color (HEX string, RGB sequence or EnderColor)
            use_arrow: Append the gray " »" after the label
            level: Level for the underlying channel, applied only when no
                other EnderLogger has already set it
        """
        self.state = LoggerState.UNINITIALIZED
        self.prefix = ""
        self._level = level
        self._logger: logging.Logger | None = None
        self.configure(label, color, use_arrow)

    @classmethod
    def from_config(cls, config: PrefixConfig, level: int = logging.INFO) -> "EnderLogger":
        """Create a logger from the ``prefix`` section of a plugin config."""
        return cls(config.name, config.color, config.use_arrow, level=level)

    def configure(
        self, label: str, color: Any = DEFAULT_PREFIX_COLOR, use_arrow: bool = True
    ) -> None:
        """(Re)compute the prefix and bind the channel.

        Call again whenever the prefix configuration changes.

        Raises:
            ColorError: If color is not a valid color. The logger keeps its
                previous prefix and channel.
        """
        resolved = to_color(color)
        prefix = render_prefix(label, resolved, use_arrow)

        self.label = label
        self.color = resolved
        self.use_arrow = use_arrow
        self.prefix = prefix
        self.state = LoggerState.CONFIGURED

        self._logger = self._bind(prefix)
        self.state = LoggerState.ACTIVE

    def reconfigure(self, config: PrefixConfig) -> None:
        """Apply a reloaded ``prefix`` config section."""
        self.configure(config.name, config.color, config.use_arrow)

    def _bind(self, prefix: str) -> logging.Logger:
        # Channels are shared by every EnderLogger rendering the same prefix;
        # the level is only set by the first one to bind
        channel = logging.getLogger(f"{CHANNEL_CORRECTION}{prefix}{RESET}")
        if channel.level == logging.NOTSET:
            channel.setLevel(self._level)

        if not channel.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(PrefixFormatter())
            channel.addHandler(handler)

        return channel

    @property
    def channel(self) -> logging.Logger:
        """The bound stdlib logger."""
        if self._logger is None:
            msg = "EnderLogger is not configured"
            raise RuntimeError(msg)
        return self._logger

    @property
    def name(self) -> str:
        return self.channel.name

    def format_message(self, *fragments: Any) -> str:
        """Join fragments with no separator, after the cursor correction and a reset."""
        return MESSAGE_CORRECTION + RESET + "".join(map(str, fragments))

    def log(self, level: int | str | LogLevel, *fragments: Any) -> None:
        """Log fragments at the given level.

        Args:
            level: stdlib level number, LogLevel, or level name
            *fragments: Message parts, concatenated as-is
        """
        self.channel.log(_resolve_level(level), self.format_message(*fragments))

    def debug(self, *fragments: Any) -> None:
        self.channel.info(self.format_message(*fragments))

    def info(self, *fragments: Any) -> None:
        self.channel.info(self.format_message(*fragments))

    def warning(self, *fragments: Any) -> None:
        self.channel.warning(self.format_message(*fragments))

    def error(self, *fragments: Any) -> None:
        self.channel.error(self.format_message(*fragments))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(label={self.label!r}, color={self.color.hex!r}, "
            f"use_arrow={self.use_arrow})"
        )
