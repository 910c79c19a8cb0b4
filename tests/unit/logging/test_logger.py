"""Tests for EnderLogger."""

import logging

import pytest

from endercore.config import PrefixConfig
from endercore.errors import InvalidColorChannelError, InvalidColorFormatError, MissingColorError
from endercore.logging.logger import (
    CHANNEL_CORRECTION,
    MESSAGE_CORRECTION,
    EnderLogger,
    PrefixFormatter,
    render_prefix,
)
from endercore.types import LoggerState, LogLevel

PURPLE = "\x1b[38;2;100;0;212m"
GRAY = "\x1b[38;2;119;119;119m"
RESET = "\x1b[0m"


class TestRenderPrefix:
    """Tests for render_prefix()."""

    def test_with_arrow(self):
        """Test label color, label, gray arrow, in that order."""
        assert render_prefix("Test", "#6400D4") == f"{PURPLE}Test{GRAY} »"

    def test_without_arrow(self):
        """Test the arrow is omitted when disabled."""
        assert render_prefix("Test", "#6400D4", use_arrow=False) == f"{PURPLE}Test"

    def test_invalid_color(self):
        """Test an invalid color raises."""
        with pytest.raises(InvalidColorFormatError):
            render_prefix("Test", "purple")


class TestEnderLoggerConfiguration:
    """Tests for construction and reconfiguration."""

    def test_defaults(self):
        """Test default color and arrow."""
        logger = EnderLogger("Test")
        assert logger.color.hex == "#6400D4"
        assert logger.use_arrow is True
        assert logger.prefix == f"{PURPLE}Test{GRAY} »"

    def test_state_is_active(self):
        """Test a constructed logger is ACTIVE."""
        assert EnderLogger("Test").state == LoggerState.ACTIVE

    def test_channel_name_embeds_prefix(self):
        """Test the channel name is correction + prefix + reset."""
        logger = EnderLogger("Test", "#6400D4", True)
        assert logger.name == f"{CHANNEL_CORRECTION}{PURPLE}Test{GRAY} »{RESET}"
        assert logger.channel is logging.getLogger(logger.name)

    def test_prefix_structure(self):
        """Test the prefix holds the label in (100, 0, 212) then a gray arrow."""
        logger = EnderLogger("Test", "#6400D4", True)
        label_at = logger.prefix.index("Test")
        arrow_at = logger.prefix.index(" »")
        assert logger.prefix.index(PURPLE) < label_at < logger.prefix.index(GRAY) < arrow_at
        assert logger.name.endswith(RESET)

    def test_accepts_any_color_shape(self):
        """Test RGB sequences are accepted as the color."""
        assert EnderLogger("Test", (100, 0, 212)).prefix == EnderLogger("Test").prefix

    def test_invalid_color_fails_at_construction(self):
        """Test bad colors fail when the logger is built."""
        with pytest.raises(InvalidColorFormatError):
            EnderLogger("Test", "#12")
        with pytest.raises(MissingColorError):
            EnderLogger("Test", None)
        with pytest.raises(InvalidColorChannelError):
            EnderLogger("Test", [1, 2])

    def test_reconfigure(self):
        """Test configure() rebinds to the new prefix."""
        logger = EnderLogger("Test")
        logger.configure("Other", "#F00", use_arrow=False)
        assert logger.prefix == "\x1b[38;2;255;0;0mOther"
        assert logger.label == "Other"
        assert logger.state == LoggerState.ACTIVE

    def test_failed_reconfigure_keeps_previous(self):
        """Test a bad color leaves the previous prefix bound."""
        logger = EnderLogger("Test")
        name = logger.name
        with pytest.raises(InvalidColorFormatError):
            logger.configure("Other", "#nothex")
        assert logger.name == name
        assert logger.label == "Test"

    def test_from_config(self):
        """Test creation from a prefix config section."""
        logger = EnderLogger.from_config(PrefixConfig(name="Homes", color="#0F0", use_arrow=False))
        assert logger.prefix == "\x1b[38;2;0;255;0mHomes"

    def test_reconfigure_from_config(self):
        """Test reconfigure() applies a prefix config section."""
        logger = EnderLogger("Test")
        logger.reconfigure(PrefixConfig(name="Homes", color="#00F"))
        assert logger.label == "Homes"
        assert logger.color.hex == "#0000FF"

    def test_installs_prefix_formatter_once(self):
        """Test a fresh channel gets exactly one PrefixFormatter handler."""
        logger = EnderLogger("FormatterOnce", "#123456")
        again = EnderLogger("FormatterOnce", "#123456")
        assert again.channel is logger.channel
        assert len(logger.channel.handlers) == 1
        assert isinstance(logger.channel.handlers[0].formatter, PrefixFormatter)

    def test_shared_channel_level_set_once(self):
        """Test a second logger on the same prefix does not change its level."""
        first = EnderLogger("SharedLevel", "#654321", level=logging.WARNING)
        second = EnderLogger("SharedLevel", "#654321", level=logging.DEBUG)

        assert second.channel is first.channel
        assert first.channel.level == logging.WARNING


class TestEnderLoggerCalls:
    """Tests for the logging methods."""

    def test_fragments_joined_without_separator(self, capture_channel):
        """Test fragments are concatenated as-is after correction and reset."""
        logger = EnderLogger("Calls")
        stream = capture_channel(logger)
        logger.info("Loaded ", 3, " homes", "!")
        assert stream.getvalue() == f"INFO|{MESSAGE_CORRECTION}{RESET}Loaded 3 homes!\n"

    def test_no_fragments(self, capture_channel):
        """Test an empty call still emits the correction."""
        logger = EnderLogger("Calls")
        stream = capture_channel(logger)
        logger.info()
        assert stream.getvalue() == f"INFO|{MESSAGE_CORRECTION}{RESET}\n"

    @pytest.mark.parametrize(
        ("method", "level"),
        [
            ("debug", "INFO"),
            ("info", "INFO"),
            ("warning", "WARNING"),
            ("error", "ERROR"),
        ],
    )
    def test_severity_mapping(self, capture_channel, method, level):
        """Test each method forwards at its mapped level."""
        logger = EnderLogger("Severity")
        stream = capture_channel(logger)
        getattr(logger, method)("x")
        assert stream.getvalue().startswith(f"{level}|")

    @pytest.mark.parametrize(
        ("level", "expected"),
        [
            (LogLevel.DEBUG, "DEBUG"),
            (LogLevel.WARN, "WARNING"),
            (logging.CRITICAL, "CRITICAL"),
            ("error", "ERROR"),
            ("WARNING", "WARNING"),
        ],
    )
    def test_log_with_level(self, capture_channel, level, expected):
        """Test log() accepts LogLevel, stdlib levels and level names."""
        logger = EnderLogger("Levels")
        stream = capture_channel(logger)
        logger.log(level, "a", "b")
        assert stream.getvalue() == f"{expected}|{MESSAGE_CORRECTION}{RESET}ab\n"

    def test_log_unknown_level_name(self):
        """Test an unknown level name raises ValueError."""
        with pytest.raises(ValueError):
            EnderLogger("Levels").log("loud", "x")

    def test_percent_signs_not_interpolated(self, capture_channel):
        """Test fragments containing % are logged literally."""
        logger = EnderLogger("Percent")
        stream = capture_channel(logger)
        logger.info("100%", " %s done")
        assert stream.getvalue().endswith("100% %s done\n")

    def test_prefix_formatter_layout(self, capture_channel):
        """Test the host layout puts the channel name before the message."""
        logger = EnderLogger("Layout", "#6400D4")
        stream = capture_channel(logger, fmt=PrefixFormatter.DEFAULT_FORMAT)
        logger.info("hello")
        assert stream.getvalue() == (
            f"[{CHANNEL_CORRECTION}{PURPLE}Layout{GRAY} »{RESET}] "
            f"{MESSAGE_CORRECTION}{RESET}hello\n"
        )
