"""
Pytest configuration and shared fixtures for EnderCore tests.
"""

import logging
import sys
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def data_folder(tmp_path: Path) -> Path:
    """Return an empty plugin data folder."""
    folder = tmp_path / "plugins" / "TestPlugin"
    folder.mkdir(parents=True)
    return folder


@pytest.fixture
def write_config(data_folder: Path):
    """Write config.yml into the plugin data folder."""

    def _write(text: str) -> Path:
        path = data_folder / "config.yml"
        path.write_text(text, encoding="utf-8")
        return path

    return _write


# =============================================================================
# Logging Fixtures
# =============================================================================


@pytest.fixture
def capture_channel() -> Generator:
    """Capture raw messages logged on an EnderLogger's channel.

    Usage:
        stream = capture_channel(ender_logger)
        ender_logger.info("hi")
        stream.getvalue()
    """
    installed: list[tuple[logging.Logger, list[logging.Handler], int]] = []

    def _capture(ender_logger, fmt: str = "%(levelname)s|%(message)s") -> StringIO:
        stream = StringIO()
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))

        channel = ender_logger.channel
        installed.append((channel, channel.handlers, channel.level))
        channel.handlers = [handler]
        channel.setLevel(logging.DEBUG)
        return stream

    yield _capture

    for channel, handlers, level in installed:
        channel.handlers = handlers
        channel.setLevel(level)


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
