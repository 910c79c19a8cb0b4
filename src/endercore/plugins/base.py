"""EnderPlugin base class.

Host adapters subclass EnderPlugin and call on_enable()/on_disable() from
their own lifecycle hooks. Plugins implement on_plugin_enable() and
on_plugin_disable().

Lifecycle:
1. on_enable -> on_core_enable (load config, configure logger) -> on_plugin_enable
2. on_disable -> on_core_disable -> on_plugin_disable
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from endercore.config import ConfigLoader, EnderConfig, deep_merge
from endercore.config.loader import CONFIG_FILENAME
from endercore.errors import create_error
from endercore.logging import EnderLogger, TextComponent, build_prefix, gen_message

from .types import CommandHandler, CommandRegistrar

logger = logging.getLogger(__name__)


class EnderPlugin(ABC):
    """Base class for EnderCore plugins.

    Attributes:
        name: Plugin name, also the logger label until config is loaded
        data_folder: Directory holding the plugin's config.yml
        logger: The plugin's EnderLogger
        config: Loaded configuration (None before on_enable)
    """

    def __init__(
        self,
        name: str,
        data_folder: str | Path,
        default_config: dict[str, Any] | None = None,
        commands: CommandRegistrar | None = None,
    ):
        """Initialize the plugin.

        Args:
            name: Plugin name
            data_folder: Directory holding config.yml
            default_config: Bundled defaults in config.yml layout; their
                ``version`` is the required config version. Missing keys fall
                back to the EnderConfig defaults, with the plugin name as label
            commands: Host command registration capability, if any
        """
        self.name = name
        self.data_folder = Path(data_folder)
        self.logger = EnderLogger(name)
        self.config: EnderConfig | None = None
        self._commands = commands
        defaults = deep_merge({"prefix": {"name": name}}, default_config or {})
        self._loader = ConfigLoader(defaults=defaults, logger=self.logger)
        self._loader.on_change(self._apply_config)

    # =========================================================================
    # Lifecycle
    # =========================================================================

    def on_enable(self) -> None:
        self.on_core_enable()
        self.on_plugin_enable()

    def on_disable(self) -> None:
        self.on_core_disable()
        self.on_plugin_disable()

    def on_core_enable(self) -> None:
        """Load config and switch the logger to the configured prefix."""
        self.load_config()
        self.get_ender_logger()

    def on_core_disable(self) -> None:
        logger.debug("Plugin %s disabled", self.name)

    @abstractmethod
    def on_plugin_enable(self) -> None:
        """Plugin-specific enable logic."""

    @abstractmethod
    def on_plugin_disable(self) -> None:
        """Plugin-specific disable logic."""

    # =========================================================================
    # Config
    # =========================================================================

    @property
    def config_path(self) -> Path:
        return self.data_folder / CONFIG_FILENAME

    @property
    def required_config_version(self) -> int:
        """Version declared by the bundled default config."""
        return self._loader.required_version

    def load_config(self) -> EnderConfig:
        """Read config.yml from the data folder, falling back to defaults.

        A version mismatch is reported through the plugin logger and does not
        stop loading.

        Raises:
            ConfigError: If the file is malformed
        """
        self._loader.set_logger(self.logger)
        self.config = self._loader.load(self.config_path)
        return self.config

    def reload(self) -> EnderConfig:
        """Re-read config.yml and reconfigure the logger."""
        if self.config is None:
            self.load_config()
        return self._loader.reload()

    def _apply_config(self, config: EnderConfig) -> None:
        self.config = config
        self.get_ender_logger()

    # =========================================================================
    # Messages
    # =========================================================================

    def get_ender_logger(self) -> EnderLogger:
        """Build an EnderLogger from the current ``prefix`` config.

        Raises:
            ConfigError: If config is not loaded
            ColorError: If prefix.color is invalid
        """
        config = self._loader.get()
        self.logger = EnderLogger.from_config(config.prefix)
        return self.logger

    def get_prefix(self, label: str, color: Any, use_arrow: bool = True) -> TextComponent:
        return build_prefix(label, color, use_arrow)

    def gen_message(self, *components: TextComponent) -> TextComponent:
        """Prefix components with the configured chat prefix."""
        prefix = self._loader.get().prefix
        return gen_message(
            self.get_prefix(prefix.name, prefix.color, prefix.use_arrow),
            *components,
        )

    # =========================================================================
    # Commands
    # =========================================================================

    def register_command(self, name: str, handler: CommandHandler) -> None:
        """Register a command with the host.

        Raises:
            PluginError: If the host provides no command capability
        """
        if self._commands is None:
            raise create_error(
                "CAPABILITY_UNAVAILABLE", capability="commands", plugin=self.name
            )
        self._commands.register_command(name, handler)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r})"
