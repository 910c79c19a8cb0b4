"""EnderCore plugin glue.

Usage:
    from endercore.plugins import EnderPlugin

    class HomesPlugin(EnderPlugin):
        def on_plugin_enable(self) -> None:
            self.logger.info("Homes enabled")

        def on_plugin_disable(self) -> None:
            self.logger.info("Homes disabled")

    plugin = HomesPlugin("Homes", data_folder="plugins/Homes")
    plugin.on_enable()
"""

from .base import EnderPlugin
from .types import CommandHandler, CommandRegistrar

__all__ = [
    "EnderPlugin",
    "CommandRegistrar",
    "CommandHandler",
]
