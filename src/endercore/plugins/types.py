"""Host capability protocols for the plugin glue layer.

EnderPlugin never imports a host runtime. Whatever the host can do beyond
logging is handed in as an object satisfying one of these protocols.
"""

from collections.abc import Callable, Sequence
from typing import Any, Protocol, runtime_checkable

CommandHandler = Callable[[Any, Sequence[str]], bool | None]


@runtime_checkable
class CommandRegistrar(Protocol):
    """Optional host capability: registering chat/console commands.

    The handler receives the command sender (host-defined) and the argument
    list.
    """

    def register_command(self, name: str, handler: CommandHandler) -> None:
        """Register a command under name."""
        ...
