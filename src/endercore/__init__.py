"""EnderCore - Colored prefixed logging and color utilities for Minecraft server plugins.

Host-agnostic: nothing here imports a server runtime. A host adapter
subclasses endercore.plugins.EnderPlugin and drives its lifecycle.
"""

from endercore.color import EnderColor, background_color, text_color
from endercore.logging import EnderLogger

__version__ = "1.0.0"
__all__ = ["__version__", "EnderColor", "EnderLogger", "text_color", "background_color"]
