"""EnderCore configuration data models."""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_PREFIX_COLOR = "#6400D4"


@dataclass
class PrefixConfig:
    """The ``prefix`` section: how the plugin labels its messages."""

    name: str = "EnderCore"
    color: str = DEFAULT_PREFIX_COLOR
    use_arrow: bool = True  # YAML key: useArrow


@dataclass
class EnderConfig:
    """Plugin configuration (config.yml)."""

    version: int = 1
    prefix: PrefixConfig = field(default_factory=PrefixConfig)
    extra: dict[str, Any] = field(default_factory=dict)  # Plugin-specific top-level keys

    def to_dict(self) -> dict[str, Any]:
        """Convert back to the config.yml layout."""
        return {
            "version": self.version,
            "prefix": {
                "name": self.prefix.name,
                "color": self.prefix.color,
                "useArrow": self.prefix.use_arrow,
            },
            **self.extra,
        }
