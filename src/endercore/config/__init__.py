"""EnderCore configuration - YAML plugin config loading."""

from .loader import ConfigLoader, deep_merge, resolve_env_vars
from .models import DEFAULT_PREFIX_COLOR, EnderConfig, PrefixConfig

__all__ = [
    "ConfigLoader",
    "EnderConfig",
    "PrefixConfig",
    "DEFAULT_PREFIX_COLOR",
    "deep_merge",
    "resolve_env_vars",
]
