"""EnderCore configuration loader."""

import logging
import os
import re
from collections.abc import Callable
from pathlib import Path
from typing import Any

import yaml

from endercore.color import is_hex, require_hex
from endercore.errors import create_error
from endercore.types import ValidationIssue, ValidationResult

from .models import EnderConfig, PrefixConfig

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "config.yml"
PREFIX_KEYS = {"name", "color", "useArrow"}


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        ConfigError: If required var not set
    """
    # Pattern: ${VAR}, ${VAR:-default}, ${VAR:?error}
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)

        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        elif operator == "?":
            error_msg = operand or f"Required environment variable {var_name} not set"
            raise create_error("CONFIG_INVALID", detail=error_msg)
        else:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Required environment variable {var_name} not set",
            )

    return re.sub(pattern, replacer, value)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    elif isinstance(data, str):
        return resolve_env_vars(data)
    else:
        return data


class ConfigLoader:
    """Load and validate a plugin's config.yml.

    The bundled defaults play the role of the config resource shipped with
    the plugin: keys missing from the file fall back to them, and their
    ``version`` is the version the plugin requires. Files are only read,
    never written.
    """

    def __init__(self, defaults: dict[str, Any] | None = None, logger: Any = None):
        """Initialize config loader.

        Args:
            defaults: Bundled default config in config.yml layout, merged over
                the EnderConfig defaults
            logger: Optional EnderLogger used for user-facing warnings
        """
        self._defaults = deep_merge(EnderConfig().to_dict(), defaults or {})
        self._config: EnderConfig | None = None
        self._config_path: Path | None = None
        self._logger = logger
        self._change_callbacks: list[Callable[[EnderConfig], None]] = []

    @property
    def required_version(self) -> int:
        """Config version the bundled defaults declare."""
        return int(self._defaults.get("version", 1))

    @property
    def config_path(self) -> Path | None:
        return self._config_path

    def set_logger(self, logger: Any) -> None:
        self._logger = logger

    def load(self, path: str | Path | None = None, use_defaults: bool = True) -> EnderConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. ENDERCORE_CONFIG_PATH environment variable
        2. ./config.yml

        Args:
            path: Optional path to config file
            use_defaults: If True, use the bundled defaults when no file is found

        Returns:
            Loaded EnderConfig instance

        Raises:
            ConfigError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = self._resolve_config_path()

        config_path = Path(path)

        if not config_path.exists():
            if use_defaults:
                logger.debug("No config file at %s, using defaults", config_path)
                return self.load_from_dict({}, config_path)
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Configuration file not found: {config_path}",
            )

        try:
            with config_path.open(encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Invalid YAML in config file: {e}",
            ) from e

        if not isinstance(data, dict):
            raise create_error(
                "CONFIG_INVALID",
                detail=f"Config file {config_path} must contain a mapping",
            )

        return self.load_from_dict(data, config_path)

    def load_defaults(self) -> EnderConfig:
        """Load the bundled defaults without a file."""
        return self.load_from_dict({})

    def load_from_dict(self, data: dict[str, Any], config_path: Path | None = None) -> EnderConfig:
        """Load configuration from dictionary.

        Args:
            data: Configuration dictionary, merged over the defaults
            config_path: Optional path to config file (for tracking)

        Returns:
            Loaded EnderConfig instance

        Raises:
            ConfigError: If configuration is invalid
        """
        data = deep_merge(self._defaults, data)
        data = _resolve_env_vars_recursive(data)

        validation = self.validate(data)
        for issue in validation.warnings:
            logger.warning("%s: %s", issue.path, issue.message)
        if not validation.valid:
            error_messages = [f"- {issue.message}" for issue in validation.errors]
            raise create_error(
                "CONFIG_INVALID",
                detail="Configuration validation failed:\n" + "\n".join(error_messages),
            )

        config = self._dict_to_config(data)
        self._check_version(config)

        self._config = config
        self._config_path = config_path
        logger.debug("Configuration loaded from %s", config_path or "defaults")

        return config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate config data without loading.

        Args:
            data: Configuration dictionary

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        version = data.get("version")
        if "version" in data and (isinstance(version, bool) or not isinstance(version, int)):
            errors.append(ValidationIssue(path="version", message="version must be an integer"))

        prefix = data.get("prefix", {})
        if not isinstance(prefix, dict):
            errors.append(ValidationIssue(path="prefix", message="prefix must be a dictionary"))
            return ValidationResult(valid=True, errors=errors, warnings=warnings)

        if "name" in prefix and not isinstance(prefix["name"], str):
            errors.append(
                ValidationIssue(path="prefix.name", message="prefix.name must be a string")
            )

        if not is_hex(prefix.get("color")):
            errors.append(
                ValidationIssue(
                    path="prefix.color",
                    message=f"prefix.color must be a HEX color, got {prefix.get('color')!r}",
                )
            )

        if "useArrow" in prefix and not isinstance(prefix["useArrow"], bool):
            errors.append(
                ValidationIssue(
                    path="prefix.useArrow", message="prefix.useArrow must be a boolean"
                )
            )

        for key in prefix:
            if key not in PREFIX_KEYS:
                warnings.append(
                    ValidationIssue(
                        path=f"prefix.{key}",
                        message=f"Unknown prefix key: {key}",
                        severity="warning",
                    )
                )

        return ValidationResult(valid=True, errors=errors, warnings=warnings)

    def get(self) -> EnderConfig:
        """Get current configuration.

        Raises:
            ConfigError: If configuration not loaded
        """
        if self._config is None:
            raise create_error("CONFIG_NOT_LOADED")
        return self._config

    def reload(self) -> EnderConfig:
        """Reload configuration from the last loaded path.

        Notifies registered callbacks. A failing callback is logged and the
        remaining callbacks still run.

        Raises:
            ConfigError: If no config path set or reload fails
        """
        if self._config_path is None:
            raise create_error("CONFIG_INVALID", detail="No config path set, cannot reload")

        new_config = self.load(self._config_path)

        for callback in self._change_callbacks:
            try:
                callback(new_config)
            except Exception:
                logger.exception("Config change callback failed")

        return new_config

    def on_change(self, callback: Callable[[EnderConfig], None]) -> None:
        """Register callback for config changes."""
        self._change_callbacks.append(callback)

    def _check_version(self, config: EnderConfig) -> None:
        required = self.required_version
        if config.version == required:
            return
        # Tolerated: the plugin keeps running on a mismatched config
        if self._logger is not None:
            self._logger.warning("Config version must be ", str(required))
        else:
            logger.warning("Config version must be %s (found %s)", required, config.version)

    def _resolve_config_path(self) -> Path:
        env_path = os.environ.get("ENDERCORE_CONFIG_PATH")
        if env_path:
            return Path(env_path)
        return Path(CONFIG_FILENAME)

    def _dict_to_config(self, data: dict[str, Any]) -> EnderConfig:
        prefix = data.get("prefix", {})
        defaults = PrefixConfig()
        extra = {k: v for k, v in data.items() if k not in ("version", "prefix")}

        return EnderConfig(
            version=data.get("version", 1),
            prefix=PrefixConfig(
                name=prefix.get("name", defaults.name),
                color=require_hex(prefix["color"]),
                use_arrow=prefix.get("useArrow", defaults.use_arrow),
            ),
            extra=extra,
        )
