"""Error registry for creating errors from templates."""

from typing import Any

from .errors import (
    ConfigError,
    EnderError,
    ErrorCategory,
    ErrorTemplate,
    InvalidColorChannelError,
    InvalidColorFormatError,
    MissingColorError,
    PluginError,
)


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def register(self, template: ErrorTemplate) -> None:
        """Register (or replace) a template.

        Args:
            template: Template to register under its code
        """
        self._templates[template.code] = template

    def get_template(self, code: str) -> ErrorTemplate | None:
        """Get template by error code.

        Args:
            code: Error code to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(code)

    def list_codes(self) -> list[str]:
        """List all registered error codes.

        Returns:
            List of error codes
        """
        return list(self._templates.keys())

    def create(
        self,
        code: str,
        context: dict[str, Any] | None = None,
    ) -> EnderError:
        """Create error instance from template + context.

        Args:
            code: Error code
            context: Context variables for template interpolation. A
                ``detail`` or ``suggestion`` entry overrides the template.

        Returns:
            Instance of the template's error class

        Raises:
            ValueError: If error code not found
        """
        template = self.get_template(code)
        if not template:
            msg = f"Unknown error code: {code}"
            raise ValueError(msg)

        context = context or {}

        message = self._interpolate(template.message_template, context)
        detail = context.get("detail") or self._interpolate(template.detail_template, context)
        suggestion = context.get("suggestion") or self._interpolate(
            template.suggestion_template, context
        )

        if message is None:
            message = f"Error {code}"

        return template.error_class(
            code=template.code,
            category=template.category,
            message=message,
            detail=detail,
            suggestion=suggestion,
            value=context.get("value"),
        )

    def _interpolate(
        self,
        template: str | None,
        context: dict[str, Any],
    ) -> str | None:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string or None if template is None
        """
        if template is None:
            return None

        try:
            return template.format(**context)
        except KeyError:
            # Missing context variable - return template as-is
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        # COLOR Errors
        self.register(
            ErrorTemplate(
                code="MISSING_COLOR",
                category=ErrorCategory.COLOR,
                message_template="{kind} color cannot be None",
                detail_template="A color value was required but none was given",
                suggestion_template="Pass a hex string like '#6400D4' or an (r, g, b) triple",
                error_class=MissingColorError,
            )
        )

        self.register(
            ErrorTemplate(
                code="INVALID_COLOR_FORMAT",
                category=ErrorCategory.COLOR,
                message_template="Invalid HEX color format: {value!r}",
                detail_template="A HEX color is '#' followed by exactly 3 or 6 hex digits",
                suggestion_template="Use a value like '#FAB' or '#FFAABB'",
                error_class=InvalidColorFormatError,
            )
        )

        self.register(
            ErrorTemplate(
                code="INVALID_COLOR_CHANNEL",
                category=ErrorCategory.COLOR,
                message_template="Invalid RGB color: {value!r}",
                detail_template="Each channel must be an integer between 0 and 255",
                suggestion_template="Clamp the channels to 0-255",
                error_class=InvalidColorChannelError,
            )
        )

        # CONFIG Errors
        self.register(
            ErrorTemplate(
                code="CONFIG_INVALID",
                category=ErrorCategory.CONFIG,
                message_template="Invalid configuration",
                detail_template="The configuration file is missing or malformed",
                suggestion_template="Check config.yml against the plugin defaults",
                error_class=ConfigError,
            )
        )

        self.register(
            ErrorTemplate(
                code="CONFIG_NOT_LOADED",
                category=ErrorCategory.CONFIG,
                message_template="Configuration not loaded",
                detail_template="The configuration was accessed before load() was called",
                suggestion_template="Call load_config() during plugin enable",
                error_class=ConfigError,
            )
        )

        # PLUGIN Errors
        self.register(
            ErrorTemplate(
                code="CAPABILITY_UNAVAILABLE",
                category=ErrorCategory.PLUGIN,
                message_template="Host does not provide the '{capability}' capability",
                detail_template="Plugin '{plugin}' was created without a {capability} adapter",
                suggestion_template="Pass the host adapter when constructing the plugin",
                error_class=PluginError,
            )
        )
