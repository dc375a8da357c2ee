"""Configuration validation framework with schema definitions.

Provides declarative schema definitions (ConfigField, ConfigItems) for
validating the `[rdrop]` configuration table. Supports type checking,
required fields, choices, custom validators, and fuzzy matching for typo
detection.
"""

import difflib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

__all__ = [
    "BOOL_FALSE_STRINGS",
    "BOOL_TRUE_STRINGS",
    "ConfigField",
    "ConfigItems",
    "ConfigValidator",
    "coerce_to_bool",
    "format_config_error",
]

BOOL_TRUE_STRINGS = frozenset({"true", "yes", "on", "1", "enabled"})
BOOL_FALSE_STRINGS = frozenset({"false", "no", "off", "0", "disabled"})


def coerce_to_bool(value: object, default: bool = False) -> bool:
    """Coerce a value to boolean, handling loose typing.

    - None → default
    - Explicit falsy strings ("false", "no", "off", "0", "disabled") → False
    - Explicit truthy strings → True
    - Non-string values → bool(value)
    """
    if value is None:
        return default
    if isinstance(value, str):
        return value.lower().strip() in BOOL_TRUE_STRINGS
    return bool(value)


@dataclass
class ConfigField:
    """Describes an expected configuration field for validation.

    Attributes:
        name: The configuration key name
        field_type: Expected type (str, int, bool)
        required: Whether the field is required
        default: Default value if not provided
        description: Human-readable description for error messages
        choices: List of valid values for enum-like fields
        validator: Custom validator function returning list of error messages
        aliases: Older names accepted for this field
    """

    name: str
    field_type: type = str
    required: bool = False
    default: Any = None
    description: str = ""
    choices: list | None = None
    validator: Callable[[Any], list[str]] | None = None
    aliases: tuple[str, ...] = ()


class ConfigItems(list):
    """A list of ConfigField items with lookup by name."""

    def __init__(self, *args: ConfigField) -> None:
        super().__init__(args)

    def get(self, name: str) -> ConfigField | None:
        """Get a ConfigField by name or alias."""
        for prop in self:
            if name == prop.name or name in prop.aliases:
                return prop
        return None

    @property
    def known_keys(self) -> list[str]:
        """Every accepted key, aliases included."""
        return [key for prop in self for key in (prop.name, *prop.aliases)]


def format_config_error(section: str, field: str, message: str, suggestion: str = "") -> str:
    """Format a configuration error message.

    Args:
        section: Config table name
        field: Field name that has the error
        message: Error description
        suggestion: Optional suggestion for fixing the error
    """
    msg = f"[{section}] Config error for '{field}': {message}"
    if suggestion:
        msg += f" -> {suggestion}"
    return msg


class ConfigValidator:
    """Validates configuration against a schema."""

    def __init__(self, config: dict, section: str, logger: logging.Logger) -> None:
        """Initialize the validator.

        Args:
            config: The configuration dictionary to validate
            section: Name of the config table, for error messages
            logger: Logger instance for warnings
        """
        self.config = config
        self.section = section
        self.log = logger

    def lookup(self, field_def: ConfigField) -> tuple[str, Any]:
        """Return the key used in the config for `field_def`, and its value."""
        for key in (field_def.name, *field_def.aliases):
            if key in self.config:
                return key, self.config[key]
        return field_def.name, None

    def validate(self, schema: ConfigItems) -> list[str]:
        """Validate configuration against schema.

        Returns:
            List of error messages (empty if validation passed)
        """
        errors = []

        for field_def in schema:
            key, value = self.lookup(field_def)

            if value is None:
                if field_def.required:
                    errors.append(format_config_error(self.section, key, "Missing required field", self._get_required_suggestion(field_def)))
                continue

            type_error = self._check_type(field_def, key, value)
            if type_error:
                errors.append(type_error)
                continue

            if field_def.choices is not None and field_def.validator is None and value not in field_def.choices:
                choices_str = ", ".join(repr(c) for c in field_def.choices)
                errors.append(format_config_error(self.section, key, f"Invalid value {value!r}", f"Valid options: {choices_str}"))

            if field_def.validator:
                errors.extend(format_config_error(self.section, key, error) for error in field_def.validator(value))

        return errors

    def _check_type(self, field_def: ConfigField, key: str, value: Any) -> str | None:  # noqa: ANN401
        """Check if value matches expected type.

        Returns:
            Error message if type mismatch, None otherwise
        """
        expected_type = field_def.field_type
        if expected_type is bool:
            if isinstance(value, bool) or (isinstance(value, str) and value.lower() in BOOL_TRUE_STRINGS | BOOL_FALSE_STRINGS):
                return None
            return format_config_error(self.section, key, f"Expected bool, got {type(value).__name__}", "Use true/false (without quotes)")
        if expected_type is int:
            if isinstance(value, int) and not isinstance(value, bool):
                return None
            return format_config_error(self.section, key, f"Expected int, got {type(value).__name__}", f"Use {key} = 42 (without quotes)")
        if not isinstance(value, expected_type):
            return format_config_error(self.section, key, f"Expected {expected_type.__name__}, got {type(value).__name__}", f'Use {key} = "value"')
        return None

    def _get_required_suggestion(self, field_def: ConfigField) -> str:
        """Generate suggestion for a missing required field."""
        if field_def.field_type is str:
            return f'Add {field_def.name} = "value" to [{self.section}]'
        if field_def.field_type is int:
            example = field_def.default if field_def.default is not None else 0
            return f"Add {field_def.name} = {example} to [{self.section}]"
        return f"Add {field_def.name} = true/false to [{self.section}]"

    def warn_unknown_keys(self, schema: ConfigItems) -> list[str]:
        """Log warnings for unknown configuration keys.

        Returns:
            List of warning messages
        """
        warnings = []
        known_keys = schema.known_keys

        for key in self.config:
            if key in known_keys:
                continue
            similar = difflib.get_close_matches(key, known_keys, n=1)
            if similar:
                msg = f"[{self.section}] Unknown option '{key}' (did you mean '{similar[0]}'?)"
            else:
                msg = f"[{self.section}] Unknown option '{key}' - will be ignored"
            self.log.warning(msg)
            warnings.append(msg)

        return warnings
