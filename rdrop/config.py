"""Dropdown configuration: schema and typed settings."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from .constants import CONFIG_SECTION
from .models import Anchor, ConfigError, GeometrySpec
from .validation import ConfigField, ConfigItems, ConfigValidator, coerce_to_bool

__all__ = ["CONFIG_SCHEMA", "DropdownConfig"]


def _validate_percent(value: int) -> list[str]:
    if not 0 <= value <= 100:  # noqa: PLR2004
        return [f"{value} is out of range -> Use a percentage between 0 and 100"]
    return []


def _validate_margin(value: int) -> list[str]:
    if value < 0:
        return [f"{value} is negative -> Use a number of pixels >= 0"]
    return []


def _validate_anchor(value: str) -> list[str]:
    """Case-insensitive anchor validation, short forms allowed."""
    try:
        Anchor.parse(value)
    except ValueError:
        return [f"invalid value '{value}' -> Valid: 'top', 'right', 'bottom', 'left' (or T, R, B, L)"]
    return []


CONFIG_SCHEMA = ConfigItems(
    ConfigField("terminal", str, required=True, description="Terminal program to launch"),
    ConfigField("class", str, required=True, description="Window class given to the terminal"),
    ConfigField("width", int, default=50, description="Width, in percent of the monitor", validator=_validate_percent),
    ConfigField("height", int, default=50, description="Height, in percent of the monitor", validator=_validate_percent),
    ConfigField("margin", int, default=0, description="Pixels from the anchor edge", validator=_validate_margin, aliases=("gap",)),
    ConfigField(
        "anchor",
        str,
        default="top",
        description="Screen edge to attach to",
        choices=[anchor.value for anchor in Anchor],
        validator=_validate_anchor,
        aliases=("position",),
    ),
    ConfigField("float", bool, default=True, description="Spawn the terminal floating"),
    ConfigField("lock", bool, default=True, description="Ignore concurrent invocations"),
)


@dataclass(frozen=True)
class DropdownConfig:  # pylint: disable=too-many-instance-attributes
    """Validated settings of the dropdown terminal."""

    terminal: str
    class_name: str
    width: int = 50
    height: int = 50
    margin: int = 0
    anchor: Anchor = Anchor.TOP
    floating: bool = True
    lock: bool = True

    @property
    def geometry(self) -> GeometrySpec:
        """Return the geometry part of the settings."""
        return GeometrySpec(width_percent=self.width, height_percent=self.height, margin=self.margin, anchor=self.anchor)

    @classmethod
    def from_dict(cls, config: dict[str, Any], log: logging.Logger) -> DropdownConfig:
        """Validate a raw config table and build the settings.

        Unknown keys only produce warnings.

        Raises:
            ConfigError: listing every problem found
        """
        validator = ConfigValidator(config, CONFIG_SECTION, log)
        errors = validator.validate(CONFIG_SCHEMA)
        validator.warn_unknown_keys(CONFIG_SCHEMA)
        if errors:
            raise ConfigError("\n".join(errors))

        def value(name: str) -> Any:  # noqa: ANN401
            field_def = CONFIG_SCHEMA.get(name)
            assert field_def
            found = validator.lookup(field_def)[1]
            return field_def.default if found is None else found

        return cls(
            terminal=value("terminal"),
            class_name=value("class"),
            width=value("width"),
            height=value("height"),
            margin=value("margin"),
            anchor=Anchor.parse(value("anchor")),
            floating=coerce_to_bool(value("float"), default=True),
            lock=coerce_to_bool(value("lock"), default=True),
        )
