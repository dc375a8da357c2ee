"""Configuration file loading utilities.

This module handles reading and parsing the TOML configuration file.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import TYPE_CHECKING, Any

from aiofiles import open as aiopen
from aiofiles import os as aios

from .config import DropdownConfig
from .constants import CONFIG_FILE, CONFIG_SECTION
from .models import ConfigError

if TYPE_CHECKING:
    import logging

__all__ = ["ConfigLoader"]


class ConfigLoader:
    """Handles loading the configuration file.

    Options are read from the `[rdrop]` table, or from the top level of the
    file when there is no such table.
    """

    def __init__(self, log: logging.Logger) -> None:
        """Initialize the config loader.

        Args:
            log: Logger instance for status and error messages
        """
        self.log = log

    @staticmethod
    def resolve_path(config_filename: str | Path | None = None) -> Path:
        """Return the config file to use, expanding `~` and variables."""
        if not config_filename:
            return CONFIG_FILE
        return Path(os.path.expandvars(str(config_filename))).expanduser()

    async def load(self, config_filename: str | Path | None = None) -> DropdownConfig:
        """Load and validate the configuration.

        Args:
            config_filename: Optional path to the config file.
                           If empty, uses default CONFIG_FILE location.

        Raises:
            ConfigError: If the file is missing, unreadable or invalid.
        """
        fname = self.resolve_path(config_filename)
        raw = await self._load_config_file(fname)
        section = raw.get(CONFIG_SECTION, raw)
        if not isinstance(section, dict):
            msg = f"{fname}: [{CONFIG_SECTION}] must be a table"
            raise ConfigError(msg)
        return DropdownConfig.from_dict(section, self.log)

    async def _load_config_file(self, fname: Path) -> dict[str, Any]:
        """Load a single configuration file.

        Raises:
            ConfigError: If file not found or has syntax errors
        """
        if not await aios.path.isfile(fname):
            msg = f"config file not found! Please create {fname}"
            raise ConfigError(msg)

        self.log.info("Loading %s", fname)
        try:
            async with aiopen(fname, encoding="utf-8") as f:
                content = await f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"cannot read {fname}: {e}") from e

        try:
            return tomllib.loads(content)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"invalid TOML in {fname}: {e}") from e
