"""Shared constants for rdrop."""

import os
from pathlib import Path

__all__ = [
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "HYPRCTL",
    "LOCK_FOLDER",
    "SCRATCH_WORKSPACE",
]

# Config file path - use XDG_CONFIG_HOME with fallback to ~/.config
_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "rdrop" / "config.toml"

# Table holding the options in the config file
CONFIG_SECTION = "rdrop"

# Compositor control binary
HYPRCTL = "hyprctl"

# Special workspace the window is parked on while hidden
SCRATCH_WORKSPACE = "special:rdrop"

LOCK_FOLDER = Path(os.environ.get("XDG_RUNTIME_DIR") or "/tmp")  # noqa: S108
