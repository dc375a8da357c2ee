"""rdrop - a dropdown terminal toggle for Hyprland.

Spawns a terminal on a hidden special workspace on first use, then toggles it
between that workspace and the active one, resized and anchored to a screen
edge of the focused monitor. Every run is a one-shot process driving `hyprctl`.
"""

VERSION = "0.1.0"
