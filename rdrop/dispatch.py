"""Mutating commands sent to the compositor for the dropdown window."""

from logging import Logger

from .ipc import hyprctl_dispatch

__all__ = ["DispatchGateway"]


class DispatchGateway:
    """Issue `hyprctl dispatch` commands targeting one window class.

    Every method sends exactly one dispatcher and raises `DispatchError` on failure.
    """

    def __init__(self, class_name: str, log: Logger) -> None:
        """Initialize the gateway.

        Args:
            class_name: Class identifier of the managed window
            log: Logger to use
        """
        self.class_name = class_name
        self.log = log

    @property
    def selector(self) -> str:
        """Window selector understood by the dispatchers."""
        return f"class:{self.class_name}"

    async def spawn(self, command: str, *, workspace: str, floating: bool = True) -> None:
        """Launch `command` silently on `workspace`, with the managed class.

        Args:
            command: terminal program to run
            workspace: workspace the new window opens on
            floating: open the window floating
        """
        rules = f"workspace {workspace} silent;"
        if floating:
            rules += "float;"
        await hyprctl_dispatch(["exec", f"[{rules}]", command, "--class", self.class_name], log=self.log)

    async def resize(self, width: int, height: int) -> None:
        """Resize the window to exact pixel dimensions."""
        await hyprctl_dispatch(["resizewindowpixel", "exact", str(width), str(height), ",", self.selector], log=self.log)

    async def move(self, x: int, y: int) -> None:  # pylint: disable=invalid-name
        """Move the window to exact pixel coordinates."""
        await hyprctl_dispatch(["movewindowpixel", "exact", str(x), str(y), ",", self.selector], log=self.log)

    async def pin(self) -> None:
        """Pin the window, making it visible on every workspace."""
        await hyprctl_dispatch(["pin", self.selector], log=self.log)

    async def move_to_workspace(self, workspace: str) -> None:
        """Move the window to `workspace` without following it."""
        await hyprctl_dispatch(["movetoworkspacesilent", f"{workspace},", self.selector], log=self.log)

    async def focus(self) -> None:
        """Give input focus to the window."""
        await hyprctl_dispatch(["focuswindow", self.selector], log=self.log)
