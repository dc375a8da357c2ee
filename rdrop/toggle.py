"""Toggle logic: spawn, show or hide the dropdown window."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .constants import SCRATCH_WORKSPACE
from .geometry import compute_geometry
from .models import Action

if TYPE_CHECKING:
    import logging

    from .config import DropdownConfig
    from .dispatch import DispatchGateway
    from .models import WindowInfo, WorkspaceInfo
    from .state import StateQuery

__all__ = ["DropdownToggle", "choose_destination"]


def choose_destination(window_workspace: WorkspaceInfo, active_workspace: WorkspaceInfo) -> tuple[str, Action]:
    """Return the workspace the window should go to, and whether that shows or hides it.

    A window away from the active workspace is brought there, otherwise it is sent back to the scratch workspace.
    """
    if window_workspace.id != active_workspace.id:
        return active_workspace.name, Action.SHOW
    return SCRATCH_WORKSPACE, Action.HIDE


class DropdownToggle:
    """Decide what to do with the dropdown window and issue the commands.

    Commands are sent one at a time and the first failure stops the sequence,
    nothing already applied is reverted.
    """

    def __init__(self, config: DropdownConfig, query: StateQuery, gateway: DispatchGateway, log: logging.Logger) -> None:
        self.config = config
        self.query = query
        self.gateway = gateway
        self.log = log

    async def run(self) -> Action:
        """Run one toggle and return the action taken."""
        window = await self.query.find_window_by_class(self.config.class_name)
        if window is None:
            return await self.spawn()
        return await self.toggle(window)

    async def spawn(self) -> Action:
        """Start the terminal, hidden on the scratch workspace.

        It is positioned on the next run, once the compositor has mapped it.
        """
        self.log.info("Terminal session creating...")
        await self.gateway.spawn(self.config.terminal, workspace=SCRATCH_WORKSPACE, floating=self.config.floating)
        return Action.SPAWN

    async def toggle(self, window: WindowInfo) -> Action:
        """Resize, position and pin `window`, then show or hide it.

        The window is placed before it changes workspace so it never shows up at the wrong size.
        """
        self.log.info("Move and resize terminal session...")
        monitor = await self.query.get_focused_monitor()
        geometry = compute_geometry(monitor, self.config.geometry)
        self.log.debug("monitor %sx%s -> %s", monitor.width, monitor.height, geometry)

        await self.gateway.resize(geometry.width, geometry.height)
        await self.gateway.move(geometry.x, geometry.y)
        await self.gateway.pin()

        active = await self.query.get_active_workspace()
        destination, action = choose_destination(window.workspace, active)
        self.log.debug("%s: workspace %s -> %s", action, window.workspace.name, destination)
        await self.gateway.move_to_workspace(destination)
        if action is Action.SHOW:
            await self.gateway.focus()
        return action
