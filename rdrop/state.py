"""Read-only queries of the compositor state."""

from logging import Logger

from .ipc import hyprctl_json
from .models import MonitorInfo, NotFoundError, QueryError, WindowInfo, WorkspaceInfo

__all__ = ["StateQuery"]


class StateQuery:
    """Fetch windows, monitors and workspaces from Hyprland.

    Nothing is cached: every call issues a fresh query.
    """

    def __init__(self, log: Logger) -> None:
        self.log = log

    async def _json_list(self, request: str) -> list:
        payload = await hyprctl_json(request, log=self.log)
        if not isinstance(payload, list):
            msg = f"{request}: expected a list, got {type(payload).__name__}"
            raise QueryError(msg)
        return payload

    async def list_windows(self) -> list[WindowInfo]:
        """Return every client known to the compositor."""
        return [WindowInfo.from_json(client) for client in await self._json_list("clients")]

    async def get_focused_monitor(self) -> MonitorInfo:
        """Return the focused monitor.

        Raises:
            NotFoundError: if no monitor is focused
        """
        focused = [mon for mon in map(MonitorInfo.from_json, await self._json_list("monitors")) if mon.focused]
        if not focused:
            msg = "no focused monitor"
            raise NotFoundError(msg)
        if len(focused) > 1:
            self.log.warning("%d monitors report focus, using the first one", len(focused))
        return focused[0]

    async def get_active_workspace(self) -> WorkspaceInfo:
        """Return the workspace currently shown on the focused monitor."""
        return WorkspaceInfo.from_json(await hyprctl_json("activeworkspace", log=self.log))

    async def find_window_by_class(self, class_name: str) -> WindowInfo | None:
        """Return the first window whose class is exactly `class_name`.

        Duplicates are not disambiguated, the compositor's order decides.
        """
        matches = [win for win in await self.list_windows() if win.class_name == class_name]
        if len(matches) > 1:
            self.log.debug("%d windows with class %s, using the first one", len(matches), class_name)
        return matches[0] if matches else None
