"""Type definitions and data models for rdrop.

Provides strict records built from Hyprland's JSON API responses:
- WorkspaceInfo: Workspace identifier
- MonitorInfo: Monitor dimensions and focus
- WindowInfo: Client class and location

Also includes:
- Anchor: Screen edge the dropdown is attached to
- GeometrySpec / ComputedGeometry: Configured and resolved placement
- Action: Outcome of a toggle run
- ExitCode: Standard CLI exit codes
- RdropError and its subclasses
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto
from typing import Any

__all__ = [
    "Action",
    "Anchor",
    "ComputedGeometry",
    "ConfigError",
    "DispatchError",
    "ExitCode",
    "GeometrySpec",
    "LockError",
    "MonitorInfo",
    "NotFoundError",
    "QueryError",
    "RdropError",
    "WindowInfo",
    "WorkspaceInfo",
]


class RdropError(Exception):
    """Base error, raised for failures which end the current invocation."""


class ConfigError(RdropError):
    """Configuration file missing, unreadable or invalid."""


class QueryError(RdropError):
    """A `hyprctl -j` query failed or returned an unexpected payload."""


class NotFoundError(QueryError):
    """No focused monitor reported by the compositor."""


class DispatchError(RdropError):
    """A `hyprctl dispatch` command failed."""


class LockError(RdropError):
    """Another invocation is already handling the same window."""


class ExitCode(IntEnum):
    """Standard exit codes for the rdrop CLI."""

    SUCCESS = 0
    UNEXPECTED = 1
    CONFIG_ERROR = 2
    QUERY_ERROR = 3
    NOT_FOUND = 4
    DISPATCH_ERROR = 5
    LOCKED = 6
    INTERRUPTED = 130


class Action(StrEnum):
    """What a toggle run did."""

    SPAWN = auto()
    SHOW = auto()
    HIDE = auto()


class Anchor(StrEnum):
    """Screen edge the window is positioned against."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"

    @classmethod
    def parse(cls, text: str) -> Anchor:
        """Return the anchor named by `text`.

        Accepts the full name in any case, or the one letter form (T, R, B, L).

        Raises:
            ValueError: if `text` names no anchor
        """
        value = text.strip().lower()
        for anchor in cls:
            if value in (anchor.value, anchor.value[0]):
                return anchor
        msg = f"unknown anchor {text!r}"
        raise ValueError(msg)


def _require(payload: object, record: str, fields: dict[str, type]) -> dict[str, Any]:
    """Extract `fields` from `payload`, checking presence and types.

    Keys not listed in `fields` are ignored.

    Raises:
        QueryError: when the payload is not a mapping, or a field is missing or mistyped
    """
    if not isinstance(payload, Mapping):
        msg = f"{record}: expected an object, got {type(payload).__name__}"
        raise QueryError(msg)
    values = {}
    for name, expected in fields.items():
        if name not in payload:
            msg = f"{record}: missing field '{name}'"
            raise QueryError(msg)
        value = payload[name]
        # bool is a subclass of int, never accept it as a number
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            msg = f"{record}: field '{name}' should be {expected.__name__}, got {type(value).__name__}"
            raise QueryError(msg)
        values[name] = value
    return values


@dataclass(frozen=True)
class WorkspaceInfo:
    """Workspace definition."""

    id: int  # noqa: A003
    name: str

    @classmethod
    def from_json(cls, payload: object) -> WorkspaceInfo:
        """Build from a Hyprland workspace object."""
        return cls(**_require(payload, "workspace", {"id": int, "name": str}))


@dataclass(frozen=True)
class MonitorInfo:
    """Monitor size and focus state."""

    width: int
    height: int
    focused: bool

    @classmethod
    def from_json(cls, payload: object) -> MonitorInfo:
        """Build from a Hyprland monitor object."""
        return cls(**_require(payload, "monitor", {"width": int, "height": int, "focused": bool}))


@dataclass(frozen=True)
class WindowInfo:
    """A client window, identified by its class."""

    class_name: str
    workspace: WorkspaceInfo

    @classmethod
    def from_json(cls, payload: object) -> WindowInfo:
        """Build from a Hyprland client object."""
        values = _require(payload, "client", {"class": str, "workspace": Mapping})
        return cls(class_name=values["class"], workspace=WorkspaceInfo.from_json(values["workspace"]))


@dataclass(frozen=True)
class GeometrySpec:
    """Configured size (in percent of the monitor) and placement."""

    width_percent: int
    height_percent: int
    margin: int
    anchor: Anchor


@dataclass(frozen=True)
class ComputedGeometry:
    """Resolved window rectangle, in monitor pixels."""

    width: int
    height: int
    x: int
    y: int
